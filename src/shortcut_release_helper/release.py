"""Assembly of the final release bundle."""

from __future__ import annotations

from collections.abc import Mapping

from shortcut_release_helper.contracts.exceptions import ReleaseAssemblyError
from shortcut_release_helper.contracts.git import HeadCommit
from shortcut_release_helper.contracts.release import Release, ReleaseContent


def assemble_release(
    content: ReleaseContent,
    *,
    next_heads: Mapping[str, HeadCommit],
    name: str | None = None,
    version: str | None = None,
    description: str | None = None,
    include_unparsed_commits: bool = True,
) -> Release:
    unknown = sorted(set(content.unparsed_commits) - set(next_heads))
    if unknown:
        raise ReleaseAssemblyError(f"Unparsed commits reference unknown repositories: {', '.join(unknown)}")

    unparsed_commits = (
        {repo: list(commits) for repo, commits in content.unparsed_commits.items()} if include_unparsed_commits else {}
    )
    return Release(
        name=name,
        version=version,
        description=description,
        stories=list(content.stories),
        epics=list(content.epics),
        unparsed_commits=unparsed_commits,
        next_heads=dict(next_heads),
    )

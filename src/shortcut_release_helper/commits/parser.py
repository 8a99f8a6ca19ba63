"""Extraction of Shortcut story references from commit messages."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence, Set

from shortcut_release_helper.contracts.git import UnreleasedCommit
from shortcut_release_helper.contracts.release import ParsedCommits
from shortcut_release_helper.contracts.tracker import StoryId

_LOG = logging.getLogger(__name__)

# "sc-123" as written by Shortcut's VCS integration, plus the legacy Clubhouse "ch123".
STORY_REFERENCE_PATTERN = re.compile(r"\b(?:sc-|ch)(\d+)\b", re.IGNORECASE)


def extract_story_ids(message: str | None) -> list[StoryId]:
    """Return story ids referenced by *message* in first-occurrence order, without duplicates."""
    if not message:
        return []
    found: dict[StoryId, None] = {}
    for match in STORY_REFERENCE_PATTERN.finditer(message):
        found.setdefault(int(match.group(1)), None)
    return list(found)


def _surviving_story_ids(message: str | None, exclude_story_ids: Set[StoryId]) -> list[StoryId]:
    return [story_id for story_id in extract_story_ids(message) if story_id not in exclude_story_ids]


def parse_commits(
    repo_to_commits: Mapping[str, Sequence[UnreleasedCommit]],
    exclude_story_ids: Set[StoryId] = frozenset(),
) -> ParsedCommits:
    """Partition every repository's commits into story ids and unparsed commits.

    A commit is unparsed exactly when no story id survives *exclude_story_ids*:

        ids in message | ids after exclusion | outcome
        ---------------+---------------------+---------------------------------
        0              | 0                   | unparsed
        >= 1           | 0                   | unparsed
        >= 1           | >= 1                | ids added to the repository set

    Unparsed commits keep their input order.
    """
    story_ids: dict[str, frozenset[StoryId]] = {}
    unparsed_commits: dict[str, list[UnreleasedCommit]] = {}
    for repo_name, commits in repo_to_commits.items():
        repo_ids: set[StoryId] = set()
        repo_unparsed: list[UnreleasedCommit] = []
        for commit in commits:
            ids = _surviving_story_ids(commit.message, exclude_story_ids)
            if ids:
                repo_ids.update(ids)
            else:
                _LOG.debug("[%s] No story reference in commit %s", repo_name, commit.id)
                repo_unparsed.append(commit)
        story_ids[repo_name] = frozenset(repo_ids)
        unparsed_commits[repo_name] = repo_unparsed
    return ParsedCommits(story_ids=story_ids, unparsed_commits=unparsed_commits)

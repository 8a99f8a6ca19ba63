"""Markdown release notes renderer."""

from __future__ import annotations

from shortcut_release_helper.contracts.git import UnreleasedCommit
from shortcut_release_helper.contracts.release import Release
from shortcut_release_helper.contracts.renderer import ReleaseRenderer
from shortcut_release_helper.contracts.tracker import Epic, Story


def bullets(items: list[str]) -> str:
    return "\n".join(f"* {item}" for item in items)


def link(text: str, url: str | None) -> str:
    return f"[{text}]({url})" if url else text


def story_line(story: Story) -> str:
    line = f"{link(f'sc-{story.id}', story.app_url)} {story.name}"
    if story.story_type:
        line += f" ({story.story_type})"
    return line


def commit_line(commit: UnreleasedCommit) -> str:
    summary = commit.message.splitlines()[0] if commit.message else "(no message)"
    return f"`{commit.id[:10]}` {summary}"


class MarkdownRenderer(ReleaseRenderer):
    def render(self, release: Release) -> str:
        title = release.name or "Release notes"
        if release.version:
            title += f" {release.version}"
        sections: list[str] = [f"# {title}"]
        if release.description:
            sections.append(release.description)

        epics_by_id: dict[int, Epic] = {epic.id: epic for epic in release.epics}
        if release.epics:
            epic_lines = [link(epic.name, epic.app_url) for epic in release.epics]
            sections.append(f"## Epics\n\n{bullets(epic_lines)}")

        if release.stories:
            story_blocks: list[str] = []
            for epic in release.epics:
                epic_stories = [story_line(story) for story in release.stories if story.epic_id == epic.id]
                if epic_stories:
                    story_blocks.append(f"### {epic.name}\n\n{bullets(epic_stories)}")
            loose = [story_line(story) for story in release.stories if story.epic_id not in epics_by_id]
            if loose:
                heading = "### Other stories" if story_blocks else ""
                story_blocks.append(f"{heading}\n\n{bullets(loose)}".lstrip())
            sections.append("## Stories\n\n" + "\n\n".join(story_blocks))
        else:
            sections.append("## Stories\n\nNo stories in this release.")

        unparsed = {repo: commits for repo, commits in sorted(release.unparsed_commits.items()) if commits}
        if unparsed:
            blocks = [
                f"### {repo}\n\n{bullets([commit_line(commit) for commit in commits])}"
                for repo, commits in unparsed.items()
            ]
            sections.append("## Commits without story\n\n" + "\n\n".join(blocks))

        if release.next_heads:
            heads = [f"{repo}: `{head.id}`" for repo, head in sorted(release.next_heads.items())]
            sections.append(f"## Repositories\n\n{bullets(heads)}")

        return "\n\n".join(sections) + "\n"

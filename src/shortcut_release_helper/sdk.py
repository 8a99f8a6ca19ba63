"""SDK composition root for shortcut-release-helper."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel

from shortcut_release_helper.auth import create_token_resolver
from shortcut_release_helper.commits import parse_commits
from shortcut_release_helper.contracts.config import ReleaseHelperConfig
from shortcut_release_helper.contracts.exceptions import ConfigError
from shortcut_release_helper.contracts.provider import IssueTracker
from shortcut_release_helper.contracts.release import Release, ReleaseResult
from shortcut_release_helper.contracts.renderer import ReleaseRenderer
from shortcut_release_helper.contracts.tracker import StoryId, StoryLabelFilter
from shortcut_release_helper.engine import ReleaseAggregator
from shortcut_release_helper.engine.progress import NullReleaseProgress, ReleaseProgress
from shortcut_release_helper.git import GitClient, find_all_unreleased_commits
from shortcut_release_helper.providers import create_tracker
from shortcut_release_helper.release import assemble_release
from shortcut_release_helper.renderers import create_renderer

_LOG = logging.getLogger(__name__)


class ReleaseOptions(BaseModel):
    """Per-run options, usually taken from the command line."""

    name: str | None = None
    version: str | None = None
    description: str | None = None
    exclude_story_ids: frozenset[StoryId] = frozenset()
    exclude_story_labels: frozenset[str] = frozenset()
    include_story_labels: frozenset[str] = frozenset()
    include_unparsed_commits: bool = True

    model_config = {"frozen": True}

    @classmethod
    def from_lists(
        cls,
        *,
        exclude_story_ids: Iterable[StoryId] = (),
        exclude_story_labels: Iterable[str] = (),
        include_story_labels: Iterable[str] = (),
        **kwargs: object,
    ) -> ReleaseOptions:
        return cls(
            exclude_story_ids=frozenset(exclude_story_ids),
            exclude_story_labels=frozenset(exclude_story_labels),
            include_story_labels=frozenset(include_story_labels),
            **kwargs,
        )

    def label_filter(self) -> StoryLabelFilter:
        return StoryLabelFilter.new(self.exclude_story_labels, self.include_story_labels)


class ReleaseHelper:
    """Shortcut release helper public API."""

    def __init__(
        self,
        *,
        config: ReleaseHelperConfig,
        tracker: IssueTracker,
        renderer: ReleaseRenderer,
        progress: ReleaseProgress | None = None,
        git: GitClient | None = None,
    ) -> None:
        self._config = config
        self._tracker = tracker
        self._renderer = renderer
        self._progress: ReleaseProgress = progress or NullReleaseProgress()
        self._git = git or GitClient()

    @classmethod
    async def from_config(
        cls,
        config: ReleaseHelperConfig,
        *,
        renderer_name: str | None = None,
        progress: ReleaseProgress | None = None,
        tracker: IssueTracker | None = None,
    ) -> ReleaseHelper:
        renderer = _create_configured_renderer(config, renderer_name)
        if tracker is None:
            token = await create_token_resolver(config).resolve()
            tracker = create_tracker("shortcut", token=token, api_url=config.api_url)
        return cls(config=config, tracker=tracker, renderer=renderer, progress=progress)

    async def build_release(self, options: ReleaseOptions | None = None) -> ReleaseResult:
        options = options or ReleaseOptions()

        self._progress.phase_start("Repositories", total=len(self._config.repositories))
        try:
            repo_commits = await find_all_unreleased_commits(self._config.repositories, git=self._git)
        except BaseException as exc:
            self._progress.phase_error("Repositories", exc)
            raise
        self._progress.phase_done("Repositories")

        next_heads = {name: commits.next_head for name, commits in repo_commits.items()}
        parsed = parse_commits(
            {name: commits.unreleased_commits for name, commits in repo_commits.items()},
            options.exclude_story_ids,
        )
        _LOG.debug("Parsed commits: %s", parsed)

        async with self._tracker as tracker:
            aggregator = ReleaseAggregator(tracker, max_concurrent=self._config.max_concurrent, progress=self._progress)
            content = await aggregator.build(parsed, options.label_filter())

        release = assemble_release(
            content,
            next_heads=next_heads,
            name=options.name,
            version=options.version,
            description=options.description,
            include_unparsed_commits=options.include_unparsed_commits,
        )
        return ReleaseResult(release=release, content=content)

    def render(self, release: Release) -> str:
        return self._renderer.render(release)


def _create_configured_renderer(config: ReleaseHelperConfig, renderer_name: str | None) -> ReleaseRenderer:
    name = renderer_name or config.renderer
    kwargs: dict[str, object] = {}
    if name == "template":
        if config.template_file is None:
            raise ConfigError("renderer 'template' requires template_file in the config")
        kwargs["template_file"] = config.template_file
    try:
        return create_renderer(name, **kwargs)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

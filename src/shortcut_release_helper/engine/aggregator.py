"""Story and epic aggregation across repositories."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Literal, TypeVar

from shortcut_release_helper.contracts.exceptions import AuthenticationError, ProviderError
from shortcut_release_helper.contracts.provider import IssueTracker
from shortcut_release_helper.contracts.release import FetchFailure, ParsedCommits, ReleaseContent
from shortcut_release_helper.contracts.tracker import Epic, LabelDecision, Story, StoryLabelFilter
from shortcut_release_helper.engine.progress import NullReleaseProgress, ReleaseProgress

_LOG = logging.getLogger(__name__)

T = TypeVar("T")


class ReleaseAggregator:
    """Fetches, deduplicates, and filters the stories and epics of a release.

    Story and epic lookups run concurrently, bounded by *max_concurrent*.
    Authentication failures abort the run; any other tracker failure only
    drops the affected entity and is reported in ``ReleaseContent.failures``.
    """

    def __init__(
        self,
        tracker: IssueTracker,
        *,
        max_concurrent: int = 4,
        progress: ReleaseProgress | None = None,
    ) -> None:
        self._tracker = tracker
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._progress: ReleaseProgress = progress or NullReleaseProgress()

    async def build(self, parsed: ParsedCommits, label_filter: StoryLabelFilter | None = None) -> ReleaseContent:
        label_filter = label_filter or StoryLabelFilter()
        failures: list[FetchFailure] = []

        story_ids = sorted(parsed.all_story_ids())
        stories = await self._fetch_phase("Stories", "story", story_ids, self._tracker.get_story, failures)
        retained = self._filter_stories(stories, label_filter)

        epic_ids = sorted({story.epic_id for story in retained if story.epic_id is not None})
        epics = await self._fetch_phase("Epics", "epic", epic_ids, self._tracker.get_epic, failures)

        return ReleaseContent(
            stories=sorted(retained, key=lambda story: story.id),
            epics=sorted(epics, key=lambda epic: epic.id),
            unparsed_commits={repo: list(commits) for repo, commits in parsed.unparsed_commits.items()},
            failures=sorted(failures, key=lambda failure: (failure.kind, failure.entity_id)),
        )

    @staticmethod
    def _filter_stories(stories: Iterable[Story], label_filter: StoryLabelFilter) -> list[Story]:
        retained: list[Story] = []
        for story in stories:
            decision = label_filter.decide(story.labels)
            if decision is LabelDecision.KEEP:
                retained.append(story)
            else:
                _LOG.debug("Dropping story %d (%s)", story.id, decision.value)
        return retained

    async def _fetch_phase(
        self,
        phase: str,
        kind: Literal["story", "epic"],
        ids: list[int],
        fetch: Callable[[int], Awaitable[T]],
        failures: list[FetchFailure],
    ) -> list[T]:
        self._progress.phase_start(phase, total=len(ids))
        tasks: list[asyncio.Task[T | None]] = []
        try:
            try:
                async with asyncio.TaskGroup() as tg:
                    for entity_id in ids:
                        tasks.append(tg.create_task(self._fetch_one(phase, kind, entity_id, fetch, failures)))
            except* AuthenticationError as error_group:
                first_error = error_group.exceptions[0]
                raise first_error from error_group
        except BaseException as exc:
            self._progress.phase_error(phase, exc)
            raise
        self._progress.phase_done(phase)
        return [result for task in tasks if (result := task.result()) is not None]

    async def _fetch_one(
        self,
        phase: str,
        kind: Literal["story", "epic"],
        entity_id: int,
        fetch: Callable[[int], Awaitable[T]],
        failures: list[FetchFailure],
    ) -> T | None:
        try:
            async with self._semaphore:
                return await fetch(entity_id)
        except AuthenticationError:
            raise
        except ProviderError as exc:
            _LOG.warning("Could not fetch %s %d: %s", kind, entity_id, exc)
            failures.append(FetchFailure(kind=kind, entity_id=entity_id, reason=str(exc)))
            return None
        finally:
            self._progress.item_done(phase)

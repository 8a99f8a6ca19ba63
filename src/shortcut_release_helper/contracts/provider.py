"""Issue-tracker adapter contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from shortcut_release_helper.contracts.tracker import Epic, EpicId, Story, StoryId


class IssueTracker(ABC):
    @abstractmethod
    async def __aenter__(self) -> IssueTracker: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def get_story(self, story_id: StoryId) -> Story: ...  # pragma: no cover

    @abstractmethod
    async def get_epic(self, epic_id: EpicId) -> Epic: ...  # pragma: no cover

"""Shortcut REST payload models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from shortcut_release_helper.contracts.tracker import Epic, Story


class ShortcutLabel(BaseModel):
    name: str


class ShortcutStoryPayload(BaseModel):
    id: int
    name: str
    story_type: str | None = None
    app_url: str | None = None
    labels: list[ShortcutLabel] = Field(default_factory=list)
    epic_id: int | None = None

    def to_story(self) -> Story:
        return Story(
            id=self.id,
            name=self.name,
            story_type=self.story_type,
            app_url=self.app_url,
            labels=[label.name for label in self.labels],
            epic_id=self.epic_id,
        )


class ShortcutEpicPayload(BaseModel):
    id: int
    name: str
    app_url: str | None = None
    labels: list[ShortcutLabel] = Field(default_factory=list)

    def to_epic(self) -> Epic:
        return Epic(
            id=self.id,
            name=self.name,
            app_url=self.app_url,
            labels=[label.name for label in self.labels],
        )

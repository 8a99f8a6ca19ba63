"""Issue-tracker entity contracts."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, Field

StoryId = int
EpicId = int


class Story(BaseModel):
    id: StoryId
    name: str
    story_type: str | None = None
    app_url: str | None = None
    labels: list[str] = Field(default_factory=list)
    epic_id: EpicId | None = None

    model_config = {"frozen": True}


class Epic(BaseModel):
    id: EpicId
    name: str
    app_url: str | None = None
    labels: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class LabelDecision(StrEnum):
    KEEP = "keep"
    EXCLUDED = "excluded"
    NOT_INCLUDED = "not-included"


class StoryLabelFilter(BaseModel):
    """Label-based story selection.

    Decision table, evaluated top to bottom::

        carries excluded label | include set empty | carries included label | decision
        -----------------------+-------------------+------------------------+-------------
        yes                    | any               | any                    | EXCLUDED
        no                     | yes               | any                    | KEEP
        no                     | no                | yes                    | KEEP
        no                     | no                | no                     | NOT_INCLUDED
    """

    exclude_labels: frozenset[str] = frozenset()
    include_labels: frozenset[str] = frozenset()

    model_config = {"frozen": True}

    @classmethod
    def new(cls, exclude_labels: Iterable[str] = (), include_labels: Iterable[str] = ()) -> StoryLabelFilter:
        return cls(exclude_labels=frozenset(exclude_labels), include_labels=frozenset(include_labels))

    def decide(self, labels: Iterable[str]) -> LabelDecision:
        story_labels = set(labels)
        if story_labels & self.exclude_labels:
            return LabelDecision.EXCLUDED
        if not self.include_labels:
            return LabelDecision.KEEP
        if story_labels & self.include_labels:
            return LabelDecision.KEEP
        return LabelDecision.NOT_INCLUDED

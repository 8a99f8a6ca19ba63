"""Release content contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from shortcut_release_helper.contracts.git import RepoToCommits, RepoToHeadCommit
from shortcut_release_helper.contracts.tracker import Epic, Story, StoryId


class ParsedCommits(BaseModel):
    """Per-repository story ids and commits that referenced no story."""

    story_ids: dict[str, frozenset[StoryId]] = Field(default_factory=dict)
    unparsed_commits: RepoToCommits = Field(default_factory=dict)

    model_config = {"frozen": True}

    def all_story_ids(self) -> frozenset[StoryId]:
        return frozenset().union(*self.story_ids.values())


class FetchFailure(BaseModel):
    kind: Literal["story", "epic"]
    entity_id: int
    reason: str

    model_config = {"frozen": True}


class ReleaseContent(BaseModel):
    stories: list[Story] = Field(default_factory=list)
    epics: list[Epic] = Field(default_factory=list)
    unparsed_commits: RepoToCommits = Field(default_factory=dict)
    failures: list[FetchFailure] = Field(default_factory=list)

    model_config = {"frozen": True}


class Release(BaseModel):
    name: str | None = None
    version: str | None = None
    description: str | None = None
    stories: list[Story] = Field(default_factory=list)
    epics: list[Epic] = Field(default_factory=list)
    unparsed_commits: RepoToCommits = Field(default_factory=dict)
    next_heads: RepoToHeadCommit = Field(default_factory=dict)

    model_config = {"frozen": True}


class ReleaseResult(BaseModel):
    """A release plus the aggregation details it was built from."""

    release: Release
    content: ReleaseContent

    model_config = {"frozen": True}

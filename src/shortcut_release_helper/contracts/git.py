"""Git commit contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadCommit(BaseModel):
    """Head commit of a branch. May or may not have been released."""

    id: str
    message: str | None = None

    model_config = {"frozen": True}


class UnreleasedCommit(BaseModel):
    """Commit only present in the next branch."""

    id: str
    message: str | None = None

    model_config = {"frozen": True}


class UnreleasedCommits(BaseModel):
    unreleased_commits: list[UnreleasedCommit] = Field(default_factory=list)
    next_head: HeadCommit

    model_config = {"frozen": True}


RepoToCommits = dict[str, list[UnreleasedCommit]]
"""A repository name -> unreleased commits mapping."""

RepoToHeadCommit = dict[str, HeadCommit]
"""A repository name -> head of the next branch mapping."""

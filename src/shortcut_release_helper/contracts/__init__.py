"""Public contracts for shortcut-release-helper."""

from shortcut_release_helper.contracts.config import DEFAULT_API_URL, ReleaseHelperConfig, RepositoryConfiguration
from shortcut_release_helper.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    EntityNotFoundError,
    GitCommandError,
    ProviderError,
    ReferenceResolutionError,
    ReleaseAssemblyError,
    ReleaseHelperError,
    RenderError,
    RepositoryError,
    RepositoryOpenError,
)
from shortcut_release_helper.contracts.git import (
    HeadCommit,
    RepoToCommits,
    RepoToHeadCommit,
    UnreleasedCommit,
    UnreleasedCommits,
)
from shortcut_release_helper.contracts.provider import IssueTracker
from shortcut_release_helper.contracts.release import (
    FetchFailure,
    ParsedCommits,
    Release,
    ReleaseContent,
    ReleaseResult,
)
from shortcut_release_helper.contracts.renderer import ReleaseRenderer
from shortcut_release_helper.contracts.tracker import Epic, EpicId, LabelDecision, Story, StoryId, StoryLabelFilter

__all__ = [
    "DEFAULT_API_URL",
    "AuthenticationError",
    "ConfigError",
    "EntityNotFoundError",
    "Epic",
    "EpicId",
    "FetchFailure",
    "GitCommandError",
    "HeadCommit",
    "IssueTracker",
    "LabelDecision",
    "ParsedCommits",
    "ProviderError",
    "ReferenceResolutionError",
    "Release",
    "ReleaseAssemblyError",
    "ReleaseContent",
    "ReleaseResult",
    "ReleaseHelperConfig",
    "ReleaseHelperError",
    "ReleaseRenderer",
    "RenderError",
    "RepoToCommits",
    "RepoToHeadCommit",
    "RepositoryConfiguration",
    "RepositoryError",
    "RepositoryOpenError",
    "Story",
    "StoryId",
    "StoryLabelFilter",
    "UnreleasedCommit",
    "UnreleasedCommits",
]

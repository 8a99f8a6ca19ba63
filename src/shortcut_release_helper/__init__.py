"""Public API surface for shortcut-release-helper."""

__version__ = "0.3.0"

from shortcut_release_helper.auth import create_token_resolver, load_env_file
from shortcut_release_helper.commits import extract_story_ids, parse_commits
from shortcut_release_helper.config import load_config
from shortcut_release_helper.contracts.config import ReleaseHelperConfig, RepositoryConfiguration
from shortcut_release_helper.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    EntityNotFoundError,
    ProviderError,
    ReferenceResolutionError,
    ReleaseAssemblyError,
    ReleaseHelperError,
    RenderError,
    RepositoryError,
    RepositoryOpenError,
)
from shortcut_release_helper.contracts.git import HeadCommit, UnreleasedCommit, UnreleasedCommits
from shortcut_release_helper.contracts.provider import IssueTracker
from shortcut_release_helper.contracts.release import FetchFailure, ParsedCommits, Release, ReleaseContent, ReleaseResult
from shortcut_release_helper.contracts.renderer import ReleaseRenderer
from shortcut_release_helper.contracts.tracker import Epic, Story, StoryId, StoryLabelFilter
from shortcut_release_helper.engine import ReleaseAggregator, ReleaseProgress
from shortcut_release_helper.git import Repository, find_all_unreleased_commits
from shortcut_release_helper.providers import create_tracker
from shortcut_release_helper.release import assemble_release
from shortcut_release_helper.renderers import create_renderer
from shortcut_release_helper.sdk import ReleaseHelper, ReleaseOptions

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "EntityNotFoundError",
    "Epic",
    "FetchFailure",
    "HeadCommit",
    "IssueTracker",
    "ParsedCommits",
    "ProviderError",
    "ReferenceResolutionError",
    "Release",
    "ReleaseAggregator",
    "ReleaseAssemblyError",
    "ReleaseContent",
    "ReleaseHelper",
    "ReleaseHelperConfig",
    "ReleaseHelperError",
    "ReleaseOptions",
    "ReleaseProgress",
    "ReleaseRenderer",
    "ReleaseResult",
    "RenderError",
    "Repository",
    "RepositoryConfiguration",
    "RepositoryError",
    "RepositoryOpenError",
    "Story",
    "StoryId",
    "StoryLabelFilter",
    "UnreleasedCommit",
    "UnreleasedCommits",
    "__version__",
    "assemble_release",
    "create_renderer",
    "create_token_resolver",
    "create_tracker",
    "extract_story_ids",
    "find_all_unreleased_commits",
    "load_config",
    "load_env_file",
    "parse_commits",
]

"""Git repository access."""

from shortcut_release_helper.git.client import CompletedProcess, GitClient
from shortcut_release_helper.git.repository import (
    Repository,
    find_all_unreleased_commits,
    find_unreleased_commits,
    parse_log_records,
)

__all__ = [
    "CompletedProcess",
    "GitClient",
    "Repository",
    "find_all_unreleased_commits",
    "find_unreleased_commits",
    "parse_log_records",
]

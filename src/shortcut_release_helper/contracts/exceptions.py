"""Exception hierarchy for shortcut-release-helper."""

from __future__ import annotations


class ReleaseHelperError(Exception):
    """Base exception for all release helper errors."""


class ConfigError(ReleaseHelperError):
    """Configuration loading, validation, or credential failure."""


class RepositoryError(ReleaseHelperError):
    """Base failure while reading a git repository."""

    def __init__(self, message: str, *, repository: str) -> None:
        super().__init__(message)
        self.repository = repository


class RepositoryOpenError(RepositoryError):
    """Configured location is not a readable git repository."""

    def __init__(self, message: str, *, repository: str, location: str) -> None:
        super().__init__(message, repository=repository)
        self.location = location


class ReferenceResolutionError(RepositoryError):
    """A release or next reference does not resolve to a commit."""

    def __init__(self, message: str, *, repository: str, reference: str) -> None:
        super().__init__(message, repository=repository)
        self.reference = reference


class ProviderError(ReleaseHelperError):
    """Base issue-tracker operation failure."""


class AuthenticationError(ProviderError):
    """Authentication/authorization failure."""


class EntityNotFoundError(ProviderError):
    """The issue tracker has no story or epic with the requested id."""

    def __init__(self, message: str, *, kind: str, entity_id: int) -> None:
        super().__init__(message)
        self.kind = kind
        self.entity_id = entity_id


class ReleaseAssemblyError(ReleaseHelperError):
    """Release content and head commits disagree on repository names."""


class RenderError(ReleaseHelperError):
    """Release rendering or output write failure."""


class GitCommandError(ReleaseHelperError):
    """A git invocation exited with a non-zero status."""

    def __init__(self, message: str, *, returncode: int, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr

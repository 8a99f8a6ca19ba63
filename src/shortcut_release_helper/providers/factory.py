"""Factory for creating issue-tracker instances."""

from __future__ import annotations

from shortcut_release_helper.contracts.provider import IssueTracker
from shortcut_release_helper.providers.shortcut import ShortcutTracker

TRACKERS: dict[str, type[ShortcutTracker]] = {"shortcut": ShortcutTracker}


def create_tracker(name: str, *, token: str, **kwargs: object) -> IssueTracker:
    """Create an issue tracker by name.

    The returned tracker is an async context manager.

    Raises:
        ValueError: If the tracker name is unknown.
    """
    tracker_cls = TRACKERS.get(name)
    if tracker_cls is None:
        available = ", ".join(sorted(TRACKERS))
        raise ValueError(f"Unknown tracker: {name!r}. Available: {available}")
    return tracker_cls(token=token, **kwargs)  # type: ignore[arg-type]

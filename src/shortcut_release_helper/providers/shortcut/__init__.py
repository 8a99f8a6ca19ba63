"""Shortcut issue-tracker provider."""

from shortcut_release_helper.providers.shortcut.tracker import ShortcutTracker

__all__ = ["ShortcutTracker"]

"""Issue-tracker implementations and factory."""

from shortcut_release_helper.providers.factory import create_tracker
from shortcut_release_helper.providers.shortcut import ShortcutTracker

__all__ = ["ShortcutTracker", "create_tracker"]

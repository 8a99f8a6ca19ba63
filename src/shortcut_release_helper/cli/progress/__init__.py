"""CLI progress displays."""

from shortcut_release_helper.cli.progress.rich import RichReleaseProgress

__all__ = ["RichReleaseProgress"]

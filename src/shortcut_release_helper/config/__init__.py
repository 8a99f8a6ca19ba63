"""Configuration loading exports."""

from shortcut_release_helper.config.loader import DEFAULT_CONFIG_PATH, load_config

__all__ = ["DEFAULT_CONFIG_PATH", "load_config"]

"""Auth module public exports."""

from shortcut_release_helper.auth.base import TokenResolver
from shortcut_release_helper.auth.env_file import load_env_file
from shortcut_release_helper.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver", "load_env_file"]

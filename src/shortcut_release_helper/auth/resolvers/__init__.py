"""Token resolver implementations."""

from shortcut_release_helper.auth.resolvers.env import TOKEN_ENV_VAR, EnvTokenResolver
from shortcut_release_helper.auth.resolvers.static import StaticTokenResolver

__all__ = ["TOKEN_ENV_VAR", "EnvTokenResolver", "StaticTokenResolver"]

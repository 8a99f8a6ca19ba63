"""Token resolver factory."""

from __future__ import annotations

from shortcut_release_helper.auth.base import TokenResolver
from shortcut_release_helper.auth.resolvers.env import EnvTokenResolver
from shortcut_release_helper.auth.resolvers.static import StaticTokenResolver
from shortcut_release_helper.contracts.config import ReleaseHelperConfig
from shortcut_release_helper.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: ReleaseHelperConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")

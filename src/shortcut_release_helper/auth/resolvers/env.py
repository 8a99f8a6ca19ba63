"""Environment token resolver."""

from __future__ import annotations

import os

from shortcut_release_helper.auth.base import TokenResolver
from shortcut_release_helper.contracts.exceptions import ConfigError

TOKEN_ENV_VAR = "SHORTCUT_TOKEN"


class EnvTokenResolver(TokenResolver):
    async def resolve(self) -> str:
        token = (os.getenv(TOKEN_ENV_VAR) or "").strip()
        if not token:
            raise ConfigError(
                f"Missing {TOKEN_ENV_VAR} environment variable. "
                "Please provide it in a .env file or set it in your environment."
            )
        return token

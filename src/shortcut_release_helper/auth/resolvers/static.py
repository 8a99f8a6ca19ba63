"""Static token resolver."""

from __future__ import annotations

from dataclasses import dataclass

from shortcut_release_helper.auth.base import TokenResolver
from shortcut_release_helper.contracts.exceptions import ConfigError


@dataclass(frozen=True)
class StaticTokenResolver(TokenResolver):
    token: str

    async def resolve(self) -> str:
        resolved = self.token.strip()
        if not resolved:
            raise ConfigError("Static token is empty")
        return resolved

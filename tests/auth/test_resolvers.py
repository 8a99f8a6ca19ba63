from __future__ import annotations

import os
from pathlib import Path

import pytest

from shortcut_release_helper.auth.env_file import load_env_file
from shortcut_release_helper.auth.factory import create_token_resolver
from shortcut_release_helper.auth.resolvers import EnvTokenResolver, StaticTokenResolver
from shortcut_release_helper.contracts.config import ReleaseHelperConfig
from shortcut_release_helper.contracts.exceptions import ConfigError

_REPOS = {"dev": {"location": "/tmp/repo", "release_branch": "master", "next_branch": "next"}}


@pytest.mark.asyncio
async def test_env_resolver_reads_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHORTCUT_TOKEN", "  from-env  ")

    assert await EnvTokenResolver().resolve() == "from-env"


@pytest.mark.asyncio
async def test_env_resolver_missing_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHORTCUT_TOKEN", raising=False)

    with pytest.raises(ConfigError, match="SHORTCUT_TOKEN"):
        await EnvTokenResolver().resolve()


@pytest.mark.asyncio
async def test_static_resolver() -> None:
    assert await StaticTokenResolver(token=" abc ").resolve() == "abc"

    with pytest.raises(ConfigError, match="empty"):
        await StaticTokenResolver(token="  ").resolve()


def test_factory_selects_env_resolver() -> None:
    config = ReleaseHelperConfig.model_validate({"repositories": _REPOS})

    assert isinstance(create_token_resolver(config), EnvTokenResolver)


def test_factory_selects_static_resolver() -> None:
    config = ReleaseHelperConfig.model_validate({"repositories": _REPOS, "auth": "token", "token": "abc"})

    resolver = create_token_resolver(config)

    assert isinstance(resolver, StaticTokenResolver)
    assert resolver.token == "abc"


def test_load_env_file_does_not_override_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SHORTCUT_TOKEN=from-file\nRELEASE_HELPER_TEST_VAR=loaded\n", encoding="utf-8")
    monkeypatch.setenv("SHORTCUT_TOKEN", "from-env")
    monkeypatch.delenv("RELEASE_HELPER_TEST_VAR", raising=False)

    assert load_env_file(env_file) is True


    assert os.environ["SHORTCUT_TOKEN"] == "from-env"
    assert os.environ["RELEASE_HELPER_TEST_VAR"] == "loaded"
    monkeypatch.delenv("RELEASE_HELPER_TEST_VAR")


def test_load_env_file_without_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert load_env_file() is False

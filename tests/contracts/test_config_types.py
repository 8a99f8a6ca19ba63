from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from shortcut_release_helper.contracts.config import DEFAULT_API_URL, ReleaseHelperConfig, RepositoryConfiguration


def _repo() -> dict[str, object]:
    return {"location": "/tmp/repo", "release_branch": "master", "next_branch": "next"}


def test_config_defaults() -> None:
    config = ReleaseHelperConfig.model_validate({"repositories": {"dev": _repo()}})

    assert config.renderer == "markdown"
    assert config.max_concurrent == 4
    assert config.auth == "env"
    assert config.api_url == DEFAULT_API_URL
    assert config.repositories["dev"] == RepositoryConfiguration(
        location=Path("/tmp/repo"), release_branch="master", next_branch="next"
    )


def test_config_requires_a_repository() -> None:
    with pytest.raises(ValidationError, match="at least one repository"):
        ReleaseHelperConfig.model_validate({"repositories": {}})


@pytest.mark.parametrize("field", ["release_branch", "next_branch"])
def test_repository_requires_non_empty_references(field: str) -> None:
    payload = _repo()
    payload[field] = ""

    with pytest.raises(ValidationError):
        RepositoryConfiguration.model_validate(payload)


def test_token_auth_requires_token() -> None:
    with pytest.raises(ValidationError, match="non-empty token"):
        ReleaseHelperConfig.model_validate({"repositories": {"dev": _repo()}, "auth": "token"})


def test_token_rejected_for_env_auth() -> None:
    with pytest.raises(ValidationError, match="token must be unset"):
        ReleaseHelperConfig.model_validate({"repositories": {"dev": _repo()}, "token": "abc"})


def test_unknown_auth_mode_rejected() -> None:
    with pytest.raises(ValidationError, match="auth must be one of"):
        ReleaseHelperConfig.model_validate({"repositories": {"dev": _repo()}, "auth": "oauth"})


@pytest.mark.parametrize("value", [0, 17])
def test_max_concurrent_bounds(value: int) -> None:
    with pytest.raises(ValidationError):
        ReleaseHelperConfig.model_validate({"repositories": {"dev": _repo()}, "max_concurrent": value})


def test_template_file_selects_template_renderer() -> None:
    config = ReleaseHelperConfig.model_validate({"repositories": {"dev": _repo()}, "template_file": "notes.md.jinja"})

    assert config.renderer == "template"
    assert config.template_file == Path("notes.md.jinja")


def test_explicit_renderer_wins_over_template_file() -> None:
    config = ReleaseHelperConfig.model_validate(
        {"repositories": {"dev": _repo()}, "template_file": "notes.md.jinja", "renderer": "json"}
    )

    assert config.renderer == "json"


def test_template_renderer_requires_template_file() -> None:
    with pytest.raises(ValidationError, match="requires template_file"):
        ReleaseHelperConfig.model_validate({"repositories": {"dev": _repo()}, "renderer": "template"})

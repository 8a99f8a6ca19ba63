"""Config loading and path resolution."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shortcut_release_helper.contracts.config import ReleaseHelperConfig, RepositoryConfiguration
from shortcut_release_helper.contracts.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("config.toml")


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    value = value.expanduser()
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> ReleaseHelperConfig:
    """Load and validate config from TOML.

    Repository locations and ``template_file`` are resolved against the config directory.
    """
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = tomllib.loads(config_path.read_text(encoding="utf-8"))
        parsed = ReleaseHelperConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in config file: {config_path}: {exc}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    repositories = {
        name: RepositoryConfiguration(
            location=_resolve_path(repo.location, base_dir=config_dir),
            release_branch=repo.release_branch,
            next_branch=repo.next_branch,
        )
        for name, repo in parsed.repositories.items()
    }
    template_file = _resolve_path(parsed.template_file, base_dir=config_dir) if parsed.template_file else None
    return parsed.model_copy(update={"repositories": repositories, "template_file": template_file})

"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_API_URL = "https://api.app.shortcut.com/api/v3"


class RepositoryConfiguration(BaseModel):
    location: Path
    release_branch: str = Field(min_length=1)
    next_branch: str = Field(min_length=1)

    model_config = {"frozen": True}


class ReleaseHelperConfig(BaseModel):
    repositories: dict[str, RepositoryConfiguration]
    renderer: str = "markdown"
    template_file: Path | None = None
    max_concurrent: int = Field(default=4, ge=1, le=16)
    auth: str = "env"
    token: str | None = None
    api_url: str = DEFAULT_API_URL

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def default_template_renderer(cls, data: Any) -> Any:
        # A configured template is used unless another renderer is named explicitly.
        if isinstance(data, dict) and data.get("template_file") and "renderer" not in data:
            return {**data, "renderer": "template"}
        return data

    @field_validator("repositories")
    @classmethod
    def validate_repositories(cls, value: dict[str, RepositoryConfiguration]) -> dict[str, RepositoryConfiguration]:
        if not value:
            raise ValueError("at least one repository must be configured")
        for name in value:
            if not name.strip():
                raise ValueError("repository names must be non-empty")
        return value

    @model_validator(mode="after")
    def validate_auth_token(self) -> ReleaseHelperConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth not in {"env", "token"}:
            raise ValueError("auth must be one of: env, token")
        return self

    @model_validator(mode="after")
    def validate_template_file(self) -> ReleaseHelperConfig:
        if self.renderer == "template" and self.template_file is None:
            raise ValueError("renderer 'template' requires template_file")
        return self

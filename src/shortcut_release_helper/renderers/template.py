"""User-supplied Jinja template renderer."""

from __future__ import annotations

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from shortcut_release_helper.contracts.exceptions import ConfigError, RenderError
from shortcut_release_helper.contracts.release import Release
from shortcut_release_helper.contracts.renderer import ReleaseRenderer


class TemplateRenderer(ReleaseRenderer):
    """Renders a release through a Jinja template file.

    The template sees the release fields as top-level variables: ``name``,
    ``version``, ``description``, ``stories``, ``epics``, ``unparsed_commits``
    and ``next_heads``. The template is loaded eagerly so a missing file or a
    syntax error is reported before any repository is read.
    """

    def __init__(self, *, template_file: str | Path) -> None:
        path = Path(template_file).expanduser()
        self._environment = Environment(
            loader=FileSystemLoader(str(path.parent)),
            undefined=StrictUndefined,
            autoescape=select_autoescape(("html", "htm", "xml")),
            keep_trailing_newline=True,
        )
        try:
            self._template = self._environment.get_template(path.name)
        except TemplateNotFound as exc:
            raise ConfigError(f"template file not found: {path}") from exc
        except TemplateSyntaxError as exc:
            raise ConfigError(f"invalid template {path}, line {exc.lineno}: {exc.message}") from exc
        self.template_file = path

    def render(self, release: Release) -> str:
        try:
            return self._template.render(**release.model_dump(mode="json"))
        except TemplateError as exc:
            raise RenderError(f"failed rendering template {self.template_file}: {exc}") from exc

"""Renderer factory."""

from __future__ import annotations

from shortcut_release_helper.contracts.renderer import ReleaseRenderer
from shortcut_release_helper.renderers.json import JsonRenderer
from shortcut_release_helper.renderers.markdown import MarkdownRenderer
from shortcut_release_helper.renderers.template import TemplateRenderer

RENDERERS: dict[str, type[ReleaseRenderer]] = {
    "markdown": MarkdownRenderer,
    "json": JsonRenderer,
    "template": TemplateRenderer,
}


def create_renderer(name: str, **kwargs: object) -> ReleaseRenderer:
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    return renderer_cls(**kwargs)

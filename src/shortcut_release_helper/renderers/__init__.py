"""Renderer implementations and factory."""

from shortcut_release_helper.renderers.factory import RENDERERS, create_renderer
from shortcut_release_helper.renderers.json import JsonRenderer
from shortcut_release_helper.renderers.markdown import MarkdownRenderer
from shortcut_release_helper.renderers.output import write_release
from shortcut_release_helper.renderers.template import TemplateRenderer

__all__ = ["RENDERERS", "JsonRenderer", "MarkdownRenderer", "TemplateRenderer", "create_renderer", "write_release"]

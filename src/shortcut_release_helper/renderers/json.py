"""JSON release renderer."""

from __future__ import annotations

from shortcut_release_helper.contracts.release import Release
from shortcut_release_helper.contracts.renderer import ReleaseRenderer


class JsonRenderer(ReleaseRenderer):
    def __init__(self, *, indent: int = 2) -> None:
        self._indent = indent

    def render(self, release: Release) -> str:
        return release.model_dump_json(indent=self._indent) + "\n"

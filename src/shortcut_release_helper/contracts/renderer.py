"""Renderer contract."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shortcut_release_helper.contracts.release import Release


class ReleaseRenderer(ABC):
    @abstractmethod
    def render(self, release: Release) -> str: ...  # pragma: no cover

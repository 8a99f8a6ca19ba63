"""Shared test fixtures for shortcut-release-helper tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_token(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real Shortcut token out of the test run."""
    monkeypatch.delenv("SHORTCUT_TOKEN", raising=False)

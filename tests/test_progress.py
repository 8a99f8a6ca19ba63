"""Tests for RichReleaseProgress and NullReleaseProgress."""

from __future__ import annotations

import io

from rich.console import Console

from shortcut_release_helper.cli.progress import RichReleaseProgress
from shortcut_release_helper.engine.progress import NullReleaseProgress, ReleaseProgress


def _console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, width=100)


class TestNullReleaseProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(NullReleaseProgress, ReleaseProgress)

    def test_phase_lifecycle_is_noop(self) -> None:
        progress = NullReleaseProgress()
        progress.phase_start("Stories", total=5)
        progress.item_done("Stories")
        progress.phase_done("Stories")
        progress.phase_error("Stories", RuntimeError("boom"))


class TestRichReleaseProgress:
    """RichReleaseProgress drives Rich progress bars."""

    def test_context_manager(self) -> None:
        progress = RichReleaseProgress(console=_console())
        with progress as p:
            assert p is progress

    def test_determinate_phase_completes(self) -> None:
        with RichReleaseProgress(console=_console()) as progress:
            progress.phase_start("Stories", total=3)
            progress.item_done("Stories")
            progress.phase_done("Stories")

            task = progress._progress.tasks[0]
            assert task.completed == 3

    def test_indeterminate_phase_completes(self) -> None:
        with RichReleaseProgress(console=_console()) as progress:
            progress.phase_start("Repositories", total=None)
            progress.phase_done("Repositories")

            task = progress._progress.tasks[0]
            assert task.total == 1
            assert task.completed == 1

    def test_unknown_phase_is_noop(self) -> None:
        with RichReleaseProgress(console=_console()) as progress:
            progress.item_done("Unknown")
            progress.phase_done("Unknown")
            progress.phase_error("Unknown", RuntimeError("boom"))

    def test_phase_error_marks_description(self) -> None:
        with RichReleaseProgress(console=_console()) as progress:
            progress.phase_start("Epics", total=2)
            progress.phase_error("Epics", RuntimeError("boom"))

            assert "Epics" in progress._progress.tasks[0].description
            assert progress._progress.tasks[0].description.startswith("[red]")

"""Writing rendered release notes to disk."""

from __future__ import annotations

from pathlib import Path

from shortcut_release_helper.contracts.exceptions import RenderError


def write_release(path: str | Path, text: str) -> Path:
    output_path = Path(path).expanduser()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise RenderError(f"failed writing release notes to {output_path}: {exc}") from exc
    return output_path

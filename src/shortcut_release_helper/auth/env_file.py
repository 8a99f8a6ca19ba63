"""Loading of ``.env`` files into the process environment."""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv


def load_env_file(path: str | Path | None = None) -> bool:
    """Load *path*, or the nearest ``.env`` from the working directory upward.

    Variables already present in the environment win over the file.
    """
    if path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            return False
        path = found
    return load_dotenv(path, override=False)

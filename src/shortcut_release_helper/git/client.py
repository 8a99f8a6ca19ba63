"""Async wrapper around the ``git`` CLI."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from shortcut_release_helper.contracts.exceptions import GitCommandError

_LOG = logging.getLogger(__name__)


@dataclass
class CompletedProcess:
    """Result of a ``git`` CLI invocation."""

    returncode: int
    stdout: str
    stderr: str


class GitClient:
    """Async wrapper around the ``git`` binary.

    Every repository read is executed by shelling out to ``git`` with the
    repository location as working directory. Nothing here writes to the
    repository.
    """

    def __init__(self, executable: str = "git") -> None:
        self._executable = executable

    async def run(self, args: list[str], *, cwd: Path, check: bool = True) -> CompletedProcess:
        """Execute ``git <args>`` asynchronously inside *cwd*.

        Args:
            args: Arguments to pass to git.
            cwd: Repository location.
            check: If True, raise on non-zero exit.

        Returns:
            CompletedProcess with stdout, stderr, returncode.

        Raises:
            GitCommandError: If git cannot be executed, or check=True and the command fails.
        """
        cmd = [self._executable, *args]
        _LOG.debug("Running in %s: %s", cwd, " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=cwd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise GitCommandError(f"git executable not found: {self._executable}", returncode=-1) from exc
        except OSError as exc:
            raise GitCommandError(f"cannot run git in {cwd}: {exc}", returncode=-1) from exc
        stdout_bytes, stderr_bytes = await proc.communicate()
        result = CompletedProcess(
            returncode=proc.returncode or 0,
            stdout=stdout_bytes.decode("utf-8", errors="replace") if stdout_bytes else "",
            stderr=stderr_bytes.decode("utf-8", errors="replace") if stderr_bytes else "",
        )
        if check and result.returncode != 0:
            raise GitCommandError(
                f"git command failed: {' '.join(cmd)}\n{result.stderr}",
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result

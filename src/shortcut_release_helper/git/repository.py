"""Read-only access to the commits of a local git repository."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping
from pathlib import Path

from shortcut_release_helper.contracts.config import RepositoryConfiguration
from shortcut_release_helper.contracts.exceptions import (
    GitCommandError,
    ReferenceResolutionError,
    RepositoryError,
    RepositoryOpenError,
)
from shortcut_release_helper.contracts.git import HeadCommit, UnreleasedCommit, UnreleasedCommits
from shortcut_release_helper.git.client import GitClient

_LOG = logging.getLogger(__name__)

# One NUL-terminated record per commit: "<sha>\n<raw message>".
_LOG_FORMAT = "--format=%H%n%B"


def parse_log_records(output: str) -> list[tuple[str, str | None]]:
    """Split ``git log -z --format=%H%n%B`` output into (sha, message) pairs."""
    records: list[tuple[str, str | None]] = []
    for record in output.split("\0"):
        record = record.lstrip("\n")
        if not record:
            continue
        sha, _, body = record.partition("\n")
        message = body.rstrip()
        records.append((sha.strip(), message or None))
    return records


class Repository:
    """A git repository whose release and next references have been resolved.

    Use :meth:`open` to construct one; it fails fast when the location is not a
    repository or when either reference is missing.
    """

    def __init__(
        self,
        name: str,
        config: RepositoryConfiguration,
        *,
        release_id: str,
        next_id: str,
        git: GitClient,
    ) -> None:
        self.name = name
        self.config = config
        self.release_id = release_id
        self.next_id = next_id
        self._git = git

    @classmethod
    async def open(cls, name: str, config: RepositoryConfiguration, *, git: GitClient | None = None) -> Repository:
        git = git or GitClient()
        location = config.location
        if not location.is_dir():
            raise RepositoryOpenError(
                f"Repository '{name}': location {location} does not exist or is not a directory",
                repository=name,
                location=str(location),
            )
        try:
            root = await cls._repository_root(name, location, git)
            if root is None or root.resolve() != location.resolve():
                where = f" (enclosing repository: {root})" if root is not None else ""
                raise RepositoryOpenError(
                    f"Repository '{name}': {location} is not a git repository{where}",
                    repository=name,
                    location=str(location),
                )
            release_id = await cls._resolve(name, config, config.release_branch, git)
            next_id = await cls._resolve(name, config, config.next_branch, git)
        except GitCommandError as exc:
            raise RepositoryOpenError(
                f"Repository '{name}': cannot run git in {location}: {exc}",
                repository=name,
                location=str(location),
            ) from exc
        return cls(name, config, release_id=release_id, next_id=next_id, git=git)

    @staticmethod
    async def _repository_root(name: str, location: Path, git: GitClient) -> Path | None:
        """Top-level directory of the repository git discovers from *location*.

        Discovery walks up parent directories, so a plain folder nested in some
        other work tree reports that outer tree. Bare repositories report their
        git directory.
        """
        probe = await git.run(["rev-parse", "--is-bare-repository", "--absolute-git-dir"], cwd=location, check=False)
        lines = probe.stdout.splitlines()
        if probe.returncode != 0 or len(lines) < 2:
            return None
        if lines[0].strip() == "true":
            return Path(lines[1].strip())
        toplevel = await git.run(["rev-parse", "--show-toplevel"], cwd=location, check=False)
        if toplevel.returncode != 0 or not toplevel.stdout.strip():
            _LOG.debug("[%s] no work tree at %s: %s", name, location, toplevel.stderr.strip())
            return None
        return Path(toplevel.stdout.strip())

    @staticmethod
    async def _resolve(name: str, config: RepositoryConfiguration, reference: str, git: GitClient) -> str:
        result = await git.run(
            ["rev-parse", "--verify", "--quiet", f"{reference}^{{commit}}"],
            cwd=config.location,
            check=False,
        )
        sha = result.stdout.strip()
        if result.returncode != 0 or not sha:
            raise ReferenceResolutionError(
                f"Repository '{name}': cannot resolve reference '{reference}' to a commit",
                repository=name,
                reference=reference,
            )
        return sha

    async def find_unreleased_commits_and_head(self) -> UnreleasedCommits:
        """Return commits reachable from next but not from release, plus the head of next.

        ``--not <release>`` stops the walk at commits already reachable from the
        release reference, so only the unreleased part of history is visited.
        """
        try:
            log = await self._git.run(
                ["log", "-z", "--encoding=UTF-8", _LOG_FORMAT, self.next_id, "--not", self.release_id],
                cwd=self.config.location,
            )
            head = await self._git.run(
                ["log", "-1", "-z", "--encoding=UTF-8", _LOG_FORMAT, self.next_id],
                cwd=self.config.location,
            )
        except GitCommandError as exc:
            raise RepositoryError(
                f"Repository '{self.name}': failed reading history: {exc}", repository=self.name
            ) from exc

        commits = [UnreleasedCommit(id=sha, message=message) for sha, message in parse_log_records(log.stdout)]
        head_records = parse_log_records(head.stdout)
        head_message = head_records[0][1] if head_records else None
        return UnreleasedCommits(
            unreleased_commits=commits,
            next_head=HeadCommit(id=self.next_id, message=head_message),
        )


async def find_unreleased_commits(
    name: str, config: RepositoryConfiguration, *, git: GitClient | None = None
) -> UnreleasedCommits:
    _LOG.info(
        "[%s] release_branch=%s next_branch=%s",
        name,
        config.release_branch,
        config.next_branch,
    )
    started = time.perf_counter()
    repository = await Repository.open(name, config, git=git)
    _LOG.debug("[%s] Initialization done in %dms", name, (time.perf_counter() - started) * 1000)

    started = time.perf_counter()
    commits = await repository.find_unreleased_commits_and_head()
    _LOG.info(
        "[%s] Found %d unreleased commits in %dms",
        name,
        len(commits.unreleased_commits),
        (time.perf_counter() - started) * 1000,
    )
    return commits


async def find_all_unreleased_commits(
    repositories: Mapping[str, RepositoryConfiguration], *, git: GitClient | None = None
) -> dict[str, UnreleasedCommits]:
    """Read every repository concurrently; the first failure aborts the others."""
    git = git or GitClient()
    tasks: dict[str, asyncio.Task[UnreleasedCommits]] = {}
    try:
        async with asyncio.TaskGroup() as tg:
            for name, config in repositories.items():
                tasks[name] = tg.create_task(find_unreleased_commits(name, config, git=git))
    except* RepositoryError as error_group:
        first_error = error_group.exceptions[0]
        raise first_error from error_group
    return {name: task.result() for name, task in tasks.items()}

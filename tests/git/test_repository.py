from __future__ import annotations

from pathlib import Path

import pytest

from shortcut_release_helper.contracts.config import RepositoryConfiguration
from shortcut_release_helper.contracts.exceptions import ReferenceResolutionError, RepositoryOpenError
from shortcut_release_helper.git.repository import (
    Repository,
    find_all_unreleased_commits,
    find_unreleased_commits,
    parse_log_records,
)
from tests.fakes.git_repo import GitRepo, requires_git


def _config(path: Path, *, release: str = "master", next_: str = "next") -> RepositoryConfiguration:
    return RepositoryConfiguration(location=path, release_branch=release, next_branch=next_)


@pytest.fixture
def diverged_repo(tmp_path: Path) -> GitRepo:
    """master: base <- hotfix ; next: base <- sc-1 <- cleanup."""
    repo = GitRepo.init(tmp_path / "repo")
    repo.commit("base commit")
    repo.checkout("next", create=True)
    repo.commit("fix bug sc-1")
    repo.commit("cleanup")
    repo.checkout("master")
    repo.commit("hotfix only on master")
    return repo


def test_parse_log_records_splits_nul_separated_entries() -> None:
    output = "a" * 40 + "\nfirst line\n\nbody\n\0" + "b" * 40 + "\n\n\0"

    assert parse_log_records(output) == [
        ("a" * 40, "first line\n\nbody"),
        ("b" * 40, None),
    ]


def test_parse_log_records_empty_output() -> None:
    assert parse_log_records("") == []


@requires_git
@pytest.mark.asyncio
async def test_finds_commits_only_on_next(diverged_repo: GitRepo) -> None:
    result = await find_unreleased_commits("dev", _config(diverged_repo.path))

    messages = [commit.message for commit in result.unreleased_commits]
    assert messages == ["cleanup", "fix bug sc-1"]
    assert result.next_head.id == diverged_repo.git("rev-parse", "next")
    assert result.next_head.message == "cleanup"


@requires_git
@pytest.mark.asyncio
async def test_same_reference_yields_no_commits(diverged_repo: GitRepo) -> None:
    result = await find_unreleased_commits("dev", _config(diverged_repo.path, release="master", next_="master"))

    assert result.unreleased_commits == []
    assert result.next_head.id == diverged_repo.git("rev-parse", "master")


@requires_git
@pytest.mark.asyncio
async def test_merged_history_is_excluded(tmp_path: Path) -> None:
    repo = GitRepo.init(tmp_path / "repo")
    repo.commit("base")
    repo.checkout("next", create=True)
    repo.commit("sc-1 shipped")
    repo.checkout("master")
    repo.merge("next", "release sc-1")
    repo.checkout("next")
    repo.commit("sc-2 pending")

    result = await find_unreleased_commits("dev", _config(repo.path))

    assert [commit.message for commit in result.unreleased_commits] == ["sc-2 pending"]


@requires_git
@pytest.mark.asyncio
async def test_commit_sha_can_be_used_as_reference(diverged_repo: GitRepo) -> None:
    base = diverged_repo.git("rev-list", "--max-parents=0", "HEAD")

    result = await find_unreleased_commits("dev", _config(diverged_repo.path, release=base))

    assert len(result.unreleased_commits) == 2


@requires_git
@pytest.mark.asyncio
async def test_missing_reference_names_reference(diverged_repo: GitRepo) -> None:
    with pytest.raises(ReferenceResolutionError, match="does-not-exist") as exc_info:
        await Repository.open("dev", _config(diverged_repo.path, next_="does-not-exist"))

    assert exc_info.value.reference == "does-not-exist"
    assert exc_info.value.repository == "dev"


@requires_git
@pytest.mark.asyncio
async def test_directory_that_is_not_a_repository(tmp_path: Path) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()

    with pytest.raises(RepositoryOpenError, match="not a git repository"):
        await Repository.open("dev", _config(plain))


@pytest.mark.asyncio
async def test_missing_location(tmp_path: Path) -> None:
    with pytest.raises(RepositoryOpenError, match="does not exist") as exc_info:
        await Repository.open("dev", _config(tmp_path / "missing"))

    assert exc_info.value.repository == "dev"


@requires_git
@pytest.mark.asyncio
async def test_all_repositories_read_concurrently(tmp_path: Path) -> None:
    first = GitRepo.init(tmp_path / "first")
    first.commit("base")
    first.checkout("next", create=True)
    first.commit("sc-1")
    second = GitRepo.init(tmp_path / "second")
    second.commit("base")
    second.checkout("next", create=True)

    results = await find_all_unreleased_commits({"first": _config(first.path), "second": _config(second.path)})

    assert set(results) == {"first", "second"}
    assert len(results["first"].unreleased_commits) == 1
    assert results["second"].unreleased_commits == []


@requires_git
@pytest.mark.asyncio
async def test_one_failing_repository_aborts_the_run(tmp_path: Path, diverged_repo: GitRepo) -> None:
    with pytest.raises(ReferenceResolutionError) as exc_info:
        await find_all_unreleased_commits(
            {
                "good": _config(diverged_repo.path),
                "bad": _config(diverged_repo.path, release="missing-release"),
            }
        )

    assert exc_info.value.repository == "bad"


@requires_git
@pytest.mark.asyncio
async def test_plain_folder_inside_another_repository_is_rejected(tmp_path: Path) -> None:
    outer = GitRepo.init(tmp_path / "workspace")
    outer.commit("workflow checkout")
    outer.checkout("next", create=True)
    outer.commit("sc-999 outer repo commit")
    nested = outer.path / "src" / "repo_one"
    nested.mkdir(parents=True)

    with pytest.raises(RepositoryOpenError, match="not a git repository") as exc_info:
        await find_unreleased_commits("repo_one", _config(nested))

    assert exc_info.value.repository == "repo_one"
    assert exc_info.value.location == str(nested)


@requires_git
@pytest.mark.asyncio
async def test_repository_nested_in_another_work_tree_is_read_on_its_own(tmp_path: Path) -> None:
    outer = GitRepo.init(tmp_path / "workspace")
    outer.commit("sc-999 outer repo commit")
    inner = GitRepo.init(outer.path / "src" / "repo_one")
    inner.commit("base")
    inner.checkout("next", create=True)
    inner.commit("sc-5 inner change")

    result = await find_unreleased_commits("repo_one", _config(inner.path))

    assert [commit.message for commit in result.unreleased_commits] == ["sc-5 inner change"]


@requires_git
@pytest.mark.asyncio
async def test_bare_repository_can_be_opened(tmp_path: Path, diverged_repo: GitRepo) -> None:
    bare = tmp_path / "bare.git"
    diverged_repo.git("clone", "--quiet", "--bare", str(diverged_repo.path), str(bare))

    result = await find_unreleased_commits("dev", _config(bare))

    assert [commit.message for commit in result.unreleased_commits] == ["cleanup", "fix bug sc-1"]


@pytest.mark.asyncio
async def test_git_start_failure_names_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _denied(*args: object, **kwargs: object) -> None:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("shortcut_release_helper.git.client.asyncio.create_subprocess_exec", _denied)

    with pytest.raises(RepositoryOpenError, match="Repository 'dev'") as exc_info:
        await find_all_unreleased_commits({"dev": _config(tmp_path)})

    assert exc_info.value.repository == "dev"
    assert exc_info.value.location == str(tmp_path)

"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from template_library.core.models.repository import RepositoryDescriptor
from template_library.registry import RepositoryRegistry
from tests.helpers import FakeGitHost, commit_files, git


@pytest.fixture(autouse=True)
def git_identity(monkeypatch: pytest.MonkeyPatch) -> None:
    """Commits made by tests and by pulls need an identity."""
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@test.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@test.com")


@pytest.fixture
def upstream_repo(tmp_path: Path) -> Path:
    """A core-like repository with release tags and a umd-3 branch.

    Lives at <tmp>/quattor/template-library-core.git so that it can be
    reached through a root URL.
    """
    repo = tmp_path / "quattor" / "template-library-core.git"
    repo.mkdir(parents=True)
    git("init", "--quiet", cwd=repo)
    git("symbolic-ref", "HEAD", "refs/heads/master", cwd=repo)

    commit_files(repo, {"quattor/functions.pan": "v1\n"}, "Release 14.2.0")
    git("tag", "template-library-14.2.0", cwd=repo)
    commit_files(repo, {"quattor/functions.pan": "v2\n"}, "Release 14.2.1")
    git("tag", "template-library-14.2.1", cwd=repo)
    git("tag", "template-library-14.2.2-rc1", cwd=repo)

    git("checkout", "--quiet", "-b", "umd-3", cwd=repo)
    commit_files(repo, {"grid/umd.pan": "umd-3\n"}, "UMD 3")
    git("checkout", "--quiet", "master", cwd=repo)
    return repo


@pytest.fixture
def fork_repo(upstream_repo: Path) -> Path:
    """alice's fork of the upstream repository with a 'fix' branch off master."""
    fork = upstream_repo.parent.parent / "alice" / upstream_repo.name
    fork.parent.mkdir(parents=True)
    git("clone", "--quiet", str(upstream_repo), str(fork), cwd=fork.parent)
    git("checkout", "--quiet", "-b", "fix", cwd=fork)
    commit_files(fork, {"quattor/fix.pan": "fixed\n"}, "Fix")
    return fork


@pytest.fixture
def git_host() -> FakeGitHost:
    return FakeGitHost()


@pytest.fixture
def core_repo() -> RepositoryDescriptor:
    return RepositoryRegistry().get("template-library-core")

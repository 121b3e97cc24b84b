"""Shared test helpers: git shortcuts and an in-memory git client."""

import subprocess
from pathlib import Path

from template_library.core.exceptions import GitCommandError

ROOT_URL = "https://git.example.org/quattor"


def git(*args: str, cwd: Path) -> str:
    """Run git in ``cwd`` and return stdout."""
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def commit_files(repo: Path, files: dict[str, str], message: str) -> None:
    for relative, content in files.items():
        path = repo / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    git("add", ".", cwd=repo)
    git("commit", "--quiet", "-m", message, cwd=repo)


class FakeRemote:
    """In-memory remote repository: ref name -> {relative path: content}."""

    def __init__(
        self,
        branches: dict[str, dict[str, str]] | None = None,
        tags: dict[str, dict[str, str]] | None = None,
    ) -> None:
        self.branches = branches or {}
        self.tags = tags or {}

    def files(self, ref: str) -> dict[str, str] | None:
        if ref in self.tags:
            return self.tags[ref]
        return self.branches.get(ref)


class FakeGitHost:
    """Hosts fake remotes by URL and creates FakeGitClients bound to it."""

    def __init__(self) -> None:
        self.remotes: dict[str, FakeRemote] = {}
        self.calls: list[tuple] = []
        self.failing: set[tuple[str, str]] = set()

    def add(self, url: str, remote: FakeRemote) -> FakeRemote:
        self.remotes[url] = remote
        return remote

    def fail(self, operation: str, argument: str) -> None:
        self.failing.add((operation, argument))

    def client(self, repo_path: Path) -> "FakeGitClient":
        return FakeGitClient(self, repo_path)


class FakeGitClient:
    """Drop-in replacement of GitClient working on FakeRemotes."""

    def __init__(self, host: FakeGitHost, repo_path: Path) -> None:
        self._host = host
        self._repo_path = Path(repo_path)
        self._origin: FakeRemote | None = None
        self._remotes: dict[str, str] = {}

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def _record(self, operation: str, *args: str) -> None:
        self._host.calls.append((operation, *args))
        if (operation, args[0] if args else "") in self._host.failing:
            raise GitCommandError(f"git {operation} failed", command=["git", operation, *args])

    def _write(self, files: dict[str, str]) -> None:
        for relative, content in files.items():
            path = self._repo_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)

    def clone(self, url: str) -> None:
        self._record("clone", url)
        if url not in self._host.remotes:
            raise GitCommandError(f"repository not found: {url}")
        self._origin = self._host.remotes[url]
        (self._repo_path / ".git").mkdir(parents=True)

    def list_remote_branches(self) -> list[str]:
        return list(self._origin.branches)

    def list_tags(self) -> list[str]:
        return list(self._origin.tags)

    def checkout(self, ref: str) -> None:
        self._record("checkout", ref)
        files = self._origin.files(ref)
        if files is None:
            raise GitCommandError(f"unknown ref: {ref}")
        self._write(files)

    def add_remote(self, name: str, url: str) -> None:
        self._record("add_remote", name, url)
        self._remotes[name] = url

    def pull(self, remote: str, branch: str) -> None:
        self._record("pull", remote, branch)
        fork = self._host.remotes.get(self._remotes[remote])
        files = fork.files(branch) if fork else None
        if files is None:
            raise GitCommandError(f"couldn't find remote ref {branch}")
        self._write(files)

    def discard_untracked_files(self) -> None:
        self._record("discard_untracked_files")



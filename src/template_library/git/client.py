"""Git client using subprocess."""

import subprocess
from pathlib import Path

import structlog

from template_library.core.exceptions import GitCommandError

logger = structlog.get_logger(__name__)

ORIGIN = "origin"


class GitClient:
    """Runs git commands against one local clone.

    Uses subprocess + git CLI directly (no gitpython dependency). Every
    failing command raises GitCommandError.
    """

    def __init__(self, repo_path: str | Path, executable: str = "git") -> None:
        self._repo_path = Path(repo_path).resolve()
        self._executable = executable

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    def _run(self, args: list[str], cwd: Path | None) -> str:
        command = [self._executable, *args]
        logger.debug("Running git", command=" ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise GitCommandError(
                f"git {args[0]} failed: {e.stderr.strip()}",
                command=command,
                stderr=e.stderr,
                details={"returncode": e.returncode, "repo_path": str(self._repo_path)},
            ) from e
        except FileNotFoundError as e:
            raise GitCommandError(
                f"git executable not found: {self._executable}",
                command=command,
            ) from e
        return result.stdout.strip()

    def _run_git(self, *args: str) -> str:
        """Run a git command inside the clone and return stdout."""
        return self._run(list(args), cwd=self._repo_path)

    def clone(self, url: str) -> None:
        """Clone ``url`` into the client's repository path."""
        self._repo_path.parent.mkdir(parents=True, exist_ok=True)
        self._run(["clone", "--quiet", url, str(self._repo_path)], cwd=None)

    def list_remote_branches(self) -> list[str]:
        """List branch names of the origin remote, without the remote prefix.

        The symbolic ``origin/HEAD -> origin/master`` entry is reported
        as ``HEAD``.
        """
        output = self._run_git("branch", "--remotes")
        prefix = f"{ORIGIN}/"
        branches = []
        for line in output.splitlines():
            name = line.strip().split(" -> ")[0]
            if name.startswith(prefix):
                branches.append(name[len(prefix):])
        return branches

    def list_tags(self) -> list[str]:
        output = self._run_git("tag", "--list")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def checkout(self, ref: str) -> None:
        """Check out a branch or tag, discarding local modifications."""
        self._run_git("checkout", "--quiet", "--force", ref)

    def add_remote(self, name: str, url: str) -> None:
        self._run_git("remote", "add", name, url)

    def pull(self, remote: str, branch: str) -> None:
        """Merge ``branch`` of ``remote`` into the checked-out ref."""
        self._run_git("pull", "--quiet", "--no-rebase", "--no-edit", remote, branch)

    def discard_untracked_files(self) -> None:
        """Remove untracked files and directories left over by a checkout."""
        self._run_git("clean", "--force", "-d", "--quiet")

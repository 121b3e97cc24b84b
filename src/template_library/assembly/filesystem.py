"""File tree operations used to populate the destination."""

import shutil
from pathlib import Path

VCS_METADATA = (".git",)


class FileTree:
    """Directory creation, recursive copy and removal."""

    def make_directories(self, path: str | Path) -> Path:
        """Create ``path`` and its parents. Existing directories are fine."""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def copy_tree_into(self, source: str | Path, destination: str | Path) -> None:
        """Copy the contents of ``source`` into ``destination``.

        Existing files are overwritten, git metadata is skipped.
        """
        shutil.copytree(
            source,
            destination,
            ignore=shutil.ignore_patterns(*VCS_METADATA),
            dirs_exist_ok=True,
        )

    def remove_tree(self, path: str | Path) -> None:
        """Remove ``path`` recursively if it exists."""
        path = Path(path)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()

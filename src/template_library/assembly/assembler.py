"""Assembler: copy a resolved ref into its place in the template library."""

from pathlib import Path
from typing import Protocol

import structlog

from template_library.assembly.filesystem import FileTree
from template_library.core.models.refs import ResolvedRef
from template_library.core.models.repository import (
    BRANCH_PLACEHOLDER,
    TAG_PLACEHOLDER,
    RepositoryDescriptor,
)

logger = structlog.get_logger(__name__)


class WorkingTree(Protocol):
    """The part of the git client used by the assembler."""

    @property
    def repo_path(self) -> Path: ...

    def discard_untracked_files(self) -> None: ...


def destination_path(repo: RepositoryDescriptor, ref: ResolvedRef) -> str:
    """Destination of ``ref`` relative to the library root.

    ``%BRANCH%`` is replaced by the ref family and ``%TAG%`` by its
    version. An empty result means the library root itself.
    """
    path = repo.destination.replace(BRANCH_PLACEHOLDER, ref.family)
    path = path.replace(TAG_PLACEHOLDER, ref.version)
    if repo.strip_destination_suffix:
        path = path.replace(repo.strip_destination_suffix, "")
    return path


class Assembler:
    """Materializes checked-out refs under the destination root."""

    def __init__(self, root: str | Path, file_tree: FileTree | None = None) -> None:
        self._root = Path(root)
        self._file_tree = file_tree or FileTree()

    def assemble(self, repo: RepositoryDescriptor, ref: ResolvedRef, working_tree: WorkingTree) -> Path:
        """Copy the checked-out working tree of ``ref`` to its destination.

        Untracked files are discarded afterwards so that the next checkout
        in the same clone starts clean.
        """
        relative = destination_path(repo, ref)
        target = self._root / relative if relative else self._root

        self._file_tree.make_directories(target)
        self._file_tree.copy_tree_into(working_tree.repo_path, target)
        working_tree.discard_untracked_files()

        logger.info("Ref copied", repo=repo.name, ref=ref.name, destination=str(target))
        return target

"""Version resolution: build the pattern selecting refs for a requested version."""

import re
from collections.abc import Iterable

from template_library.core.models.repository import RepositoryDescriptor
from template_library.core.models.run import MOST_RECENT_VERSION


def uses_tags(repo: RepositoryDescriptor, requested_version: str) -> bool:
    """Whether refs of ``repo`` are tags for this run.

    The most recent version is only available on branches, so HEAD
    forces branch mode for every repository.
    """
    if requested_version == MOST_RECENT_VERSION:
        return False
    return repo.use_tags


def build_selection_pattern(repo: RepositoryDescriptor, requested_version: str) -> re.Pattern:
    """Compile the regex selecting the candidate refs of ``repo``.

    The same descriptor and version always give the same pattern.
    """
    if requested_version == MOST_RECENT_VERSION or repo.ignore_requested_version:
        return re.compile(rf"^(?:{repo.branch_pattern})$")

    version = re.escape(requested_version)
    if repo.tags_ignore_pattern:
        return re.compile(rf"-{version}$")
    return re.compile(rf"(?:{repo.branch_pattern})-{version}$")


def select_refs(pattern: re.Pattern, refs: Iterable[str]) -> list[str]:
    """Refs matching ``pattern``, in discovery order."""
    return [ref for ref in refs if pattern.search(ref)]

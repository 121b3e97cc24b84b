"""Domain models for the template library assembler."""

from template_library.core.models.refs import PullRequestSpec, ResolvedRef
from template_library.core.models.repository import RepositoryDescriptor
from template_library.core.models.run import (
    ExitStatus,
    RepositoryResult,
    RunConfig,
    RunResult,
)

__all__ = [
    "RepositoryDescriptor",
    "ResolvedRef",
    "PullRequestSpec",
    "RunConfig",
    "RepositoryResult",
    "RunResult",
    "ExitStatus",
]

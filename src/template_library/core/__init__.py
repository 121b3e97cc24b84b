"""Core domain models and exceptions for the template library assembler."""

from template_library.core.exceptions import (
    ConfigurationError,
    GitCommandError,
    OverlayError,
    ResolutionError,
    TemplateLibraryError,
)
from template_library.core.models import (
    ExitStatus,
    PullRequestSpec,
    RepositoryDescriptor,
    RepositoryResult,
    ResolvedRef,
    RunConfig,
    RunResult,
)

__all__ = [
    # Models
    "RepositoryDescriptor",
    "ResolvedRef",
    "PullRequestSpec",
    "RunConfig",
    "RepositoryResult",
    "RunResult",
    "ExitStatus",
    # Exceptions
    "TemplateLibraryError",
    "ConfigurationError",
    "ResolutionError",
    "GitCommandError",
    "OverlayError",
]

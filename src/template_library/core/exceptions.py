"""Exception hierarchy for the template library assembler."""

from typing import Any


class TemplateLibraryError(Exception):
    """Base exception for all template library errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TemplateLibraryError):
    """Invalid invocation or configuration, detected before any git interaction."""


class ResolutionError(TemplateLibraryError):
    """A repository descriptor cannot be turned into a usable ref selection."""


class GitCommandError(TemplateLibraryError):
    """A git command failed. Always fatal for the run."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        stderr: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.command = command or []
        self.stderr = stderr


class OverlayError(TemplateLibraryError):
    """A pull request could not be merged on top of a resolved ref."""

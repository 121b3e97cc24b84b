"""Business logic services for the template library assembler."""

from template_library.services.library import LibraryService

__all__ = ["LibraryService"]

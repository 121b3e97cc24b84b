"""Git integration module for the template library assembler."""

from template_library.git.client import GitClient
from template_library.git.url_resolver import RepositoryURLResolver

__all__ = ["GitClient", "RepositoryURLResolver"]

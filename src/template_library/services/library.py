"""Template library service."""

from pathlib import Path

import structlog

from template_library.assembly.assembler import Assembler
from template_library.assembly.filesystem import FileTree
from template_library.config.settings import Settings
from template_library.core.exceptions import ConfigurationError
from template_library.core.models.run import RunConfig, RunResult
from template_library.git.client import GitClient
from template_library.git.url_resolver import RepositoryURLResolver
from template_library.pipelines.assembly import AssemblyPipeline
from template_library.registry import RepositoryRegistry

logger = structlog.get_logger(__name__)


class LibraryService:
    """Service preparing the destination and running the assembly pipeline."""

    def __init__(
        self,
        settings: Settings,
        registry: RepositoryRegistry | None = None,
        file_tree: FileTree | None = None,
    ) -> None:
        self._settings = settings
        self._registry = registry or RepositoryRegistry()
        self._file_tree = file_tree or FileTree()

    def prepare_destination(self, config: RunConfig) -> Path:
        """Make sure the destination root can be populated.

        An existing destination is removed when ``force`` is set and
        rejected otherwise.
        """
        destination = Path(config.destination).expanduser()
        if destination.exists():
            if not config.force:
                raise ConfigurationError(
                    f"Destination already exists: {destination} (use --force to replace it)",
                    details={"destination": str(destination)},
                )
            logger.info("Removing existing destination", destination=str(destination))
            self._file_tree.remove_tree(destination)
        return self._file_tree.make_directories(destination)

    def create_pipeline(self, config: RunConfig) -> AssemblyPipeline:
        assembler = None
        if not config.list_only:
            assembler = Assembler(Path(config.destination).expanduser(), self._file_tree)

        executable = self._settings.git_executable
        return AssemblyPipeline(
            registry=self._registry,
            url_resolver=RepositoryURLResolver(self._settings.git_root_url),
            assembler=assembler,
            git_factory=lambda path: GitClient(path, executable=executable),
            file_tree=self._file_tree,
            clone_parent=self._settings.clone_parent,
        )

    def assemble(self, config: RunConfig) -> RunResult:
        """Build the template library described by ``config``.

        Raises ConfigurationError before any git interaction when the
        configuration is unusable.
        """
        self._registry.select(config.repositories)
        if not config.list_only:
            self.prepare_destination(config)

        logger.info(
            "Assembling template library",
            version=config.version,
            destination=config.destination,
            list_only=config.list_only,
        )
        return self.create_pipeline(config).run(config)

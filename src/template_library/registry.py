"""Repository registry: the source repositories of the template library."""

from collections.abc import Sequence

from template_library.core.exceptions import ConfigurationError
from template_library.core.models.repository import RepositoryDescriptor

# Processed in this order. The examples repository is copied into the
# destination root itself.
DEFAULT_REPOSITORIES: tuple[RepositoryDescriptor, ...] = (
    RepositoryDescriptor(
        name="template-library-core",
        branch_pattern="master",
        tags_ignore_pattern=True,
        destination="quattor/%TAG%",
    ),
    RepositoryDescriptor(
        name="template-library-standard",
        branch_pattern="master",
        tags_ignore_pattern=True,
        destination="standard",
    ),
    RepositoryDescriptor(
        name="template-library-os",
        branch_pattern=r"el\d+\.x-x86_64(?:-spma)?",
        destination="os/%BRANCH%",
        strip_destination_suffix="-spma",
    ),
    RepositoryDescriptor(
        name="template-library-grid",
        branch_pattern=r"umd-\d+",
        destination="grid/%BRANCH%",
    ),
    RepositoryDescriptor(
        name="template-library-openstack",
        branch_pattern="master",
        tags_ignore_pattern=True,
        destination="openstack",
    ),
    RepositoryDescriptor(
        name="template-library-monitoring",
        branch_pattern="master",
        tags_ignore_pattern=True,
        destination="monitoring",
    ),
    RepositoryDescriptor(
        name="template-library-examples",
        branch_pattern="master",
        use_tags=False,
        ignore_requested_version=True,
        destination="",
    ),
)


class RepositoryRegistry:
    """Ordered, read-only collection of repository descriptors."""

    def __init__(self, repositories: Sequence[RepositoryDescriptor] = DEFAULT_REPOSITORIES) -> None:
        names = [repo.name for repo in repositories]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Duplicate repositories: {', '.join(duplicates)}",
                details={"duplicates": duplicates},
            )
        self._repositories = tuple(repositories)

    def __iter__(self):
        return iter(self._repositories)

    @property
    def names(self) -> list[str]:
        return [repo.name for repo in self._repositories]

    def get(self, name: str) -> RepositoryDescriptor:
        for repo in self._repositories:
            if repo.name == name:
                return repo
        raise ConfigurationError(f"Unknown repository: {name}", details={"repository": name})

    def select(self, names: Sequence[str]) -> list[RepositoryDescriptor]:
        """Descriptors for ``names`` in declared order; all of them if ``names`` is empty."""
        if not names:
            return list(self._repositories)
        for name in names:
            self.get(name)
        return [repo for repo in self._repositories if repo.name in names]

"""Per-repository effective configuration.

Merges the run-wide RunConfig with one RepositoryDescriptor, once per
repository, so that ref mode, selection pattern and ignore rules are
never re-derived at the place they are used.
"""

import re

from pydantic import BaseModel

from template_library.core.exceptions import ResolutionError
from template_library.core.models.repository import RepositoryDescriptor
from template_library.core.models.run import RunConfig
from template_library.resolution.exclusion import IgnoreRules, build_ignore_rules
from template_library.resolution.selector import build_selection_pattern, uses_tags


class EffectiveRepositoryConfig(BaseModel):
    """Everything needed to resolve the refs of one repository in one run."""

    repository: RepositoryDescriptor
    requested_version: str
    use_tags: bool
    pattern: re.Pattern
    rules: IgnoreRules

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    @property
    def name(self) -> str:
        return self.repository.name

    @property
    def ref_kind(self) -> str:
        return "tag" if self.use_tags else "branch"


def resolve_effective_config(
    repo: RepositoryDescriptor,
    config: RunConfig,
    rules: IgnoreRules | None = None,
) -> EffectiveRepositoryConfig:
    """Build the effective configuration of ``repo`` for the run ``config``."""
    try:
        pattern = build_selection_pattern(repo, config.version)
    except re.error as e:
        raise ResolutionError(
            f"Cannot build ref pattern for {repo.name}: {e}",
            details={"repository": repo.name, "branch_pattern": repo.branch_pattern},
        ) from e

    return EffectiveRepositoryConfig(
        repository=repo,
        requested_version=config.version,
        use_tags=uses_tags(repo, config.version),
        pattern=pattern,
        rules=rules if rules is not None else build_ignore_rules(config),
    )

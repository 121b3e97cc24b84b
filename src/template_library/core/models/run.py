"""Run configuration and result models."""

from enum import IntEnum

from pydantic import BaseModel, Field

from template_library.core.models.refs import PullRequestSpec, ResolvedRef

MOST_RECENT_VERSION = "HEAD"


class ExitStatus(IntEnum):
    """Process exit status of a run."""

    SUCCESS = 0
    INVALID_INVOCATION = 1
    GIT_FAILURE = 3
    OVERLAY_FAILURE = 4
    NO_MATCH = 5


class RunConfig(BaseModel):
    """Immutable run-wide configuration, built once at startup."""

    version: str = Field(..., min_length=1, description="Requested version or HEAD")
    destination: str = "template-library"
    force: bool = False
    list_only: bool = False
    keep_clones: bool = Field(default=False, description="Keep temporary clones for diagnosis")
    pull_request: PullRequestSpec | None = None

    # Ignore rule toggles
    include_legacy: bool = False
    include_rc: bool = False
    use_spma: bool = False

    # Restrict the run to these repositories (empty: all registered)
    repositories: tuple[str, ...] = ()

    class Config:
        frozen = True

    @property
    def most_recent(self) -> bool:
        return self.version == MOST_RECENT_VERSION


class RepositoryResult(BaseModel):
    """Outcome of processing one repository."""

    name: str
    selected: list[ResolvedRef] = Field(default_factory=list)
    materialized: list[ResolvedRef] = Field(default_factory=list)
    overlaid: list[str] = Field(default_factory=list, description="Refs with the pull request merged")
    error: str | None = None

    @property
    def matched(self) -> bool:
        """At least one ref survived filtering."""
        return bool(self.selected)


class RunResult(BaseModel):
    """Outcome of a whole run."""

    repositories: list[RepositoryResult] = Field(default_factory=list)
    status: ExitStatus = ExitStatus.SUCCESS

    @property
    def unmatched(self) -> list[str]:
        return [r.name for r in self.repositories if r.error is None and not r.matched]

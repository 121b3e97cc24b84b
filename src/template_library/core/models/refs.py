"""Resolved ref and pull request models."""

from pydantic import BaseModel, Field

from template_library.core.models.repository import DEFAULT_BRANCH

UNDEFINED_VERSION = "undefined"


class ResolvedRef(BaseModel):
    """A concrete branch or tag with its family/version decomposition.

    ``family`` is the product line the ref belongs to, ``version`` the
    extracted version suffix. ``display_family`` is the name used when
    matching pull request targets.
    """

    name: str
    family: str
    version: str = UNDEFINED_VERSION
    display_family: str

    class Config:
        frozen = True

    @property
    def has_version(self) -> bool:
        return self.version != UNDEFINED_VERSION


class PullRequestSpec(BaseModel):
    """An external change set to merge on top of one repository/branch pair."""

    repository: str = Field(..., min_length=1)
    user: str = Field(..., min_length=1, description="Contributor owning the fork")
    branch: str = Field(..., min_length=1, description="Source branch in the fork")
    target: str = Field(default=DEFAULT_BRANCH, min_length=1)

    class Config:
        frozen = True

    @classmethod
    def parse(cls, descriptor: str) -> "PullRequestSpec":
        """Parse ``repository:user:branch[:target]``.

        Raises ValueError if the descriptor does not have three or four
        non-empty fields.
        """
        parts = descriptor.split(":")
        if len(parts) not in (3, 4) or not all(part.strip() for part in parts):
            raise ValueError(
                f"Invalid pull request {descriptor!r}, expected repository:user:branch[:target]"
            )
        repository, user, branch = (part.strip() for part in parts[:3])
        if len(parts) == 4:
            return cls(repository=repository, user=user, branch=branch, target=parts[3].strip())
        return cls(repository=repository, user=user, branch=branch)

    def __str__(self) -> str:
        return f"{self.user}/{self.repository}:{self.branch} -> {self.target}"

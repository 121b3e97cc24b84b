"""Repository descriptor models."""

import re

from pydantic import BaseModel, Field, field_validator

DEFAULT_BRANCH = "master"
BRANCH_PLACEHOLDER = "%BRANCH%"
TAG_PLACEHOLDER = "%TAG%"


class RepositoryDescriptor(BaseModel):
    """Declarative description of one source repository.

    Describes how refs of the repository are named, how the ref matching
    a requested version is selected, and where its contents land in the
    assembled template library.
    """

    name: str = Field(..., min_length=1)
    branch_pattern: str = Field(
        default=DEFAULT_BRANCH, description="Regex matched against raw branch or tag names"
    )
    use_tags: bool = Field(default=True, description="Select tags rather than branches")
    ignore_requested_version: bool = Field(
        default=False, description="Select every ref matching the pattern, whatever the version"
    )
    tags_ignore_pattern: bool = Field(
        default=False, description="Match the version suffix alone, without the branch pattern"
    )
    destination: str = Field(
        default="", description="Destination template, may use %BRANCH% and %TAG%"
    )
    rename_master: str | None = Field(
        default=None, description="Display name used instead of the default branch name"
    )
    strip_destination_suffix: str | None = Field(
        default=None, description="Literal removed from the computed destination path"
    )

    class Config:
        frozen = True

    @field_validator("branch_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
            re.compile(rf"^(?:{value})$")
        except re.error as e:
            raise ValueError(f"Invalid branch pattern {value!r}: {e}") from e
        return value

"""Overlay resolver: merge a pull request on top of a resolved ref."""

from typing import Protocol

import structlog

from template_library.core.exceptions import GitCommandError, OverlayError
from template_library.core.models.refs import PullRequestSpec, ResolvedRef

logger = structlog.get_logger(__name__)


class OverlayClient(Protocol):
    """The part of the git client used to apply an overlay."""

    def add_remote(self, name: str, url: str) -> None: ...

    def pull(self, remote: str, branch: str) -> None: ...


def applies_to(pr: PullRequestSpec | None, repo_name: str, ref: ResolvedRef) -> bool:
    """Whether ``pr`` targets this repository and the ref's display family."""
    if pr is None:
        return False
    return pr.repository == repo_name and pr.target == ref.display_family


class OverlayResolver:
    """Applies one pull request to the refs it targets.

    The contributor's fork is added as a remote named after the
    contributor, once per clone, then the source branch is pulled into
    each targeted checkout.
    """

    def __init__(self, pr: PullRequestSpec, fork_url: str) -> None:
        self._pr = pr
        self._fork_url = fork_url
        self._remote_added = False

    def applies_to(self, repo_name: str, ref: ResolvedRef) -> bool:
        return applies_to(self._pr, repo_name, ref)

    def apply(self, git: OverlayClient, ref: ResolvedRef) -> None:
        """Merge the pull request branch into the checked-out ``ref``.

        Raises OverlayError if the remote cannot be added or the branch
        cannot be merged.
        """
        remote = self._pr.user
        if not self._remote_added:
            try:
                git.add_remote(remote, self._fork_url)
            except GitCommandError as e:
                raise OverlayError(
                    f"Cannot add remote {remote} ({self._fork_url}): {e.message}",
                    details={"remote": remote, "url": self._fork_url},
                ) from e
            self._remote_added = True

        try:
            git.pull(remote, self._pr.branch)
        except GitCommandError as e:
            raise OverlayError(
                f"Cannot merge {self._pr} into {ref.name}: {e.message}",
                details={"ref": ref.name, "branch": self._pr.branch},
            ) from e

        logger.info(
            "Pull request merged",
            repo=self._pr.repository,
            ref=ref.name,
            user=self._pr.user,
            branch=self._pr.branch,
        )

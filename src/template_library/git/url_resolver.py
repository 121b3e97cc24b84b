"""URL resolver for source repositories and contributor forks."""

import re

SSH_ROOT_RE = re.compile(r"^(?P<prefix>[\w.-]+@[^:]+:)(?P<owner>[^/]+)$")


class RepositoryURLResolver:
    """Resolves repository names to clone URLs.

    The root URL is the organisation hosting every repository, either
    HTTPS (https://github.com/quattor) or SSH (git@github.com:quattor).
    """

    def __init__(self, root_url: str) -> None:
        self._root_url = root_url.rstrip("/")

    def repository_url(self, name: str) -> str:
        """URL of a repository of the organisation."""
        return self._join(self._root_url, name)

    def fork_url(self, user: str, name: str) -> str:
        """URL of the same repository in a contributor's namespace."""
        return self._join(self._owner_url(user), name)

    def _owner_url(self, owner: str) -> str:
        ssh_match = SSH_ROOT_RE.match(self._root_url)
        if ssh_match:
            return f"{ssh_match.group('prefix')}{owner}"
        base, _, _ = self._root_url.rpartition("/")
        return f"{base}/{owner}"

    @staticmethod
    def _join(owner_url: str, name: str) -> str:
        return f"{owner_url}/{name}.git"

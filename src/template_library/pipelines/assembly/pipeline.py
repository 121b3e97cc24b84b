"""Main assembly pipeline."""

import tempfile
from collections.abc import Callable
from pathlib import Path

import structlog

from template_library.assembly.assembler import Assembler
from template_library.assembly.filesystem import FileTree
from template_library.core.exceptions import GitCommandError, OverlayError
from template_library.core.models.run import ExitStatus, RepositoryResult, RunConfig, RunResult
from template_library.git.client import GitClient
from template_library.git.url_resolver import RepositoryURLResolver
from template_library.registry import RepositoryRegistry
from template_library.resolution.classifier import classify
from template_library.resolution.effective import EffectiveRepositoryConfig, resolve_effective_config
from template_library.resolution.exclusion import build_ignore_rules, is_excluded
from template_library.resolution.overlay import OverlayResolver
from template_library.resolution.selector import select_refs

logger = structlog.get_logger(__name__)

GitClientFactory = Callable[[Path], GitClient]


class AssemblyPipeline:
    """Pipeline assembling the template library for one requested version.

    Processes every repository in declared order:
    1. Clone it into a temporary directory
    2. List its tags or branches and select the candidates
    3. Classify and filter each candidate
    4. Check out each surviving ref, merge the pull request if it targets it
    5. Copy the ref into the destination tree
    6. Remove the temporary clone

    A failing git command aborts the whole run. A repository without any
    surviving ref is reported but does not stop the run.
    """

    def __init__(
        self,
        registry: RepositoryRegistry,
        url_resolver: RepositoryURLResolver,
        assembler: Assembler | None = None,
        git_factory: GitClientFactory = GitClient,
        file_tree: FileTree | None = None,
        clone_parent: str | None = None,
    ) -> None:
        self._registry = registry
        self._url_resolver = url_resolver
        self._assembler = assembler
        self._git_factory = git_factory
        self._file_tree = file_tree or FileTree()
        self._clone_parent = clone_parent

    def run(self, config: RunConfig) -> RunResult:
        """Resolve and assemble every selected repository."""
        if self._assembler is None and not config.list_only:
            raise ValueError("An assembler is required unless the run only lists refs")

        rules = build_ignore_rules(config)
        result = RunResult()

        for repo in self._registry.select(config.repositories):
            effective = resolve_effective_config(repo, config, rules)
            repo_result = RepositoryResult(name=repo.name)
            result.repositories.append(repo_result)

            try:
                self._process_repository(effective, config, repo_result)
            except OverlayError as e:
                repo_result.error = e.message
                result.status = ExitStatus.OVERLAY_FAILURE
                logger.error("Pull request overlay failed", repo=repo.name, error=e.message)
                return result
            except GitCommandError as e:
                repo_result.error = e.message
                result.status = ExitStatus.GIT_FAILURE
                logger.error("Git operation failed", repo=repo.name, error=e.message)
                return result

            if not repo_result.matched:
                logger.warning(
                    "No matching ref found",
                    repo=repo.name,
                    version=config.version,
                    kind=effective.ref_kind,
                )

        if config.pull_request is not None and not any(r.overlaid for r in result.repositories):
            logger.warning(
                "Pull request did not match any processed ref",
                pull_request=str(config.pull_request),
            )

        if result.unmatched:
            result.status = ExitStatus.NO_MATCH
        return result

    def _process_repository(
        self,
        effective: EffectiveRepositoryConfig,
        config: RunConfig,
        repo_result: RepositoryResult,
    ) -> None:
        repo = effective.repository
        clone_dir = Path(tempfile.mkdtemp(prefix=f"{repo.name}-", dir=self._clone_parent))
        try:
            git = self._git_factory(clone_dir / repo.name)
            url = self._url_resolver.repository_url(repo.name)
            logger.info("Cloning repository", repo=repo.name, url=url)
            git.clone(url)

            refs = git.list_tags() if effective.use_tags else git.list_remote_branches()
            candidates = select_refs(effective.pattern, refs)
            logger.debug(
                "Candidate refs",
                repo=repo.name,
                kind=effective.ref_kind,
                pattern=effective.pattern.pattern,
                candidates=candidates,
            )

            overlay = None
            pr = config.pull_request
            if pr is not None and pr.repository == repo.name:
                overlay = OverlayResolver(pr, self._url_resolver.fork_url(pr.user, repo.name))

            for raw_ref in candidates:
                ref = classify(
                    raw_ref, effective.use_tags, repo.rename_master, effective.requested_version
                )
                if is_excluded(ref, effective.requested_version, effective.rules):
                    logger.debug("Ref ignored", repo=repo.name, ref=raw_ref)
                    continue
                repo_result.selected.append(ref)
                if config.list_only:
                    continue

                git.checkout(ref.name)
                if overlay is not None and overlay.applies_to(repo.name, ref):
                    overlay.apply(git, ref)
                    repo_result.overlaid.append(ref.name)
                self._assembler.assemble(repo, ref, git)
                repo_result.materialized.append(ref)
        finally:
            if config.keep_clones:
                logger.info("Keeping clone", repo=repo.name, path=str(clone_dir))
            else:
                self._file_tree.remove_tree(clone_dir)

"""CLI for the template library assembler."""

import sys

import click
import structlog

from template_library.config.logging import configure_logging
from template_library.core.exceptions import TemplateLibraryError
from template_library.core.models.refs import PullRequestSpec
from template_library.core.models.run import MOST_RECENT_VERSION, ExitStatus, RunConfig, RunResult

logger = structlog.get_logger(__name__)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(int(ExitStatus.INVALID_INVOCATION))


def _report(result: RunResult, list_only: bool) -> None:
    for repo_result in result.repositories:
        if list_only:
            click.echo(f"{repo_result.name}:")
            for ref in repo_result.selected:
                click.echo(f"  - {ref.name}")
        elif repo_result.materialized:
            refs = ", ".join(ref.name for ref in repo_result.materialized)
            click.echo(f"{repo_result.name}: {refs}")
        if repo_result.error:
            click.echo(f"{repo_result.name}: FAILED ({repo_result.error})", err=True)

    for name in result.unmatched:
        click.echo(f"Warning: no matching ref found in {name}", err=True)


@click.command()
@click.option(
    "--version", "-V", "version",
    help=f"Version to assemble ({MOST_RECENT_VERSION} for the most recent branches)",
)
@click.option(
    "--destination", "-d", default="template-library", show_default=True,
    help="Root directory of the template library",
)
@click.option("--force", "-f", is_flag=True, help="Replace an existing destination")
@click.option("--list", "-l", "list_only", is_flag=True, help="Only list the selected refs")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--pull-request", "-p", "pull_request",
    help="Merge a pull request: repository:user:branch[:target]",
)
@click.option("--legacy", is_flag=True, help="Include legacy refs")
@click.option("--rc", is_flag=True, help="Include release candidates")
@click.option("--spma", is_flag=True, help="Use the SPMA variant of the OS templates")
@click.option("--keep-clones", is_flag=True, help="Keep temporary clones for diagnosis")
@click.option(
    "--repository", "-r", "repositories", multiple=True,
    help="Only process this repository (repeatable)",
)
def cli(
    version: str | None,
    destination: str,
    force: bool,
    list_only: bool,
    verbose: bool,
    pull_request: str | None,
    legacy: bool,
    rc: bool,
    spma: bool,
    keep_clones: bool,
    repositories: tuple[str, ...],
) -> None:
    """Assemble a template library for one version from its git repositories."""
    from template_library.config.settings import get_settings
    from template_library.services.library import LibraryService

    settings = get_settings()
    configure_logging(log_level="DEBUG" if verbose else settings.log_level)

    if not version:
        _fail("a version is required (--version), use HEAD for the most recent one")

    pr = None
    if pull_request:
        try:
            pr = PullRequestSpec.parse(pull_request)
        except ValueError as e:
            _fail(str(e))

    config = RunConfig(
        version=version,
        destination=destination,
        force=force,
        list_only=list_only,
        keep_clones=keep_clones,
        pull_request=pr,
        include_legacy=legacy,
        include_rc=rc,
        use_spma=spma,
        repositories=repositories,
    )

    service = LibraryService(settings)
    try:
        result = service.assemble(config)
    except TemplateLibraryError as e:
        _fail(e.message)

    _report(result, list_only)
    logger.debug("Run finished", status=result.status.name)
    sys.exit(int(result.status))


if __name__ == "__main__":
    cli()

"""Tests for the command line interface."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from template_library.cli import cli
from template_library.config.settings import get_settings
from template_library.core.exceptions import ResolutionError
from template_library.services.library import LibraryService


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("TEMPLATE_LIBRARY_GIT_ROOT_URL", str(tmp_path / "quattor"))
    monkeypatch.setenv("TEMPLATE_LIBRARY_WORK_DIR", str(work))
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


@pytest.mark.unit
class TestInvocationErrors:
    """Invalid invocations exit with status 1 before any git interaction."""

    def test_missing_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "version is required" in result.output

    def test_malformed_pull_request(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["-V", "14.2.1", "-d", str(tmp_path / "lib"), "-p", "template-library-core"]
        )
        assert result.exit_code == 1
        assert "Invalid pull request" in result.output

    def test_existing_destination(self, runner: CliRunner, tmp_path: Path) -> None:
        destination = tmp_path / "lib"
        destination.mkdir()
        result = runner.invoke(cli, ["-V", "14.2.1", "-d", str(destination)])
        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_unknown_repository(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["-V", "14.2.1", "-d", str(tmp_path / "lib"), "-r", "template-library-nope"]
        )
        assert result.exit_code == 1
        assert "Unknown repository" in result.output


    def test_resolution_error(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def assemble(self, config):
            raise ResolutionError("Cannot build ref pattern for template-library-core: bad")

        monkeypatch.setattr(LibraryService, "assemble", assemble)
        result = runner.invoke(cli, ["-V", "14.2.1", "-d", str(tmp_path / "lib")])
        assert result.exit_code == 1
        assert "Cannot build ref pattern" in result.output

@pytest.mark.unit
class TestRuns:
    """Runs against local git repositories."""

    def test_assemble(self, runner: CliRunner, upstream_repo: Path, tmp_path: Path) -> None:
        destination = tmp_path / "lib"
        result = runner.invoke(
            cli, ["-V", "14.2.1", "-d", str(destination), "-r", "template-library-core"]
        )
        assert result.exit_code == 0, result.output
        assert "template-library-core: template-library-14.2.1" in result.output
        assert (destination / "quattor" / "14.2.1" / "quattor" / "functions.pan").exists()

    def test_force_replaces_destination(
        self, runner: CliRunner, upstream_repo: Path, tmp_path: Path
    ) -> None:
        destination = tmp_path / "lib"
        (destination / "stale").mkdir(parents=True)
        result = runner.invoke(
            cli, ["-V", "14.2.1", "-d", str(destination), "-f", "-r", "template-library-core"]
        )
        assert result.exit_code == 0, result.output
        assert not (destination / "stale").exists()

    def test_list(self, runner: CliRunner, upstream_repo: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["-V", "14.2.2-rc1", "--rc", "--list", "-r", "template-library-core"]
        )
        assert result.exit_code == 0, result.output
        assert "  - template-library-14.2.2-rc1" in result.output

    def test_release_candidate_requested_explicitly(
        self, runner: CliRunner, upstream_repo: Path
    ) -> None:
        result = runner.invoke(cli, ["-V", "14.2.2-rc1", "--list", "-r", "template-library-core"])
        assert result.exit_code == 0, result.output
        assert "template-library-14.2.2-rc1" in result.output

    def test_no_match(self, runner: CliRunner, upstream_repo: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            cli, ["-V", "13.1.0", "-d", str(tmp_path / "lib"), "-r", "template-library-core"]
        )
        assert result.exit_code == 5
        assert "no matching ref found in template-library-core" in result.output

    def test_clone_failure(self, runner: CliRunner, upstream_repo: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            cli,
            [
                "-V", "14.2.1",
                "-d", str(tmp_path / "lib"),
                "-r", "template-library-core",
                "-r", "template-library-grid",
            ],
        )
        assert result.exit_code == 3
        assert "template-library-grid: FAILED" in result.output

    def test_pull_request_merge_failure(
        self, runner: CliRunner, upstream_repo: Path, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            cli,
            [
                "-V", "14.2.1",
                "-d", str(tmp_path / "lib"),
                "-r", "template-library-core",
                "-p", "template-library-core:alice:fix",
            ],
        )
        assert result.exit_code == 4

"""Tests for the CLI runner."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from frieza_action import __version__
from frieza_action.cli import CLIRunner
from frieza_action.config import ActionInputs
from frieza_action.exceptions import AssetNotFoundError, ExecutionError


@pytest.fixture
def credentials(monkeypatch):
    """Set the required setup inputs."""
    monkeypatch.setenv("INPUT_ACCESS_KEY", "AK")
    monkeypatch.setenv("INPUT_SECRET_KEY", "SK")
    monkeypatch.setenv("INPUT_REGION", "eu-west-2")
    monkeypatch.setenv("INPUT_RELEASE", "v0.3.0")


@pytest.mark.asyncio
class TestCLIRunner:
    """Test CLIRunner.run."""

    async def test_version(self, capsys) -> None:
        """Test --version prints the package version."""
        code = await CLIRunner().run(["--version"])

        assert code == 0
        assert capsys.readouterr().out.strip() == __version__

    async def test_no_command_prints_help(self, capsys) -> None:
        """Test running without a command shows usage and fails."""
        code = await CLIRunner().run([])

        assert code == 1
        assert "usage:" in capsys.readouterr().out

    async def test_setup_reads_inputs(self, credentials) -> None:
        """Test setup passes environment inputs to the workflow."""
        with patch(
            "frieza_action.cli.runner.run_setup", new_callable=AsyncMock
        ) as run_setup:
            code = await CLIRunner().run(["setup"])

        assert code == 0
        inputs = run_setup.await_args.args[0]
        assert inputs == ActionInputs("AK", "SK", "eu-west-2", "v0.3.0")

    async def test_setup_release_override(self, credentials) -> None:
        """Test --release replaces the release input."""
        with patch(
            "frieza_action.cli.runner.run_setup", new_callable=AsyncMock
        ) as run_setup:
            await CLIRunner().run(["setup", "--release", "v0.4.0"])

        assert run_setup.await_args.args[0].release == "v0.4.0"

    async def test_setup_missing_input_fails(self, capsys) -> None:
        """Test a missing required input is a run-level failure."""
        code = await CLIRunner().run(["setup"])

        assert code == 1
        assert (
            "::error::Invalid input: Input required and not supplied: "
            "access_key" in capsys.readouterr().out
        )

    async def test_cleanup(self) -> None:
        """Test cleanup dispatches to the cleanup workflow."""
        with patch(
            "frieza_action.cli.runner.run_cleanup", new_callable=AsyncMock
        ) as run_cleanup:
            code = await CLIRunner().run(["cleanup"])

        assert code == 0
        run_cleanup.assert_awaited_once()

    async def test_workflow_error_reported(self, capsys) -> None:
        """Test workflow errors become an error command and exit 1."""
        with patch(
            "frieza_action.cli.runner.run_cleanup",
            new=AsyncMock(
                side_effect=ExecutionError(
                    "frieza exited with code 1", target="clean --auto-approve"
                )
            ),
        ):
            code = await CLIRunner().run(["cleanup"])

        assert code == 1
        assert (
            "::error::Command failed for 'clean --auto-approve': "
            "frieza exited with code 1" in capsys.readouterr().out
        )

    async def test_install_prints_path(self, capsys, monkeypatch) -> None:
        """Test install prints the installed binary path."""
        monkeypatch.setenv("INPUT_RELEASE", "v0.2.0")
        binary = MagicMock()
        binary.path = Path("/tmp/frieza/frieza")
        with patch(
            "frieza_action.cli.runner.install_binary",
            new=AsyncMock(return_value=binary),
        ) as install:
            code = await CLIRunner().run(["install"])

        assert code == 0
        assert install.await_args.args[1] == "v0.2.0"
        assert str(binary.path) in capsys.readouterr().out.splitlines()

    async def test_install_failure(self, capsys) -> None:
        """Test a missing asset fails the install command."""
        with patch(
            "frieza_action.cli.runner.install_binary",
            new=AsyncMock(side_effect=AssetNotFoundError("no asset")),
        ):
            code = await CLIRunner().run(["install", "--release", "v9.9.9"])

        assert code == 1
        assert "::error::Asset lookup failed" in capsys.readouterr().out

    async def test_config_file_applied(self, tmp_path) -> None:
        """Test --config settings reach the workflow."""
        config = tmp_path / "settings.ini"
        config.write_text("[execution]\ncommand_timeout_seconds = 7\n")
        with patch(
            "frieza_action.cli.runner.run_cleanup", new_callable=AsyncMock
        ) as run_cleanup:
            await CLIRunner().run(["--config", str(config), "cleanup"])

        settings = run_cleanup.await_args.args[0]
        assert settings["execution"]["command_timeout_seconds"] == 7

    async def test_malformed_config_fails(self, tmp_path, capsys) -> None:
        """Test an unreadable settings file is a run-level failure."""
        config = tmp_path / "settings.ini"
        config.write_text("not ini\n")

        code = await CLIRunner().run(["--config", str(config), "cleanup"])

        assert code == 1
        assert "::error::" in capsys.readouterr().out

"""Tests for the CLI argument parser."""

from pathlib import Path

import pytest

from frieza_action.cli import CLIParser


class TestCLIParser:
    """Test CLIParser.parse_args."""

    def test_setup(self) -> None:
        """Test the setup command without overrides."""
        args = CLIParser().parse_args(["setup"])

        assert args.command == "setup"
        assert args.release is None
        assert args.config is None
        assert args.version is False

    def test_setup_release_override(self) -> None:
        """Test --release is accepted by setup."""
        args = CLIParser().parse_args(["setup", "--release", "v0.4.0"])
        assert args.release == "v0.4.0"

    def test_install_empty_release(self) -> None:
        """Test an empty release override is kept as empty."""
        args = CLIParser().parse_args(["install", "--release", ""])
        assert args.release == ""

    def test_cleanup_has_no_release(self) -> None:
        """Test cleanup takes no release option."""
        with pytest.raises(SystemExit):
            CLIParser().parse_args(["cleanup", "--release", "v1"])

    def test_global_config(self) -> None:
        """Test --config is parsed to a path."""
        args = CLIParser().parse_args(["--config", "a.ini", "cleanup"])

        assert args.config == Path("a.ini")
        assert args.command == "cleanup"

    def test_version_without_command(self) -> None:
        """Test --version needs no subcommand."""
        args = CLIParser().parse_args(["--version"])

        assert args.version is True
        assert args.command is None

    def test_unknown_command(self) -> None:
        """Test unknown commands are rejected."""
        with pytest.raises(SystemExit):
            CLIParser().parse_args(["destroy"])

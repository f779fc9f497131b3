"""CLI argument parser for frieza-action.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path


class CLIParser:
    """Command-line argument parser for frieza-action."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; defaults to sys.argv[1:]

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subcommands."""
        parser = argparse.ArgumentParser(
            prog="frieza-action",
            description=(
                "Install frieza, snapshot a cloud account and clean it "
                "back after a GitHub Actions job"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Inputs are read from INPUT_* environment variables set by the runner.

Examples:
  # Main step: install frieza, register credentials, snapshot
  %(prog)s setup

  # Post step: clean everything created since the snapshot
  %(prog)s cleanup

  # Only install a given release and print the binary path
  %(prog)s install --release v0.4.0
            """,
        )
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show frieza-action version and exit",
        )
        parser.add_argument(
            "--config",
            type=Path,
            default=None,
            help="INI settings file (default: $FRIEZA_ACTION_CONFIG)",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        setup_parser = subparsers.add_parser(
            "setup",
            help="Install frieza, register credentials and take a snapshot",
        )
        self._add_release_option(setup_parser)

        subparsers.add_parser(
            "cleanup",
            help="Clean the account back to the setup snapshot",
        )

        install_parser = subparsers.add_parser(
            "install",
            help="Install frieza only and print the binary path",
        )
        self._add_release_option(install_parser)

    def _add_release_option(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--release",
            default=None,
            help=(
                "Release tag or id (overrides the release input; "
                "empty selects the latest release)"
            ),
        )

"""Command-line interface for frieza-action."""

from frieza_action.cli.parser import CLIParser
from frieza_action.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]

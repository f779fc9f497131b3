"""Logging formatters for console and file output.

This module provides custom formatters for the frieza-action logging system:
- ColoredConsoleFormatter: Adds ANSI color codes to log levels
- SimpleConsoleFormatter: Shows only message content (no metadata)
- HybridConsoleFormatter: Uses simple format for INFO, structured for others
- ActionsCommandFormatter: Renders records as GitHub Actions workflow
  commands so the runner annotates warnings and errors
"""

import logging

from frieza_action.constants import LOG_COLORS
from frieza_action.infrastructure.workflow_commands import (
    COMMAND_DEBUG,
    COMMAND_ERROR,
    COMMAND_WARNING,
    format_command,
)


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for different log levels.

    Colors are applied to the level name only, temporarily during
    ``format()``, and reverted afterwards so other handlers see the
    original record.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors for console output.

        Args:
            record: The log record to format

        Returns:
            Formatted log message with ANSI color codes for the level name

        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]
            colored_level = f"{color}{record.levelname}{reset}"

            original_levelname = record.levelname
            record.levelname = colored_level
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class SimpleConsoleFormatter(logging.Formatter):
    """Minimal console formatter that only shows the message content."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record showing only the message.

        Args:
            record: The log record to format

        Returns:
            The message content only, without metadata

        """
        return record.getMessage()


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with simple format for INFO, structured for others.

    Example Output:
        INFO:     "Downloading frieza_0.4.0_linux_amd64.zip"
        WARNING:  "12:30:45 - frieza_action - WARNING - Token ignored"
        ERROR:    "12:30:45 - frieza_action - ERROR - Connection failed"

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter with structured format template.

        Args:
            fmt: Format string for structured messages (non-INFO levels)
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._simple_formatter = SimpleConsoleFormatter()
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record using simple or structured format by level."""
        if record.levelno == logging.INFO:
            return self._simple_formatter.format(record)
        return self._colored_formatter.format(record)


class ActionsCommandFormatter(logging.Formatter):
    """Formatter emitting GitHub Actions workflow commands.

    INFO records are printed as plain text. DEBUG records become
    ``::debug::`` lines, which the runner only shows when step debugging is
    enabled. WARNING and ERROR records become annotations.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a record as plain text or a workflow command."""
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        if record.levelno >= logging.ERROR:
            return format_command(COMMAND_ERROR, message)
        if record.levelno >= logging.WARNING:
            return format_command(COMMAND_WARNING, message)
        if record.levelno >= logging.INFO:
            return message
        return format_command(COMMAND_DEBUG, message)

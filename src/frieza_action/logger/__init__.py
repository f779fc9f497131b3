"""Logging utilities for frieza-action.

This package provides structured logging with:
- GitHub Actions workflow command output when running on a runner
  (``::debug::``, ``::warning::``, ``::error::``)
- Colored hybrid console output elsewhere
- Optional file rotation using RotatingFileHandler
- QueueHandler/QueueListener so the event loop never blocks on handler I/O
- Hierarchical logger naming (e.g., frieza_action.core.download)

Usage:
    >>> from frieza_action.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Downloading %s", asset_name)  # Use %-style formatting

Environment Variables:
    LOG_LEVEL: Override console log level
    RUNNER_DEBUG: Set to 1 by the runner when step debugging is enabled;
        forces DEBUG on the console

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from frieza_action.logger.formatters import (
    ActionsCommandFormatter,
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from frieza_action.logger.handlers import ConfigurationError
from frieza_action.logger.logger import (
    apply_logging_settings,
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from frieza_action.logger.state import get_state

__all__ = [
    "ActionsCommandFormatter",
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "apply_logging_settings",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
]

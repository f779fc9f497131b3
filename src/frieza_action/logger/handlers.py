"""Handler creation and management for logging system.

This module provides functions for creating and configuring logging handlers:
- Console handler, rendering workflow commands when running on an Actions
  runner and hybrid formatting otherwise
- Rotating file handler, only when a log file is configured
- Root logger setup with QueueListener
"""

import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from frieza_action.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
    ROOT_LOGGER_NAME,
)
from frieza_action.logger.formatters import (
    ActionsCommandFormatter,
    HybridConsoleFormatter,
)


class ConfigurationError(Exception):
    """Error in logging configuration."""


def running_on_actions() -> bool:
    """Return True when executed by a GitHub Actions runner."""
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


def create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create and configure the console handler.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "INFO")

    Returns:
        Configured StreamHandler writing to stdout

    """
    console_handler = logging.StreamHandler(sys.stdout)
    if running_on_actions():
        console_handler.setFormatter(ActionsCommandFormatter())
    else:
        console_handler.setFormatter(
            HybridConsoleFormatter(
                LOG_CONSOLE_FORMAT,
                datefmt=LOG_CONSOLE_DATE_FORMAT,
            )
        )
    console_handler.setLevel(getattr(logging, console_level, logging.INFO))
    return console_handler


def create_file_handler(
    log_file: Path, file_level: str
) -> RotatingFileHandler:
    """Create and configure rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If file handler creation fails

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                LOG_FILE_FORMAT,
                datefmt=LOG_FILE_DATE_FORMAT,
            )
        )
        file_handler.setLevel(getattr(logging, file_level, logging.DEBUG))
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e
    else:
        return file_handler


def start_listener(state, handlers: list[logging.Handler]) -> None:
    """Start a QueueListener feeding the given handlers.

    Any running listener is stopped first and the root logger's queue
    handler is replaced, so this can be called again to swap handlers.
    """
    if state.queue_listener is not None:
        state.queue_listener.stop()
        state.queue_listener = None

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()
    root_logger.addHandler(QueueHandler(state.log_queue))


def setup_root_logger(
    state,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """Initialize root logger with handlers via QueueListener.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level (e.g., "INFO", "WARNING")
        file_level: File log level (e.g., "DEBUG", "INFO")
        log_file: Path to log file, None disables file logging

    Raises:
        ConfigurationError: If handler setup fails

    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    handlers: list[logging.Handler] = [create_console_handler(console_level)]
    if log_file is not None:
        handlers.append(create_file_handler(log_file, file_level))

    start_listener(state, handlers)
    state.root_initialized = True

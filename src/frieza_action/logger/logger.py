"""Main logger module providing public API functions.

This module contains the core public API for the frieza-action logging
system:
- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get or create logger instance with singleton pattern
- apply_logging_settings(): Apply levels and log file from settings
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
import os
import time
from pathlib import Path

from frieza_action.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ROOT_LOGGER_NAME,
)
from frieza_action.logger.handlers import (
    create_console_handler,
    create_file_handler,
    setup_root_logger,
    start_listener,
)
from frieza_action.logger.state import get_state
from frieza_action.types import LoggingConfig


def resolve_console_level(configured: str) -> str:
    """Resolve the console level, honoring environment overrides.

    ``RUNNER_DEBUG=1`` is set by the Actions runner when step debug logging
    is enabled and forces DEBUG. ``LOG_LEVEL`` overrides the configured
    level otherwise.
    """
    if os.environ.get("RUNNER_DEBUG") == "1":
        return "DEBUG"
    env_level = os.environ.get("LOG_LEVEL", "").strip().upper()
    if env_level in logging.getLevelNamesMapping():
        return env_level
    return configured.upper()


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete."""
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        # QueueListener doesn't use task_done(), so poll the queue
        timeout = 5.0
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > timeout:
                break
            time.sleep(0.01)

        time.sleep(0.05)

        for handler in state.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The root ``frieza_action`` logger is initialized exactly once; child
    loggers propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file, None disables file logging

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            setup_root_logger(
                state,
                resolve_console_level(
                    console_level or DEFAULT_CONSOLE_LOG_LEVEL
                ),
                file_level or DEFAULT_LOG_LEVEL,
                log_file,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get or create logger instance with singleton pattern.

    Best Practice:
        Use __name__ as the logger name for proper hierarchical logging:
        >>> logger = get_logger(__name__)

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Configured logger instance (singleton per name)

    """
    return setup_logging(name=name)


def apply_logging_settings(config: LoggingConfig) -> None:
    """Rebuild the root handlers from loaded settings.

    Called once settings are known. The console handler gets the configured
    level (subject to environment overrides) and a rotating file handler is
    added when a log file is configured.

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    setup_logging()
    with state.lock:
        handlers: list[logging.Handler] = [
            create_console_handler(
                resolve_console_level(config["console_log_level"])
            )
        ]
        if config["log_file"] is not None:
            handlers.append(
                create_file_handler(config["log_file"], config["log_level"])
            )
        flush_all_handlers()
        start_listener(state, handlers)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, removes handlers from frieza_action loggers
    and resets the state flags.

    Warning:
        This function is intended for testing only.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)

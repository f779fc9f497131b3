"""Centralized type definitions for frieza-action.

This module contains the TypedDict definitions used for settings so that
the config loader, the HTTP session and the logger agree on their shape.
"""

from pathlib import Path
from typing import TypedDict


class NetworkConfig(TypedDict):
    """Network configuration options."""

    timeout_seconds: int


class ExecutionConfig(TypedDict):
    """External command configuration options."""

    command_timeout_seconds: int


class LoggingConfig(TypedDict):
    """Logging configuration options."""

    console_log_level: str
    log_level: str
    log_file: Path | None


class Settings(TypedDict):
    """Complete runtime settings."""

    network: NetworkConfig
    execution: ExecutionConfig
    logging: LoggingConfig

"""Centralized constants module for frieza-action.

This module serves as the single source of truth for all shared constants
across the frieza-action codebase. Constants are organized by logical
categories and use typing.Final annotations to ensure immutability.

Usage:
    from frieza_action.constants import TOOL_NAME
"""

from typing import Final

# =============================================================================
# Tool and Release Index Constants
# =============================================================================

# Name of the external tool, used in asset names and the canonical binary
TOOL_NAME: Final[str] = "frieza"

# Repository publishing the tool releases
RELEASE_OWNER: Final[str] = "outscale-dev"
RELEASE_REPO: Final[str] = "frieza"

GITHUB_API_URL: Final[str] = "https://api.github.com"
GITHUB_API_ACCEPT: Final[str] = "application/vnd.github+json"
USER_AGENT: Final[str] = "frieza-action"

# Leading character stripped from a release tag to get the numeric version
VERSION_PREFIX: Final[str] = "v"

# Release assets are zip archives
ARCHIVE_EXTENSION: Final[str] = ".zip"

# Windows executables carry a suffix, both in the archive and once renamed
WINDOWS_OS_NAME: Final[str] = "windows"
WINDOWS_EXE_SUFFIX: Final[str] = ".exe"

# =============================================================================
# Frieza Profile Constants
# =============================================================================

DEFAULT_PROFILE_NAME: Final[str] = "action"
DEFAULT_SNAPSHOT_NAME: Final[str] = "snapshot-action"
DEFAULT_PROVIDER: Final[str] = "outscale_oapi"

# =============================================================================
# Action Input Names
# =============================================================================

INPUT_ACCESS_KEY: Final[str] = "access_key"
INPUT_SECRET_KEY: Final[str] = "secret_key"
INPUT_REGION: Final[str] = "region"
INPUT_RELEASE: Final[str] = "release"
INPUT_GITHUB_TOKEN: Final[str] = "github_token"

# =============================================================================
# Configuration Constants
# =============================================================================

# Environment variable pointing at an optional INI settings file
CONFIG_ENV_VAR: Final[str] = "FRIEZA_ACTION_CONFIG"

SECTION_NETWORK: Final[str] = "network"
SECTION_EXECUTION: Final[str] = "execution"
SECTION_LOGGING: Final[str] = "logging"

KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_COMMAND_TIMEOUT_SECONDS: Final[str] = "command_timeout_seconds"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_LOG_FILE: Final[str] = "log_file"

DEFAULT_TIMEOUT_SECONDS: Final[int] = 30
DEFAULT_COMMAND_TIMEOUT_SECONDS: Final[int] = 1800
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOG_LEVEL: Final[str] = "DEBUG"

# =============================================================================
# Download Constants
# =============================================================================

CHUNK_SIZE: Final[int] = 8192

# =============================================================================
# Logging Constants
# =============================================================================

ROOT_LOGGER_NAME: Final[str] = "frieza_action"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

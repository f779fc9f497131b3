"""INI settings for timeouts and logging."""

import configparser
import os
from pathlib import Path

from frieza_action.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_COMMAND_TIMEOUT_SECONDS,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    KEY_COMMAND_TIMEOUT_SECONDS,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_FILE,
    KEY_LOG_LEVEL,
    KEY_TIMEOUT_SECONDS,
    SECTION_EXECUTION,
    SECTION_LOGGING,
    SECTION_NETWORK,
)
from frieza_action.logger import get_logger
from frieza_action.types import Settings

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsManager:
    """Loads runtime settings from an optional INI file.

    Example file::

        [network]
        timeout_seconds = 30

        [execution]
        command_timeout_seconds = 1800

        [logging]
        console_log_level = INFO
        log_level = DEBUG
        log_file = /tmp/frieza-action.log
    """

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize the manager.

        Args:
            config_file: INI file to read. Falls back to the file named by
                ``FRIEZA_ACTION_CONFIG``; no file means defaults only.

        """
        if config_file is None:
            env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
            config_file = Path(env_path).expanduser() if env_path else None
        self.config_file = config_file

    def get_default_settings(self) -> dict[str, dict[str, str]]:
        """Get default settings as raw INI values."""
        return {
            SECTION_NETWORK: {
                KEY_TIMEOUT_SECONDS: str(DEFAULT_TIMEOUT_SECONDS),
            },
            SECTION_EXECUTION: {
                KEY_COMMAND_TIMEOUT_SECONDS: str(
                    DEFAULT_COMMAND_TIMEOUT_SECONDS
                ),
            },
            SECTION_LOGGING: {
                KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
                KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
                KEY_LOG_FILE: "",
            },
        }

    def load(self) -> Settings:
        """Load settings, applying file values over defaults.

        Returns:
            Typed settings dictionary

        Raises:
            configparser.Error: If the file is not valid INI

        """
        parser = configparser.ConfigParser(interpolation=None)
        parser.read_dict(self.get_default_settings())

        if self.config_file is not None:
            if self.config_file.is_file():
                logger.debug("Loading settings from %s", self.config_file)
                parser.read(self.config_file, encoding="utf-8")
            else:
                logger.warning(
                    "Settings file %s not found, using defaults",
                    self.config_file,
                )

        return self._convert(parser)

    def _convert(self, parser: configparser.ConfigParser) -> Settings:
        """Convert raw INI values to typed settings."""
        log_file = parser.get(SECTION_LOGGING, KEY_LOG_FILE).strip()
        return {
            "network": {
                "timeout_seconds": self._positive_int(
                    parser,
                    SECTION_NETWORK,
                    KEY_TIMEOUT_SECONDS,
                    DEFAULT_TIMEOUT_SECONDS,
                ),
            },
            "execution": {
                "command_timeout_seconds": self._positive_int(
                    parser,
                    SECTION_EXECUTION,
                    KEY_COMMAND_TIMEOUT_SECONDS,
                    DEFAULT_COMMAND_TIMEOUT_SECONDS,
                ),
            },
            "logging": {
                "console_log_level": self._log_level(
                    parser, KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
                ),
                "log_level": self._log_level(
                    parser, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL
                ),
                "log_file": Path(log_file).expanduser() if log_file else None,
            },
        }

    @staticmethod
    def _positive_int(
        parser: configparser.ConfigParser,
        section: str,
        key: str,
        default: int,
    ) -> int:
        raw = parser.get(section, key)
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value <= 0:
            logger.warning(
                "Invalid %s.%s value %r, using %s", section, key, raw, default
            )
            return default
        return value

    @staticmethod
    def _log_level(
        parser: configparser.ConfigParser, key: str, default: str
    ) -> str:
        raw = parser.get(SECTION_LOGGING, key).strip().upper()
        if raw not in VALID_LOG_LEVELS:
            logger.warning(
                "Invalid logging.%s value %r, using %s", key, raw, default
            )
            return default
        return raw

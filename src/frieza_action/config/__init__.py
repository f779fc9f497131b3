"""Configuration: workflow inputs and INI settings.

This package provides:
- ActionInputs: Inputs handed over by the Actions runner (from inputs.py)
- SettingsManager: Timeouts and logging from an INI file (from settings.py)
"""

from frieza_action.config.inputs import (
    ActionInputs,
    github_token_from_environment,
    release_from_environment,
)
from frieza_action.config.settings import SettingsManager
from frieza_action.types import Settings

__all__ = [
    "ActionInputs",
    "Settings",
    "SettingsManager",
    "github_token_from_environment",
    "release_from_environment",
]

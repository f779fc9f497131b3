"""Action inputs supplied by the workflow."""

from __future__ import annotations

import os
from dataclasses import dataclass

from frieza_action.constants import (
    INPUT_ACCESS_KEY,
    INPUT_GITHUB_TOKEN,
    INPUT_REGION,
    INPUT_RELEASE,
    INPUT_SECRET_KEY,
)
from frieza_action.infrastructure.actions import get_input


@dataclass(slots=True, frozen=True)
class ActionInputs:
    """Inputs of the setup step.

    Attributes:
        access_key: Cloud access key
        secret_key: Cloud secret key
        region: Cloud region
        release: Release specifier; empty selects the latest release
        github_token: Optional token for GitHub API requests

    """

    access_key: str
    secret_key: str
    region: str
    release: str = ""
    github_token: str = ""

    @classmethod
    def from_environment(cls) -> ActionInputs:
        """Read inputs the way the runner exposes them.

        ``github_token`` falls back to the ``GITHUB_TOKEN`` environment
        variable when the input is not set.

        Raises:
            InputError: If a required input is missing

        """
        return cls(
            access_key=get_input(INPUT_ACCESS_KEY, required=True),
            secret_key=get_input(INPUT_SECRET_KEY, required=True),
            region=get_input(INPUT_REGION, required=True),
            release=get_input(INPUT_RELEASE),
            github_token=github_token_from_environment(),
        )


def release_from_environment() -> str:
    """Read only the release input, for steps needing no credentials."""
    return get_input(INPUT_RELEASE)


def github_token_from_environment() -> str:
    """Read the optional GitHub token input or environment variable."""
    return get_input(INPUT_GITHUB_TOKEN) or os.environ.get(
        "GITHUB_TOKEN", ""
    ).strip()

"""Invocation of the installed frieza CLI.

The action drives three frieza commands with fixed argument shapes:
registering a credentials profile, creating a snapshot, and cleaning the
account back to that snapshot. Output of the tool is streamed straight to
the job log.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from frieza_action.constants import (
    DEFAULT_COMMAND_TIMEOUT_SECONDS,
    DEFAULT_PROFILE_NAME,
    DEFAULT_PROVIDER,
    DEFAULT_SNAPSHOT_NAME,
    TOOL_NAME,
)
from frieza_action.exceptions import ExecutionError
from frieza_action.logger import get_logger

logger = get_logger(__name__)

REDACTED = "***"


@dataclass(slots=True, frozen=True)
class FriezaProfile:
    """Names shared by the setup and cleanup steps.

    Attributes:
        profile_name: frieza profile holding the credentials
        snapshot_name: Snapshot taken at setup and restored at cleanup
        provider: frieza provider the profile is created for

    """

    profile_name: str = DEFAULT_PROFILE_NAME
    snapshot_name: str = DEFAULT_SNAPSHOT_NAME
    provider: str = DEFAULT_PROVIDER


def profile_new_args(
    profile: FriezaProfile, access_key: str, secret_key: str, region: str
) -> list[str]:
    """Build arguments registering a credentials profile."""
    return [
        "profile",
        "new",
        profile.provider,
        f"--region={region}",
        f"--ak={access_key}",
        f"--sk={secret_key}",
        profile.profile_name,
    ]


def snapshot_new_args(profile: FriezaProfile) -> list[str]:
    """Build arguments creating the action snapshot."""
    return ["snapshot", "new", profile.snapshot_name, profile.profile_name]


def clean_args(profile: FriezaProfile) -> list[str]:
    """Build arguments cleaning the account back to the action snapshot."""
    return ["clean", "--auto-approve", profile.snapshot_name]


def redact_args(args: Sequence[str], secrets: Sequence[str]) -> list[str]:
    """Return args with every occurrence of a secret value replaced."""
    redacted = []
    for arg in args:
        for secret in secrets:
            if secret:
                arg = arg.replace(secret, REDACTED)
        redacted.append(arg)
    return redacted


class FriezaRunner:
    """Run frieza subcommands as child processes."""

    def __init__(
        self,
        executable: str | Path = TOOL_NAME,
        profile: FriezaProfile | None = None,
        timeout_seconds: int = DEFAULT_COMMAND_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the runner.

        Args:
            executable: Path to the binary, or a name looked up on PATH
            profile: Profile and snapshot names (defaults when omitted)
            timeout_seconds: Maximum run time of a single command

        """
        self.executable = str(executable)
        self.profile = profile or FriezaProfile()
        self.timeout_seconds = timeout_seconds

    async def run(
        self, args: Sequence[str], secrets: Sequence[str] = ()
    ) -> None:
        """Run frieza with the given arguments.

        Args:
            args: Arguments passed after the executable
            secrets: Values to hide when the command line is logged

        Raises:
            ExecutionError: If the process cannot start, times out or exits
                with a non-zero code

        """
        shown = " ".join([self.executable, *redact_args(args, secrets)])
        logger.info("[command]%s", shown)
        subcommand = " ".join(args[:2])

        try:
            process = await asyncio.create_subprocess_exec(
                self.executable, *args
            )
        except OSError as e:
            msg = f"Unable to start {self.executable}: {e}"
            raise ExecutionError(msg, target=subcommand) from e

        try:
            returncode = await asyncio.wait_for(
                process.wait(), timeout=self.timeout_seconds
            )
        except TimeoutError as e:
            logger.warning(
                "Killing %s after %s seconds", subcommand, self.timeout_seconds
            )
            process.kill()
            await process.wait()
            msg = f"Timed out after {self.timeout_seconds} seconds"
            raise ExecutionError(msg, target=subcommand) from e

        if returncode != 0:
            msg = f"{self.executable} exited with code {returncode}"
            raise ExecutionError(msg, target=subcommand)
        logger.debug("%s completed", subcommand)

    async def register_credentials(
        self, access_key: str, secret_key: str, region: str
    ) -> None:
        """Create the frieza profile holding the cloud credentials."""
        logger.debug("Add credentials to frieza")
        await self.run(
            profile_new_args(self.profile, access_key, secret_key, region),
            secrets=(access_key, secret_key),
        )

    async def make_snapshot(self) -> None:
        """Snapshot the account resources."""
        logger.debug("Make a snapshot")
        await self.run(snapshot_new_args(self.profile))

    async def clean_account(self) -> None:
        """Delete everything created since the snapshot."""
        logger.debug("Clean account")
        await self.run(clean_args(self.profile))

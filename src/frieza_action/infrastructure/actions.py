"""GitHub Actions runner protocol.

The runner hands action inputs over as ``INPUT_<NAME>`` environment
variables, reads workflow commands from stdout and reads PATH additions
from the file named by ``GITHUB_PATH``. This module wraps those
conventions.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from frieza_action.exceptions import InputError
from frieza_action.infrastructure.workflow_commands import (
    COMMAND_ADD_MASK,
    COMMAND_ERROR,
    format_command,
)
from frieza_action.logger import flush_all_handlers, get_logger

logger = get_logger(__name__)


def input_env_name(name: str) -> str:
    """Return the environment variable the runner uses for an input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    required: bool = False,  # noqa: FBT001, FBT002
) -> str:
    """Read an action input.

    Args:
        name: Input name as declared in action.yml
        required: Raise when the input is missing or blank

    Returns:
        The input value with surrounding whitespace removed, or an empty
        string when not supplied

    Raises:
        InputError: If a required input is missing

    """
    value = os.environ.get(input_env_name(name), "").strip()
    if required and not value:
        msg = f"Input required and not supplied: {name}"
        raise InputError(msg)
    return value


def issue_command(line: str) -> None:
    """Write a workflow command line to stdout.

    Pending log records are flushed first so the command keeps its place
    relative to log output.
    """
    flush_all_handlers()
    sys.stdout.write(line + os.linesep)
    sys.stdout.flush()


def add_mask(value: str) -> None:
    """Ask the runner to redact a value from all further log output."""
    if value:
        issue_command(format_command(COMMAND_ADD_MASK, value))


def add_path(directory: Path) -> None:
    """Prepend a directory to PATH for this process and later steps.

    Later steps pick the directory up from the ``GITHUB_PATH`` file; the
    current process ``PATH`` is updated as well so the tool can be invoked
    right away.
    """
    path_file = os.environ.get("GITHUB_PATH")
    if path_file:
        with Path(path_file).open("a", encoding="utf-8") as fh:
            fh.write(f"{directory}{os.linesep}")
    else:
        logger.debug("GITHUB_PATH not set, updating process PATH only")

    current = os.environ.get("PATH", "")
    os.environ["PATH"] = (
        f"{directory}{os.pathsep}{current}" if current else str(directory)
    )
    logger.debug("Added %s to PATH", directory)


def set_failed(message: str) -> None:
    """Report a run-level failure to the runner.

    The caller is responsible for exiting with a non-zero status.
    """
    issue_command(format_command(COMMAND_ERROR, message))

"""Formatting of GitHub Actions workflow commands.

The runner scans a step's stdout for lines shaped like
``::command key=value,key=value::data``. Data and property values must be
escaped so that a message containing newlines or ``::`` cannot end the
command early or inject another one.

This module has no dependency on the logger so that log formatters can use
it without creating an import cycle.
"""

from __future__ import annotations

COMMAND_DEBUG = "debug"
COMMAND_WARNING = "warning"
COMMAND_ERROR = "error"
COMMAND_ADD_MASK = "add-mask"


def escape_data(value: str) -> str:
    """Escape the data part of a workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a property value of a workflow command."""
    return (
        escape_data(value)
        .replace(":", "%3A")
        .replace(",", "%2C")
    )


def format_command(command: str, message: str = "", **properties: str) -> str:
    """Render a single workflow command line.

    Args:
        command: Command name, e.g. ``error`` or ``add-mask``
        message: Command data
        **properties: Optional command properties (``title``, ``file``...)

    Returns:
        The command line without a trailing newline

    """
    props = ",".join(
        f"{key}={escape_property(str(value))}"
        for key, value in properties.items()
        if value
    )
    head = f"::{command} {props}" if props else f"::{command}"
    return f"{head}::{escape_data(message)}"

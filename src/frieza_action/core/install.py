"""Normalization of the extracted frieza executable.

Release archives ship the executable as ``frieza_<tag>`` (plus ``.exe`` on
Windows). It is renamed in place to ``frieza`` so every later invocation
uses the same name whatever the release.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from pathlib import Path

from frieza_action.constants import TOOL_NAME
from frieza_action.core.github.models import Release
from frieza_action.core.target import PlatformTarget
from frieza_action.exceptions import NormalizationError
from frieza_action.logger import get_logger

logger = get_logger(__name__)

EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass(slots=True, frozen=True)
class InstalledBinary:
    """The canonical frieza executable of this run.

    Attributes:
        path: Canonical executable path
        release: Release the executable came from

    """

    path: Path
    release: Release

    @property
    def directory(self) -> Path:
        """Directory to put on PATH."""
        return self.path.parent


def versioned_binary_name(
    release_tag: str, target: PlatformTarget, tool_name: str = TOOL_NAME
) -> str:
    """Name of the executable inside the archive; the tag keeps its prefix."""
    return f"{tool_name}_{release_tag}{target.exe_suffix}"


def canonical_binary_name(
    target: PlatformTarget, tool_name: str = TOOL_NAME
) -> str:
    """Version independent executable name."""
    return f"{tool_name}{target.exe_suffix}"


def make_executable(path: Path) -> None:
    """Add execute permission bits to a file."""
    logger.debug("Making executable: %s", path.name)
    path.chmod(path.stat().st_mode | EXECUTABLE_BITS)


def normalize_binary(
    extracted_dir: Path,
    release_tag: str,
    target: PlatformTarget,
    tool_name: str = TOOL_NAME,
) -> Path:
    """Rename the extracted executable to its canonical name.

    The file is made executable before an atomic rename, so the canonical
    path either appears complete or not at all.

    Args:
        extracted_dir: Directory holding the extracted archive
        release_tag: Release tag, version prefix included
        target: Platform the archive was selected for
        tool_name: Tool name used in both file names

    Returns:
        Canonical executable path

    Raises:
        NormalizationError: If the versioned executable is missing or the
            rename fails; the message names both paths

    """
    source = extracted_dir / versioned_binary_name(
        release_tag, target, tool_name
    )
    destination = extracted_dir / canonical_binary_name(target, tool_name)
    logger.debug("Moving %s to %s", source, destination)

    if not source.is_file():
        logger.error("Unable to move %s to %s", source, destination)
        msg = f"Unable to move {source} to {destination}: source not found"
        raise NormalizationError(msg)

    try:
        make_executable(source)
        os.replace(source, destination)
    except OSError as e:
        logger.error("Unable to move %s to %s", source, destination)
        msg = f"Unable to move {source} to {destination}: {e}"
        raise NormalizationError(msg) from e

    return destination

"""Asset name construction and lookup."""

from __future__ import annotations

from collections.abc import Iterable

from frieza_action.constants import ARCHIVE_EXTENSION
from frieza_action.core.github.models import Asset


def build_asset_name(
    tool_name: str, numeric_version: str, os_name: str, arch: str
) -> str:
    """Build the archive name published for a version and platform.

    >>> build_asset_name("frieza", "0.4.0", "linux", "amd64")
    'frieza_0.4.0_linux_amd64.zip'
    """
    return f"{tool_name}_{numeric_version}_{os_name}_{arch}{ARCHIVE_EXTENSION}"


def find_asset_url(assets: Iterable[Asset], asset_name: str) -> str | None:
    """Return the download URL of the first asset named exactly asset_name.

    Returns:
        The download URL, or None when no asset matches

    """
    for asset in assets:
        if asset.name == asset_name:
            return asset.browser_download_url
    return None

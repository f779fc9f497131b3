"""GitHub release and asset models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from frieza_action.constants import VERSION_PREFIX


@dataclass(slots=True, frozen=True)
class Asset:
    """Represents a GitHub release asset.

    Attributes:
        name: Asset filename
        browser_download_url: Direct download URL for the asset
        size: Asset size in bytes

    """

    name: str
    browser_download_url: str
    size: int = 0

    @classmethod
    def from_api_response(cls, asset_data: Any) -> Asset | None:
        """Create Asset from GitHub API response data.

        Args:
            asset_data: Raw asset data from GitHub API

        Returns:
            Asset instance or None if required fields are missing

        """
        if not isinstance(asset_data, dict):
            return None
        try:
            name = asset_data.get("name") or ""
            download_url = asset_data.get("browser_download_url") or ""
            size = int(asset_data.get("size") or 0)
        except (TypeError, ValueError):
            return None

        if not name or not download_url:
            return None

        return cls(name=name, browser_download_url=download_url, size=size)


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release with its assets.

    Attributes:
        tag_name: Tag exactly as published (e.g. ``v0.4.0``)
        assets: Release assets in API order

    """

    tag_name: str
    assets: list[Asset] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, api_data: dict[str, Any]) -> Release:
        """Create Release from GitHub API response data.

        Asset entries without a name or download URL are skipped.

        Raises:
            ValueError: If the payload has no usable tag name

        """
        tag_name = api_data.get("tag_name")
        if not isinstance(tag_name, str) or not tag_name:
            msg = "release payload has no tag_name"
            raise ValueError(msg)

        raw_assets = api_data.get("assets") or []
        if not isinstance(raw_assets, list):
            msg = "release payload assets is not a list"
            raise ValueError(msg)

        assets = []
        for asset_data in raw_assets:
            asset = Asset.from_api_response(asset_data)
            if asset:
                assets.append(asset)

        return cls(tag_name=tag_name, assets=assets)

    @property
    def numeric_version(self) -> str:
        """Tag with a single leading version prefix removed."""
        return strip_version_prefix(self.tag_name)


def strip_version_prefix(tag: str) -> str:
    """Remove one leading ``v`` from a release tag.

    >>> strip_version_prefix("v2.1.0")
    '2.1.0'
    >>> strip_version_prefix("2.1.0")
    '2.1.0'
    """
    if tag.startswith(VERSION_PREFIX):
        return tag[len(VERSION_PREFIX) :]
    return tag

"""GitHub release index - API client, models and asset lookup."""

from frieza_action.core.github.assets import build_asset_name, find_asset_url
from frieza_action.core.github.client import ReleaseAPIClient
from frieza_action.core.github.models import (
    Asset,
    Release,
    strip_version_prefix,
)
from frieza_action.core.github.release_fetcher import ReleaseFetcher

__all__ = [
    "Asset",
    "Release",
    "ReleaseAPIClient",
    "ReleaseFetcher",
    "build_asset_name",
    "find_asset_url",
    "strip_version_prefix",
]

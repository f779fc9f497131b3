"""Release lookup from a release specifier.

Release data is fetched fresh on every run; there is no cache.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from frieza_action.core.github.models import Release
from frieza_action.exceptions import ResolutionError
from frieza_action.logger import get_logger

if TYPE_CHECKING:
    from frieza_action.core.github.client import ReleaseAPIClient

logger = get_logger(__name__)


class ReleaseFetcher:
    """Resolve a release specifier to a Release."""

    def __init__(self, api_client: ReleaseAPIClient) -> None:
        self.api_client = api_client

    async def resolve_release(self, specifier: str) -> Release:
        """Resolve a release specifier.

        An empty specifier selects the latest release. A numeric specifier
        is a release id; anything else is a tag.

        Args:
            specifier: Release specifier

        Returns:
            The resolved release

        Raises:
            ResolutionError: If the lookup fails or the payload is not a
                release

        """
        specifier = specifier.strip()
        if not specifier:
            logger.debug("Resolving latest release")
            data = await self.api_client.fetch_latest_release()
        elif specifier.isdigit():
            logger.debug("Resolving release id %s", specifier)
            data = await self.api_client.fetch_release_by_id(specifier)
        else:
            logger.debug("Resolving release tag %s", specifier)
            data = await self.api_client.fetch_release_by_tag(specifier)

        label = specifier or "latest"
        if not isinstance(data, dict):
            msg = f"unexpected API response type {type(data).__name__}"
            raise ResolutionError(msg, target=label)

        try:
            release = Release.from_api_response(data)
        except ValueError as e:
            raise ResolutionError(str(e), target=label) from e

        logger.info(
            "Resolved %s release to %s (%d assets)",
            label,
            release.tag_name,
            len(release.assets),
        )
        return release

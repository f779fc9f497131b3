"""Low-level GitHub API client for HTTP communication.

This module handles direct HTTP communication with the GitHub release
index. Every request is attempted once; failures are reported as
ResolutionError without retry.
"""

from typing import Any
from urllib.parse import quote

import aiohttp
import orjson

from frieza_action.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_API_ACCEPT,
    GITHUB_API_URL,
    RELEASE_OWNER,
    RELEASE_REPO,
    USER_AGENT,
)
from frieza_action.exceptions import ResolutionError
from frieza_action.infrastructure.auth import GitHubAuth
from frieza_action.logger import get_logger

logger = get_logger(__name__)


class ReleaseAPIClient:
    """Handles direct communication with GitHub API for release data."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        auth: GitHubAuth | None = None,
        owner: str = RELEASE_OWNER,
        repo: str = RELEASE_REPO,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session for making requests
            auth: Optional GitHub authentication
            owner: Repository owner
            repo: Repository name
            timeout_seconds: Total timeout of a single API request

        """
        self.session = session
        self.auth = auth or GitHubAuth()
        self.owner = owner
        self.repo = repo
        self.timeout = aiohttp.ClientTimeout(
            total=timeout_seconds,
            sock_connect=timeout_seconds,
        )

    @property
    def releases_url(self) -> str:
        return f"{GITHUB_API_URL}/repos/{self.owner}/{self.repo}/releases"

    async def _fetch_from_api(self, url: str) -> Any:
        """Fetch and decode a JSON document from the GitHub API.

        Args:
            url: API URL to fetch

        Returns:
            Decoded JSON payload

        Raises:
            ResolutionError: On transport error, timeout, non-2xx status or
                undecodable body

        """
        headers = self.auth.apply_auth(
            {"Accept": GITHUB_API_ACCEPT, "User-Agent": USER_AGENT}
        )
        logger.debug(
            "GET %s (%s)",
            url,
            "authenticated" if self.auth.is_authenticated() else "anonymous",
        )

        try:
            async with self.session.get(
                url, headers=headers, timeout=self.timeout
            ) as response:
                if response.status >= 400:  # noqa: PLR2004
                    msg = f"GET {url} returned HTTP {response.status}"
                    raise ResolutionError(msg)
                body = await response.read()
        except (aiohttp.ClientError, TimeoutError) as e:
            msg = f"GET {url} failed: {str(e) or type(e).__name__}"
            raise ResolutionError(msg) from e

        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON from {url}: {e}"
            raise ResolutionError(msg) from e

    async def fetch_latest_release(self) -> Any:
        """Fetch the most recent published release."""
        return await self._fetch_from_api(f"{self.releases_url}/latest")

    async def fetch_release_by_id(self, release_id: str) -> Any:
        """Fetch a release by its numeric identifier."""
        return await self._fetch_from_api(f"{self.releases_url}/{release_id}")

    async def fetch_release_by_tag(self, tag: str) -> Any:
        """Fetch a release by its tag, escaped as a single path segment."""
        url = f"{self.releases_url}/tags/{quote(tag, safe='')}"
        return await self._fetch_from_api(url)

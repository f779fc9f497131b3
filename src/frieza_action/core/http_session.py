"""HTTP session utilities for frieza-action.

This module provides utilities for creating configured HTTP sessions
with proper timeout and connection settings.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from frieza_action.constants import USER_AGENT
from frieza_action.types import NetworkConfig


@asynccontextmanager
async def create_http_session(
    network_config: NetworkConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create configured HTTP session.

    Args:
        network_config: Network settings

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout_seconds = network_config["timeout_seconds"]
    timeout = aiohttp.ClientTimeout(
        total=timeout_seconds * 60,
        sock_read=timeout_seconds * 3,
        sock_connect=timeout_seconds,
    )
    connector = aiohttp.TCPConnector(limit=4)

    async with aiohttp.ClientSession(
        timeout=timeout,
        connector=connector,
        headers={"User-Agent": USER_AGENT},
    ) as session:
        yield session

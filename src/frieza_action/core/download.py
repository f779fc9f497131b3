"""Download and extraction of release archives.

Archives are downloaded into a fresh temporary directory and unpacked into
a second one. Temporary directories live under ``RUNNER_TEMP`` when the
runner provides it, so the runner discards them after the job.
"""

import asyncio
import contextlib
import os
import tempfile
import zipfile
from pathlib import Path
from urllib.parse import urlparse

import aiofiles
import aiohttp

from frieza_action.constants import CHUNK_SIZE, DEFAULT_TIMEOUT_SECONDS
from frieza_action.exceptions import AssetNotFoundError, FetchError
from frieza_action.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ARCHIVE_NAME = "archive.zip"


def get_temp_root() -> Path | None:
    """Return the runner temporary directory, if any."""
    runner_temp = os.environ.get("RUNNER_TEMP", "").strip()
    return Path(runner_temp) if runner_temp else None


class DownloadService:
    """Service for downloading and unpacking release archives."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
        temp_root: Path | None = None,
    ) -> None:
        """Initialize download service with HTTP session.

        Args:
            session: aiohttp session for downloads
            timeout_seconds: Base timeout for connecting and reading
            temp_root: Parent of the temporary directories; defaults to
                RUNNER_TEMP or the system temporary directory

        """
        self.session = session
        if temp_root is None:
            temp_root = get_temp_root()
        self.temp_root = temp_root
        self.timeout = aiohttp.ClientTimeout(
            total=timeout_seconds * 60,
            sock_read=timeout_seconds * 3,
            sock_connect=timeout_seconds,
        )

    def _make_temp_dir(self, prefix: str) -> Path:
        if self.temp_root is not None:
            self.temp_root.mkdir(parents=True, exist_ok=True)
        return Path(tempfile.mkdtemp(prefix=prefix, dir=self.temp_root))

    def get_filename_from_url(self, url: str) -> str:
        """Extract filename from URL.

        Args:
            url: Download URL

        Returns:
            Extracted filename, or a generic archive name

        """
        return Path(urlparse(url).path).name or DEFAULT_ARCHIVE_NAME

    async def download_file(self, url: str, dest: Path) -> Path:
        """Download a file from URL to destination.

        Args:
            url: URL to download from
            dest: Destination path

        Returns:
            The destination path

        Raises:
            FetchError: If the request fails, times out or returns an error
                status; the partial file is removed

        """
        logger.debug("Downloading %s", url)
        try:
            async with self.session.get(url, timeout=self.timeout) as response:
                response.raise_for_status()
                async with aiofiles.open(dest, mode="wb") as f:
                    async for chunk in response.content.iter_chunked(
                        CHUNK_SIZE
                    ):
                        if chunk:
                            await f.write(chunk)
        except (aiohttp.ClientError, TimeoutError, OSError) as e:
            if dest.exists():
                logger.debug("Removing partial download: %s", dest)
                with contextlib.suppress(OSError):
                    dest.unlink()
            msg = f"Unable to download {url}: {str(e) or type(e).__name__}"
            raise FetchError(msg) from e

        logger.debug("Download completed: %s", dest)
        return dest

    def extract_zip(self, archive: Path, dest_dir: Path) -> Path:
        """Extract a zip archive.

        Args:
            archive: Zip file to extract
            dest_dir: Directory receiving the archive contents

        Returns:
            The extraction directory

        Raises:
            FetchError: If the archive is corrupt, not a zip, or holds a
                member that would land outside dest_dir

        """
        root = dest_dir.resolve()
        try:
            with zipfile.ZipFile(archive) as zf:
                for member in zf.namelist():
                    target = (root / member).resolve()
                    if target != root and root not in target.parents:
                        msg = f"Archive member outside target: {member}"
                        raise FetchError(msg, target=archive.name)
                zf.extractall(root)
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as e:
            msg = f"Unable to extract {archive.name}: {e}"
            raise FetchError(msg) from e

        logger.debug("Extracted %s to %s", archive.name, root)
        return root

    async def fetch_and_extract(self, url: str | None) -> Path:
        """Download a zip archive and extract it.

        Args:
            url: Archive download URL

        Returns:
            Directory holding the extracted archive contents

        Raises:
            AssetNotFoundError: If url is empty; no request is made
            FetchError: If download or extraction fails

        """
        if not url:
            msg = "could not resolve asset download URL"
            raise AssetNotFoundError(msg)

        download_dir = self._make_temp_dir("frieza-download-")
        archive = download_dir / self.get_filename_from_url(url)
        await self.download_file(url, archive)

        extract_dir = self._make_temp_dir("frieza-extract-")
        logger.debug("Extracting %s", archive.name)
        return await asyncio.to_thread(self.extract_zip, archive, extract_dir)

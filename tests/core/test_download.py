"""Tests for archive download and extraction."""

import zipfile

import aiohttp
import pytest
from aioresponses import aioresponses

from frieza_action.core.download import DownloadService, get_temp_root
from frieza_action.exceptions import AssetNotFoundError, FetchError

ASSET_URL = (
    "https://github.com/outscale-dev/frieza/releases/download/"
    "v3.0.0/frieza_3.0.0_linux_amd64.zip"
)


class TestGetTempRoot:
    """Test get_temp_root function."""

    def test_uses_runner_temp(self, tmp_path, monkeypatch) -> None:
        """Test RUNNER_TEMP is used when set."""
        monkeypatch.setenv("RUNNER_TEMP", str(tmp_path))
        assert get_temp_root() == tmp_path

    def test_unset_returns_none(self, monkeypatch) -> None:
        """Test the system default is used outside a runner."""
        monkeypatch.delenv("RUNNER_TEMP", raising=False)
        assert get_temp_root() is None


class TestGetFilenameFromURL:
    """Test DownloadService.get_filename_from_url."""

    def test_last_path_component(self) -> None:
        """Test the archive name is taken from the URL path."""
        service = DownloadService(session=None)  # type: ignore[arg-type]
        assert (
            service.get_filename_from_url(f"{ASSET_URL}?x=1")
            == "frieza_3.0.0_linux_amd64.zip"
        )

    def test_fallback_name(self) -> None:
        """Test a URL without a path falls back to a generic name."""
        service = DownloadService(session=None)  # type: ignore[arg-type]
        assert service.get_filename_from_url("https://host") == "archive.zip"


class TestExtractZip:
    """Test DownloadService.extract_zip."""

    def test_extracts_members(self, tmp_path, make_zip) -> None:
        """Test archive contents land in the destination."""
        archive = tmp_path / "a.zip"
        archive.write_bytes(make_zip({"frieza_v1.0.0": b"bin"}))
        dest = tmp_path / "out"
        dest.mkdir()

        service = DownloadService(session=None)  # type: ignore[arg-type]
        result = service.extract_zip(archive, dest)

        assert (result / "frieza_v1.0.0").read_bytes() == b"bin"

    def test_rejects_traversal(self, tmp_path, make_zip) -> None:
        """Test members escaping the destination are refused."""
        archive = tmp_path / "evil.zip"
        archive.write_bytes(make_zip({"../escaped": b"x"}))
        dest = tmp_path / "out"
        dest.mkdir()

        service = DownloadService(session=None)  # type: ignore[arg-type]
        with pytest.raises(FetchError, match="outside target"):
            service.extract_zip(archive, dest)

        assert not (tmp_path / "escaped").exists()

    def test_not_a_zip(self, tmp_path) -> None:
        """Test a corrupt archive is a fetch failure."""
        archive = tmp_path / "bad.zip"
        archive.write_bytes(b"this is not a zip file")
        dest = tmp_path / "out"
        dest.mkdir()

        service = DownloadService(session=None)  # type: ignore[arg-type]
        with pytest.raises(FetchError, match="Unable to extract") as exc_info:
            service.extract_zip(archive, dest)

        assert isinstance(exc_info.value.__cause__, zipfile.BadZipFile)


@pytest.mark.asyncio
class TestFetchAndExtract:
    """Test DownloadService.fetch_and_extract."""

    async def test_success(self, tmp_path, make_zip) -> None:
        """Test the archive is downloaded and unpacked under temp_root."""
        body = make_zip({"frieza_v3.0.0": b"#!/bin/sh\n"})
        with aioresponses() as m:
            m.get(ASSET_URL, body=body)
            async with aiohttp.ClientSession() as session:
                service = DownloadService(session, temp_root=tmp_path)
                extracted = await service.fetch_and_extract(ASSET_URL)

        assert (extracted / "frieza_v3.0.0").read_bytes() == b"#!/bin/sh\n"
        assert tmp_path in extracted.parents

    async def test_defaults_to_runner_temp(self, tmp_path, make_zip) -> None:
        """Test temporary directories are created under RUNNER_TEMP."""
        with aioresponses() as m:
            m.get(ASSET_URL, body=make_zip({"frieza_v3.0.0": b""}))
            async with aiohttp.ClientSession() as session:
                extracted = await DownloadService(session).fetch_and_extract(
                    ASSET_URL
                )

        assert tmp_path / "runner-temp" in extracted.parents

    async def test_http_error(self, tmp_path) -> None:
        """Test an error status is a fetch failure with no file left."""
        with aioresponses() as m:
            m.get(ASSET_URL, status=500)
            async with aiohttp.ClientSession() as session:
                service = DownloadService(session, temp_root=tmp_path)
                with pytest.raises(FetchError, match="Unable to download"):
                    await service.fetch_and_extract(ASSET_URL)

        assert not list(tmp_path.rglob("*.zip"))

    async def test_connection_error(self, tmp_path) -> None:
        """Test transport errors are wrapped."""
        with aioresponses() as m:
            m.get(ASSET_URL, exception=aiohttp.ClientConnectionError("reset"))
            async with aiohttp.ClientSession() as session:
                service = DownloadService(session, temp_root=tmp_path)
                with pytest.raises(FetchError, match="reset"):
                    await service.fetch_and_extract(ASSET_URL)

    async def test_corrupt_archive(self, tmp_path) -> None:
        """Test a downloaded file that is not a zip fails extraction."""
        with aioresponses() as m:
            m.get(ASSET_URL, body=b"<html>not found</html>")
            async with aiohttp.ClientSession() as session:
                service = DownloadService(session, temp_root=tmp_path)
                with pytest.raises(FetchError, match="Unable to extract"):
                    await service.fetch_and_extract(ASSET_URL)

    @pytest.mark.parametrize("url", ["", None])
    async def test_missing_url_makes_no_request(self, tmp_path, url) -> None:
        """Test the not-found sentinel fails before any network access."""
        with aioresponses() as m:
            async with aiohttp.ClientSession() as session:
                service = DownloadService(session, temp_root=tmp_path)
                with pytest.raises(AssetNotFoundError):
                    await service.fetch_and_extract(url)

            assert not m.requests
        assert not list(tmp_path.iterdir())

"""Tests for normalization of the extracted executable."""

import os
import stat
import sys

import pytest

from frieza_action.core.install import (
    canonical_binary_name,
    normalize_binary,
    versioned_binary_name,
)
from frieza_action.core.target import PlatformTarget
from frieza_action.exceptions import NormalizationError

LINUX = PlatformTarget("linux", "amd64")
WINDOWS = PlatformTarget("windows", "amd64")


class TestBinaryNames:
    """Test executable naming helpers."""

    def test_versioned_keeps_tag_prefix(self) -> None:
        """Test the tag is used verbatim, prefix included."""
        assert versioned_binary_name("v0.4.0", LINUX) == "frieza_v0.4.0"

    def test_versioned_windows(self) -> None:
        """Test Windows executables carry the .exe suffix."""
        assert versioned_binary_name("v0.4.0", WINDOWS) == "frieza_v0.4.0.exe"

    def test_canonical(self) -> None:
        """Test the canonical name is version independent."""
        assert canonical_binary_name(LINUX) == "frieza"
        assert canonical_binary_name(WINDOWS) == "frieza.exe"


class TestNormalizeBinary:
    """Test normalize_binary function."""

    def test_renames_to_canonical(self, tmp_path) -> None:
        """Test the versioned file is moved to the canonical name."""
        (tmp_path / "frieza_v3.0.0").write_bytes(b"binary")

        result = normalize_binary(tmp_path, "v3.0.0", LINUX)

        assert result == tmp_path / "frieza"
        assert result.read_bytes() == b"binary"
        assert not (tmp_path / "frieza_v3.0.0").exists()

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_sets_executable_bit(self, tmp_path) -> None:
        """Test the canonical file is executable."""
        source = tmp_path / "frieza_v3.0.0"
        source.write_bytes(b"binary")
        source.chmod(0o644)

        result = normalize_binary(tmp_path, "v3.0.0", LINUX)

        assert result.stat().st_mode & stat.S_IXUSR
        assert os.access(result, os.X_OK)

    def test_windows_suffix(self, tmp_path) -> None:
        """Test Windows archives are normalized to frieza.exe."""
        (tmp_path / "frieza_v3.0.0.exe").write_bytes(b"binary")

        result = normalize_binary(tmp_path, "v3.0.0", WINDOWS)

        assert result.name == "frieza.exe"
        assert result.exists()

    def test_missing_source_names_both_paths(self, tmp_path) -> None:
        """Test a missing executable fails and leaves no canonical file."""
        (tmp_path / "README.md").write_text("docs")

        with pytest.raises(NormalizationError) as exc_info:
            normalize_binary(tmp_path, "v3.0.0", LINUX)

        message = str(exc_info.value)
        assert str(tmp_path / "frieza_v3.0.0") in message
        assert str(tmp_path / "frieza") in message
        assert not (tmp_path / "frieza").exists()

    def test_prefixless_tag_not_guessed(self, tmp_path) -> None:
        """Test the tag is not rewritten to find the executable."""
        (tmp_path / "frieza_3.0.0").write_bytes(b"binary")

        with pytest.raises(NormalizationError):
            normalize_binary(tmp_path, "v3.0.0", LINUX)

    def test_custom_tool_name(self, tmp_path) -> None:
        """Test the tool name is used for both file names."""
        (tmp_path / "other_v1.0").write_bytes(b"binary")

        result = normalize_binary(tmp_path, "v1.0", LINUX, tool_name="other")

        assert result == tmp_path / "other"

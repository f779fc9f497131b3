"""Pytest configuration and fixtures for frieza-action tests."""

import io
import logging
import zipfile
from collections.abc import Callable, Iterable
from typing import Any

import pytest

from frieza_action.logger import clear_logger_state


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("frieza_action"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams after each test."""
    yield
    clear_logger_state()


@pytest.fixture(autouse=True)
def runner_environment(monkeypatch, tmp_path):
    """Isolate tests from the environment of a real Actions runner."""
    for name in (
        "GITHUB_PATH",
        "GITHUB_TOKEN",
        "RUNNER_DEBUG",
        "LOG_LEVEL",
        "FRIEZA_ACTION_CONFIG",
        "INPUT_ACCESS_KEY",
        "INPUT_SECRET_KEY",
        "INPUT_REGION",
        "INPUT_RELEASE",
        "INPUT_GITHUB_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RUNNER_TEMP", str(tmp_path / "runner-temp"))


@pytest.fixture
def make_zip() -> Callable[[dict[str, bytes]], bytes]:
    """Build zip archive bytes from a mapping of member name to content."""

    def _make(files: dict[str, bytes]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as zf:
            for name, data in files.items():
                zf.writestr(name, data)
        return buffer.getvalue()

    return _make


@pytest.fixture
def release_payload() -> Callable[..., dict[str, Any]]:
    """Build a GitHub API release payload."""

    def _payload(
        tag: str = "v3.0.0", asset_names: Iterable[str] = ()
    ) -> dict[str, Any]:
        return {
            "tag_name": tag,
            "prerelease": False,
            "assets": [
                {
                    "name": name,
                    "size": 1024,
                    "browser_download_url": (
                        "https://github.com/outscale-dev/frieza/releases/"
                        f"download/{tag}/{name}"
                    ),
                }
                for name in asset_names
            ],
        }

    return _payload

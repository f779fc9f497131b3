"""Setup, cleanup and install workflows.

The setup step installs frieza, registers the credentials and snapshots the
account. The cleanup step, run at the end of the job, deletes everything
created since that snapshot. Every step runs once, in order, and the first
failure aborts the workflow.
"""

from __future__ import annotations

from frieza_action.config import ActionInputs, Settings
from frieza_action.constants import TOOL_NAME
from frieza_action.core.download import DownloadService
from frieza_action.core.github import (
    ReleaseAPIClient,
    ReleaseFetcher,
    build_asset_name,
    find_asset_url,
)
from frieza_action.core.http_session import create_http_session
from frieza_action.core.install import InstalledBinary, normalize_binary
from frieza_action.core.target import PlatformTarget, detect_target
from frieza_action.exceptions import AssetNotFoundError
from frieza_action.infrastructure import actions
from frieza_action.infrastructure.auth import GitHubAuth
from frieza_action.infrastructure.runner import FriezaProfile, FriezaRunner
from frieza_action.logger import get_logger

logger = get_logger(__name__)


class FriezaInstaller:
    """Resolve, download and normalize the frieza binary."""

    def __init__(
        self,
        fetcher: ReleaseFetcher,
        downloader: DownloadService,
        target: PlatformTarget | None = None,
        tool_name: str = TOOL_NAME,
    ) -> None:
        """Initialize the installer.

        Args:
            fetcher: Release lookup
            downloader: Archive download and extraction
            target: Platform to install for; detected from the host when
                omitted
            tool_name: Tool name used in asset and binary names

        """
        self.fetcher = fetcher
        self.downloader = downloader
        self.target = target or detect_target()
        self.tool_name = tool_name

    async def install(self, specifier: str) -> InstalledBinary:
        """Install the release selected by specifier.

        Args:
            specifier: Release specifier; empty selects the latest release

        Returns:
            The installed binary

        Raises:
            ResolutionError: If the release lookup fails
            AssetNotFoundError: If the release has no asset for the target;
                nothing is downloaded
            FetchError: If download or extraction fails
            NormalizationError: If the executable cannot be renamed

        """
        release = await self.fetcher.resolve_release(specifier)

        asset_name = build_asset_name(
            self.tool_name,
            release.numeric_version,
            self.target.os_name,
            self.target.arch,
        )
        url = find_asset_url(release.assets, asset_name)
        if not url:
            msg = f"could not resolve asset {asset_name}"
            raise AssetNotFoundError(msg, target=release.tag_name)

        logger.info("Downloading %s", asset_name)
        logger.debug("Downloading Frieza from %s", url)
        extracted_dir = await self.downloader.fetch_and_extract(url)
        logger.debug("Frieza path is %s", extracted_dir)

        path = normalize_binary(
            extracted_dir, release.tag_name, self.target, self.tool_name
        )
        logger.info("Installed %s %s", self.tool_name, release.tag_name)
        return InstalledBinary(path=path, release=release)


async def install_binary(
    settings: Settings, release: str = "", github_token: str = ""
) -> InstalledBinary:
    """Install frieza and add its directory to PATH.

    Args:
        settings: Runtime settings
        release: Release specifier; empty selects the latest release
        github_token: Optional token for GitHub API requests

    Returns:
        The installed binary

    """
    timeout_seconds = settings["network"]["timeout_seconds"]
    async with create_http_session(settings["network"]) as session:
        api_client = ReleaseAPIClient(
            session,
            auth=GitHubAuth(github_token),
            timeout_seconds=timeout_seconds,
        )
        installer = FriezaInstaller(
            ReleaseFetcher(api_client),
            DownloadService(session, timeout_seconds=timeout_seconds),
        )
        binary = await installer.install(release)

    logger.debug("Add %s to PATH", binary.directory)
    actions.add_path(binary.directory)
    return binary


async def run_setup(
    inputs: ActionInputs,
    settings: Settings,
    profile: FriezaProfile | None = None,
) -> InstalledBinary:
    """Install frieza, register credentials and snapshot the account.

    Args:
        inputs: Action inputs
        settings: Runtime settings
        profile: Profile and snapshot names (defaults when omitted)

    Returns:
        The installed binary

    """
    actions.add_mask(inputs.access_key)
    actions.add_mask(inputs.secret_key)
    actions.add_mask(inputs.github_token)

    binary = await install_binary(
        settings, inputs.release, inputs.github_token
    )

    runner = FriezaRunner(
        binary.path,
        profile=profile,
        timeout_seconds=settings["execution"]["command_timeout_seconds"],
    )
    await runner.register_credentials(
        inputs.access_key, inputs.secret_key, inputs.region
    )
    await runner.make_snapshot()
    return binary


async def run_cleanup(
    settings: Settings, profile: FriezaProfile | None = None
) -> None:
    """Clean the account back to the snapshot taken at setup.

    frieza is looked up on PATH, where the setup step put it.
    """
    runner = FriezaRunner(
        TOOL_NAME,
        profile=profile,
        timeout_seconds=settings["execution"]["command_timeout_seconds"],
    )
    await runner.clean_account()

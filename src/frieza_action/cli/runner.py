"""CLI runner for frieza-action.

Routes parsed arguments to the setup, cleanup and install workflows and
turns any failure into a run-level failure reported to the runner.
"""

import configparser
from argparse import Namespace
from collections.abc import Sequence
from dataclasses import replace

from frieza_action import __version__
from frieza_action.cli.parser import CLIParser
from frieza_action.config import (
    ActionInputs,
    SettingsManager,
    github_token_from_environment,
    release_from_environment,
)
from frieza_action.core.workflows import install_binary, run_cleanup, run_setup
from frieza_action.exceptions import FriezaActionError
from frieza_action.infrastructure import actions
from frieza_action.logger import (
    ConfigurationError,
    apply_logging_settings,
    get_logger,
)
from frieza_action.types import Settings

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, parser: CLIParser | None = None) -> None:
        self.parser = parser or CLIParser()
        self.command_handlers = {
            "setup": self._setup,
            "cleanup": self._cleanup,
            "install": self._install,
        }

    async def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Arguments to parse; defaults to sys.argv[1:]

        Returns:
            Process exit code

        """
        args = self.parser.parse_args(argv)

        if args.version:
            print(__version__)
            return EXIT_SUCCESS

        if not args.command:
            self.parser.create_parser().print_help()
            return EXIT_FAILURE

        try:
            settings = SettingsManager(args.config).load()
            apply_logging_settings(settings["logging"])
            await self.command_handlers[args.command](args, settings)
        except (
            FriezaActionError,
            ConfigurationError,
            configparser.Error,
        ) as e:
            logger.debug("%s failed", args.command, exc_info=True)
            actions.set_failed(str(e))
            return EXIT_FAILURE

        return EXIT_SUCCESS

    async def _setup(self, args: Namespace, settings: Settings) -> None:
        inputs = ActionInputs.from_environment()
        if args.release is not None:
            inputs = replace(inputs, release=args.release)
        await run_setup(inputs, settings)

    async def _cleanup(self, args: Namespace, settings: Settings) -> None:
        await run_cleanup(settings)

    async def _install(self, args: Namespace, settings: Settings) -> None:
        release = (
            args.release
            if args.release is not None
            else release_from_environment()
        )
        binary = await install_binary(
            settings, release, github_token_from_environment()
        )
        print(binary.path)

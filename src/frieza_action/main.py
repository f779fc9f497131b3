"""Main CLI entry point for frieza-action.

This module provides the minimal entry point for the command-line
interface, delegating all functionality to the CLI runner.
"""

import asyncio
import sys

from frieza_action.cli import CLIRunner
from frieza_action.infrastructure import actions
from frieza_action.logger import get_logger

logger = get_logger(__name__)


async def async_main() -> int:
    """Run the CLI asynchronously and return the exit code."""
    runner = CLIRunner()
    return await runner.run()


def main() -> None:
    """Run the CLI application.

    uvloop drives the event loop where it is available; it does not support
    Windows runners, which use the default asyncio loop.
    """
    try:
        if sys.platform == "win32":
            exit_code = asyncio.run(async_main())
        else:
            import uvloop  # noqa: PLC0415

            exit_code = uvloop.run(async_main())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        actions.set_failed(f"Unexpected error: {e}")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

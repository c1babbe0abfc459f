"""
__main__ provides the console-script entrypoint for the sprig package.
"""
from __future__ import annotations

import sys
import traceback

from sprig.cli import CLI
from sprig.command import Command, PathsCommand
from sprig.console import logger
from sprig.dispatch import Analysis, dispatch
from sprig.errors import OptionsError


def describe(command: Command) -> None:
    """Show the resolved request, with every default filled in."""
    logger.header(command.mode.value, str(command.config.input))
    logger.key_value(command.config.summary())

    match command:
        case PathsCommand(config=config) if not config.functions:
            logger.warning("No functions given; there are no call paths to search for.")
        case _:
            pass


def main(argv: list[str] | None = None, analysis: Analysis | None = None) -> int:
    """
    main is the entrypoint for the `sprig` console script.

    Without an analysis engine attached, the request is validated and
    described, then main returns.
    """
    cli = CLI()
    try:
        command = cli.parse_command(argv)
        describe(command)
        if analysis is None:
            logger.info("No analysis engine attached; request is valid.")
            return 0
        dispatch(command, analysis)
        return 0
    except OptionsError as e:
        logger.error(f"error: {e}")
        logger.log(cli.format_usage().rstrip())
        return 2
    except ValueError as e:
        logger.error(f"error: {e}")
        logger.log(f"details: {e!r}")
        return 1
    except RuntimeError as e:
        logger.error("runtime error while running sprig.")
        logger.log(f"details: {e!r}")
        return 1
    except Exception as e:
        logger.error(f"unexpected error: {type(e).__name__}: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line interface for reqlint.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from reqlint.config import load_config
from reqlint.__version__ import __version__
from reqlint.context import ReqLintContext
from reqlint.constants import CONFIG_ENV_VAR
from reqlint.commands.lint import lint
from reqlint.exceptions import ConfigError, ReqLintError
from reqlint.utils.logger import get_logger, level_for_verbosity, setup_logging
from reqlint.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar=CONFIG_ENV_VAR,
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="REQLINT_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="reqlint",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """reqlint: keep requirements.txt files sorted and free of duplicates.

    \b
    Available commands:
      reqlint lint                 Lint requirements files

    \b
    Examples:
      reqlint lint
      reqlint lint requirements/ --format json
      reqlint -v lint requirements.txt requirements-dev.txt

    Use ``reqlint COMMAND --help`` for command-specific options.
    """
    _configure_logging(verbose)

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    reqlint_ctx = ReqLintContext()
    reqlint_ctx.config_path = config or loaded_config.source_path
    reqlint_ctx.config = loaded_config
    reqlint_ctx.color = color
    reqlint_ctx.verbose = verbose
    ctx.obj = reqlint_ctx

    logger.debug("reqlint v%s", __version__)
    logger.debug("Config path: %s", reqlint_ctx.config_path)
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


cli.add_command(lint)


def main() -> int:
    """Main entry point for the reqlint CLI.

    Returns:
        Exit code:
            0   No failing findings
            1   Failing findings, or an application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        result = cli(standalone_mode=False)
        return result if isinstance(result, int) else 0

    except click.exceptions.Exit as exc:
        return exc.exit_code

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        if exc.code is None or isinstance(exc.code, int):
            return exc.code or 0
        return 1

    except ReqLintError as exc:
        print_error(str(exc))
        logger.debug(
            "ReqLintError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Main CLI entry point for hostfetch.

This module provides the command-line interface that prints colorized
host properties.
"""

import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from hostfetch import __version__
from hostfetch.cli.commands import colors as colors_commands
from hostfetch.cli.commands import config as config_commands
from hostfetch.cli.commands import show as show_commands
from hostfetch.cli.context import HostfetchContext
from hostfetch.cli.utils import echo_error
from hostfetch.color import ColorMode
from hostfetch.exceptions import ConfigurationError
from hostfetch.utils.logging import configure_logging, get_logger

# Load environment variables from .env file
load_dotenv()

logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="hostfetch")
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--color",
    type=click.Choice([mode.value for mode in ColorMode], case_sensitive=False),
    default=None,
    help="When to colorize output (default: auto)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Set console logging level (logs go to stderr)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write JSON log lines to this file",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    color: str | None,
    log_level: str | None,
    log_file: Path | None,
) -> None:
    """hostfetch - Show host properties as colorized lines.

    Running without a command prints the OS, kernel, CPU and memory lines.

    Examples:

        # Default display
        hostfetch

        # Selected properties, never colorized
        hostfetch --color never show os kernel

        # Write a starter configuration
        hostfetch config init
    """
    hostfetch_ctx = HostfetchContext(
        config_path=config,
        color=ColorMode(color.lower()) if color else None,
        log_level=log_level,
        log_file=log_file,
    )

    try:
        configure_logging(
            level=hostfetch_ctx.effective_log_level,
            log_file=hostfetch_ctx.effective_log_file,
        )
    except ConfigurationError as e:
        echo_error(f"Configuration Error: {e}")
        raise click.exceptions.Exit(2) from e

    ctx.obj = hostfetch_ctx

    logger.debug(
        "cli_initialized",
        config=str(config) if config else None,
        color=hostfetch_ctx.color_mode.value,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(show_commands.show)


cli.add_command(config_commands.config)
cli.add_command(show_commands.show)
cli.add_command(colors_commands.colors)


def main() -> int:
    """Main entry point for CLI."""
    try:
        exit_code = cli(standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except Exception as e:
        logger.error("unexpected_error", error=str(e), exc_info=True)
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

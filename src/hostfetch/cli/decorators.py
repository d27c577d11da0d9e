"""
Decorators for CLI commands.

This module provides decorators for error handling, context passing,
and configuration checks shared by the CLI commands.
"""

import functools
from collections.abc import Callable

import click

from hostfetch.cli.context import HostfetchContext
from hostfetch.cli.utils import echo_error
from hostfetch.exceptions import ConfigurationError, HostfetchError, PropertySourceError
from hostfetch.utils.logging import get_logger

logger = get_logger(__name__)


def pass_context(f: Callable) -> Callable:
    """
    Decorator to pass HostfetchContext to command function.

    Usage:
        @click.command()
        @pass_context
        def my_command(ctx: HostfetchContext):
            print(ctx.config)
    """

    @click.pass_context
    @functools.wraps(f)
    def wrapper(click_ctx: click.Context, *args, **kwargs):
        hostfetch_ctx: HostfetchContext = click_ctx.obj
        return f(hostfetch_ctx, *args, **kwargs)

    return wrapper


def handle_errors(f: Callable) -> Callable:
    """
    Decorator to handle common errors in CLI commands.

    Exit codes:
        0: Success
        1: General error
        2: Configuration error
        3: Property source error
    """

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)

        except click.exceptions.Exit:
            raise

        except ConfigurationError as e:
            logger.error("configuration_error", error=str(e))
            echo_error(f"Configuration Error: {e}")
            raise click.exceptions.Exit(2) from e

        except PropertySourceError as e:
            logger.error("property_source_error", error=str(e))
            echo_error(f"Property Error: {e}")
            raise click.exceptions.Exit(3) from e

        except HostfetchError as e:
            logger.error("hostfetch_error", error=str(e))
            echo_error(f"Error: {e}")
            raise click.exceptions.Exit(1) from e

        except Exception as e:
            logger.error("unexpected_error", error=str(e), exc_info=True)
            echo_error(f"Unexpected Error: {e}")
            raise click.exceptions.Exit(1) from e

    return wrapper


def requires_config(f: Callable) -> Callable:
    """
    Decorator to ensure a configuration document is available and valid.

    Commands that inspect the document itself (rather than the built-in
    default) use this to fail early with exit code 2.
    """

    @functools.wraps(f)
    def wrapper(ctx: HostfetchContext, *args, **kwargs):
        if ctx.document_path is None:
            echo_error(
                "Configuration file required. Use --config option, set "
                "HOSTFETCH_CONFIG_FILE, or run 'hostfetch config init'."
            )
            raise click.exceptions.Exit(2)

        try:
            _ = ctx.raw_config
        except ConfigurationError as e:
            echo_error(f"Error loading configuration: {e}")
            raise click.exceptions.Exit(2) from e

        return f(ctx, *args, **kwargs)

    return wrapper

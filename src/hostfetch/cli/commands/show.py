"""
Property display command.

This module renders the requested host properties as colorized
``name: value`` lines on stdout.
"""

import click

from hostfetch.cli.context import HostfetchContext
from hostfetch.cli.decorators import handle_errors, pass_context
from hostfetch.properties import Property
from hostfetch.sources import display_name
from hostfetch.utils.logging import get_logger

logger = get_logger(__name__)


@click.command(name="show")
@click.argument("keys", nargs=-1)
@pass_context
@handle_errors
def show(ctx: HostfetchContext, keys: tuple[str, ...]) -> None:
    """Display host properties.

    KEYS are property names (os, kernel, cpu, memory). Without KEYS the
    properties from HOSTFETCH_PROPERTIES are shown, by default all four.

    Examples:

        hostfetch show

        hostfetch show os kernel
    """
    requested = list(keys) or ctx.settings.properties
    colorize = ctx.color_mode.enabled(click.get_text_stream("stdout"))
    config = ctx.config

    snapshot = ctx.source.collect(requested)
    for key, value in snapshot.items():
        line = Property.styled(key, display_name(key), value, config).render(colorize=colorize)
        click.echo(line, color=colorize)

    logger.debug("properties_rendered", count=len(snapshot), colorize=colorize)

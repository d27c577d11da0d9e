"""
Color preview command.

Prints swatches for the named colors (and optionally the 256-color
palette) so configuration values can be picked by eye.
"""

import click

from hostfetch.cli.context import HostfetchContext
from hostfetch.cli.decorators import handle_errors, pass_context
from hostfetch.color import IndexedColor, NamedColor, with_bg, with_fg


@click.command(name="colors")
@click.option("--palette", is_flag=True, help="Also show the 256-color palette")
@pass_context
@handle_errors
def colors(ctx: HostfetchContext, palette: bool) -> None:
    """Preview the colors usable in the configuration.

    Examples:

        hostfetch colors

        hostfetch --color always colors --palette
    """
    colorize = ctx.color_mode.enabled(click.get_text_stream("stdout"))

    for color in NamedColor:
        if color is NamedColor.RESET:
            continue
        if colorize:
            click.echo(f"{with_bg('    ', color)} {with_fg(color.to_text(), color)}", color=True)
        else:
            click.echo(color.to_text())

    if not palette:
        return

    click.echo()
    for row_start in range(0, 256, 16):
        cells = []
        for index in range(row_start, row_start + 16):
            label = f"{index:>4}"
            cells.append(with_bg(label, IndexedColor(index)) if colorize else label)
        click.echo("".join(cells), color=colorize)

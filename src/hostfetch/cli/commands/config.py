"""
Configuration management commands.

This module provides commands for creating, validating and inspecting
the styling configuration document.
"""

from pathlib import Path

import click

from hostfetch.cli.context import HostfetchContext
from hostfetch.cli.decorators import handle_errors, pass_context, requires_config
from hostfetch.cli.utils import (
    confirm_overwrite,
    echo_info,
    echo_success,
    echo_warning,
    print_table,
)
from hostfetch.config import (
    StylingRecord,
    default_config_path,
    default_raw_configuration,
    save_config_to_yaml,
)
from hostfetch.utils.logging import get_logger

logger = get_logger(__name__)


@click.group(name="config")
def config() -> None:
    """Configuration management commands.

    Create, validate and inspect the styling configuration document.
    """
    pass


@config.command(name="validate")
@pass_context
@requires_config
@handle_errors
def validate(ctx: HostfetchContext) -> None:
    """Validate the configuration document.

    Checks that the document parses, that the default styling is complete
    and that every color is valid.

    Examples:

        hostfetch --config config.yaml config validate
    """
    echo_info(f"Validating configuration: {ctx.document_path}")

    raw = ctx.raw_config
    resolved = ctx.config

    echo_success(f"Default styling: {_describe(raw.default)}")
    echo_success(f"Groups: {len(raw.groups)}")
    echo_success(f"Overrides: {len(raw.overrides)}")
    echo_success(f"Styled properties: {len(resolved.configured_properties())}")

    for group_name, group in raw.groups.items():
        if not group.properties:
            echo_warning(f"Group '{group_name}' has no member properties")

    click.echo()
    echo_success("Configuration is valid!")


@config.command(name="show")
@pass_context
@handle_errors
def show(ctx: HostfetchContext) -> None:
    """Display the resolved styling of every known property.

    Lists the styled properties, then the displayed ones, then every
    property the host source can read.

    Examples:

        hostfetch config show
    """
    resolved = ctx.config
    origin = str(ctx.document_path) if ctx.document_path else "built-in default"

    names = list(resolved.configured_properties())
    for name in [*ctx.settings.properties, *ctx.source.keys()]:
        if name not in names:
            names.append(name)

    rows = [["(default)", *_cells(resolved.default_styling)]]
    rows.extend([name, *_cells(resolved.get(name))] for name in names)

    print_table(
        f"Resolved styling ({origin})",
        ["Property", "Name color", "Separator", "Separator color", "Value color"],
        rows,
    )


@config.command(name="init")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the document (default: per-user config path)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file without asking")
@pass_context
@handle_errors
def init(ctx: HostfetchContext, output: Path | None, force: bool) -> None:
    """Write the built-in default configuration to a file.

    Examples:

        hostfetch config init

        hostfetch config init --output ./hostfetch.yaml --force
    """
    output_path = output or default_config_path()

    if not confirm_overwrite(output_path, force=force):
        echo_warning("Operation cancelled.")
        return

    save_config_to_yaml(default_raw_configuration(), output_path)
    logger.info("configuration_written", config_path=str(output_path))
    echo_success(f"Configuration written to {output_path}")


def _cells(styling: StylingRecord) -> list[str]:
    return [
        styling.name_color.to_text(),
        repr(styling.separator),
        styling.separator_color.to_text(),
        styling.value_color.to_text(),
    ]


def _describe(styling: StylingRecord) -> str:
    name_color, separator, separator_color, value_color = _cells(styling)
    return (
        f"name={name_color} separator={separator} "
        f"separator_color={separator_color} value={value_color}"
    )

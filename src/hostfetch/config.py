"""Configuration management for hostfetch using Pydantic.

This module provides the typed configuration document (default styling,
groups and per-property overrides), YAML load/save helpers, the built-in
default document, and runtime settings read from the environment.
"""

from pathlib import Path
from typing import Annotated, Any

import click
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from hostfetch.color import Color, ColorMode, IndexedColor, NamedColor, RgbColor, parse_color
from hostfetch.exceptions import ConfigurationError

DEFAULT_PROPERTIES = ["os", "kernel", "cpu", "memory"]
STYLING_ATTRIBUTES = ("name_color", "separator", "separator_color", "value_color")


def coerce_color(value: Any) -> Color:
    """Validate a color field value.

    Accepts an already-built color, its text form, or a bare YAML integer
    0-255 (read as a palette index).
    """
    if isinstance(value, (NamedColor, IndexedColor, RgbColor)):
        return value
    if isinstance(value, bool):
        raise ValueError(f"'{value}' is not a valid color")
    if isinstance(value, int):
        return IndexedColor(value)
    if isinstance(value, str):
        return parse_color(value)
    raise ValueError(f"Expected a color string, got {type(value).__name__}")


ColorField = Annotated[
    Color,
    PlainValidator(coerce_color),
    PlainSerializer(lambda color: color.to_text(), return_type=str),
]


class StylingRecord(BaseModel):
    """Fully resolved styling for one property. Every attribute is set."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name_color: ColorField = Field(..., description="Color of the property name")
    separator: str = Field(..., description="Text between name and value")
    separator_color: ColorField = Field(..., description="Color of the separator")
    value_color: ColorField = Field(..., description="Color of the property value")


class PartialStylingRecord(BaseModel):
    """Styling with optional attributes; ``None`` means inherit."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name_color: ColorField | None = Field(default=None)
    separator: str | None = Field(default=None)
    separator_color: ColorField | None = Field(default=None)
    value_color: ColorField | None = Field(default=None)

    def merged_with(self, incoming: "PartialStylingRecord") -> "PartialStylingRecord":
        """Return a copy where every attribute set on ``incoming`` wins."""
        updates = {
            attribute: value
            for attribute, value in incoming.styling_items()
            if value is not None
        }
        return PartialStylingRecord(**{**dict(self.styling_items()), **updates})

    def styling_items(self) -> list[tuple[str, Any]]:
        """The four styling attributes as (name, value) pairs."""
        return [(attribute, getattr(self, attribute)) for attribute in STYLING_ATTRIBUTES]


class GroupConfig(PartialStylingRecord):
    """A named set of properties sharing a partial styling."""

    properties: list[str] = Field(default_factory=list, description="Member property names")

    @property
    def styling(self) -> PartialStylingRecord:
        """The group's styling without the member list."""
        return PartialStylingRecord(**dict(self.styling_items()))


class RawConfiguration(BaseModel):
    """The configuration document as authored."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default: StylingRecord = Field(..., description="Styling applied when nothing else matches")
    groups: dict[str, GroupConfig] = Field(
        default_factory=dict, description="Group name to group styling and members"
    )
    overrides: dict[str, PartialStylingRecord] = Field(
        default_factory=dict, description="Property name to per-property styling"
    )


def default_raw_configuration() -> RawConfiguration:
    """Build the configuration used when no document is supplied."""
    return RawConfiguration(
        default=StylingRecord(
            name_color=parse_color("bright cyan"),
            separator=": ",
            separator_color=parse_color("bright white"),
            value_color=parse_color("bright white"),
        ),
        groups={
            "sys": GroupConfig(
                name_color=parse_color("69"),
                value_color=parse_color("#FFFFFF"),
                properties=["os", "kernel", "memory", "cpu", "gpu"],
            ),
        },
        overrides={},
    )


class AppSettings(BaseSettings):
    """Runtime options read from ``HOSTFETCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HOSTFETCH_",
        case_sensitive=False,
        extra="ignore",
    )

    config_file: Path | None = Field(default=None, description="Configuration document path")
    color: ColorMode = Field(default=ColorMode.AUTO, description="When to emit color escapes")
    properties: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROPERTIES),
        description="Properties to display, in order",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: Path | None = Field(default=None, description="Optional JSON log file")

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper


def default_config_path() -> Path:
    """Per-user location checked when no document path is given."""
    return Path(click.get_app_dir("hostfetch")) / "config.yaml"


def _to_raw_configuration(data: Any, path: Path | None = None) -> RawConfiguration:
    if not data:
        raise ConfigurationError("Empty configuration document", path)
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration document must be a mapping", path)

    try:
        return RawConfiguration.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", path) from e


def load_config_from_string(text: str) -> RawConfiguration:
    """Load configuration from YAML text.

    Args:
        text: YAML document

    Returns:
        RawConfiguration: Loaded configuration

    Raises:
        ConfigurationError: If the document is malformed or invalid
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML: {e}") from e
    return _to_raw_configuration(data)


def load_config_from_yaml(config_path: str | Path) -> RawConfiguration:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        RawConfiguration: Loaded configuration

    Raises:
        ConfigurationError: If the file is missing, unreadable, malformed or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError("Configuration file not found", config_path)

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML: {e}", config_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file: {e}", config_path) from e

    return _to_raw_configuration(config_data, config_path)


def dump_config_to_string(config: RawConfiguration) -> str:
    """Serialize configuration to YAML text.

    Colors are written in their canonical text form and unset partial
    attributes are omitted.
    """
    config_dict = config.model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False)


def save_config_to_yaml(config: RawConfiguration, output_path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save
        output_path: Path to output YAML file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        f.write(dump_config_to_string(config))

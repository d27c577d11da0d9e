"""
CLI context for hostfetch.

This module provides the context object passed to all CLI commands. It
holds the runtime settings, the configuration document and the resolved
configuration, each loaded lazily and at most once per run.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from hostfetch.color import ColorMode
from hostfetch.config import (
    AppSettings,
    RawConfiguration,
    default_config_path,
    default_raw_configuration,
    load_config_from_yaml,
)
from hostfetch.exceptions import ConfigurationError
from hostfetch.resolver import ResolvedConfiguration
from hostfetch.sources import HostPropertySource
from hostfetch.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class HostfetchContext:
    """
    Context object for CLI commands.

    Values given on the command line take precedence over the
    ``HOSTFETCH_*`` settings.

    Attributes:
        config_path: Configuration document given with --config
        color: Color mode given with --color
        log_level: Logging level given with --log-level
        log_file: Log file given with --log-file
    """

    config_path: Path | None = None
    color: ColorMode | None = None
    log_level: str | None = None
    log_file: Path | None = None

    # Lazy-loaded attributes
    _settings: AppSettings | None = field(default=None, init=False, repr=False)
    _raw_config: RawConfiguration | None = field(default=None, init=False, repr=False)
    _config: ResolvedConfiguration | None = field(default=None, init=False, repr=False)
    _source: HostPropertySource | None = field(default=None, init=False, repr=False)

    @property
    def settings(self) -> AppSettings:
        """Get or load runtime settings from the environment."""
        if self._settings is None:
            try:
                self._settings = AppSettings()
            except ValidationError as e:
                raise ConfigurationError(f"Invalid HOSTFETCH_* environment settings: {e}") from e
        return self._settings

    @property
    def color_mode(self) -> ColorMode:
        return self.color if self.color is not None else self.settings.color

    @property
    def effective_log_level(self) -> str:
        return (self.log_level or self.settings.log_level).upper()

    @property
    def effective_log_file(self) -> Path | None:
        return self.log_file or self.settings.log_file

    @property
    def document_path(self) -> Path | None:
        """Configuration document to load, or None for the built-in default.

        An explicit path is returned even when it does not exist so that
        loading reports it. The per-user default path is only used when the
        file is present.
        """
        if self.config_path is not None:
            return self.config_path
        if self.settings.config_file is not None:
            return self.settings.config_file

        user_path = default_config_path()
        if user_path.exists():
            return user_path
        return None

    @property
    def raw_config(self) -> RawConfiguration:
        """Get or load the configuration document."""
        if self._raw_config is None:
            path = self.document_path
            if path is None:
                self._raw_config = default_raw_configuration()
            else:
                logger.debug("configuration_loading", config_path=str(path))
                self._raw_config = load_config_from_yaml(path)
                logger.info(
                    "configuration_loaded",
                    config_path=str(path),
                    groups=len(self._raw_config.groups),
                    overrides=len(self._raw_config.overrides),
                )
        return self._raw_config

    @property
    def config(self) -> ResolvedConfiguration:
        """Get or build the resolved configuration."""
        if self._config is None:
            if self.document_path is None:
                logger.debug("builtin_configuration_used")
                self._config = ResolvedConfiguration.builtin()
            else:
                self._config = ResolvedConfiguration.build(self.raw_config)
        return self._config

    @property
    def source(self) -> HostPropertySource:
        """Get or create the host property source."""
        if self._source is None:
            self._source = HostPropertySource()
        return self._source

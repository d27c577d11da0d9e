"""Custom exceptions for hostfetch.

This module defines exception classes for the error conditions that can
occur while parsing colors, loading configuration documents and reading
host properties.
"""

from pathlib import Path


class HostfetchError(Exception):
    """Base exception for all hostfetch errors."""

    pass


class ColorParseError(HostfetchError, ValueError):
    """Raised when text matches none of the recognized color forms.

    Subclasses ValueError so pydantic validators surface it as a regular
    validation error.
    """

    def __init__(self, text: str):
        """Initialize color parse error.

        Args:
            text: The text that failed to parse, as given
        """
        self.text = text
        super().__init__(f"'{text}' is not a valid color")


class ConfigurationError(HostfetchError):
    """Raised when a configuration document is missing, malformed or invalid."""

    def __init__(self, message: str, path: Path | str | None = None):
        """Initialize configuration error.

        Args:
            message: Error message
            path: Path of the offending document, if it came from a file
        """
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with the document path."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class PropertySourceError(HostfetchError):
    """Raised when an unknown property is requested from the host data source."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown property: {key}")

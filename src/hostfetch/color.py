"""Terminal color model.

A color is exactly one of three variants:

- ``NamedColor``: the 16 standard/bright ANSI colors plus ``reset``
- ``IndexedColor``: one of the 256 palette colors
- ``RgbColor``: a 24-bit true color

Every variant renders foreground/background SGR escape sequences and a
canonical text form that ``parse_color`` reads back to an equal value.
"""

import os
import re
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from hostfetch.exceptions import ColorParseError

ESC = "\x1b"

_DECIMAL_PATTERN = re.compile(r"[0-9]+")
_HEX_PATTERN = re.compile(r"#?([0-9a-f]{1,6})")
_STANDARD_ORDER = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def _sgr(code: str) -> str:
    return f"{ESC}[{code}m"


class NamedColor(Enum):
    """The named ANSI colors and the ``reset`` sentinel."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"
    RESET = "reset"

    @property
    def is_bright(self) -> bool:
        return self.value.startswith("bright_")

    def _code(self, base: int) -> str:
        if self is NamedColor.RESET:
            return "39;49"
        offset = _STANDARD_ORDER.index(self.value.removeprefix("bright_"))
        if self.is_bright:
            return str(base + 60 + offset)
        return str(base + offset)

    def foreground_escape(self) -> str:
        """SGR sequence setting the foreground (30-37, 90-97, reset 39;49)."""
        return _sgr(self._code(30))

    def background_escape(self) -> str:
        """SGR sequence setting the background (40-47, 100-107, reset 39;49)."""
        return _sgr(self._code(40))

    def to_text(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class IndexedColor:
    """One of the 256 palette colors."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"Palette index must be between 0 and 255, got {self.index}")

    def foreground_escape(self) -> str:
        return _sgr(f"38;5;{self.index}")

    def background_escape(self) -> str:
        return _sgr(f"48;5;{self.index}")

    def to_text(self) -> str:
        return str(self.index)

    def __str__(self) -> str:
        return self.to_text()


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit true color.

    The text form is a 24-bit hex integer whose low byte holds the red
    channel, the middle byte green and the high byte blue, so ``#ff00aa``
    is red 0xaa, green 0x00, blue 0xff.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue"):
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                raise ValueError(f"{channel} channel must be between 0 and 255, got {value}")

    @classmethod
    def from_int(cls, value: int) -> "RgbColor":
        """Split a 24-bit integer into channels, red in the low byte."""
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"RGB value must fit in 24 bits, got {value:#x}")
        return cls(value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF)

    def to_int(self) -> int:
        return self.red | (self.green << 8) | (self.blue << 16)

    def foreground_escape(self) -> str:
        return _sgr(f"38;2;{self.red};{self.green};{self.blue}")

    def background_escape(self) -> str:
        return _sgr(f"48;2;{self.red};{self.green};{self.blue}")

    def to_text(self) -> str:
        return f"#{self.to_int():06x}"

    def __str__(self) -> str:
        return self.to_text()


Color = NamedColor | IndexedColor | RgbColor


def _build_literals() -> dict[str, NamedColor]:
    aliases = {
        "magenta": ("purple",),
        "white": ("gray", "grey"),
    }
    literals: dict[str, NamedColor] = {"reset": NamedColor.RESET}
    for base in _STANDARD_ORDER:
        standard = NamedColor(base)
        bright = NamedColor(f"bright_{base}")
        for spelling in (base, *aliases.get(base, ())):
            literals[spelling] = standard
            literals[f"bright_{spelling}"] = bright
            literals[f"bright {spelling}"] = bright
    return literals


COLOR_LITERALS = _build_literals()


def parse_color(text: str) -> Color:
    """Parse a color from its human-friendly text form.

    Tries, in order: a color name (case-insensitive, with ``bright_``/``bright ``
    prefixes and the ``purple``/``gray``/``grey`` aliases), a decimal palette
    index 0-255, and a hex RGB value with an optional leading ``#``.

    Args:
        text: Color text, e.g. ``"bright cyan"``, ``"69"`` or ``"#ff00aa"``

    Returns:
        Color: The parsed color

    Raises:
        ColorParseError: If the text matches none of the forms
    """
    lowered = text.lower()

    named = COLOR_LITERALS.get(lowered)
    if named is not None:
        return named

    if _DECIMAL_PATTERN.fullmatch(lowered) and int(lowered) <= 255:
        return IndexedColor(int(lowered))

    match = _HEX_PATTERN.fullmatch(lowered)
    if match:
        return RgbColor.from_int(int(match.group(1), 16))

    raise ColorParseError(text)


def with_fg(text: str, color: Color) -> str:
    """Wrap text in a foreground color, resetting afterwards."""
    return f"{color.foreground_escape()}{text}{NamedColor.RESET.foreground_escape()}"


def with_bg(text: str, color: Color) -> str:
    """Wrap text in a background color, resetting afterwards."""
    return f"{color.background_escape()}{text}{NamedColor.RESET.background_escape()}"


class ColorMode(Enum):
    """When escape sequences are written to the terminal."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def enabled(self, stream: TextIO | None = None) -> bool:
        """Decide whether output to ``stream`` should be colorized.

        ``auto`` colorizes only a TTY, and honours ``NO_COLOR`` and
        ``TERM=dumb``.
        """
        if self is ColorMode.ALWAYS:
            return True
        if self is ColorMode.NEVER:
            return False

        stream = stream if stream is not None else sys.stdout
        if os.environ.get("NO_COLOR"):
            return False
        if os.environ.get("TERM") == "dumb":
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

"""Rendering of a single ``name: value`` property line."""

from dataclasses import dataclass

from hostfetch.color import NamedColor
from hostfetch.config import StylingRecord
from hostfetch.resolver import ResolvedConfiguration


@dataclass(frozen=True)
class Property:
    """A displayed property bound to its resolved styling."""

    name: str
    value: str
    styling: StylingRecord

    @classmethod
    def styled(
        cls, key: str, name: str, value: str, config: ResolvedConfiguration
    ) -> "Property":
        """Build a property whose styling is looked up by ``key``."""
        return cls(name=name, value=value, styling=config.get(key))

    def render(self, colorize: bool = True) -> str:
        """Render the property as one line, without a trailing newline.

        Args:
            colorize: Emit ANSI escape sequences. When False only the
                name, separator and value text are returned.

        Returns:
            str: The rendered line
        """
        if not colorize:
            return f"{self.name}{self.styling.separator}{self.value}"

        styling = self.styling
        return (
            f"{styling.name_color.foreground_escape()}{self.name}"
            f"{styling.separator_color.foreground_escape()}{styling.separator}"
            f"{styling.value_color.foreground_escape()}{self.value}"
            f"{NamedColor.RESET.foreground_escape()}"
        )

    def __str__(self) -> str:
        return self.render()

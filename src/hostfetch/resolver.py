"""Resolution of the layered styling configuration.

Styling for a property comes from three tiers, lowest precedence first:
the global default, every group listing the property (in document order),
and the property's own override. Tiers are merged attribute by attribute,
so a tier only replaces the attributes it actually sets.
"""

from collections.abc import Mapping
from types import MappingProxyType

from hostfetch.config import (
    STYLING_ATTRIBUTES,
    PartialStylingRecord,
    RawConfiguration,
    StylingRecord,
    default_raw_configuration,
)
from hostfetch.utils.logging import get_logger

logger = get_logger(__name__)


class ResolvedConfiguration:
    """Query-ready styling, built once from a ``RawConfiguration``.

    Instances are read-only after ``build`` returns and can be shared
    freely between readers.
    """

    __slots__ = ("_default", "_properties")

    def __init__(self, default: StylingRecord, properties: Mapping[str, PartialStylingRecord]):
        self._default = default
        self._properties = MappingProxyType(dict(properties))

    @classmethod
    def build(cls, raw: RawConfiguration) -> "ResolvedConfiguration":
        """Merge groups, then overrides, into one partial record per property.

        Groups are applied in the order they appear in ``raw.groups``; when
        two groups set the same attribute of a shared property the later one
        wins. Overrides are applied after every group and so always win.

        Args:
            raw: The loaded configuration document

        Returns:
            ResolvedConfiguration: The merged configuration
        """
        accumulated: dict[str, PartialStylingRecord] = {}
        set_by: dict[tuple[str, str], str] = {}

        for group_name, group in raw.groups.items():
            styling = group.styling
            for property_name in group.properties:
                for attribute, value in styling.styling_items():
                    if value is None:
                        continue
                    previous = set_by.get((property_name, attribute))
                    if previous is not None and previous != group_name:
                        logger.debug(
                            "group_attribute_overridden",
                            property=property_name,
                            attribute=attribute,
                            previous_group=previous,
                            group=group_name,
                        )
                    set_by[(property_name, attribute)] = group_name
                _merge_into(accumulated, property_name, styling)

        for property_name, override in raw.overrides.items():
            _merge_into(accumulated, property_name, override)

        logger.debug(
            "configuration_resolved",
            groups=len(raw.groups),
            overrides=len(raw.overrides),
            properties=len(accumulated),
        )
        return cls(raw.default, accumulated)

    @classmethod
    def builtin(cls) -> "ResolvedConfiguration":
        """The configuration built from the built-in default document."""
        return cls.build(default_raw_configuration())

    @property
    def default_styling(self) -> StylingRecord:
        """The retained global default record."""
        return self._default

    def get(self, property_name: str) -> StylingRecord:
        """Resolve the full styling for a property.

        Attributes the accumulated record leaves unset fall back to the
        default record. Unknown names resolve to the default record itself.
        """
        partial = self._properties.get(property_name)
        if partial is None:
            return self._default

        resolved = {}
        for attribute in STYLING_ATTRIBUTES:
            value = getattr(partial, attribute)
            resolved[attribute] = value if value is not None else getattr(self._default, attribute)
        return StylingRecord(**resolved)

    def configured_properties(self) -> list[str]:
        """Names of properties touched by at least one group or override."""
        return list(self._properties)

    def __repr__(self) -> str:
        return f"ResolvedConfiguration(properties={list(self._properties)!r})"


def _merge_into(
    accumulated: dict[str, PartialStylingRecord],
    property_name: str,
    incoming: PartialStylingRecord,
) -> None:
    current = accumulated.get(property_name)
    if current is None:
        accumulated[property_name] = PartialStylingRecord(**dict(incoming.styling_items()))
    else:
        accumulated[property_name] = current.merged_with(incoming)

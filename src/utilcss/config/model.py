"""Style table model: read-only dictionaries loaded once per process."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

# Ordered (property, value) pairs, configuration order preserved.
Declarations = tuple[tuple[str, str], ...]

# identifier (tag, class or utility id) -> declarations
StyleDictionary = Mapping[str, Declarations]


@dataclass(frozen=True)
class Breakpoint:
    """A named viewport range used to build one ``@media`` query."""

    name: str
    min: int
    max: int | None = None


def freeze_declarations(properties: Mapping[str, str] | Iterable[tuple[str, str]]) -> Declarations:
    """Return *properties* as an immutable tuple of ``(name, value)`` pairs."""
    items = properties.items() if isinstance(properties, Mapping) else properties
    return tuple((str(name), str(value)) for name, value in items)


def freeze_dictionary(
    table: Mapping[str, Mapping[str, str] | Iterable[tuple[str, str]]],
) -> StyleDictionary:
    """Build a read-only StyleDictionary from a nested mapping."""
    return MappingProxyType(
        {str(key): freeze_declarations(props) for key, props in table.items()}
    )


@dataclass(frozen=True)
class StyleTables:
    """All configuration the stylesheet pipeline reads.

    Attributes:
        attribute_name: HTML attribute carrying utility tokens.
        root: Declarations for the single ``:root`` block.
        elements: Tag name -> declarations, emitted for every tag.
        custom: Class name -> declarations, emitted when referenced.
        utilities: Utility id -> declarations.
        breakpoints: Viewport name -> Breakpoint, in output order.
    """

    attribute_name: str
    root: Declarations
    elements: StyleDictionary
    custom: StyleDictionary
    utilities: StyleDictionary
    breakpoints: Mapping[str, Breakpoint]

    @classmethod
    def from_mappings(
        cls,
        *,
        attribute_name: str,
        root: Mapping[str, str] | None = None,
        elements: Mapping[str, Mapping[str, str]] | None = None,
        custom: Mapping[str, Mapping[str, str]] | None = None,
        utilities: Mapping[str, Mapping[str, str]] | None = None,
        breakpoints: Mapping[str, Mapping[str, int | None]] | None = None,
    ) -> StyleTables:
        """Build tables from plain dicts (handy for tests and embedding)."""
        frozen_breakpoints = {
            name: Breakpoint(name=name, min=int(rng["min"]), max=_optional_int(rng.get("max")))
            for name, rng in (breakpoints or {}).items()
        }
        return cls(
            attribute_name=attribute_name,
            root=freeze_declarations(root or {}),
            elements=freeze_dictionary(elements or {}),
            custom=freeze_dictionary(custom or {}),
            utilities=freeze_dictionary(utilities or {}),
            breakpoints=MappingProxyType(frozen_breakpoints),
        )

    def utility(self, utility_id: str) -> Declarations | None:
        """Declarations for *utility_id*, or None when it is not configured."""
        return self.utilities.get(utility_id)

    def custom_class(self, class_name: str) -> Declarations | None:
        """Declarations for *class_name*, or None when it is not configured."""
        return self.custom.get(class_name)

    def breakpoint(self, viewport: str) -> Breakpoint | None:
        return self.breakpoints.get(viewport)


def _optional_int(value: int | str | None) -> int | None:
    if value is None:
        return None
    return int(value)

"""Raw-text scan of markup for class-like and utility attribute values.

The scan works on the markup string itself rather than on a parsed tree,
so it behaves the same for fragments and malformed documents.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["ScanResult", "attribute_pattern", "scan_attribute_values", "scan_markup"]


@dataclass(frozen=True)
class ScanResult:
    """Whitespace-split values found in the markup, in document order."""

    classes: tuple[str, ...] = ()
    utilities: tuple[str, ...] = ()


def attribute_pattern(names: Iterable[str]) -> re.Pattern[str]:
    """Pattern matching ``name = "value"`` for any of *names*.

    The name must not be the tail of a longer attribute name, so
    ``data-class="x"`` does not match ``class``.
    """
    alternatives = "|".join(re.escape(name) for name in names)
    return re.compile(rf'(?<![\w-])(?:{alternatives})\s*=\s*"(?P<value>[^"]*)"')


def scan_attribute_values(markup: str, names: Iterable[str]) -> tuple[str, ...]:
    names = [name for name in names if name]
    if not names:
        return ()
    values: list[str] = []
    for match in attribute_pattern(names).finditer(markup):
        values.extend(match.group("value").split())
    return tuple(values)


def scan_markup(
    markup: str,
    utility_attribute: str,
    class_attributes: Iterable[str] = ("class", "element"),
) -> ScanResult:
    """Collect class tokens and utility tokens from *markup*."""
    return ScanResult(
        classes=scan_attribute_values(markup, class_attributes),
        utilities=scan_attribute_values(markup, [utility_attribute]),
    )

"""Stylesheet model: UtilityToken and RuleFragment dataclasses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def serialize_declarations(properties: Iterable[tuple[str, str]], *, trailing: bool = False) -> str:
    """Join ``(name, value)`` pairs as ``name:value;name:value``.

    With ``trailing=True`` every declaration is terminated by ``;``,
    including the last one.
    """
    body = ";".join(f"{name}:{value}" for name, value in properties)
    if trailing and body:
        body += ";"
    return body


@dataclass(frozen=True)
class UtilityToken:
    """One utility token split into its style id and viewport suffix.

    ``row(lc)s+`` -> base_id ``row(lc)``, viewport ``s+``.
    """

    base_id: str
    viewport: str = ""

    def __str__(self) -> str:
        return f"{self.base_id}{self.viewport}"


@dataclass(frozen=True)
class RuleFragment:
    """A selector plus its ordered declarations, the atomic unit of output."""

    selector: str
    properties: tuple[tuple[str, str], ...]

    def __str__(self) -> str:
        return f"{self.selector}{{{serialize_declarations(self.properties)}}}"

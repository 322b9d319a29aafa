"""Utility token splitting and per-viewport grouping.

A token is a style id followed by an optional viewport suffix. Ids may end
in a parenthesized argument, so the suffix is whatever follows the last
``)``::

    row(lc)s+   -> id "row(lc)", viewport "s+"
    row(lc)     -> id "row(lc)", viewport ""
    ghost       -> id "ghost",   viewport ""

When the tables are known, ``box(sm)`` is also read as id ``box`` at
viewport ``sm`` provided ``box(sm)`` itself is not a utility id, ``box`` is,
and ``sm`` is a configured breakpoint.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from utilcss.config.model import StyleTables
from utilcss.stylesheet.model import UtilityToken

__all__ = ["ViewportGroups", "split_token", "group_by_viewport"]

# viewport -> {base id: token text used in the selector}
ViewportGroups = dict[str, dict[str, str]]

_PARENTHESIZED_VIEWPORT_RE = re.compile(r"^(?P<base>[^()\s]+)\((?P<viewport>[^()\s]+)\)$")


def split_token(token: str) -> UtilityToken:
    """Split *token* at its last ``)`` into base id and viewport suffix."""
    token = token.strip()
    close = token.rfind(")")
    if close == -1:
        return UtilityToken(base_id=token, viewport="")
    return UtilityToken(base_id=token[: close + 1], viewport=token[close + 1 :])


def _parenthesized_viewport(token: str, tables: StyleTables) -> UtilityToken | None:
    match = _PARENTHESIZED_VIEWPORT_RE.match(token)
    if match is None:
        return None
    base, viewport = match.group("base"), match.group("viewport")
    if tables.utility(base) is None or tables.breakpoint(viewport) is None:
        return None
    return UtilityToken(base_id=base, viewport=viewport)


def group_by_viewport(
    tokens: Iterable[str], tables: StyleTables | None = None
) -> ViewportGroups:
    """Group *tokens* by viewport suffix, collapsing repeated ids.

    The first occurrence of an id within a viewport wins.
    """
    groups: ViewportGroups = {}
    for raw in tokens:
        text = raw.strip()
        if not text:
            continue
        token = split_token(text)
        if tables is not None and not token.viewport and tables.utility(token.base_id) is None:
            token = _parenthesized_viewport(text, tables) or token
        groups.setdefault(token.viewport, {}).setdefault(token.base_id, text)
    return groups

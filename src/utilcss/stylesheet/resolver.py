"""Resolve grouped utility tokens against the utility dictionary."""

from __future__ import annotations

import logging

from utilcss.config.model import StyleTables
from utilcss.stylesheet.model import RuleFragment
from utilcss.stylesheet.tokens import ViewportGroups

__all__ = ["utility_selector", "resolve_utilities", "join_fragments"]

logger = logging.getLogger(__name__)


def utility_selector(attribute_name: str, token: str) -> str:
    """Attribute "contains word" selector matching *token*."""
    return f'[{attribute_name}~="{token}"]'


def resolve_utilities(
    groups: ViewportGroups, tables: StyleTables
) -> dict[str, list[RuleFragment]]:
    """Map every grouped id to a RuleFragment.

    Ids missing from the utility dictionary produce nothing. Within one
    viewport, fragments follow the utility dictionary's configured order.
    Viewports are resolved whether or not they are configured breakpoints;
    emission is decided by the media query assembler.
    """
    resolved: dict[str, list[RuleFragment]] = {}
    for viewport, ids in groups.items():
        fragments = [
            RuleFragment(
                selector=utility_selector(tables.attribute_name, ids[utility_id]),
                properties=properties,
            )
            for utility_id, properties in tables.utilities.items()
            if utility_id in ids
        ]
        missing = [utility_id for utility_id in ids if tables.utility(utility_id) is None]
        if missing:
            logger.debug("Unknown utilities for viewport %r: %s", viewport, ", ".join(missing))
        resolved[viewport] = fragments
    return resolved


def join_fragments(resolved: dict[str, list[RuleFragment]]) -> dict[str, str]:
    """Concatenate each viewport's fragments into one rule string."""
    return {
        viewport: "".join(str(fragment) for fragment in fragments)
        for viewport, fragments in resolved.items()
    }

"""Wrap resolved utility rules in ``@media`` blocks, in breakpoint order."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from utilcss.config.model import Breakpoint

__all__ = ["media_query_prelude", "assemble_media_queries"]

logger = logging.getLogger(__name__)


def media_query_prelude(breakpoint: Breakpoint) -> str:
    """``@media screen and (min-width: Npx)[ and (max-width: Mpx)]``"""
    prelude = f"@media screen and (min-width: {breakpoint.min}px)"
    if breakpoint.max is not None:
        prelude += f" and (max-width: {breakpoint.max}px)"
    return prelude


def assemble_media_queries(
    resolved_text: Mapping[str, str], breakpoints: Mapping[str, Breakpoint]
) -> str:
    """Emit one ``@media`` block per breakpoint that has resolved rules.

    Output order is the breakpoint table's order, never the order in which
    viewports were encountered. Viewports that are not breakpoints are
    dropped.
    """
    blocks: list[str] = []
    for viewport, breakpoint in breakpoints.items():
        rules = resolved_text.get(viewport, "")
        if rules:
            blocks.append(f"{media_query_prelude(breakpoint)}{{{rules}}}")

    unknown = [v for v, rules in resolved_text.items() if rules and v not in breakpoints]
    if unknown:
        logger.debug("Dropping rules for unconfigured viewports: %s", unknown)
    return "".join(blocks)

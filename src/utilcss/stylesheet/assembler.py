"""Assemble the complete stylesheet text from the tables and scanned markup.

Block order is fixed::

    :root{...}  tag{...}*  .class{...}*  @media ...{...}*

Blocks are concatenated without separators.
"""

from __future__ import annotations

from collections.abc import Iterable

from utilcss.config.model import StyleTables
from utilcss.stylesheet.media import assemble_media_queries
from utilcss.stylesheet.model import RuleFragment, serialize_declarations
from utilcss.stylesheet.resolver import join_fragments, resolve_utilities
from utilcss.stylesheet.tokens import group_by_viewport

__all__ = [
    "root_block",
    "element_blocks",
    "custom_class_blocks",
    "utility_media_queries",
    "assemble_stylesheet",
]


def root_block(tables: StyleTables) -> str:
    # Every root declaration keeps its ";", the last one included.
    return f":root{{{serialize_declarations(tables.root, trailing=True)}}}"


def element_blocks(tables: StyleTables) -> str:
    """One block per configured element, whether or not the markup uses it."""
    return "".join(
        str(RuleFragment(selector=tag, properties=properties))
        for tag, properties in tables.elements.items()
    )


def custom_class_blocks(tables: StyleTables, classes: Iterable[str]) -> str:
    """Blocks for referenced classes that exist in the custom dictionary.

    Each class is emitted once, in order of first reference.
    """
    blocks: list[str] = []
    seen: set[str] = set()
    for class_name in classes:
        if class_name in seen:
            continue
        seen.add(class_name)
        properties = tables.custom_class(class_name)
        if properties is None:
            continue
        blocks.append(str(RuleFragment(selector=f".{class_name}", properties=properties)))
    return "".join(blocks)


def utility_media_queries(tables: StyleTables, utility_tokens: Iterable[str]) -> str:
    groups = group_by_viewport(utility_tokens, tables)
    resolved = resolve_utilities(groups, tables)
    return assemble_media_queries(join_fragments(resolved), tables.breakpoints)


def assemble_stylesheet(
    tables: StyleTables, classes: Iterable[str], utility_tokens: Iterable[str]
) -> str:
    """Build the full stylesheet for one document."""
    return (
        root_block(tables)
        + element_blocks(tables)
        + custom_class_blocks(tables, classes)
        + utility_media_queries(tables, utility_tokens)
    )

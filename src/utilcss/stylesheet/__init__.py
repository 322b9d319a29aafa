from utilcss.stylesheet.model import RuleFragment, UtilityToken, serialize_declarations
from utilcss.stylesheet.tokens import ViewportGroups, group_by_viewport, split_token
from utilcss.stylesheet.resolver import resolve_utilities, utility_selector
from utilcss.stylesheet.media import assemble_media_queries, media_query_prelude
from utilcss.stylesheet.assembler import assemble_stylesheet

__all__ = [
    "RuleFragment",
    "UtilityToken",
    "serialize_declarations",
    "ViewportGroups",
    "group_by_viewport",
    "split_token",
    "resolve_utilities",
    "utility_selector",
    "assemble_media_queries",
    "media_query_prelude",
    "assemble_stylesheet",
]

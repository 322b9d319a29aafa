"""Tests for utility resolution and media query assembly."""

from types import MappingProxyType

from utilcss.config.model import Breakpoint
from utilcss.stylesheet import (
    RuleFragment,
    assemble_media_queries,
    group_by_viewport,
    media_query_prelude,
    resolve_utilities,
    utility_selector,
)
from utilcss.stylesheet.resolver import join_fragments


# ---------------------------------------------------------------------------
# resolve_utilities
# ---------------------------------------------------------------------------


class TestResolveUtilities:
    def test_selector_uses_full_token(self):
        assert utility_selector("data-util", "row(lc)s+") == '[data-util~="row(lc)s+"]'

    def test_known_id_resolves(self, tables):
        resolved = resolve_utilities(group_by_viewport(["row(lc)s+"]), tables)
        assert resolved == {
            "s+": [
                RuleFragment(
                    selector='[data-util~="row(lc)s+"]',
                    properties=(("display", "flex"), ("align-items", "center")),
                )
            ]
        }

    def test_unknown_id_dropped(self, tables):
        resolved = resolve_utilities(group_by_viewport(["ghost(x)s+"]), tables)
        assert resolved == {"s+": []}

    def test_unknown_viewport_still_resolved(self, tables):
        resolved = resolve_utilities(group_by_viewport(["row(lc)zz"]), tables)
        assert len(resolved["zz"]) == 1

    def test_fragments_follow_dictionary_order(self, tables):
        groups = group_by_viewport(["box(sm)", "row(lc)sm"], tables)
        resolved = resolve_utilities(groups, tables)
        selectors = [f.selector for f in resolved["sm"]]
        assert selectors == ['[data-util~="row(lc)sm"]', '[data-util~="box(sm)"]']

    def test_repeated_id_single_fragment(self, tables):
        resolved = resolve_utilities(group_by_viewport(["row(lc)m", "row(lc)m"]), tables)
        assert len(resolved["m"]) == 1

    def test_join_fragments(self, tables):
        resolved = resolve_utilities(group_by_viewport(["row(lc)m"]), tables)
        assert join_fragments(resolved) == {
            "m": '[data-util~="row(lc)m"]{display:flex;align-items:center}'
        }


# ---------------------------------------------------------------------------
# assemble_media_queries
# ---------------------------------------------------------------------------


def _breakpoints(*points: Breakpoint):
    return MappingProxyType({p.name: p for p in points})


class TestMediaQueryPrelude:
    def test_min_only(self):
        assert media_query_prelude(Breakpoint("s+", 0)) == "@media screen and (min-width: 0px)"

    def test_min_and_max(self):
        prelude = media_query_prelude(Breakpoint("m", 600, 1023))
        assert prelude == "@media screen and (min-width: 600px) and (max-width: 1023px)"


class TestAssembleMediaQueries:
    def test_breakpoint_order_not_encounter_order(self):
        breakpoints = _breakpoints(Breakpoint("s", 0), Breakpoint("m", 600), Breakpoint("l", 1024))
        text = assemble_media_queries({"l": "L{}", "s": "S{}"}, breakpoints)
        assert text == (
            "@media screen and (min-width: 0px){S{}}"
            "@media screen and (min-width: 1024px){L{}}"
        )

    def test_unknown_viewport_dropped(self):
        breakpoints = _breakpoints(Breakpoint("s", 0))
        assert assemble_media_queries({"zz": "Z{}"}, breakpoints) == ""

    def test_empty_rules_dropped(self):
        breakpoints = _breakpoints(Breakpoint("s", 0))
        assert assemble_media_queries({"s": ""}, breakpoints) == ""

    def test_max_clause(self):
        breakpoints = _breakpoints(Breakpoint("m", 600, 1023))
        text = assemble_media_queries({"m": "a{b:c}"}, breakpoints)
        assert text == "@media screen and (min-width: 600px) and (max-width: 1023px){a{b:c}}"

    def test_no_input(self):
        assert assemble_media_queries({}, _breakpoints(Breakpoint("s", 0))) == ""

"""CSSParser: scan markup, build its stylesheet and inject it."""

from __future__ import annotations

import logging

from utilcss.config.loader import load_tables
from utilcss.config.model import StyleTables
from utilcss.config.settings import ParserSettings
from utilcss.document import StyleInjector
from utilcss.scanner import scan_markup
from utilcss.stylesheet.assembler import assemble_stylesheet

__all__ = ["CSSParser"]

logger = logging.getLogger(__name__)


class CSSParser:
    """Adds a generated ``<style>`` to HTML documents.

    Tables are loaded once, at construction; a ConfigLoadError raised here
    means no parser exists. After that ``parse`` never fails, and the
    parser holds no per-call state, so one instance may serve many threads.

    Usage::

        parser = CSSParser(ParserSettings(config_dir="configs"))
        html = parser.parse('<html><body data-util="row(lc)s+"></body></html>')
    """

    def __init__(
        self,
        settings: ParserSettings | None = None,
        *,
        tables: StyleTables | None = None,
    ) -> None:
        self.settings = settings or ParserSettings()
        self.tables = tables if tables is not None else load_tables(self.settings)
        self._injector = StyleInjector(self.settings.html_parser)

    @classmethod
    def from_tables(
        cls, tables: StyleTables, settings: ParserSettings | None = None
    ) -> CSSParser:
        return cls(settings, tables=tables)

    def build_stylesheet(self, markup: str) -> str:
        """Return the stylesheet *markup* needs, without touching the markup."""
        scanned = scan_markup(
            markup,
            self.tables.attribute_name,
            self.settings.class_attributes,
        )
        logger.debug(
            "Scanned %d class tokens and %d utility tokens",
            len(scanned.classes),
            len(scanned.utilities),
        )
        return assemble_stylesheet(self.tables, scanned.classes, scanned.utilities)

    def parse(self, markup: str) -> str:
        """Return *markup* with the generated stylesheet appended to its style element.

        Not idempotent: parsing the output again appends a second copy.
        """
        css = self.build_stylesheet(markup)
        return self._injector.inject_markup(markup, css)

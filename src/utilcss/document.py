"""Place generated CSS into a parsed HTML document.

Tree building and serialization are delegated to BeautifulSoup. The
``html.parser`` builder never raises on malformed markup; it produces a
best-effort tree instead.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag
from bs4.element import Stylesheet

__all__ = ["parse_document", "find_or_create_head", "find_or_create_style", "StyleInjector"]


def parse_document(markup: str, html_parser: str = "html.parser") -> BeautifulSoup:
    return BeautifulSoup(markup, html_parser)


def _root_element(soup: BeautifulSoup) -> Tag:
    html = soup.find("html")
    if isinstance(html, Tag):
        return html
    for child in soup.children:
        if isinstance(child, Tag):
            return child
    return soup


def find_or_create_head(soup: BeautifulSoup) -> Tag:
    """Return the first ``head``, appending a new one to the root if absent."""
    head = soup.find("head")
    if isinstance(head, Tag):
        return head
    head = soup.new_tag("head")
    _root_element(soup).append(head)
    return head


def find_or_create_style(soup: BeautifulSoup, head: Tag) -> Tag:
    """Return the first ``style`` anywhere in *soup*, else a new one in *head*."""
    style = soup.find("style")
    if isinstance(style, Tag):
        return style
    style = soup.new_tag("style")
    head.append(style)
    return style


class StyleInjector:
    """Appends stylesheet text to a document's style element.

    Text is appended, never replaced: injecting into a document that was
    already processed accumulates a second stylesheet.
    """

    def __init__(self, html_parser: str = "html.parser") -> None:
        self._html_parser = html_parser

    def inject(self, soup: BeautifulSoup, css: str) -> Tag:
        head = find_or_create_head(soup)
        style = find_or_create_style(soup, head)
        style.append(soup.new_string(css, Stylesheet))
        return style

    def inject_markup(self, markup: str, css: str) -> str:
        """Parse *markup*, inject *css* and serialize the result."""
        soup = parse_document(markup, self._html_parser)
        self.inject(soup, css)
        return str(soup)

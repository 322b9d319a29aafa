"""utilcss: generate and inject stylesheets from utility attributes."""

from utilcss.config import Breakpoint, ParserSettings, StyleTables, load_tables
from utilcss.errors import ConfigLoadError, UtilCSSError
from utilcss.parser import CSSParser

__version__ = "0.1.0"

__all__ = [
    "Breakpoint",
    "ParserSettings",
    "StyleTables",
    "load_tables",
    "ConfigLoadError",
    "UtilCSSError",
    "CSSParser",
    "__version__",
]

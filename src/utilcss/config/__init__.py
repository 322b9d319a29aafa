from utilcss.config.model import Breakpoint, StyleDictionary, StyleTables
from utilcss.config.settings import ParserSettings
from utilcss.config.loader import load_tables, read_ini

__all__ = [
    "Breakpoint",
    "StyleDictionary",
    "StyleTables",
    "ParserSettings",
    "load_tables",
    "read_ini",
]

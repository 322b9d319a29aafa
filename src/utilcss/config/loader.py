"""Load the style tables from an INI configuration directory.

Layout (one file per table, names configurable via ParserSettings)::

    config.ini        attributeName = data-util
    root.ini          --primary = #0af
    elements.ini      [body]
                      margin = 0
    custom.ini        [header-hero]
                      margin = 0
    utilities.ini     [row(lc)]
                      display = flex
    resolutions.ini   [s+]
                      min = 0
                      max = 599

``config.ini`` and ``root.ini`` are flat; the others have one section per
identifier. Section and key order is preserved.
"""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from types import MappingProxyType

from utilcss.config.model import (
    Breakpoint,
    StyleTables,
    freeze_declarations,
    freeze_dictionary,
)
from utilcss.config.settings import ParserSettings
from utilcss.errors import ConfigLoadError

__all__ = ["load_tables", "read_ini"]

logger = logging.getLogger(__name__)

# Section name used to hold keys of flat files.
_TOP_LEVEL = "__top__"
# Keeps configparser from treating a [DEFAULT] section specially.
_NO_DEFAULTS = "\x00defaults"


def _new_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        interpolation=None,
        delimiters=("=",),
        default_section=_NO_DEFAULTS,
        strict=False,
        inline_comment_prefixes=(";",),
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def read_ini(path: Path, *, flat: bool = False) -> dict[str, dict[str, str]]:
    """Decode one INI file into ``{section: {key: value}}``.

    With ``flat=True`` the keys before the first section header are returned
    under the ``"__top__"`` section. Raises ConfigLoadError on any failure.
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"Failed to read {path}: {exc}", path=path, cause=exc) from exc

    if flat:
        text = f"[{_TOP_LEVEL}]\n{text}"

    parser = _new_parser()
    try:
        parser.read_string(text, source=str(path))
    except configparser.Error as exc:
        raise ConfigLoadError(f"Failed to parse {path}: {exc}", path=path, cause=exc) from exc

    return {
        section: {key: _unquote(value) for key, value in parser.items(section)}
        for section in parser.sections()
    }


def _read_flat(path: Path) -> dict[str, str]:
    data = read_ini(path, flat=True)
    sections = [section for section in data if section != _TOP_LEVEL]
    if sections:
        raise ConfigLoadError(
            f"{path} must not contain sections, found: {', '.join(sections)}", path=path
        )
    return data.get(_TOP_LEVEL, {})


def _parse_pixels(raw: str, *, viewport: str, key: str, path: Path) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigLoadError(
            f"Breakpoint {viewport!r} in {path}: {key} must be an integer, got {raw!r}",
            path=path,
            cause=exc,
        ) from exc


def _read_breakpoints(path: Path) -> dict[str, Breakpoint]:
    breakpoints: dict[str, Breakpoint] = {}
    for viewport, ranges in read_ini(path).items():
        if "min" not in ranges:
            raise ConfigLoadError(
                f"Breakpoint {viewport!r} in {path} has no min width", path=path
            )
        minimum = _parse_pixels(ranges["min"], viewport=viewport, key="min", path=path)
        maximum = None
        if "max" in ranges:
            maximum = _parse_pixels(ranges["max"], viewport=viewport, key="max", path=path)
        breakpoints[viewport] = Breakpoint(name=viewport, min=minimum, max=maximum)
    return breakpoints


def load_tables(settings: ParserSettings | None = None) -> StyleTables:
    """Read every table named by *settings* and return them frozen.

    Any missing or undecodable file aborts the whole load with
    ConfigLoadError; no partially filled tables are ever returned.
    """
    settings = settings or ParserSettings()

    general_path = settings.path_for(settings.settings_file)
    general = _read_flat(general_path)
    attribute_name = general.get("attributeName", "").strip()
    if not attribute_name:
        raise ConfigLoadError(f"{general_path} does not define attributeName", path=general_path)

    root = _read_flat(settings.path_for(settings.root_file))
    elements = read_ini(settings.path_for(settings.elements_file))
    custom = read_ini(settings.path_for(settings.custom_file))
    utilities = read_ini(settings.path_for(settings.utilities_file))
    breakpoints = _read_breakpoints(settings.path_for(settings.resolutions_file))

    tables = StyleTables(
        attribute_name=attribute_name,
        root=freeze_declarations(root),
        elements=freeze_dictionary(elements),
        custom=freeze_dictionary(custom),
        utilities=freeze_dictionary(utilities),
        breakpoints=MappingProxyType(breakpoints),
    )
    logger.info(
        "Loaded style tables from %s: %d root, %d elements, %d custom, %d utilities, %d breakpoints",
        settings.config_dir,
        len(tables.root),
        len(tables.elements),
        len(tables.custom),
        len(tables.utilities),
        len(tables.breakpoints),
    )
    return tables

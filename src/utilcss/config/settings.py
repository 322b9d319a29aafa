from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ParserSettings:
    """Where the style tables live and how markup is read."""

    config_dir: str = "configs"
    settings_file: str = "config.ini"
    root_file: str = "root.ini"
    elements_file: str = "elements.ini"
    custom_file: str = "custom.ini"
    utilities_file: str = "utilities.ini"
    resolutions_file: str = "resolutions.ini"
    class_attributes: tuple[str, ...] = ("class", "element")
    html_parser: str = "html.parser"  # BeautifulSoup tree builder

    def path_for(self, file_name: str) -> Path:
        return Path(self.config_dir) / file_name

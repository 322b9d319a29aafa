"""Shared fixtures for utilcss tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from utilcss.config.model import StyleTables

FIXTURES = Path(__file__).parent / "fixtures"
CONFIG_DIR = FIXTURES / "configs"
BROKEN_CONFIG_DIR = FIXTURES / "broken_configs"


@pytest.fixture()
def tables() -> StyleTables:
    return StyleTables.from_mappings(
        attribute_name="data-util",
        root={"--primary": "#0af", "--spacing": "8px"},
        elements={"body": {"margin": "0"}, "div": {"color": "red"}},
        custom={
            "header-hero": {"margin": "0"},
            "card": {"padding": "var(--spacing)", "border-radius": "4px"},
        },
        utilities={
            "row(lc)": {"display": "flex", "align-items": "center"},
            "box": {"display": "flex"},
            "hide": {"display": "none"},
        },
        breakpoints={
            "s+": {"min": 0},
            "m+": {"min": 600},
            "m": {"min": 600, "max": 1023},
            "sm": {"min": 0},
        },
    )


@pytest.fixture()
def config_dir() -> Path:
    return CONFIG_DIR


@pytest.fixture()
def broken_config_dir() -> Path:
    return BROKEN_CONFIG_DIR

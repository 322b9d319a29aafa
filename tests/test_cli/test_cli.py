"""Tests for the utilcss CLI commands."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from utilcss import __version__
from utilcss.cli.main import cli

MARKUP = '<html><head></head><body class="card" data-util="row(lc)s+"></body></html>'


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "css" in result.output
        assert "check" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_to_stdout(self, config_dir: Path) -> None:
        result = CliRunner().invoke(cli, ["build", "-", "--config", str(config_dir)], input=MARKUP)
        assert result.exit_code == 0, result.output
        assert "<style>:root{--primary:#0af;--spacing:8px;}" in result.output
        assert '[data-util~="row(lc)s+"]{display:flex;align-items:center}' in result.output

    def test_build_to_file(self, config_dir: Path, tmp_path: Path) -> None:
        source = tmp_path / "page.html"
        source.write_text(MARKUP, encoding="utf-8")
        target = tmp_path / "out.html"
        result = CliRunner().invoke(
            cli, ["build", str(source), "--config", str(config_dir), "-o", str(target)]
        )
        assert result.exit_code == 0, result.output
        assert ".card{padding:var(--spacing);border-radius:4px}" in target.read_text(encoding="utf-8")

    def test_build_with_broken_config(self, broken_config_dir: Path) -> None:
        result = CliRunner().invoke(
            cli, ["build", "-", "--config", str(broken_config_dir)], input=MARKUP
        )
        assert result.exit_code == 1
        assert "Config error" in result.output


# ---------------------------------------------------------------------------
# css
# ---------------------------------------------------------------------------


class TestCssCommand:
    def test_prints_only_stylesheet(self, config_dir: Path) -> None:
        result = CliRunner().invoke(cli, ["css", "-", "--config", str(config_dir)], input=MARKUP)
        assert result.exit_code == 0, result.output
        assert result.output.startswith(":root{")
        assert "<html>" not in result.output


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_summary(self, config_dir: Path) -> None:
        result = CliRunner().invoke(cli, ["check", "--config", str(config_dir)])
        assert result.exit_code == 0, result.output
        assert "Attribute:   data-util" in result.output
        assert "Utilities:   4" in result.output
        assert "m: @media screen and (min-width: 600px) and (max-width: 1023px)" in result.output

    def test_missing_directory(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["check", "--config", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "Config error" in result.output

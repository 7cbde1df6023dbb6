"""Tests for the mdterm command line."""

import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdterm.cli import cli


@pytest.fixture
def config_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield str(Path(tmpdir) / "config.yaml")


def _run(config_path, *args, **kwargs):
    return CliRunner().invoke(cli, ["--config", config_path, *args], **kwargs)


def test_render_file(config_path, tmp_path):
    doc = tmp_path / "doc.md"
    doc.write_text("# Hello\n\n- one\n- two\n", encoding="utf-8")

    result = _run(config_path, "render", str(doc), "--width", "40")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "  ◆ Hello"
    assert "  • one" in lines
    assert "  • two" in lines


def test_render_stdin(config_path):
    result = _run(config_path, "render", "-w", "30", "-i", "0", input="some *text*\n")

    assert result.exit_code == 0
    assert result.output.splitlines() == ["some text"]


def test_render_missing_file(config_path):
    result = _run(config_path, "render", "/nonexistent/doc.md")

    assert result.exit_code == 1
    assert "cannot read" in result.output


def test_render_non_utf8_file(config_path, tmp_path):
    doc = tmp_path / "bin.md"
    doc.write_bytes(b"\xff\xfe\xfa")

    result = _run(config_path, "render", str(doc))

    assert result.exit_code == 1
    assert "not UTF-8" in result.output


def test_highlight_uses_suffix(config_path, tmp_path):
    src = tmp_path / "main.rs"
    src.write_text("fn main() {}\n", encoding="utf-8")

    result = _run(config_path, "highlight", str(src), "-w", "30")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("  ┌─ rs ")
    assert "fn main() {}" in lines[1]


def test_themes_lists_all(config_path):
    result = _run(config_path, "themes")

    assert result.exit_code == 0
    for name in ("dark", "light", "midnight", "nord", "monokai"):
        assert name in result.output
    assert "* midnight" in result.output


def test_set_theme(config_path):
    result = _run(config_path, "set-theme", "nord")

    assert result.exit_code == 0
    assert "theme set to nord" in result.output
    assert "* nord" in _run(config_path, "themes").output


def test_set_unknown_theme(config_path):
    result = _run(config_path, "set-theme", "neon")

    assert result.exit_code == 1
    assert "unknown theme" in result.output

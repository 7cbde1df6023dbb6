"""Tests for mdterm.render.code_block."""

from rich.style import Style

from mdterm.render.code_block import CodeBlockRenderer, render_code_block
from mdterm.render.output import line_plain
from mdterm.render.theme import DEFAULT_THEME
from mdterm.render.width import display_width


def _plain(lines):
    return [line_plain(line) for line in lines]


def test_frame_at_width_20():
    lines = _plain(render_code_block("x = 1", "python", DEFAULT_THEME, 20))
    assert lines[0] == "┌─ python " + "─" * 10
    assert lines[1] == "│ x = 1" + " " * 11 + " │"
    assert lines[2] == "└" + "─" * 19
    assert all(len(line) == 20 for line in lines)


def test_placeholder_label():
    top = _plain(render_code_block("x", "", DEFAULT_THEME, 20))[0]
    assert top.startswith("┌─ code ")


def test_multiline_code():
    lines = _plain(render_code_block("def foo():\n    return 42\n", "python", DEFAULT_THEME, 30))
    assert len(lines) == 4
    assert "def foo" in lines[1]
    assert "return 42" in lines[2]


def test_tabs_expand():
    lines = _plain(render_code_block("\tx", "go", DEFAULT_THEME, 20))
    assert lines[1].startswith("│     x")
    assert "\t" not in lines[1]


def test_custom_tab_width():
    block = CodeBlockRenderer(DEFAULT_THEME, 20, tab_width=2)
    block.open("go")
    block.feed("\tx")
    rows = _plain(block.close())
    assert rows[0].startswith("│   x ")


def test_long_line_wraps_at_inner_width():
    code = "a" * 40
    lines = _plain(render_code_block(code, "", DEFAULT_THEME, 20))
    # top, three rows of 16/16/8, bottom
    assert len(lines) == 5
    assert lines[1] == "│ " + "a" * 16 + " │"
    assert lines[3] == "│ " + "a" * 8 + " " * 8 + " │"


def test_wide_characters_fill_inner_width():
    lines = render_code_block("中文" * 10, "", DEFAULT_THEME, 20)
    # borders are sized by glyph count
    assert len(line_plain(lines[0])) == 20
    assert len(line_plain(lines[-1])) == 20
    for row in lines[1:-1]:
        code = sum(display_width(seg.text) for seg in row[1:-1])
        fill = len(row[-1].text) - len(" │")
        assert code + fill == 16


def test_only_newlines_split_rows():
    lines = _plain(render_code_block("a b\x0cc\n", "", DEFAULT_THEME, 20))
    assert len(lines) == 3
    assert lines[1].startswith("│ a b\x0cc")


def test_crlf_and_blank_lines():
    lines = _plain(render_code_block("a\r\n\r\nb\r\n", "", DEFAULT_THEME, 20))
    assert lines[1:-1] == [
        "│ a" + " " * 15 + " │",
        "│ " + " " * 16 + " │",
        "│ b" + " " * 15 + " │",
    ]


def test_background_on_code_segments():
    lines = render_code_block("let x = 1;", "rust", DEFAULT_THEME, 30)
    row = lines[1]
    bg = Style(bgcolor=DEFAULT_THEME.code_bg).bgcolor
    for seg in row[1:]:
        assert seg.style.bgcolor == bg


def test_empty_code_gives_only_borders():
    lines = render_code_block("", "python", DEFAULT_THEME, 20)
    assert len(lines) == 2


def test_close_resets_state():
    block = CodeBlockRenderer(DEFAULT_THEME, 20)
    block.open("python")
    assert block.active
    assert block.language == "python"
    block.feed("x")
    block.close()
    assert not block.active
    assert block.language == ""

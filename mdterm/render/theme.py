"""Markdown colour themes: named style roles read by the renderer."""

import logging
from dataclasses import dataclass

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkdownTheme:
    """Every colour role the markdown renderer reads."""

    name: str
    display_name: str

    # Prose
    text_normal: str
    text_bold: str

    # Headings and block structure
    md_h1: str
    md_h2: str
    md_h3: str
    md_h4: str
    md_heading_sep: str
    md_inline_code_fg: str
    md_inline_code_bg: str
    md_list_bullet: str
    md_blockquote_bar: str
    md_blockquote_text: str
    md_rule: str

    # Fenced code
    code_border: str
    code_bg: str
    code_default: str
    code_keyword: str
    code_string: str
    code_comment: str
    code_number: str
    code_type: str
    code_primitive: str
    code_macro: str
    code_attribute: str
    code_lifetime: str
    code_shell_var: str

    # Tables
    table_border: str
    table_header: str
    table_body: str


MIDNIGHT = MarkdownTheme(
    name="midnight",
    display_name="Midnight (default)",
    text_normal="#dcdce6",
    text_bold="#dcf5e6",
    md_h1="#64b4ff",
    md_h2="#82beff",
    md_h3="#a0c8ff",
    md_h4="#b4d2ff",
    md_heading_sep="#3c4664",
    md_inline_code_fg="#e6be78",
    md_inline_code_bg="#2d2d3c",
    md_list_bullet="#64a0ff",
    md_blockquote_bar="#50648c",
    md_blockquote_text="#96a0b4",
    md_rule="#464b5a",
    code_border="#505a6e",
    code_bg="#1e1e2a",
    code_default="#abb2bf",
    code_keyword="#c678dd",
    code_string="#98c379",
    code_comment="#5c6370",
    code_number="#d19a66",
    code_type="#e5c07b",
    code_primitive="#56b6c2",
    code_macro="#61afef",
    code_attribute="#56b6c2",
    code_lifetime="#e5c07b",
    code_shell_var="#56b6c2",
    table_border="#3c4664",
    table_header="#78b4ff",
    table_body="#b4b4c8",
)

DARK = MarkdownTheme(
    name="dark",
    display_name="Dark",
    text_normal="#d4d4d4",
    text_bold="#d2f0dc",
    md_h1="#50a0f0",
    md_h2="#64aaf0",
    md_h3="#78b4f0",
    md_h4="#8cbef0",
    md_heading_sep="#3c3c50",
    md_inline_code_fg="#dcb46e",
    md_inline_code_bg="#32323c",
    md_list_bullet="#5096f0",
    md_blockquote_bar="#465a82",
    md_blockquote_text="#9696aa",
    md_rule="#464650",
    code_border="#464650",
    code_bg="#232326",
    code_default="#d4d4d4",
    code_keyword="#c678dd",
    code_string="#98c379",
    code_comment="#6a737d",
    code_number="#d19a66",
    code_type="#e5c07b",
    code_primitive="#56b6c2",
    code_macro="#61afef",
    code_attribute="#56b6c2",
    code_lifetime="#e5c07b",
    code_shell_var="#56b6c2",
    table_border="#3c3c50",
    table_header="#50a0f0",
    table_body="#aaaaaa",
)

LIGHT = MarkdownTheme(
    name="light",
    display_name="Light",
    text_normal="#282832",
    text_bold="#1e643c",
    md_h1="#1e50b4",
    md_h2="#2864c8",
    md_h3="#326ed2",
    md_h4="#3c78dc",
    md_heading_sep="#b4bed2",
    md_inline_code_fg="#a0501e",
    md_inline_code_bg="#f0ebe1",
    md_list_bullet="#1e64c8",
    md_blockquote_bar="#6482b4",
    md_blockquote_text="#505a6e",
    md_rule="#bec3d2",
    code_border="#bec3d2",
    code_bg="#f5f5f8",
    code_default="#282832",
    code_keyword="#af00db",
    code_string="#a31515",
    code_comment="#008000",
    code_number="#098658",
    code_type="#267f99",
    code_primitive="#0070c1",
    code_macro="#795e26",
    code_attribute="#0070c1",
    code_lifetime="#267f99",
    code_shell_var="#0070c1",
    table_border="#b4bed2",
    table_header="#1e50b4",
    table_body="#3c3c50",
)

NORD = MarkdownTheme(
    name="nord",
    display_name="Nord",
    text_normal="#d8dee9",
    text_bold="#d2ebdc",
    md_h1="#88c0d0",
    md_h2="#81a1c1",
    md_h3="#8fbcbb",
    md_h4="#b2baca",
    md_heading_sep="#434c5e",
    md_inline_code_fg="#ebcb8b",
    md_inline_code_bg="#3b4252",
    md_list_bullet="#81a1c1",
    md_blockquote_bar="#4c566a",
    md_blockquote_text="#a0aab9",
    md_rule="#434c5e",
    code_border="#4c566a",
    code_bg="#2e3440",
    code_default="#d8dee9",
    code_keyword="#b48ead",
    code_string="#a3be8c",
    code_comment="#616e80",
    code_number="#d08770",
    code_type="#ebcb8b",
    code_primitive="#8fbcbb",
    code_macro="#88c0d0",
    code_attribute="#8fbcbb",
    code_lifetime="#ebcb8b",
    code_shell_var="#8fbcbb",
    table_border="#434c5e",
    table_header="#88c0d0",
    table_body="#b2baca",
)

MONOKAI = MarkdownTheme(
    name="monokai",
    display_name="Monokai",
    text_normal="#f8f8f2",
    text_bold="#d7f5e1",
    md_h1="#f92672",
    md_h2="#66d9ef",
    md_h3="#a6e22e",
    md_h4="#e6db74",
    md_heading_sep="#505046",
    md_inline_code_fg="#e6db74",
    md_inline_code_bg="#37372d",
    md_list_bullet="#f92672",
    md_blockquote_bar="#75715e",
    md_blockquote_text="#aaaaa0",
    md_rule="#505046",
    code_border="#505046",
    code_bg="#272822",
    code_default="#f8f8f2",
    code_keyword="#f92672",
    code_string="#e6db74",
    code_comment="#75715e",
    code_number="#ae81ff",
    code_type="#a6e22e",
    code_primitive="#66d9ef",
    code_macro="#66d9ef",
    code_attribute="#a6e22e",
    code_lifetime="#ae81ff",
    code_shell_var="#66d9ef",
    table_border="#505046",
    table_header="#66d9ef",
    table_body="#bebeb4",
)

# Cycle order used when stepping through themes.
THEMES: dict[str, MarkdownTheme] = {
    t.name: t for t in (DARK, LIGHT, MIDNIGHT, NORD, MONOKAI)
}

DEFAULT_THEME = MIDNIGHT


def get_theme(name: str | None) -> MarkdownTheme:
    """Look up a theme by name (case-insensitive), falling back to the default."""
    if not name:
        return DEFAULT_THEME
    theme = THEMES.get(name.strip().lower())
    if theme is None:
        _log.warning("unknown theme %r -- using %s", name, DEFAULT_THEME.name)
        return DEFAULT_THEME
    return theme


def next_theme_name(name: str) -> str:
    """Name of the theme after ``name`` in cycle order."""
    names = list(THEMES)
    current = get_theme(name).name
    return names[(names.index(current) + 1) % len(names)]

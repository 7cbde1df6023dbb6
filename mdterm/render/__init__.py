"""Markdown rendering engine: events in, width-bounded styled lines out."""

from .theme import THEMES, DEFAULT_THEME, MarkdownTheme, get_theme, next_theme_name
from .width import char_width, display_width, wrap_text, truncate_to_width
from .events import Event, EventKind, Tag, Alignment, parse_events, preprocess_cjk_emphasis
from .style_stack import StyleStack
from .highlight import highlight_code_line
from .code_block import CodeBlockRenderer, render_code_block
from .table import TableLayout, compute_column_widths
from .markdown import MarkdownRenderer, RenderState, render_events, render_markdown
from .output import line_plain, line_to_text, lines_to_text, print_lines

__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "MarkdownTheme",
    "get_theme",
    "next_theme_name",
    "char_width",
    "display_width",
    "wrap_text",
    "truncate_to_width",
    "Event",
    "EventKind",
    "Tag",
    "Alignment",
    "parse_events",
    "preprocess_cjk_emphasis",
    "StyleStack",
    "highlight_code_line",
    "CodeBlockRenderer",
    "render_code_block",
    "TableLayout",
    "compute_column_widths",
    "MarkdownRenderer",
    "RenderState",
    "render_events",
    "render_markdown",
    "line_plain",
    "line_to_text",
    "lines_to_text",
    "print_lines",
]

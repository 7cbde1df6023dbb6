"""Markdown -> styled terminal lines.

The renderer walks the parser's event stream once, keeping all mutable
layout state in a RenderState. Prose is wrapped to the content width as
it arrives; code blocks and tables are buffered and laid out when they
close. Output lines are lists of rich Segments.
"""

import logging
from dataclasses import dataclass, field

from rich.segment import Segment
from rich.style import Style

from .code_block import TAB_WIDTH, CodeBlockRenderer
from .events import Event, EventKind, Tag, parse_events, strip_zero_width
from .style_stack import StyleStack
from .table import TableLayout
from .theme import DEFAULT_THEME, MarkdownTheme
from .width import display_width, wrap_text

_log = logging.getLogger(__name__)

Line = list[Segment]

HEADING_GLYPHS = {1: "◆ ", 2: "◇ ", 3: "▸ ", 4: "▹ "}
HEADING_RULES = {1: "━", 2: "─"}
RULE_GLYPH = "─"
BULLET = "• "
QUOTE_BAR = "| "
QUOTE_PREFIX_WIDTH = 2


@dataclass
class RenderState:
    """Cross-event layout state for one rendering pass."""

    list_depth: int = 0
    # one entry per open list: next ordinal, or None for bullet lists
    counters: list[int | None] = field(default_factory=list)
    heading_level: int | None = None
    heading_prefix_pending: bool = False
    quote_depth: int = 0
    current: Line = field(default_factory=list)
    current_has_bar: bool = False

    @property
    def in_quote(self) -> bool:
        return self.quote_depth > 0

    @property
    def ordered_index(self) -> int | None:
        return self.counters[-1] if self.counters else None


class MarkdownRenderer:
    """One pass of the event stream into an append-only list of lines.

    Instances are single-use; call :func:`render_markdown` or
    :func:`render_events` instead of driving this directly.
    """

    def __init__(
        self,
        content_width: int,
        theme: MarkdownTheme = DEFAULT_THEME,
        tab_width: int = TAB_WIDTH,
    ):
        self.width = max(content_width, 0)
        self.theme = theme
        self.lines: list[Line] = []
        self.state = RenderState()
        self.styles = StyleStack(Style(color=theme.text_normal))
        self.code = CodeBlockRenderer(theme, self.width, tab_width)
        self.table = TableLayout(theme, self.width)
        self._bar_style = Style(color=theme.md_blockquote_bar)

    # -- line buffer -----------------------------------------------------

    def flush(self) -> None:
        """Move the pending line into the output; no-op when empty."""
        st = self.state
        if st.current:
            self.lines.append(st.current)
        st.current = []
        st.current_has_bar = False

    def _begin_line(self) -> None:
        """Open the pending line with the quote bar when inside a quote."""
        st = self.state
        if not st.current and st.in_quote:
            st.current.append(Segment(QUOTE_BAR, self._bar_style))
            st.current_has_bar = True

    def _has_content(self) -> bool:
        st = self.state
        return len(st.current) > (1 if st.current_has_bar else 0)

    def _current_width(self) -> int:
        return sum(display_width(seg.text) for seg in self.state.current)

    def _full_width(self) -> int:
        prefix = QUOTE_PREFIX_WIDTH if self.state.in_quote else 0
        return max(self.width - prefix, 0)

    def _append(self, text: str, style: Style | None) -> None:
        self._begin_line()
        self.state.current.append(Segment(text, style))

    def _blank_line(self) -> None:
        self.lines.append([])

    # -- dispatch --------------------------------------------------------

    def feed(self, event: Event) -> None:
        kind = event.kind
        if kind is EventKind.START:
            getattr(self, f"_start_{event.tag.name.lower()}")(event)
        elif kind is EventKind.END:
            getattr(self, f"_end_{event.tag.name.lower()}")(event)
        elif kind is EventKind.TEXT:
            self._on_text(event.text)
        elif kind is EventKind.CODE:
            self._on_inline_code(event.text)
        elif kind is EventKind.SOFT_BREAK:
            self._on_soft_break()
        elif kind is EventKind.HARD_BREAK:
            self._on_hard_break()
        elif kind is EventKind.RULE:
            self.flush()
            self.lines.append([Segment(RULE_GLYPH * self.width, Style(color=self.theme.md_rule))])

    def finish(self) -> list[Line]:
        """Flush trailing state and return the rendered lines."""
        self.flush()
        if self.code.active:
            self.lines.extend(self.code.close())
        if self.table.active:
            self.lines.extend(self.table.close())
        return self.lines

    # -- headings --------------------------------------------------------

    def _heading_color(self, level: int) -> str:
        t = self.theme
        return {1: t.md_h1, 2: t.md_h2, 3: t.md_h3}.get(level, t.md_h4)

    def _start_heading(self, event: Event) -> None:
        self.flush()
        if self.lines:
            self._blank_line()
        st = self.state
        st.heading_level = event.level
        st.heading_prefix_pending = True
        color = self._heading_color(event.level)
        if event.level <= 2:
            self.styles.push(Style(color=color, bold=True, underline=True))
        else:
            self.styles.push(Style(color=color))

    def _end_heading(self, event: Event) -> None:
        self.flush()
        level = event.level or self.state.heading_level or 0
        if level in HEADING_RULES:
            self.lines.append([
                Segment(HEADING_RULES[level] * self.width, Style(color=self.theme.md_heading_sep)),
            ])
        self.styles.pop()
        self.state.heading_level = None
        self.state.heading_prefix_pending = False

    # -- inline scopes ---------------------------------------------------

    def _start_strong(self, event: Event) -> None:
        self.styles.push_layer(Style(bold=True, color=self.theme.text_bold))

    def _end_strong(self, event: Event) -> None:
        self.styles.pop()

    def _start_emphasis(self, event: Event) -> None:
        self.styles.push_layer(Style(italic=True))

    def _end_emphasis(self, event: Event) -> None:
        self.styles.pop()

    def _start_strikethrough(self, event: Event) -> None:
        self.styles.push_layer(Style(strike=True))

    def _end_strikethrough(self, event: Event) -> None:
        self.styles.pop()

    # -- blocks ----------------------------------------------------------

    def _start_paragraph(self, event: Event) -> None:
        if self.lines and self.state.heading_level is None and self.lines[-1]:
            self._blank_line()

    def _end_paragraph(self, event: Event) -> None:
        self.flush()

    def _start_block_quote(self, event: Event) -> None:
        self.flush()
        self.state.quote_depth += 1
        self.styles.push_layer(Style(color=self.theme.md_blockquote_text))

    def _end_block_quote(self, event: Event) -> None:
        self.flush()
        self.state.quote_depth = max(self.state.quote_depth - 1, 0)
        self.styles.pop()

    def _start_list(self, event: Event) -> None:
        self.flush()
        self.state.list_depth += 1
        self.state.counters.append(event.start)

    def _end_list(self, event: Event) -> None:
        self.flush()
        st = self.state
        st.list_depth = max(st.list_depth - 1, 0)
        if st.counters:
            st.counters.pop()

    def _start_item(self, event: Event) -> None:
        self.flush()
        st = self.state
        indent = "  " * max(st.list_depth - 1, 0)
        index = st.ordered_index
        if index is None:
            bullet = f"{indent}{BULLET}"
        else:
            bullet = f"{indent}{index}. "
            st.counters[-1] = index + 1
        self._append(bullet, Style(color=self.theme.md_list_bullet))

    def _end_item(self, event: Event) -> None:
        self.flush()

    def _start_code_block(self, event: Event) -> None:
        self.flush()
        self.lines.append(self.code.open(event.language))

    def _end_code_block(self, event: Event) -> None:
        self.lines.extend(self.code.close())

    def _start_table(self, event: Event) -> None:
        self.flush()
        self.table.open(event.alignments)

    def _end_table(self, event: Event) -> None:
        self.flush()
        self.lines.extend(self.table.close())

    def _start_table_row(self, event: Event) -> None:
        self.table.start_row()

    def _end_table_row(self, event: Event) -> None:
        self.table.end_row()

    def _start_table_cell(self, event: Event) -> None:
        self.table.start_cell()

    def _end_table_cell(self, event: Event) -> None:
        self.table.end_cell()

    # -- leaves ----------------------------------------------------------

    def _on_text(self, raw: str) -> None:
        if self.code.active:
            self.code.feed(strip_zero_width(raw))
            return
        if self.table.active:
            self.table.add_text(strip_zero_width(raw))
            return

        st = self.state
        style = self.styles.current
        content = strip_zero_width(raw)

        if st.heading_prefix_pending:
            level = st.heading_level or 4
            glyph = HEADING_GLYPHS.get(level, HEADING_GLYPHS[4])
            self._append(glyph, Style(color=self._heading_color(level), bold=True))
            st.heading_prefix_pending = False

        full = self._full_width()
        remaining = full - self._current_width()
        if remaining < max(full // 4, 4) and self._has_content():
            self.flush()

        for i, part in enumerate(content.split("\n")):
            if i > 0:
                self.flush()
            self._append_wrapped(part, style)

    def _append_wrapped(self, part: str, style: Style) -> None:
        """Fill the pending line with ``part``, flushing at each wrap."""
        full = self._full_width()
        while part:
            self._begin_line()
            room = full - self._current_width()
            piece = wrap_text(part, room)[0]
            self.state.current.append(Segment(piece, style))
            part = part[len(piece):]
            if part:
                self.flush()

    def _on_inline_code(self, code: str) -> None:
        if self.table.active:
            self.table.add_code(strip_zero_width(code))
            return
        span = f" {strip_zero_width(code)} "
        if self._current_width() + display_width(span) > self._full_width() and self._has_content():
            self.flush()
        self._append(span, Style(color=self.theme.md_inline_code_fg, bgcolor=self.theme.md_inline_code_bg))

    def _on_soft_break(self) -> None:
        if self.table.active:
            self.table.add_break()
            return
        if not self._has_content():
            return
        if self._current_width() + 1 > self._full_width():
            self.flush()
            return
        self._append(" ", None)

    def _on_hard_break(self) -> None:
        if self.table.active:
            self.table.add_break()
            return
        self.flush()


def _fallback_lines(md: str, width: int, theme: MarkdownTheme) -> list[Line]:
    style = Style(color=theme.text_normal)
    lines: list[Line] = []
    for raw_line in md.split("\n"):
        for piece in wrap_text(raw_line, width):
            lines.append([Segment(piece, style)])
    return lines


def render_events(
    events: list[Event],
    content_width: int,
    theme: MarkdownTheme = DEFAULT_THEME,
    tab_width: int = TAB_WIDTH,
) -> list[Line]:
    """Lay out an already-parsed event stream."""
    renderer = MarkdownRenderer(content_width, theme, tab_width)
    for event in events:
        renderer.feed(event)
    return renderer.finish()


def render_markdown(
    md: str,
    content_width: int,
    theme: MarkdownTheme = DEFAULT_THEME,
    tab_width: int = TAB_WIDTH,
) -> list[Line]:
    """Render markdown text to width-bounded, styled terminal lines.

    Never raises for any input string: when the structured pass yields
    nothing (or fails), the raw text is wrapped in the base style.
    """
    width = max(content_width, 0)
    try:
        lines = render_events(parse_events(md), width, theme, tab_width)
    except Exception:
        _log.debug("markdown layout failed, falling back to plain text", exc_info=True)
        lines = []
    if not lines:
        lines = _fallback_lines(md, width, theme)
    return lines

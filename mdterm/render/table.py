"""Bordered table layout with width balancing.

Cells are buffered as plain strings while the table streams in; on close
the column widths are computed against the content width and the grid is
drawn with box-drawing borders.
"""

from rich.segment import Segment
from rich.style import Style

from .events import Alignment
from .theme import MarkdownTheme
from .width import display_width, truncate_to_width


def compute_column_widths(rows: list[list[str]], content_width: int) -> list[int]:
    """Column widths for ``rows`` fitted into ``content_width`` columns.

    Natural widths are clamped to two thirds of the available width, then,
    if they still overflow, every column but the last is scaled down
    proportionally and the last column takes whatever budget is left.
    Integer truncation makes the result order-dependent; the last column
    absorbs the rounding.
    """
    cols = max((len(r) for r in rows), default=0)
    if cols == 0:
        return []

    widths = [0] * cols
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))

    border = cols + 1
    pad = cols * 2
    avail = max(content_width - border - pad, 0)

    max_col = avail * 2 // 3
    widths = [min(w, max_col) for w in widths]

    total = sum(widths)
    if total > avail and total > 0:
        remaining = avail
        for i, w in enumerate(widths):
            if i == cols - 1:
                widths[i] = max(remaining, 1)
            else:
                widths[i] = max(w * avail // total, 1)
                remaining = max(remaining - widths[i], 0)
    return widths


def _fit_cell(text: str, width: int, align: Alignment) -> str:
    """Pad or truncate one cell to ``width`` plus a space on each side."""
    natural = display_width(text)
    if natural > width:
        cut = truncate_to_width(text, width)
        return f" {cut}{' ' * (width - display_width(cut))} "
    fill = width - natural
    if align is Alignment.CENTER:
        left = fill // 2
        return f" {' ' * left}{text}{' ' * (fill - left)} "
    if align is Alignment.RIGHT:
        return f" {' ' * fill}{text} "
    return f" {text}{' ' * fill} "


class TableLayout:
    """Buffers one table's rows and renders them on close."""

    def __init__(self, theme: MarkdownTheme, content_width: int):
        self._width = max(content_width, 0)
        self._border = Style(color=theme.table_border)
        self._header = Style(color=theme.table_header, bold=True)
        self._body = Style(color=theme.table_body)
        self.alignments: tuple[Alignment, ...] = ()
        self.rows: list[list[str]] = []
        self._row: list[str] = []
        self._cell: list[str] = []
        self.active = False

    def open(self, alignments: tuple[Alignment, ...] = ()) -> None:
        self.alignments = tuple(alignments)
        self.rows = []
        self.active = True

    def start_row(self) -> None:
        self._row = []

    def end_row(self) -> None:
        self.rows.append(self._row)
        self._row = []

    def start_cell(self) -> None:
        self._cell = []

    def end_cell(self) -> None:
        self._row.append("".join(self._cell))
        self._cell = []

    def add_text(self, text: str) -> None:
        self._cell.append(text)

    def add_code(self, text: str) -> None:
        self._cell.append(f"`{text}`")

    def add_break(self) -> None:
        self._cell.append(" ")

    def close(self) -> list[list[Segment]]:
        """Render the buffered table and reset."""
        lines = self.render()
        self.rows = []
        self.alignments = ()
        self.active = False
        return lines

    def render(self) -> list[list[Segment]]:
        widths = compute_column_widths(self.rows, self._width)
        if not widths:
            return []

        cols = len(widths)
        row_width = (cols + 1) + cols * 2 + sum(widths)
        right_pad = max(self._width - row_width, 0)

        lines = [self._rule("┌", "┬", "┐", widths, right_pad)]
        for idx, row in enumerate(self.rows):
            style = self._header if idx == 0 else self._body
            spans = [Segment("│", self._border)]
            for i, w in enumerate(widths):
                cell = row[i] if i < len(row) else ""
                align = self.alignments[i] if i < len(self.alignments) else Alignment.NONE
                spans.append(Segment(_fit_cell(cell, w, align), style))
                spans.append(Segment("│", self._border))
            if right_pad:
                spans.append(Segment(" " * right_pad))
            lines.append(spans)
            if idx == 0:
                lines.append(self._rule("├", "┼", "┤", widths, right_pad))
        lines.append(self._rule("└", "┴", "┘", widths, right_pad))
        return lines

    def _rule(self, left: str, mid: str, right: str, widths: list[int], right_pad: int) -> list[Segment]:
        body = mid.join("─" * (w + 2) for w in widths)
        spans = [Segment(f"{left}{body}{right}", self._border)]
        if right_pad:
            spans.append(Segment(" " * right_pad))
        return spans

"""Bordered code block container with syntax highlighting.

Fenced and indented code is framed in box-drawing borders sized to the
content width. Long lines wrap inside the frame; every wrapped piece is
highlighted on its own.
"""

from rich.segment import Segment
from rich.style import Style

from .highlight import highlight_code_line
from .theme import MarkdownTheme
from .width import display_width, wrap_text

_TOP_LEFT = "┌"
_BOT_LEFT = "└"
_VERT = "│"
_HORIZ = "─"

PLACEHOLDER_LABEL = "code"
TAB_WIDTH = 4


class CodeBlockRenderer:
    """Accumulates one code block's text and renders it on close.

    Usage:
        block = CodeBlockRenderer(theme, width, tab_width=4)
        lines.append(block.open("python"))
        block.feed(text)
        lines.extend(block.close())
    """

    def __init__(self, theme: MarkdownTheme, content_width: int, tab_width: int = TAB_WIDTH):
        self._theme = theme
        self._width = max(content_width, 0)
        self._tab = " " * tab_width
        self._border = Style(color=theme.code_border)
        self._bg = Style(bgcolor=theme.code_bg)
        self._buf: list[str] = []
        self._language = ""
        self.active = False

    @property
    def language(self) -> str:
        return self._language

    def open(self, language: str = "") -> list[Segment]:
        """Start a block and return its top border row."""
        self._buf = []
        self._language = language
        self.active = True
        return self.top_border(language)

    def feed(self, text: str) -> None:
        self._buf.append(text.replace("\t", self._tab))

    def close(self) -> list[list[Segment]]:
        """Render the accumulated code plus the bottom border, then reset."""
        rows = [self.code_row(piece) for piece in self._wrapped_lines()]
        rows.append(self.bottom_border())
        self._buf = []
        self._language = ""
        self.active = False
        return rows

    @property
    def inner_width(self) -> int:
        # "│ " on the left, " │" on the right
        return max(self._width - 4, 0)

    def top_border(self, language: str) -> list[Segment]:
        label = f" {language or PLACEHOLDER_LABEL} "
        fill = max(self._width - 2 - display_width(label), 0)
        return [Segment(f"{_TOP_LEFT}{_HORIZ}{label}{_HORIZ * fill}", self._border)]

    def bottom_border(self) -> list[Segment]:
        return [Segment(_BOT_LEFT + _HORIZ * max(self._width - 1, 0), self._border)]

    def code_row(self, piece: str) -> list[Segment]:
        highlighted = highlight_code_line(piece, self._language, self._theme)
        used = sum(display_width(seg.text) for seg in highlighted)
        fill = max(self.inner_width - used, 0)
        row = [Segment(f"{_VERT} ", self._border)]
        row.extend(Segment(seg.text, seg.style + self._bg) for seg in highlighted)
        row.append(Segment(f"{' ' * fill} {_VERT}", self._border + self._bg))
        return row

    def _wrapped_lines(self) -> list[str]:
        pieces: list[str] = []
        for line in _physical_lines("".join(self._buf)):
            pieces.extend(wrap_text(line, self.inner_width))
        return pieces


def _physical_lines(code: str) -> list[str]:
    """Split on ``\\n`` and ``\\r\\n`` only; a trailing newline adds no line."""
    lines = code.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def render_code_block(
    code: str,
    language: str,
    theme: MarkdownTheme,
    content_width: int,
) -> list[list[Segment]]:
    """Frame a complete piece of code as a bordered, highlighted block."""
    block = CodeBlockRenderer(theme, content_width)
    lines = [block.open(language)]
    block.feed(code)
    lines.extend(block.close())
    return lines

"""Terminal output for rendered lines -- thin layer over rich Text."""

from rich.console import Console
from rich.segment import Segment
from rich.text import Text

DEFAULT_INDENT = 2


def line_to_text(line: list[Segment]) -> Text:
    """Assemble one rendered line into a rich Text."""
    t = Text(no_wrap=True, overflow="crop")
    for seg in line:
        t.append(seg.text, style=seg.style)
    return t


def line_plain(line: list[Segment]) -> str:
    """Unstyled text of one rendered line."""
    return "".join(seg.text for seg in line)


def lines_to_text(lines: list[list[Segment]], indent: int = 0) -> Text:
    """Join rendered lines into a single multi-line Text."""
    out = Text(no_wrap=True, overflow="crop")
    pad = " " * indent
    for i, line in enumerate(lines):
        if i:
            out.append("\n")
        out.append(pad)
        out.append_text(line_to_text(line))
    return out


def print_lines(
    lines: list[list[Segment]],
    console: Console,
    indent: int = DEFAULT_INDENT,
) -> None:
    """Print rendered lines, each prefixed by the outer indentation."""
    pad = " " * indent
    for line in lines:
        t = Text(pad)
        t.append_text(line_to_text(line))
        console.print(t, soft_wrap=True)

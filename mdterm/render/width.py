"""Display-width helpers shared by every layout step.

Widths use a fixed two-class model: ASCII code points take one terminal
column, everything else takes two. Prose, inline code, code blocks and
tables all measure with the same functions so they agree on line widths.
"""


def char_width(ch: str) -> int:
    """Columns occupied by a single character."""
    return 1 if ord(ch) < 0x80 else 2


def display_width(text: str) -> int:
    """Columns occupied by a string."""
    return sum(char_width(ch) for ch in text)


def wrap_text(text: str, max_width: int) -> list[str]:
    """Split text into chunks that each fit in max_width columns.

    Splits happen between characters, never inside one. The budget is
    floored at 2 so a double-width character always fits on its own.
    An empty string yields a single empty chunk.
    """
    max_width = max(max_width, 2)
    chunks: list[str] = []
    current = []
    current_width = 0

    for ch in text:
        w = char_width(ch)
        if current_width + w > max_width and current:
            chunks.append("".join(current))
            current = []
            current_width = 0
        current.append(ch)
        current_width += w

    if current:
        chunks.append("".join(current))
    if not chunks:
        chunks.append("")
    return chunks


def truncate_to_width(text: str, max_width: int) -> str:
    """Cut text to at most max_width columns without splitting a wide char."""
    out = []
    used = 0
    for ch in text:
        w = char_width(ch)
        if used + w > max_width:
            break
        out.append(ch)
        used += w
    return "".join(out)

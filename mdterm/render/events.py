"""Markdown text -> flat event stream.

Wraps markdown-it-py and flattens its token tree into start/end/leaf
events, which is the only vocabulary the renderer understands.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from markdown_it import MarkdownIt
from markdown_it.token import Token

_log = logging.getLogger(__name__)

ZERO_WIDTH_SPACE = "\u200b"
ZERO_WIDTH_JOINER = "\u200d"

# Bold markers glued to CJK quotation marks are not recognised as
# emphasis delimiters (the quote is punctuation, the char before ** is a
# letter). A zero-width char between them restores flanking.
_CJK_QUOTE_FIXES = (
    ("**\u201c", "**\u200b\u201c"),
    ("**\u2018", "**\u200b\u2018"),
    ("\u201d**", "\u201d\u200b**"),
    ("\u2019**", "\u2019\u200b**"),
)


class EventKind(Enum):
    START = auto()
    END = auto()
    TEXT = auto()
    CODE = auto()
    SOFT_BREAK = auto()
    HARD_BREAK = auto()
    RULE = auto()


class Tag(Enum):
    HEADING = auto()
    PARAGRAPH = auto()
    STRONG = auto()
    EMPHASIS = auto()
    STRIKETHROUGH = auto()
    BLOCK_QUOTE = auto()
    CODE_BLOCK = auto()
    LIST = auto()
    ITEM = auto()
    TABLE = auto()
    TABLE_ROW = auto()
    TABLE_CELL = auto()


class Alignment(Enum):
    NONE = auto()
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class Event:
    """One structural or leaf markdown event.

    ``level`` is set for headings, ``start`` for ordered lists (None for
    bullet lists), ``language`` for code blocks, ``alignments`` for tables.
    """

    kind: EventKind
    tag: Tag | None = None
    text: str = ""
    level: int = 0
    start: int | None = None
    language: str = ""
    alignments: tuple[Alignment, ...] = ()


def start(tag: Tag, **kwargs) -> Event:
    return Event(EventKind.START, tag, **kwargs)


def end(tag: Tag, **kwargs) -> Event:
    return Event(EventKind.END, tag, **kwargs)


def text(content: str) -> Event:
    return Event(EventKind.TEXT, text=content)


def preprocess_cjk_emphasis(md: str) -> str:
    """Insert a zero-width space between ``**`` and adjacent CJK quotes."""
    for needle, replacement in _CJK_QUOTE_FIXES:
        if needle in md:
            md = md.replace(needle, replacement)
    return md


def strip_zero_width(content: str) -> str:
    return content.replace(ZERO_WIDTH_SPACE, "").replace(ZERO_WIDTH_JOINER, "")


def _create_parser() -> MarkdownIt:
    return MarkdownIt("commonmark").enable("strikethrough").enable("table")


_SIMPLE_BLOCKS = {
    "paragraph": Tag.PARAGRAPH,
    "blockquote": Tag.BLOCK_QUOTE,
    "list_item": Tag.ITEM,
    "table": Tag.TABLE,
    "tr": Tag.TABLE_ROW,
    "th": Tag.TABLE_CELL,
    "td": Tag.TABLE_CELL,
}

_INLINE_TAGS = {
    "strong": Tag.STRONG,
    "em": Tag.EMPHASIS,
    "s": Tag.STRIKETHROUGH,
}


def _alignment_of(token: Token) -> Alignment:
    style = str(token.attrGet("style") or "")
    if "text-align:left" in style:
        return Alignment.LEFT
    if "text-align:center" in style:
        return Alignment.CENTER
    if "text-align:right" in style:
        return Alignment.RIGHT
    return Alignment.NONE


def _table_alignments(tokens: list[Token], index: int) -> tuple[Alignment, ...]:
    """Alignments of the header cells of the table opening at ``index``."""
    aligns = []
    for tok in tokens[index + 1:]:
        if tok.type == "th_open":
            aligns.append(_alignment_of(tok))
        elif tok.type == "tr_close":
            break
    return tuple(aligns)


def _split_type(token_type: str) -> tuple[str, str]:
    """``'bullet_list_open'`` -> ``('bullet_list', 'open')``."""
    base, _, suffix = token_type.rpartition("_")
    return base, suffix


def _inline_events(children: list[Token]) -> list[Event]:
    events: list[Event] = []
    for child in children:
        t = child.type
        if t == "text":
            events.append(text(child.content))
        elif t == "code_inline":
            events.append(Event(EventKind.CODE, text=child.content))
        elif t == "softbreak":
            events.append(Event(EventKind.SOFT_BREAK))
        elif t == "hardbreak":
            events.append(Event(EventKind.HARD_BREAK))
        elif t == "image":
            # Alt text only.
            events.extend(_inline_events(child.children or []))
        else:
            base, suffix = _split_type(t)
            tag = _INLINE_TAGS.get(base)
            if tag is not None and suffix == "open":
                events.append(start(tag))
            elif tag is not None and suffix == "close":
                events.append(end(tag))
            # links contribute their children only; inline html is dropped
    return events


def tokens_to_events(tokens: list[Token]) -> list[Event]:
    """Flatten a markdown-it token list into renderer events."""
    events: list[Event] = []
    for i, tok in enumerate(tokens):
        t = tok.type

        if t == "inline":
            events.extend(_inline_events(tok.children or []))
        elif t in ("fence", "code_block"):
            info = tok.info.strip() if t == "fence" else ""
            language = info.split()[0] if info else ""
            events.append(start(Tag.CODE_BLOCK, language=language))
            if tok.content:
                events.append(text(tok.content))
            events.append(end(Tag.CODE_BLOCK, language=language))
        elif t == "hr":
            events.append(Event(EventKind.RULE))
        elif t == "heading_open":
            events.append(start(Tag.HEADING, level=int(tok.tag[1:])))
        elif t == "heading_close":
            events.append(end(Tag.HEADING, level=int(tok.tag[1:])))
        elif t in ("bullet_list_open", "ordered_list_open"):
            first = None
            if t == "ordered_list_open":
                declared = tok.attrGet("start")
                first = int(declared) if declared is not None else 1
            events.append(start(Tag.LIST, start=first))
        elif t in ("bullet_list_close", "ordered_list_close"):
            events.append(end(Tag.LIST))
        elif t == "table_open":
            events.append(start(Tag.TABLE, alignments=_table_alignments(tokens, i)))
        else:
            base, suffix = _split_type(t)
            tag = _SIMPLE_BLOCKS.get(base)
            if tag is None:
                continue
            # tight list items hide their paragraphs
            if tag is Tag.PARAGRAPH and tok.hidden:
                continue
            if suffix == "open":
                events.append(start(tag))
            elif suffix == "close":
                events.append(end(tag))
    return events


def parse_events(md: str) -> list[Event]:
    """Parse raw markdown into renderer events.

    The CJK emphasis workaround is applied first. Parser failures are
    logged and yield an empty stream.
    """
    try:
        tokens = _create_parser().parse(preprocess_cjk_emphasis(md))
    except Exception as exc:
        _log.debug("markdown parse failed: %s", exc)
        return []
    return tokens_to_events(tokens)

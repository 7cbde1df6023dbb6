"""Single-line syntax highlighter for fenced code blocks.

A hand-rolled scanner rather than a full lexer: it only needs to colour
one already-wrapped line at a time, and it must return spans whose text
concatenates back to the input exactly.
"""

from dataclasses import dataclass

from rich.segment import Segment
from rich.style import Style

from .languages import LanguageSpec, lookup_language
from .theme import MarkdownTheme

_SHELL_VAR_CHARS = "_@#?!"
_MACRO_FOLLOWERS = "([{"


@dataclass(frozen=True)
class CodeStyles:
    """Token styles for one theme."""

    default: Style
    keyword: Style
    string: Style
    comment: Style
    number: Style
    type: Style
    primitive: Style
    macro: Style
    attribute: Style
    lifetime: Style
    shell_var: Style

    @classmethod
    def from_theme(cls, theme: MarkdownTheme) -> "CodeStyles":
        return cls(
            default=Style(color=theme.code_default),
            keyword=Style(color=theme.code_keyword),
            string=Style(color=theme.code_string),
            comment=Style(color=theme.code_comment, italic=True),
            number=Style(color=theme.code_number),
            type=Style(color=theme.code_type),
            primitive=Style(color=theme.code_primitive),
            macro=Style(color=theme.code_macro),
            attribute=Style(color=theme.code_attribute),
            lifetime=Style(color=theme.code_lifetime),
            shell_var=Style(color=theme.code_shell_var),
        )


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _peek(line: str, i: int) -> str:
    """Character at ``i`` or an empty string past the end."""
    return line[i] if i < len(line) else ""


def _scan_quoted(line: str, i: int, quote: str, escapes: bool) -> int:
    """End index of a quoted run opening at ``i`` (exclusive).

    Unterminated quotes run to the end of the line.
    """
    j = i + 1
    while j < len(line):
        ch = line[j]
        if escapes and ch == "\\":
            j += 2
            continue
        j += 1
        if ch == quote:
            return j
    return len(line)


def _scan_nested(line: str, i: int, opener: str, closer: str) -> int:
    """End index of a bracketed run whose first ``opener`` is at ``i``."""
    depth = 0
    j = i
    while j < len(line):
        ch = line[j]
        j += 1
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0:
                return j
    return len(line)


def _scan_apostrophe(line: str, i: int, styles: CodeStyles) -> tuple[int, Style]:
    """Lifetime (``'a``, ``'static``) or character literal (``'x'``)."""
    j = i + 1
    while j < len(line) and _is_word_char(line[j]):
        j += 1
    run = j - (i + 1)
    if run == 1 and _peek(line, j) == "'":
        return j + 1, styles.string
    if run >= 1:
        return j, styles.lifetime
    # '\n', ' ', '{' and friends
    return _scan_quoted(line, i, "'", escapes=True), styles.string


def _scan_shell_variable(line: str, i: int) -> int:
    """``$NAME``, ``${...}``, ``$(...)``, ``$?`` and friends."""
    nxt = _peek(line, i + 1)
    if nxt == "{":
        return _scan_nested(line, i + 1, "{", "}")
    if nxt == "(":
        return _scan_nested(line, i + 1, "(", ")")
    j = i + 1
    while j < len(line) and (line[j].isalnum() or line[j] in _SHELL_VAR_CHARS):
        j += 1
    return j


def classify_word(word: str, spec: LanguageSpec, styles: CodeStyles) -> Style:
    """Style for one identifier-like word."""
    if word in spec.keywords:
        return styles.keyword
    if word in spec.primitives:
        return styles.primitive
    if "0" <= word[0] <= "9":
        return styles.number
    if spec.type_names is not None:
        return styles.type if word in spec.type_names else styles.default
    if word[0].isupper():
        return styles.type
    return styles.default


def colorize_tokens(text: str, spec: LanguageSpec, styles: CodeStyles) -> list[Segment]:
    """Split plain code into words and separators and colour the words."""
    segments: list[Segment] = []
    n = len(text)
    i = 0
    while i < n:
        j = i
        if _is_word_char(text[i]):
            while j < n and _is_word_char(text[j]):
                j += 1
            word = text[i:j]
            if spec.macros and _peek(text, j) == "!":
                after = _peek(text, j + 1)
                if not after or after in _MACRO_FOLLOWERS or after.isspace():
                    segments.append(Segment(word, styles.macro))
                    segments.append(Segment("!", styles.macro))
                    i = j + 1
                    continue
            segments.append(Segment(word, classify_word(word, spec, styles)))
        else:
            while j < n and not _is_word_char(text[j]):
                j += 1
            segments.append(Segment(text[i:j], styles.default))
        i = j
    return segments


def highlight_code_line(line: str, language: str, theme: MarkdownTheme) -> list[Segment]:
    """Highlight one line of code.

    Args:
        line: A single physical line, no newline.
        language: Language tag from the fence, any case; unknown tags use
            a generic keyword table.
        theme: Colour source for token styles.

    Returns:
        Segments in scan order whose texts join back to ``line``.
    """
    spec = lookup_language(language)
    styles = CodeStyles.from_theme(theme)

    if line.lstrip().startswith(spec.comment_prefix):
        return [Segment(line, styles.comment)]

    segments: list[Segment] = []
    n = len(line)
    plain_start = 0
    i = 0
    while i < n:
        ch = line[i]
        end = None
        if ch == '"':
            end, style = _scan_quoted(line, i, '"', escapes=True), styles.string
        elif ch == "`":
            end, style = _scan_quoted(line, i, "`", escapes=False), styles.string
        elif ch == "'" and spec.char_literals:
            end, style = _scan_apostrophe(line, i, styles)
        elif ch == "'":
            end, style = _scan_quoted(line, i, "'", escapes=True), styles.string
        elif ch == "#" and spec.attributes and _peek(line, i + 1) == "[":
            end, style = _scan_nested(line, i + 1, "[", "]"), styles.attribute
        elif ch == "$" and spec.shell_variables:
            end, style = _scan_shell_variable(line, i), styles.shell_var
        elif line.startswith(spec.comment_prefix, i):
            end, style = n, styles.comment

        if end is None:
            i += 1
            continue
        if plain_start < i:
            segments.extend(colorize_tokens(line[plain_start:i], spec, styles))
        segments.append(Segment(line[i:end], style))
        i = plain_start = end

    if plain_start < n:
        segments.extend(colorize_tokens(line[plain_start:], spec, styles))
    if not segments:
        segments.append(Segment(line, styles.default))
    return segments

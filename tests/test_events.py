"""Tests for mdterm.render.events."""

from mdterm.render.events import (
    Alignment,
    EventKind,
    Tag,
    parse_events,
    preprocess_cjk_emphasis,
    strip_zero_width,
)


def _shape(events):
    return [(e.kind, e.tag) for e in events]


def test_heading_events():
    events = parse_events("# Title")
    assert _shape(events) == [
        (EventKind.START, Tag.HEADING),
        (EventKind.TEXT, None),
        (EventKind.END, Tag.HEADING),
    ]
    assert events[0].level == 1
    assert events[1].text == "Title"


def test_tight_list_has_no_paragraphs():
    events = parse_events("- a\n- b")
    assert (EventKind.START, Tag.PARAGRAPH) not in _shape(events)
    assert events[0].tag is Tag.LIST
    assert events[0].start is None
    assert [e.text for e in events if e.kind is EventKind.TEXT] == ["a", "b"]


def test_ordered_list_start():
    events = parse_events("3. x\n4. y")
    assert events[0].tag is Tag.LIST
    assert events[0].start == 3


def test_ordered_list_default_start():
    assert parse_events("1. x")[0].start == 1


def test_ordered_list_zero_start():
    assert parse_events("0. a\n0. b")[0].start == 0


def test_fenced_code():
    events = parse_events("```python\nx = 1\n```")
    assert _shape(events) == [
        (EventKind.START, Tag.CODE_BLOCK),
        (EventKind.TEXT, None),
        (EventKind.END, Tag.CODE_BLOCK),
    ]
    assert events[0].language == "python"
    assert events[1].text == "x = 1\n"


def test_fence_language_is_first_word():
    events = parse_events("```rust title=main\nfn main() {}\n```")
    assert events[0].language == "rust"


def test_indented_code_has_no_language():
    events = parse_events("    code here\n")
    assert events[0].tag is Tag.CODE_BLOCK
    assert events[0].language == ""


def test_table_alignments():
    md = "| a | b | c |\n|:--|:-:|--:|\n| 1 | 2 | 3 |"
    events = parse_events(md)
    assert events[0].tag is Tag.TABLE
    assert events[0].alignments == (Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT)
    rows = [e for e in events if e.tag is Tag.TABLE_ROW and e.kind is EventKind.START]
    assert len(rows) == 2


def test_strikethrough():
    kinds = _shape(parse_events("~~x~~"))
    assert (EventKind.START, Tag.STRIKETHROUGH) in kinds
    assert (EventKind.END, Tag.STRIKETHROUGH) in kinds


def test_link_keeps_text_only():
    events = parse_events("[docs](https://example.com)")
    texts = [e.text for e in events if e.kind is EventKind.TEXT]
    assert texts == ["docs"]


def test_image_alt_text():
    events = parse_events("![alt text](p.png)")
    assert [e.text for e in events if e.kind is EventKind.TEXT] == ["alt text"]


def test_inline_code_and_breaks():
    events = parse_events("use `x`\nnext  \nlast")
    kinds = [e.kind for e in events]
    assert EventKind.CODE in kinds
    assert EventKind.SOFT_BREAK in kinds
    assert EventKind.HARD_BREAK in kinds


def test_rule():
    kinds = [e.kind for e in parse_events("a\n\n---\n\nb")]
    assert EventKind.RULE in kinds


def test_cjk_preprocess_inserts_zero_width_space():
    out = preprocess_cjk_emphasis("这是**“强调”**文本")
    assert out == "这是**\u200b“强调”\u200b**文本"


def test_cjk_preprocess_all_four_patterns():
    out = preprocess_cjk_emphasis("**‘a’** **“b”**")
    assert out.count("\u200b") == 4


def test_cjk_preprocess_leaves_other_text_alone():
    assert preprocess_cjk_emphasis("plain **bold**") == "plain **bold**"


def test_cjk_emphasis_is_recognised():
    events = parse_events("这是**“强调”**文本")
    assert (EventKind.START, Tag.STRONG) in _shape(events)


def test_strip_zero_width():
    assert strip_zero_width("\u200ba\u200db") == "ab"

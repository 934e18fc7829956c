"""Tests for the markdown-it boundary: source -> events."""
from markdown_it.token import Token

from stripmd.events import (
    CodeSpan,
    FootnoteReference,
    EndTag,
    HardLineBreak,
    RawHtml,
    SoftLineBreak,
    StartTag,
    Tag,
    TagKind,
    TextRun,
    ThematicBreak,
)
from stripmd.parser import _walk, get_parser, iter_events

PARA = Tag(TagKind.PARAGRAPH)


def _kinds(markdown: str) -> set[TagKind]:
    return {e.tag.kind for e in iter_events(markdown) if isinstance(e, StartTag)}


# ── Parser configuration ───────────────────────────────────────────────────

def test_parser_is_shared():
    assert get_parser() is get_parser()


def test_strikethrough_enabled_tables_disabled():
    assert TagKind.STRIKETHROUGH in _kinds("~~gone~~")
    table = "| a | b |\n|---|---|\n| 1 | 2 |\n"
    assert not {TagKind.TABLE, TagKind.TABLE_ROW, TagKind.TABLE_CELL} & _kinds(table)


def test_empty_document_has_no_events():
    assert list(iter_events("")) == []


# ── Block constructs ───────────────────────────────────────────────────────

def test_heading_carries_level():
    h2 = Tag(TagKind.HEADING, level=2)
    assert list(iter_events("## Two")) == [StartTag(h2), TextRun("Two"), EndTag(h2)]


def test_setext_heading_matches_atx():
    assert list(iter_events("Header\n======\n")) == list(iter_events("# Header"))


def test_ordered_list_start_number():
    lists = [e.tag for e in iter_events("3. c\n4. d\n") if isinstance(e, StartTag)
             and e.tag.kind is TagKind.LIST]
    assert lists == [Tag(TagKind.LIST, start=3)]


def test_bullet_list_has_no_start():
    lists = [e.tag for e in iter_events("* a\n") if isinstance(e, StartTag)
             and e.tag.kind is TagKind.LIST]
    assert lists == [Tag(TagKind.LIST)]


def test_fenced_code_block():
    tag = Tag(TagKind.CODE_BLOCK, info="py")
    assert list(iter_events("```py\nx = 1\n```")) == [
        StartTag(tag), TextRun("x = 1\n"), EndTag(tag),
    ]


def test_indented_code_block_has_no_info():
    tag = Tag(TagKind.CODE_BLOCK)
    assert list(iter_events("    code\n")) == [StartTag(tag), TextRun("code\n"), EndTag(tag)]


def test_empty_fence_has_no_text():
    tag = Tag(TagKind.CODE_BLOCK, info="")
    assert list(iter_events("```\n```")) == [StartTag(tag), EndTag(tag)]


def test_thematic_break():
    assert list(iter_events("***")) == [ThematicBreak()]


def test_html_block():
    assert list(iter_events("<div>\nhidden\n</div>\n")) == [RawHtml("<div>\nhidden\n</div>\n")]


# ── Inline constructs ──────────────────────────────────────────────────────

def test_link_carries_destination_and_title():
    link = Tag(TagKind.LINK, destination="https://example.com", title="T")
    assert list(iter_events('[text](https://example.com "T")')) == [
        StartTag(PARA), StartTag(link), TextRun("text"), EndTag(link), EndTag(PARA),
    ]


def test_image_alt_text_is_children():
    image = Tag(TagKind.IMAGE, destination="logo.png", title="Logo")
    assert list(iter_events('![alt](logo.png "Logo")')) == [
        StartTag(PARA), StartTag(image), TextRun("alt"), EndTag(image), EndTag(PARA),
    ]


def test_end_tag_matches_start_tag():
    events = list(iter_events("> [a](b) *c* **d** ~~e~~\n\n1. x\n"))
    stack = []
    for event in events:
        if isinstance(event, StartTag):
            stack.append(event.tag)
        elif isinstance(event, EndTag):
            assert stack.pop() == event.tag
    assert stack == []


def test_code_span_and_inline_html():
    assert list(iter_events("`x` <b>y</b>")) == [
        StartTag(PARA), CodeSpan("x"), TextRun(" "), RawHtml("<b>"),
        TextRun("y"), RawHtml("</b>"), EndTag(PARA),
    ]


def test_soft_and_hard_breaks():
    assert SoftLineBreak() in list(iter_events("a\nb"))
    assert HardLineBreak() in list(iter_events("a  \nb"))


# ── Unknown tokens ─────────────────────────────────────────────────────────

def test_unmapped_tokens_are_skipped():
    tokens = [
        Token("tbody_open", "tbody", 1),
        Token("text", "", 0, content="cell"),
        Token("tbody_close", "tbody", -1),
        Token("something_new", "", 0),
    ]
    assert list(_walk(tokens, [])) == [TextRun("cell")]


def test_footnote_tokens_map_when_present():
    definition = Tag(TagKind.FOOTNOTE_DEFINITION, label="note")
    tokens = [
        Token("footnote_ref", "", 0, meta={"id": 0, "label": "note"}),
        Token("footnote_open", "", 1, meta={"id": 0, "label": "note"}),
        Token("text", "", 0, content="body"),
        Token("footnote_close", "", -1),
    ]
    assert list(_walk(tokens, [])) == [
        FootnoteReference("note"), StartTag(definition), TextRun("body"), EndTag(definition),
    ]

"""markdown-it-py boundary: markdown source -> flat stream of events.

The parser runs the CommonMark grammar with strikethrough enabled.  GFM
tables and task lists are not enabled, so pipe tables and ``[ ]`` markers
come through as ordinary paragraphs and text.
"""
from __future__ import annotations

import functools
from collections.abc import Iterator, Sequence

import structlog
from markdown_it import MarkdownIt
from markdown_it.token import Token

from stripmd.events import (
    CodeSpan,
    EndTag,
    Event,
    FootnoteReference,
    HardLineBreak,
    RawHtml,
    SoftLineBreak,
    StartTag,
    Tag,
    TagKind,
    TextRun,
    ThematicBreak,
)

log = structlog.get_logger()

# markdown-it ``<name>_open`` / ``<name>_close`` pairs
_PAIRED: dict[str, TagKind] = {
    "paragraph": TagKind.PARAGRAPH,
    "heading": TagKind.HEADING,
    "blockquote": TagKind.BLOCK_QUOTE,
    "bullet_list": TagKind.LIST,
    "ordered_list": TagKind.LIST,
    "list_item": TagKind.ITEM,
    # table and footnote tokens only appear if the table rule or a footnote
    # plugin is enabled; mapped so every TagKind has a producer
    "table": TagKind.TABLE,
    "thead": TagKind.TABLE_HEAD,
    "tr": TagKind.TABLE_ROW,
    "th": TagKind.TABLE_CELL,
    "td": TagKind.TABLE_CELL,
    "em": TagKind.EMPHASIS,
    "strong": TagKind.STRONG,
    "s": TagKind.STRIKETHROUGH,
    "link": TagKind.LINK,
    "footnote": TagKind.FOOTNOTE_DEFINITION,
}

_OPEN = "_open"
_CLOSE = "_close"


@functools.lru_cache(maxsize=1)
def get_parser() -> MarkdownIt:
    """Return the shared parser instance.

    ``MarkdownIt.parse`` builds fresh state on every call, so one instance
    serves every caller (and every thread).
    """
    return MarkdownIt("commonmark").enable("strikethrough")


def iter_events(markdown: str) -> Iterator[Event]:
    """Parse *markdown* and yield its events in document order."""
    yield from _walk(get_parser().parse(markdown), [])


def _attr(token: Token, name: str) -> str:
    value = token.attrGet(name)
    return "" if value is None else str(value)


def _open_tag(token: Token, kind: TagKind) -> Tag:
    if kind is TagKind.HEADING:
        return Tag(kind, level=int(token.tag[1:]))
    if kind is TagKind.LIST:
        if token.type == "ordered_list_open":
            return Tag(kind, start=int(token.attrGet("start") or 1))
        return Tag(kind)
    if kind is TagKind.LINK:
        return Tag(kind, destination=_attr(token, "href"), title=_attr(token, "title"))
    if kind is TagKind.FOOTNOTE_DEFINITION:
        return Tag(kind, label=str((token.meta or {}).get("label", "")))
    return Tag(kind)


def _walk(tokens: Sequence[Token], open_tags: list[Tag]) -> Iterator[Event]:
    for token in tokens:
        ttype = token.type

        if ttype.endswith(_OPEN) and ttype[: -len(_OPEN)] in _PAIRED:
            tag = _open_tag(token, _PAIRED[ttype[: -len(_OPEN)]])
            open_tags.append(tag)
            yield StartTag(tag)
        elif ttype.endswith(_CLOSE) and ttype[: -len(_CLOSE)] in _PAIRED:
            yield EndTag(open_tags.pop())
        elif ttype == "inline":
            yield from _walk(token.children or [], open_tags)
        elif ttype in ("text", "text_special"):
            yield TextRun(token.content)
        elif ttype == "code_inline":
            yield CodeSpan(token.content)
        elif ttype in ("fence", "code_block"):
            info = token.info.strip() if ttype == "fence" else None
            tag = Tag(TagKind.CODE_BLOCK, info=info)
            yield StartTag(tag)
            if token.content:
                yield TextRun(token.content)
            yield EndTag(tag)
        elif ttype == "image":
            # alt text arrives as the image's inline children
            tag = Tag(
                TagKind.IMAGE,
                destination=_attr(token, "src"),
                title=_attr(token, "title"),
            )
            yield StartTag(tag)
            yield from _walk(token.children or [], open_tags)
            yield EndTag(tag)
        elif ttype in ("html_block", "html_inline"):
            yield RawHtml(token.content)
        elif ttype == "softbreak":
            yield SoftLineBreak()
        elif ttype == "hardbreak":
            yield HardLineBreak()
        elif ttype == "hr":
            yield ThematicBreak()
        elif ttype == "footnote_ref":
            # only produced when the mdit-py-plugins footnote plugin is loaded
            yield FootnoteReference(str((token.meta or {}).get("label", "")))
        else:
            log.debug("markdown_token_ignored", token_type=ttype)

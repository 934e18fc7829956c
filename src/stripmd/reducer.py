"""Event stream -> plain text.

A single left-to-right fold.  Each event appends zero or more characters to
an append-only buffer; nothing already emitted is ever rewritten.

Inline constructs (emphasis, strong, strikethrough, links, images) are
transparent: their text arrives as ordinary ``TextRun`` events, so their
tags emit nothing, except that a link or image start emits its title.
Block constructs are structural: they emit a newline when they close.
Lists and code blocks also separate on open, because markdown lets a list
or a fenced block follow other content with no blank line in between.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

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
    TaskListMarker,
    TextRun,
    ThematicBreak,
)
from stripmd.parser import iter_events

NEWLINE = "\n"
HARD_BREAK = "\n\n"

START_TEXT: dict[TagKind, str] = {
    TagKind.PARAGRAPH: "",
    TagKind.HEADING: "",
    TagKind.BLOCK_QUOTE: "",
    TagKind.LIST: NEWLINE,
    TagKind.ITEM: "",
    TagKind.CODE_BLOCK: HARD_BREAK,
    TagKind.TABLE: "",
    TagKind.TABLE_HEAD: "",
    TagKind.TABLE_ROW: "",
    TagKind.TABLE_CELL: "",
    TagKind.EMPHASIS: "",
    TagKind.STRONG: "",
    TagKind.STRIKETHROUGH: "",
    TagKind.LINK: "",
    TagKind.IMAGE: "",
    TagKind.FOOTNOTE_DEFINITION: "",
}

END_TEXT: dict[TagKind, str] = {
    TagKind.PARAGRAPH: "",
    TagKind.HEADING: NEWLINE,
    TagKind.BLOCK_QUOTE: NEWLINE,
    TagKind.LIST: "",
    TagKind.ITEM: NEWLINE,
    TagKind.CODE_BLOCK: NEWLINE,
    TagKind.TABLE: NEWLINE,
    TagKind.TABLE_HEAD: NEWLINE,
    TagKind.TABLE_ROW: NEWLINE,
    TagKind.TABLE_CELL: "",
    TagKind.EMPHASIS: "",
    TagKind.STRONG: "",
    TagKind.STRIKETHROUGH: "",
    TagKind.LINK: "",
    TagKind.IMAGE: "",
    TagKind.FOOTNOTE_DEFINITION: "",
}


def _start_text(tag: Tag) -> str:
    if tag.kind in (TagKind.LINK, TagKind.IMAGE):
        return tag.title
    return START_TEXT.get(tag.kind, "")


def render_event(event: Event) -> str:
    """Return the text a single event contributes to the output."""
    if isinstance(event, StartTag):
        return _start_text(event.tag)
    if isinstance(event, EndTag):
        return END_TEXT.get(event.tag.kind, "")
    if isinstance(event, (TextRun, CodeSpan)):
        return event.text
    if isinstance(event, (SoftLineBreak, HardLineBreak, ThematicBreak)):
        return NEWLINE
    if isinstance(event, (RawHtml, FootnoteReference, TaskListMarker)):
        return ""
    # Anything else is a construct this table does not know: stay silent.
    return ""


def reduce_events(
    events: Iterable[Event],
    on_event: Callable[[Event], None] | None = None,
) -> str:
    """Fold *events* into plain text.

    Args:
        events:   Events in document order.
        on_event: Optional hook called with each event before it is folded.
                  Its return value is ignored.

    Returns:
        The concatenated output of every event.
    """
    buffer: list[str] = []
    for event in events:
        if on_event is not None:
            on_event(event)
        buffer.append(render_event(event))
    return "".join(buffer)


def strip_markdown(
    markdown: str,
    on_event: Callable[[Event], None] | None = None,
) -> str:
    """Return the reader-visible text of *markdown* with all markup removed.

    Never raises for any ``str`` input; ``""`` maps to ``""``.
    """
    return reduce_events(iter_events(markdown), on_event)


def strip_markdown_file(
    path: str | Path,
    on_event: Callable[[Event], None] | None = None,
) -> str:
    """Read a markdown file and return its plain text (markup stripped)."""
    raw = Path(path).read_text(encoding="utf-8", errors="replace")
    return strip_markdown(raw, on_event)

"""Markdown structural events.

One event per structural or textual unit of a parsed document, in document
order.  Block and inline constructs are bracketed by ``StartTag``/``EndTag``;
everything else is a leaf.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class TagKind(enum.Enum):
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCK_QUOTE = "block_quote"
    LIST = "list"
    ITEM = "item"
    CODE_BLOCK = "code_block"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"
    IMAGE = "image"
    FOOTNOTE_DEFINITION = "footnote_definition"


@dataclass(frozen=True)
class Tag:
    """A construct kind plus whatever metadata the parser attached to it.

    Args:
        kind:        Construct kind.
        level:       Heading level (1-6), headings only.
        start:       First number of an ordered list; ``None`` for bullets.
        info:        Fenced code block info string; ``None`` when indented.
        destination: Link or image target.
        title:       Link or image title (``[a](b "title")``).
        label:       Footnote label.
    """

    kind: TagKind
    level: int | None = None
    start: int | None = None
    info: str | None = None
    destination: str = ""
    title: str = ""
    label: str = ""


@dataclass(frozen=True)
class StartTag:
    tag: Tag


@dataclass(frozen=True)
class EndTag:
    tag: Tag


@dataclass(frozen=True)
class TextRun:
    text: str


@dataclass(frozen=True)
class CodeSpan:
    text: str


@dataclass(frozen=True)
class RawHtml:
    html: str


@dataclass(frozen=True)
class FootnoteReference:
    label: str


@dataclass(frozen=True)
class TaskListMarker:
    checked: bool


@dataclass(frozen=True)
class SoftLineBreak:
    pass


@dataclass(frozen=True)
class HardLineBreak:
    pass


@dataclass(frozen=True)
class ThematicBreak:
    pass


Event = Union[
    StartTag,
    EndTag,
    TextRun,
    CodeSpan,
    RawHtml,
    FootnoteReference,
    TaskListMarker,
    SoftLineBreak,
    HardLineBreak,
    ThematicBreak,
]

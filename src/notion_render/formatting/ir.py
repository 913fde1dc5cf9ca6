"""Intermediate Representation for Notion content.

This module defines the immutable data structures that sit between the raw
Notion API payloads and HTML rendering. Every block variant the renderer
understands has its own dataclass; anything else is kept as an
``UnsupportedBlock`` so that a render never fails on new upstream types.
"""

from dataclasses import dataclass
from enum import Flag, auto
from typing import ClassVar, Optional, Union


# =============================================================================
# Block type identifiers
# =============================================================================

class BlockType:
    """Notion block type discriminators handled by the renderer."""

    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    QUOTE = "quote"
    CODE = "code"
    DIVIDER = "divider"
    IMAGE = "image"
    CALLOUT = "callout"
    TOGGLE = "toggle"
    BOOKMARK = "bookmark"
    UNSUPPORTED = "unsupported"


DEFAULT_CODE_LANGUAGE = "plaintext"
DEFAULT_CALLOUT_ICON = "💡"


# =============================================================================
# Inline text
# =============================================================================

class Annotation(Flag):
    """Inline annotation flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    STRIKETHROUGH = auto()
    UNDERLINE = auto()
    CODE = auto()


@dataclass(frozen=True)
class TextRun:
    """A contiguous span of text with one set of annotations.

    Attributes:
        text: The plain text content
        annotations: Combined annotation flags
        link: Optional hyperlink target
    """

    text: str
    annotations: Annotation = Annotation.NONE
    link: Optional[str] = None

    @property
    def bold(self) -> bool:
        return Annotation.BOLD in self.annotations

    @property
    def italic(self) -> bool:
        return Annotation.ITALIC in self.annotations

    @property
    def strikethrough(self) -> bool:
        return Annotation.STRIKETHROUGH in self.annotations

    @property
    def underline(self) -> bool:
        return Annotation.UNDERLINE in self.annotations

    @property
    def code(self) -> bool:
        return Annotation.CODE in self.annotations


RichText = tuple[TextRun, ...]


# =============================================================================
# Blocks
# =============================================================================

@dataclass(frozen=True)
class Paragraph:
    runs: RichText = ()

    block_type: ClassVar[str] = BlockType.PARAGRAPH


@dataclass(frozen=True)
class Heading:
    """A section heading.

    Attributes:
        level: Heading depth, 1 to 3
        runs: Heading text
    """

    level: int
    runs: RichText = ()

    @property
    def block_type(self) -> str:
        return f"heading_{self.level}"


@dataclass(frozen=True)
class BulletedListItem:
    runs: RichText = ()

    block_type: ClassVar[str] = BlockType.BULLETED_LIST_ITEM


@dataclass(frozen=True)
class NumberedListItem:
    runs: RichText = ()

    block_type: ClassVar[str] = BlockType.NUMBERED_LIST_ITEM


@dataclass(frozen=True)
class Quote:
    runs: RichText = ()

    block_type: ClassVar[str] = BlockType.QUOTE


@dataclass(frozen=True)
class Code:
    """A code listing.

    Attributes:
        runs: The source text
        language: Language identifier; empty means plain text
    """

    runs: RichText = ()
    language: Optional[str] = None

    block_type: ClassVar[str] = BlockType.CODE


@dataclass(frozen=True)
class Divider:
    block_type: ClassVar[str] = BlockType.DIVIDER


@dataclass(frozen=True)
class Image:
    """An image, hosted externally or by Notion.

    Attributes:
        url: Image source URL
        caption: Caption text, may be empty
    """

    url: str
    caption: RichText = ()

    block_type: ClassVar[str] = BlockType.IMAGE


@dataclass(frozen=True)
class Callout:
    """A highlighted aside with a leading icon.

    Attributes:
        runs: Callout text
        icon: Emoji icon, None when the block has no emoji icon
    """

    runs: RichText = ()
    icon: Optional[str] = None

    block_type: ClassVar[str] = BlockType.CALLOUT


@dataclass(frozen=True)
class Toggle:
    summary: RichText = ()

    block_type: ClassVar[str] = BlockType.TOGGLE


@dataclass(frozen=True)
class Bookmark:
    url: str = ""

    block_type: ClassVar[str] = BlockType.BOOKMARK


@dataclass(frozen=True)
class UnsupportedBlock:
    """Any block type the renderer does not know about.

    Attributes:
        type: The raw type discriminator reported by Notion
    """

    type: str = ""

    block_type: ClassVar[str] = BlockType.UNSUPPORTED


ContentBlock = Union[
    Paragraph,
    Heading,
    BulletedListItem,
    NumberedListItem,
    Quote,
    Code,
    Divider,
    Image,
    Callout,
    Toggle,
    Bookmark,
    UnsupportedBlock,
]

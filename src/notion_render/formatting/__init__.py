"""Formatting utilities for parsing Notion content and rendering HTML."""

from notion_render.formatting.ir import (
    Annotation,
    BlockType,
    TextRun,
    ContentBlock,
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
)
from notion_render.formatting.parser import (
    BlockParser,
    parse_block,
    parse_blocks,
    parse_rich_text,
    plain_text,
)
from notion_render.formatting.html import (
    escape_html,
    compose_run,
    render_runs,
    render_block,
    render_document,
)

__all__ = [
    "Annotation",
    "BlockType",
    "TextRun",
    "ContentBlock",
    "Paragraph",
    "Heading",
    "BulletedListItem",
    "NumberedListItem",
    "Quote",
    "Code",
    "Divider",
    "Image",
    "Callout",
    "Toggle",
    "Bookmark",
    "UnsupportedBlock",
    "BlockParser",
    "parse_block",
    "parse_blocks",
    "parse_rich_text",
    "plain_text",
    "escape_html",
    "compose_run",
    "render_runs",
    "render_block",
    "render_document",
]

"""Parser for converting Notion API payloads to IR."""

from typing import Any, Callable, Iterable

from notion_render.formatting.ir import (
    Annotation,
    BlockType,
    Bookmark,
    BulletedListItem,
    Callout,
    Code,
    ContentBlock,
    Divider,
    Heading,
    Image,
    NumberedListItem,
    Paragraph,
    Quote,
    RichText,
    TextRun,
    Toggle,
    UnsupportedBlock,
)

# Notion annotation keys mapped to IR flags
ANNOTATION_FLAGS: dict[str, Annotation] = {
    "bold": Annotation.BOLD,
    "italic": Annotation.ITALIC,
    "strikethrough": Annotation.STRIKETHROUGH,
    "underline": Annotation.UNDERLINE,
    "code": Annotation.CODE,
}


def as_dict(value: Any) -> dict[str, Any]:
    """Return value if it is a JSON object, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_text(value: Any) -> str:
    """Return value if it is a string, else an empty string."""
    return value if isinstance(value, str) else ""


def _rich_text_items(items: Any) -> list[dict[str, Any]]:
    """Keep the object entries of a rich text array; anything else is empty."""
    if not isinstance(items, (list, tuple)):
        return []
    return [item for item in items if isinstance(item, dict)]


def parse_rich_text(items: Any) -> RichText:
    """Convert a Notion rich text array to a tuple of TextRuns.

    Missing fields fall back to empty text, no annotations and no link.
    Entries that are not objects are skipped.
    """
    runs: list[TextRun] = []
    for item in _rich_text_items(items):
        annotations = Annotation.NONE
        flags = as_dict(item.get("annotations"))
        for key, flag in ANNOTATION_FLAGS.items():
            if flags.get(key) is True:
                annotations |= flag
        runs.append(
            TextRun(
                text=as_text(item.get("plain_text")),
                annotations=annotations,
                link=as_text(item.get("href")) or None,
            )
        )
    return tuple(runs)


def plain_text(items: Any) -> str:
    """Concatenate the plain text of a Notion rich text array."""
    return "".join(
        as_text(item.get("plain_text")) for item in _rich_text_items(items)
    )


class BlockParser:
    """Parse Notion block objects into the content IR."""

    def __init__(self) -> None:
        self._parsers: dict[str, Callable[[dict[str, Any]], ContentBlock]] = {
            BlockType.PARAGRAPH: self._parse_paragraph,
            BlockType.HEADING_1: self._heading_parser(1),
            BlockType.HEADING_2: self._heading_parser(2),
            BlockType.HEADING_3: self._heading_parser(3),
            BlockType.BULLETED_LIST_ITEM: self._parse_bulleted_list_item,
            BlockType.NUMBERED_LIST_ITEM: self._parse_numbered_list_item,
            BlockType.QUOTE: self._parse_quote,
            BlockType.CODE: self._parse_code,
            BlockType.DIVIDER: self._parse_divider,
            BlockType.IMAGE: self._parse_image,
            BlockType.CALLOUT: self._parse_callout,
            BlockType.TOGGLE: self._parse_toggle,
            BlockType.BOOKMARK: self._parse_bookmark,
        }

    @property
    def supported_types(self) -> tuple[str, ...]:
        """Return the Notion block types this parser understands."""
        return tuple(self._parsers)

    def parse(self, data: Any) -> ContentBlock:
        """Convert one Notion block object to a ContentBlock.

        Args:
            data: A block object as returned by the Notion API

        Returns:
            The matching IR block, or UnsupportedBlock for unknown types
        """
        data = as_dict(data)
        block_type = as_text(data.get("type"))
        parser = self._parsers.get(block_type)
        if parser is None:
            return UnsupportedBlock(type=block_type)
        return parser(data)

    def parse_all(self, items: Iterable[dict[str, Any]]) -> list[ContentBlock]:
        """Convert a sequence of Notion block objects, preserving order."""
        return [self.parse(item) for item in items]

    @staticmethod
    def _payload(data: dict[str, Any]) -> dict[str, Any]:
        """Get the type-specific payload of a block (e.g. data["quote"])."""
        return as_dict(data.get(as_text(data.get("type"))))

    def _runs(self, data: dict[str, Any], key: str = "rich_text") -> RichText:
        return parse_rich_text(self._payload(data).get(key))

    def _parse_paragraph(self, data: dict[str, Any]) -> ContentBlock:
        return Paragraph(runs=self._runs(data))

    def _heading_parser(
        self, level: int
    ) -> Callable[[dict[str, Any]], ContentBlock]:
        def parse_heading(data: dict[str, Any]) -> ContentBlock:
            return Heading(level=level, runs=self._runs(data))

        return parse_heading

    def _parse_bulleted_list_item(self, data: dict[str, Any]) -> ContentBlock:
        return BulletedListItem(runs=self._runs(data))

    def _parse_numbered_list_item(self, data: dict[str, Any]) -> ContentBlock:
        return NumberedListItem(runs=self._runs(data))

    def _parse_quote(self, data: dict[str, Any]) -> ContentBlock:
        return Quote(runs=self._runs(data))

    def _parse_code(self, data: dict[str, Any]) -> ContentBlock:
        return Code(
            runs=self._runs(data),
            language=as_text(self._payload(data).get("language")) or None,
        )

    def _parse_divider(self, data: dict[str, Any]) -> ContentBlock:
        return Divider()

    def _parse_image(self, data: dict[str, Any]) -> ContentBlock:
        payload = self._payload(data)
        # Images are either hosted by Notion ("file") or linked ("external")
        source_key = "external" if payload.get("type") == "external" else "file"
        url = as_text(as_dict(payload.get(source_key)).get("url"))
        return Image(url=url, caption=parse_rich_text(payload.get("caption")))

    def _parse_callout(self, data: dict[str, Any]) -> ContentBlock:
        icon = as_dict(self._payload(data).get("icon"))
        emoji = as_text(icon.get("emoji")) if icon.get("type") == "emoji" else None
        return Callout(runs=self._runs(data), icon=emoji or None)

    def _parse_toggle(self, data: dict[str, Any]) -> ContentBlock:
        return Toggle(summary=self._runs(data))

    def _parse_bookmark(self, data: dict[str, Any]) -> ContentBlock:
        return Bookmark(url=as_text(self._payload(data).get("url")))


def parse_block(data: dict[str, Any]) -> ContentBlock:
    """Convert one Notion block object using a default parser."""
    return BlockParser().parse(data)


def parse_blocks(items: Iterable[dict[str, Any]]) -> list[ContentBlock]:
    """Convert a sequence of Notion block objects using a default parser."""
    return BlockParser().parse_all(items)

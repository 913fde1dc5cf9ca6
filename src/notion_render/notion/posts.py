"""Blog post retrieval from a Notion database."""

from dataclasses import dataclass
from typing import Any, Optional

from notion_render.config import Settings, get_settings
from notion_render.formatting.ir import ContentBlock
from notion_render.formatting.parser import BlockParser, plain_text
from notion_render.notion.client import NotionClient
from notion_render.utils.logging import get_logger

logger = get_logger(__name__)

PUBLISHED_FILTER: dict[str, Any] = {
    "property": "Published",
    "checkbox": {"equals": True},
}
DATE_DESCENDING: list[dict[str, Any]] = [
    {"property": "Date", "direction": "descending"},
]


@dataclass(frozen=True)
class BlogPost:
    """Summary of one post page in the blog database.

    Attributes:
        id: Notion page id
        slug: URL slug
        title: Post title
        description: Short description
        date: Publication date (ISO string), empty when unset
        tags: Tag names from the multi-select property
        published: Whether the Published checkbox is ticked
    """

    id: str
    slug: str
    title: str = ""
    description: str = ""
    date: str = ""
    tags: tuple[str, ...] = ()
    published: bool = False


def post_from_page(page: dict[str, Any], slug_fallback: bool = True) -> BlogPost:
    """Flatten a Notion page object into a BlogPost.

    Args:
        page: A page object from a database query
        slug_fallback: Use the page id when the Slug property is empty

    Returns:
        BlogPost with missing properties replaced by empty defaults
    """
    props = page.get("properties") or {}

    def prop(name: str) -> dict[str, Any]:
        return props.get(name) or {}

    page_id = page.get("id") or ""
    slug = plain_text(prop("Slug").get("rich_text"))
    if not slug and slug_fallback:
        slug = page_id

    return BlogPost(
        id=page_id,
        slug=slug,
        title=plain_text(prop("Title").get("title")),
        description=plain_text(prop("Description").get("rich_text")),
        date=(prop("Date").get("date") or {}).get("start") or "",
        tags=tuple(
            tag.get("name") or "" for tag in prop("Tags").get("multi_select") or []
        ),
        published=bool(prop("Published").get("checkbox")),
    )


class PostRepository:
    """Read published posts and their content from Notion.

    When the settings carry no usable credentials every query returns an
    empty result instead of contacting the API.
    """

    def __init__(
        self,
        client: Optional[NotionClient] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize the repository.

        Args:
            client: Notion client; built from settings when omitted
            settings: Application settings (defaults to global settings)
        """
        self.settings = settings or get_settings()
        self.database_id = self.settings.notion_database_id
        if client is None and self.settings.is_configured:
            client = NotionClient.from_settings(self.settings)
        self.client = client
        self.parser = BlockParser()

    @property
    def is_configured(self) -> bool:
        return self.client is not None and bool(self.database_id)

    def get_all_posts(self) -> list[BlogPost]:
        """Get every published post, newest first."""
        if not self.is_configured:
            logger.warning("Notion is not configured; returning no posts")
            return []

        pages = self.client.query_database(
            self.database_id,
            filter=PUBLISHED_FILTER,
            sorts=DATE_DESCENDING,
        )
        logger.debug(f"Found {len(pages)} published post(s)")
        return [post_from_page(page) for page in pages]

    def get_post_by_slug(self, slug: str) -> Optional[BlogPost]:
        """Get the published post with the given slug, if any."""
        if not self.is_configured:
            logger.warning("Notion is not configured; cannot resolve posts")
            return None

        pages = self.client.query_database(
            self.database_id,
            filter={
                "and": [
                    {"property": "Slug", "rich_text": {"equals": slug}},
                    PUBLISHED_FILTER,
                ],
            },
        )
        if not pages:
            return None
        return post_from_page(pages[0], slug_fallback=False)

    def get_page_content(self, page_id: str) -> list[ContentBlock]:
        """Get all top-level blocks of a page as IR blocks."""
        if self.client is None:
            logger.warning("Notion is not configured; returning no content")
            return []

        raw_blocks = self.client.list_block_children(page_id)
        logger.debug(f"Fetched {len(raw_blocks)} block(s) for page {page_id}")
        return self.parser.parse_all(raw_blocks)

    def close(self) -> None:
        if self.client is not None:
            self.client.close()

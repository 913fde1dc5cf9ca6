"""Page rendering orchestrator."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from notion_render.errors import NotionRenderError
from notion_render.formatting.html import escape_html, render_document
from notion_render.formatting.parser import BlockParser
from notion_render.notion.posts import BlogPost, PostRepository
from notion_render.utils.logging import get_logger

logger = get_logger(__name__)


class RenderError(NotionRenderError):
    """Error loading content for rendering."""

    pass


@dataclass(frozen=True)
class RenderedPost:
    """A post summary together with its rendered body."""

    post: BlogPost
    html: str


def wrap_standalone(body: str, title: str = "") -> str:
    """Wrap a rendered fragment in a minimal HTML5 page."""
    return "\n".join([
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8" />',
        f"<title>{escape_html(title)}</title>",
        "</head>",
        "<body>",
        "<article>",
        body,
        "</article>",
        "</body>",
        "</html>",
    ])


class PageRenderer:
    """Orchestrates the Notion to HTML pipeline.

    Pipeline:
    1. Resolve the post (by slug) or take a page id directly
    2. Fetch all block children, following pagination cursors
    3. Parse raw block objects into the content IR
    4. Render the IR to HTML with list grouping
    """

    def __init__(self, repository: Optional[PostRepository] = None) -> None:
        """Initialize the renderer.

        Args:
            repository: Post repository; built from settings when omitted
        """
        self._repository = repository
        self.parser = BlockParser()

    @property
    def repository(self) -> PostRepository:
        # Built lazily so offline rendering never needs credentials
        if self._repository is None:
            self._repository = PostRepository()
        return self._repository

    def __enter__(self) -> "PageRenderer":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the repository's HTTP client, if one was built."""
        if self._repository is not None:
            self._repository.close()

    def render_page(self, page_id: str) -> str:
        """Fetch a page's blocks and render them to HTML."""
        blocks = self.repository.get_page_content(page_id)
        return render_document(blocks)

    def render_post(self, slug: str) -> Optional[RenderedPost]:
        """Resolve a published post by slug and render its content.

        Returns:
            The rendered post, or None when no published post matches
        """
        post = self.repository.get_post_by_slug(slug)
        if post is None:
            logger.info(f"No published post with slug {slug!r}")
            return None
        return RenderedPost(post=post, html=self.render_page(post.id))

    def render_file(self, path: Path) -> str:
        """Render a local JSON dump of Notion blocks.

        The file may hold a list of block objects or a block-children
        response with a ``results`` array.

        Raises:
            RenderError: If the file cannot be read or has the wrong shape
        """
        try:
            data: Any = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise RenderError(f"Could not load blocks from {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("results")
        if not isinstance(data, list):
            raise RenderError(
                f"Expected a list of blocks or a 'results' array in {path}"
            )

        blocks = self.parser.parse_all(item for item in data if isinstance(item, dict))
        return render_document(blocks)

    def write_html(
        self,
        html: str,
        path: Path,
        standalone: bool = False,
        title: str = "",
    ) -> None:
        """Write rendered HTML to a UTF-8 file."""
        if standalone:
            html = wrap_standalone(html, title)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html + "\n", encoding="utf-8")

"""Notion API access for Notion Render."""

from notion_render.notion.client import NotionClient
from notion_render.notion.posts import BlogPost, PostRepository, post_from_page

__all__ = [
    "NotionClient",
    "BlogPost",
    "PostRepository",
    "post_from_page",
]

"""Core rendering orchestration for Notion Render."""

from notion_render.core.renderer import PageRenderer, RenderedPost, wrap_standalone

__all__ = [
    "PageRenderer",
    "RenderedPost",
    "wrap_standalone",
]

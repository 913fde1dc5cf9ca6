"""Shared utilities for Notion Render."""

from notion_render.utils.logging import get_logger

__all__ = ["get_logger"]

"""Notion Render - turn Notion block trees into semantic HTML."""

__version__ = "0.1.0"

"""Pytest fixtures for Notion Render tests."""

import json
from pathlib import Path
from typing import Any, Callable, Optional

import httpx
import pytest

from notion_render.config import Settings


def rich_text(
    text: str,
    href: Optional[str] = None,
    **annotations: bool,
) -> dict[str, Any]:
    """Build a Notion rich text item."""
    flags = {
        "bold": False,
        "italic": False,
        "strikethrough": False,
        "underline": False,
        "code": False,
        "color": "default",
    }
    flags.update(annotations)
    return {
        "type": "text",
        "text": {"content": text, "link": {"url": href} if href else None},
        "plain_text": text,
        "annotations": flags,
        "href": href,
    }


def block(block_type: str, **payload: Any) -> dict[str, Any]:
    """Build a Notion block object of the given type."""
    return {
        "object": "block",
        "id": f"{block_type}-id",
        "type": block_type,
        "has_children": False,
        block_type: payload,
    }


def text_block(block_type: str, text: str) -> dict[str, Any]:
    """Build a block whose payload is a single plain rich text item."""
    return block(block_type, rich_text=[rich_text(text)] if text else [])


@pytest.fixture
def configured_settings() -> Settings:
    """Settings with credentials that pass the configuration check."""
    return Settings(
        _env_file=None,
        NOTION_API_KEY="secret_test_key",
        NOTION_DATABASE_ID="0123456789abcdef",
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without any credentials."""
    return Settings(_env_file=None, NOTION_API_KEY="", NOTION_DATABASE_ID="")


@pytest.fixture
def sample_blocks() -> list[dict[str, Any]]:
    """A short post mixing headings, paragraphs and both list types."""
    return [
        text_block("heading_1", "Hello"),
        block(
            "paragraph",
            rich_text=[
                rich_text("Some "),
                rich_text("bold", bold=True),
                rich_text(" text."),
            ],
        ),
        text_block("bulleted_list_item", "one"),
        text_block("bulleted_list_item", "two"),
        text_block("numbered_list_item", "first"),
        text_block("paragraph", ""),
        block("divider"),
    ]


@pytest.fixture
def blocks_file(tmp_path: Path, sample_blocks: list[dict[str, Any]]) -> Path:
    """A block-children response saved to disk."""
    file_path = tmp_path / "blocks.json"
    file_path.write_text(
        json.dumps({"object": "list", "results": sample_blocks, "has_more": False}),
        encoding="utf-8",
    )
    return file_path


@pytest.fixture
def mock_transport() -> Callable[..., httpx.MockTransport]:
    """Build an httpx transport that replays queued responses.

    Each response is a (status, json_body) tuple; every request received is
    recorded on the returned transport as ``requests``.
    """

    def factory(*responses: tuple[int, Any]) -> httpx.MockTransport:
        queue = list(responses)
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            status, body = queue.pop(0)
            return httpx.Response(status, json=body)

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return factory

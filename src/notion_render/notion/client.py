"""Notion REST API client built on httpx."""

import logging
from typing import Any, Callable, Iterator, Optional

import httpx
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from notion_render import __version__
from notion_render.config import Settings, get_settings
from notion_render.errors import NotionAPIError, NotionConfigError, RetryableAPIError
from notion_render.utils.logging import get_logger

logger = get_logger(__name__)

# Largest page the Notion API will return
MAX_PAGE_SIZE = 100


class NotionClient:
    """Thin synchronous client for the Notion endpoints the renderer needs.

    Paginated endpoints are followed cursor by cursor, one request at a
    time, and flattened into a single ordered list.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.notion.com/v1",
        notion_version: str = "2022-06-28",
        timeout: float = 30.0,
        page_size: int = MAX_PAGE_SIZE,
        max_retries: int = 3,
        wait_min: float = 1.0,
        wait_max: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Notion integration token
            base_url: API root URL
            notion_version: Value of the Notion-Version header
            timeout: Request timeout in seconds
            page_size: Results requested per page (capped at 100)
            max_retries: Attempts made for transient failures
            wait_min: Minimum backoff between retries in seconds
            wait_max: Maximum backoff between retries in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.page_size = max(1, min(page_size, MAX_PAGE_SIZE))
        self.max_retries = max_retries
        self.wait_min = wait_min
        self.wait_max = wait_max
        self._http = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Notion-Version": notion_version,
                "Content-Type": "application/json",
                "User-Agent": f"notion-render/{__version__}",
            },
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "NotionClient":
        """Create a client from application settings.

        Raises:
            NotionConfigError: If the credentials are missing or malformed
        """
        settings = settings or get_settings()
        if not settings.is_configured:
            raise NotionConfigError(
                "NOTION_API_KEY and NOTION_DATABASE_ID are not configured"
            )
        return cls(
            api_key=settings.notion_api_key,
            base_url=settings.api_base,
            notion_version=settings.notion_version,
            timeout=settings.timeout,
            page_size=settings.page_size,
            max_retries=settings.max_retries,
            transport=transport,
        )

    def __enter__(self) -> "NotionClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def _send(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Make a single API request and map failures to exceptions."""
        try:
            response = self._http.request(method, path, params=params, json=body)
        except httpx.TransportError as e:
            raise RetryableAPIError(f"Connection error: {e}") from e

        if response.status_code == 429 or response.status_code >= 500:
            raise RetryableAPIError(
                f"Transient error {response.status_code} from {path}",
                status=response.status_code,
            )

        if response.is_error:
            try:
                payload = response.json()
            except ValueError:
                payload = {}
            if not isinstance(payload, dict):
                payload = {}
            message = payload.get("message") or response.reason_phrase
            raise NotionAPIError(
                f"Notion API error {response.status_code}: {message}",
                status=response.status_code,
                code=payload.get("code"),
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise NotionAPIError(
                f"Invalid JSON in response from {path}",
                status=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise NotionAPIError(
                f"Unexpected response body from {path}",
                status=response.status_code,
            )
        return payload

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Make an API request with retry logic for transient failures."""
        retrying = Retrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=self.wait_min, max=self.wait_max),
            retry=retry_if_exception_type((RetryableAPIError,)),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        return retrying(self._send, method, path, params=params, body=body)

    def _paginate(
        self, fetch_page: Callable[[Optional[str]], dict[str, Any]]
    ) -> Iterator[dict[str, Any]]:
        """Yield results from every page, following continuation cursors."""
        cursor: Optional[str] = None
        pages = 0
        while True:
            data = fetch_page(cursor)
            pages += 1
            yield from data.get("results") or []

            cursor = data.get("next_cursor") if data.get("has_more") else None
            if not cursor:
                break
        logger.debug(f"Fetched {pages} page(s)")

    def query_database(
        self,
        database_id: str,
        filter: Optional[dict[str, Any]] = None,
        sorts: Optional[list[dict[str, Any]]] = None,
    ) -> list[dict[str, Any]]:
        """Query a database and return every matching page object.

        Args:
            database_id: The database to query
            filter: Optional Notion filter object
            sorts: Optional list of Notion sort objects

        Returns:
            Page objects across all result pages, in API order
        """

        def fetch_page(cursor: Optional[str]) -> dict[str, Any]:
            body: dict[str, Any] = {"page_size": self.page_size}
            if filter:
                body["filter"] = filter
            if sorts:
                body["sorts"] = sorts
            if cursor:
                body["start_cursor"] = cursor
            return self._request("POST", f"/databases/{database_id}/query", body=body)

        return list(self._paginate(fetch_page))

    def list_block_children(self, block_id: str) -> list[dict[str, Any]]:
        """Return every child block of a page or block, in document order."""

        def fetch_page(cursor: Optional[str]) -> dict[str, Any]:
            params: dict[str, Any] = {"page_size": self.page_size}
            if cursor:
                params["start_cursor"] = cursor
            return self._request("GET", f"/blocks/{block_id}/children", params=params)

        return list(self._paginate(fetch_page))

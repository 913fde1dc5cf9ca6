"""Exception hierarchy for Notion Render."""

from typing import Optional


class NotionRenderError(Exception):
    """Base exception for all Notion Render errors."""

    pass


class NotionConfigError(NotionRenderError):
    """Notion credentials are missing or malformed."""

    pass


class NotionAPIError(NotionRenderError):
    """Error communicating with the Notion API."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code


class RetryableAPIError(NotionAPIError):
    """Transient API failure (rate limit, server error, network)."""

    pass

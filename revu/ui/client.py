"""
Review Proxy Client

Thin httpx client the editor UI uses to reach the review proxy.
"""

from typing import Optional

import httpx

from revu.logging_config import get_logger

logger = get_logger(__name__)


class ReviewClientError(Exception):
    """Raised when the review proxy cannot be reached or answers with an error."""
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ReviewClient:
    """
    HTTP client for the review proxy.

    Usage:
        client = ReviewClient("http://127.0.0.1:8000")
        markdown = client.request_review(code)
    """

    REVIEW_PATH = "/ai/get-review"

    def __init__(
        self,
        base_url: str,
        timeout: float = 120.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def request_review(self, code: str) -> str:
        """
        Ask the proxy to review a code snippet.

        Args:
            code: Code text as typed in the editor

        Returns:
            Markdown review text

        Raises:
            ReviewClientError: On transport failure or a non-2xx response
        """
        try:
            with httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport
            ) as client:
                response = client.post(self.REVIEW_PATH, json={"code": code})
        except httpx.HTTPError as e:
            logger.error(
                "Review request failed",
                url=self.base_url,
                error=str(e),
                error_type=type(e).__name__
            )
            raise ReviewClientError(f"Review request failed: {e}") from e

        if response.is_error:
            logger.error(
                "Review proxy returned an error",
                status_code=response.status_code,
                response_body=response.text[:500]
            )
            raise ReviewClientError(
                f"Review proxy returned {response.status_code}",
                status_code=response.status_code
            )

        return response.text

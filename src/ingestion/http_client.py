"""
HTTP infrastructure layer for fetching upstream alert pages.

Provides:
- HTTPClientError / FetchError: failure taxonomy for upstream fetches
- HTMLFetcher: async GET returning raw markup with a fixed client identity

The fetcher deliberately does not retry: a failed listing page fails its
collector, and a failed article page is skipped by the collector. This
layer separates HTTP concerns from the markup extraction rules in the
collectors.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "ScamOfTheDayBot/1.0 (educational)"
DEFAULT_ACCEPT = "text/html,*/*"


class HTTPClientError(Exception):
    """Base exception for HTTP client errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class FetchError(HTTPClientError):
    """Raised when a page cannot be fetched (transport failure or non-2xx status)."""

    pass


class HTMLFetcher:
    """
    Async HTML fetcher with a self-identifying User-Agent.

    Features:
    - One outbound GET per fetch() call, no retries
    - Redirects followed by the transport
    - Non-2xx statuses and transport errors raised as FetchError
    - Context manager for proper resource cleanup

    Example:
        async with HTMLFetcher() as fetcher:
            html = await fetcher.fetch("https://consumer.ftc.gov/consumer-alerts")
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize fetcher.

        Args:
            user_agent: Value sent as the User-Agent header on every request.
            client: Optional pre-built httpx client (not closed by the fetcher).
        """
        self.user_agent = user_agent
        self._client = client
        self._owns_client = client is None

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": DEFAULT_ACCEPT}

    async def __aenter__(self) -> "HTMLFetcher":
        """Enter async context manager, create client."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager, close client."""
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(follow_redirects=True)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> str:
        """
        GET a page and return its markup.

        Args:
            url: Absolute page URL

        Returns:
            Response body decoded as text

        Raises:
            FetchError: On a malformed URL, transport failure or a status
                outside 200-299
        """
        client = self._ensure_client()

        try:
            response = await client.get(url, headers=self.headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            # Malformed hrefs surface as InvalidURL or IDNA errors before any I/O
            raise FetchError(f"Fetch failed for {url}: {e}", url=url) from e

        if not response.is_success:
            raise FetchError(
                f"Fetch failed {response.status_code} for {url}",
                status_code=response.status_code,
                url=url,
            )

        logger.debug(f"Fetched {url} ({len(response.content)} bytes)")
        return response.text

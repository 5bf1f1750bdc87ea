"""Async HTTP client for fetching KSP pages."""

from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from domain.exceptions import FetchError

from .settings import DEFAULT_BASE_URL

HTML_ACCEPT = "text/html,application/xhtml+xml"


class AsyncHTTPClient:
    """Thin wrapper around ``httpx.AsyncClient`` resolving paths against the KSP site."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        session_cookie: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize client.

        Args:
            base_url: Site root that relative paths are resolved against
            timeout: Request timeout in seconds, None waits indefinitely
            session_cookie: Raw ``Cookie`` header of a logged in session
            transport: Custom httpx transport (used in tests)
        """
        self.base_url = base_url
        headers = {"Cookie": session_cookie} if session_cookie else {}
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    def absolute_url(self, url: str) -> str:
        return urljoin(self.base_url, url)

    async def get(self, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
        """
        GET the URL.

        Raises:
            FetchError: On network errors and HTTP status >= 400
        """
        absolute = self.absolute_url(url)
        logger.debug(f"GET {absolute}")

        try:
            response = await self._client.get(absolute, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Request to {absolute} failed: {e}")
            raise FetchError(absolute, reason=str(e)) from e

        if response.status_code >= 400:
            logger.error(f"Request to {absolute} returned {response.status_code}")
            raise FetchError(absolute, response.status_code, response.reason_phrase)

        return response

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        response = await self.get(url)
        return response.text

    async def get_document(self, url: str) -> BeautifulSoup:
        """
        Get HTML document from URL.

        A ``<base>`` pointing at the page is added when the page has none, so
        relative references keep resolving against the page location.
        """
        absolute = self.absolute_url(url)
        response = await self.get(absolute, headers={"Accept": HTML_ACCEPT})
        document = BeautifulSoup(response.text, "lxml")
        ensure_base(document, absolute)
        return document


def ensure_base(document: BeautifulSoup, url: str) -> None:
    """
    Make the document base an absolute URL anchored at ``url``.

    An existing relative ``<base>`` is resolved against ``url``, a ``<base>``
    without href gets ``url`` and a document without one gets a new element.
    """
    base = document.find("base")
    if base is not None:
        href = base.get("href")
        base["href"] = urljoin(url, href.strip()) if isinstance(href, str) else url
        return

    head = document.head
    if head is None:
        head = document.new_tag("head")
        (document.html or document).insert(0, head)

    head.append(document.new_tag("base", href=url))

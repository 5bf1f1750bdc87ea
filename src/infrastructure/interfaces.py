"""Protocol interfaces for infrastructure collaborators."""

from typing import Protocol

from bs4 import BeautifulSoup


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str) -> str:
        """Get text content from URL."""
        ...

    async def get_document(self, url: str) -> BeautifulSoup:
        """Get parsed HTML document from URL."""
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...


class SessionProviderProtocol(Protocol):
    """Protocol for checking whether a KSP session is active."""

    def is_authenticated(self) -> bool:
        """Return True if requests are made on behalf of a logged in user."""
        ...

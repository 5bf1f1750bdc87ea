"""Infrastructure layer: transport, session and settings."""

from .http_client import AsyncHTTPClient
from .interfaces import HTTPClientProtocol, SessionProviderProtocol
from .session import CookieSessionProvider, StaticSessionProvider
from .settings import Settings, configure_logging, get_settings

__all__ = [
    "AsyncHTTPClient",
    "CookieSessionProvider",
    "HTTPClientProtocol",
    "SessionProviderProtocol",
    "Settings",
    "StaticSessionProvider",
    "configure_logging",
    "get_settings",
]

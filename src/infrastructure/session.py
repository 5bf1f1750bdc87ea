"""Session status providers."""

from .interfaces import SessionProviderProtocol


class StaticSessionProvider(SessionProviderProtocol):
    """Session state decided up front."""

    def __init__(self, authenticated: bool):
        self.authenticated = authenticated

    def is_authenticated(self) -> bool:
        return self.authenticated


class CookieSessionProvider(SessionProviderProtocol):
    """Authenticated iff a session cookie is configured for the HTTP client."""

    def __init__(self, session_cookie: str | None):
        self.session_cookie = session_cookie

    def is_authenticated(self) -> bool:
        return bool(self.session_cookie)

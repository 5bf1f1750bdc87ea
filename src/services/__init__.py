from infrastructure.settings import Settings, get_settings
from services.tasks import TaskService


def create_task_service(settings: Settings | None = None) -> TaskService:
    """Factory function to create task service with all dependencies."""
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.session import CookieSessionProvider

    settings = settings or get_settings()

    http_client = AsyncHTTPClient(
        base_url=settings.base_url,
        timeout=settings.http_timeout,
        session_cookie=settings.session_cookie,
    )

    return TaskService(
        http_client=http_client,
        session_provider=CookieSessionProvider(settings.session_cookie),
        tasks_path=settings.tasks_path,
    )


__all__ = ["TaskService", "create_task_service"]

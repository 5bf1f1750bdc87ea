"""Litestar application exposing task data."""

from litestar import Litestar
from litestar.di import Provide

from api.dependencies import provide_task_service
from api.errors import handle_task_grabber_error
from api.routes import TaskController
from domain.exceptions import TaskGrabberError
from infrastructure.settings import configure_logging, get_settings


def create_app() -> Litestar:
    settings = get_settings()

    return Litestar(
        route_handlers=[TaskController],
        dependencies={"service": Provide(provide_task_service)},
        exception_handlers={TaskGrabberError: handle_task_grabber_error},
        on_startup=[lambda: configure_logging(settings.log_level)],
    )

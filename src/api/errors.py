"""Mapping of domain errors to HTTP responses."""

from litestar import Request, Response
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)
from loguru import logger

from domain.exceptions import (
    AnchorNotFoundError,
    FetchError,
    NotAuthenticatedError,
    TaskGrabberError,
    TaskIdParsingError,
)

STATUS_CODES: dict[type[TaskGrabberError], int] = {
    TaskIdParsingError: HTTP_400_BAD_REQUEST,
    NotAuthenticatedError: HTTP_401_UNAUTHORIZED,
    AnchorNotFoundError: HTTP_404_NOT_FOUND,
    FetchError: HTTP_502_BAD_GATEWAY,
}


def handle_task_grabber_error(request: Request, exc: Exception) -> Response:
    status_code = next(
        (code for error_type, code in STATUS_CODES.items() if isinstance(exc, error_type)),
        HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")

    return Response(content={"detail": str(exc)}, status_code=status_code)

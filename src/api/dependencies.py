from collections.abc import AsyncGenerator

from loguru import logger

from services import TaskService, create_task_service


async def provide_task_service() -> AsyncGenerator[TaskService, None]:
    service = create_task_service()

    try:
        yield service
    finally:
        await service.close()
        logger.debug("HTTP client closed")

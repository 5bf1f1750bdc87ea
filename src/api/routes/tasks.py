"""API routes for task data."""

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from api.schemas.task import (
    LinkResponse,
    TaskAssignmentResponse,
    TaskDescriptorResponse,
    TaskGraphResponse,
    TaskStatusResponse,
)
from services import TaskService


class TaskController(Controller):
    """Controller for task-related endpoints."""

    path = "/tasks"

    @get("/{task_id:str}/assignment", status_code=HTTP_200_OK)
    async def get_assignment(self, task_id: str, service: TaskService) -> TaskAssignmentResponse:
        """
        Get assignment of a task.

        Path parameters:
        - task_id: Canonical task id (e.g., "29-Z1-2")
        """
        logger.debug(f"API request for assignment: task_id={task_id}")
        task = await service.grab_assignment(task_id)
        return TaskAssignmentResponse.model_validate(task)

    @get("/{task_id:str}/solution", status_code=HTTP_200_OK)
    async def get_solution(self, task_id: str, service: TaskService) -> TaskAssignmentResponse:
        """
        Get solution of a task.

        Path parameters:
        - task_id: Canonical task id (e.g., "29-Z1-2")
        """
        logger.debug(f"API request for solution: task_id={task_id}")
        task = await service.grab_solution(task_id)
        return TaskAssignmentResponse.model_validate(task)

    @get("/statuses", status_code=HTTP_200_OK)
    async def get_statuses(
        self,
        service: TaskService,
        ids: list[str] | None = None,
    ) -> list[TaskStatusResponse]:
        """
        Get submission statuses of all tasks in the years of the given ids.

        Query parameters:
        - ids: Task ids, may be repeated
        """
        logger.debug(f"API request for statuses: ids={ids}")
        states = await service.grab_task_states(ids or [])
        return [TaskStatusResponse.model_validate(status) for status in states.values()]

    @get("/graph", status_code=HTTP_200_OK)
    async def get_graph(self, service: TaskService) -> TaskGraphResponse:
        """Get the task dependency graph."""
        graph = await service.load_task_graph()

        return TaskGraphResponse(
            tasks=[
                TaskDescriptorResponse(
                    id=task.id,
                    requires=list(task.requires),
                    comment=task.comment,
                )
                for task in graph.index.values()
            ],
            links=[LinkResponse(source=link.source.id, target=link.target.id) for link in graph.links],
            clusters=graph.clusters,
        )

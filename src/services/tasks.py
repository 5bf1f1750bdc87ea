"""Service for fetching task assignments, solutions, statuses and the task graph."""

import asyncio
import json

from loguru import logger

from domain.exceptions import NotAuthenticatedError
from domain.graph import build_task_graph
from domain.models import TaskAssignmentData, TaskGraph, TaskLocation, TasksFile, TaskStatus
from domain.parsers import StatusTableParser, TaskIdParser, TaskPageParser
from infrastructure.interfaces import HTTPClientProtocol, SessionProviderProtocol


class TaskService:
    """Service for loading KSP task data."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        session_provider: SessionProviderProtocol,
        id_parser: type[TaskIdParser] = TaskIdParser,
        page_parser: TaskPageParser | None = None,
        status_parser: type[StatusTableParser] = StatusTableParser,
        tasks_path: str = "/tasks.json",
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.session_provider = session_provider
        self.id_parser = id_parser
        self.page_parser = page_parser or TaskPageParser()
        self.status_parser = status_parser
        self.tasks_path = tasks_path

    async def close(self) -> None:
        await self.http_client.close()

    async def grab_assignment(self, task_id: str) -> TaskAssignmentData:
        """Get assignment of a task."""
        logger.info(f"Getting assignment of {task_id}")
        return await self.load_task(self.id_parser.resolve_location(task_id, solution=False))

    async def grab_solution(self, task_id: str) -> TaskAssignmentData:
        """Get solution of a task."""
        logger.info(f"Getting solution of {task_id}")
        return await self.load_task(self.id_parser.resolve_location(task_id, solution=True))

    async def load_task(self, location: TaskLocation) -> TaskAssignmentData:
        document = await self.http_client.get_document(location.path)
        return self.page_parser.parse(location.anchor_id, document)

    async def grab_task_states(self, task_ids: list[str]) -> dict[str, TaskStatus]:
        """
        Get submission status of tasks, keyed by task id.

        One status page is fetched per distinct year of the parseable ids.
        Unparseable ids are skipped. Rows of all fetched years are returned,
        not only the requested ids.

        Raises:
            NotAuthenticatedError: If no session is active (nothing is fetched)
            FetchError: If any of the pages fails to load
        """
        if not self.session_provider.is_authenticated():
            raise NotAuthenticatedError("Task statuses are only available to logged in users")

        parsed = (self.id_parser.parse(task_id) for task_id in task_ids)
        years = list(dict.fromkeys(p.year for p in parsed if p is not None))
        logger.info(f"Fetching task statuses for {len(years)} year(s)")

        # the first failure cancels the remaining fetches and aborts the batch
        try:
            async with asyncio.TaskGroup() as group:
                fetches = [group.create_task(self._fetch_year_statuses(year)) for year in years]
        except ExceptionGroup as e:
            logger.error(f"Fetching task statuses failed: {e.exceptions[0]}")
            raise e.exceptions[0]

        states: dict[str, TaskStatus] = {}
        for fetch in fetches:
            for status in fetch.result():
                states[status.id] = status
        return states

    async def _fetch_year_statuses(self, year: str) -> list[TaskStatus]:
        document = await self.http_client.get_document(self.id_parser.build_status_path(year))
        return self.status_parser.parse(document)

    async def load_tasks(self) -> TasksFile:
        """Load the tasks descriptor file."""
        text = await self.http_client.get_text(self.tasks_path)
        tasks_file = TasksFile.from_dict(json.loads(text))
        logger.debug(f"Loaded {len(tasks_file.tasks)} task descriptor(s)")
        return tasks_file

    async def load_task_graph(self) -> TaskGraph:
        """Load the tasks file and build the dependency graph."""
        return build_task_graph(await self.load_tasks())

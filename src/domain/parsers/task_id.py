"""Parser for KSP task ids and resolver of task locations."""

import re

from loguru import logger

from domain.exceptions import TaskIdParsingError
from domain.models import TaskId, TaskLocation


class TaskIdParser:
    """Parser for canonical task ids such as ``29-Z1-2`` or ``32-2-2``."""

    # year - optional Z marker, series - problem
    PATTERN = re.compile(r"(\d+)-(Z?)(\d)-(\d)")

    Z_PATH = "/z/ulohy/{year}/{variant}{series}.html"
    H_PATH = "/h/ulohy/{year}/{variant}{series}.html"
    STATUS_PATH = "/cviciste/?year={year}"

    @classmethod
    def parse(cls, task_id: str) -> TaskId | None:
        """
        Parse task id. Returns None when the id is not in canonical format.
        """
        match = cls.PATTERN.fullmatch(task_id)
        if not match:
            return None

        year, z_marker, series, problem = match.groups()
        return TaskId(year=year, is_z=bool(z_marker), series=series, problem=problem)

    @classmethod
    def resolve_location(cls, task_id: str, solution: bool = False) -> TaskLocation:
        """
        Build the location of a task assignment (or solution) page.

        Raises:
            TaskIdParsingError: If the id can not be parsed
        """
        parsed = cls.parse(task_id)
        if parsed is None:
            raise TaskIdParsingError(task_id)

        template = cls.Z_PATH if parsed.is_z else cls.H_PATH
        variant = "reseni" if solution else "zadani"
        location = TaskLocation(
            path=template.format(year=parsed.year, variant=variant, series=parsed.series),
            anchor_id=f"task-{task_id}",
        )

        logger.debug(f"Resolved {task_id} to {location.path}#{location.anchor_id}")
        return location

    @classmethod
    def build_status_path(cls, year: str) -> str:
        """Build path of the status table page for one year."""
        return cls.STATUS_PATH.format(year=year)


def parse_task_id(task_id: str) -> TaskId | None:
    """Convenience function to parse a task id."""
    return TaskIdParser.parse(task_id)


def resolve_location(task_id: str, solution: bool = False) -> TaskLocation:
    """Convenience function to resolve a task location."""
    return TaskIdParser.resolve_location(task_id, solution)

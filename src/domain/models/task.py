"""Value objects for data extracted from task pages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskAssignmentData:
    """Assignment or solution of one task, extracted from a shared page."""

    id: str
    name: str
    points: int | None
    description: str
    title_html: str


@dataclass(frozen=True)
class TaskStatus:
    """One row of the submission status table."""

    id: str
    name: str
    type: str
    submitted: bool
    solved: bool
    points: int
    max_points: int

"""Domain models package."""

from .graph import Link, TaskDescriptor, TaskGraph, TasksFile
from .identifiers import TaskId, TaskLocation
from .task import TaskAssignmentData, TaskStatus

__all__ = [
    "Link",
    "TaskAssignmentData",
    "TaskDescriptor",
    "TaskGraph",
    "TaskId",
    "TaskLocation",
    "TaskStatus",
    "TasksFile",
]

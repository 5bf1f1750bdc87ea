"""Builder of the task dependency graph from the tasks file."""

from collections.abc import Sequence

from loguru import logger

from domain.exceptions import DuplicateTaskIdError, MissingPrerequisiteError
from domain.models import Link, TaskDescriptor, TaskGraph, TasksFile


def build_index(descriptors: Sequence[TaskDescriptor]) -> dict[str, TaskDescriptor]:
    """
    Index descriptors by id.

    Raises:
        DuplicateTaskIdError: On the first id seen twice
    """
    index: dict[str, TaskDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.id in index:
            raise DuplicateTaskIdError(descriptor.id)
        index[descriptor.id] = descriptor
    return index


def build_edges(descriptors: Sequence[TaskDescriptor]) -> list[Link[TaskDescriptor]]:
    """
    Create one link per (prerequisite, dependent) pair.

    Raises:
        DuplicateTaskIdError: If two descriptors share an id
        MissingPrerequisiteError: If a required id is not in the set
    """
    index = build_index(descriptors)

    links: list[Link[TaskDescriptor]] = []
    for descriptor in descriptors:
        for required_id in descriptor.requires:
            prerequisite = index.get(required_id)
            if prerequisite is None:
                raise MissingPrerequisiteError(required_id)
            links.append(Link(source=prerequisite, target=descriptor))

    return links


def build_task_graph(tasks_file: TasksFile) -> TaskGraph:
    """Build an immutable snapshot of the whole dependency graph."""
    graph = TaskGraph(
        index=build_index(tasks_file.tasks),
        links=build_edges(tasks_file.tasks),
        clusters=tasks_file.clusters,
    )
    logger.debug(f"Built task graph with {len(graph.index)} task(s) and {len(graph.links)} link(s)")
    return graph

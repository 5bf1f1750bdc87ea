from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TaskDescriptor:
    """One entry of the tasks file."""

    id: str
    requires: tuple[str, ...] = ()
    comment: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TaskDescriptor:
        return cls(
            id=data["id"],
            requires=tuple(data.get("requires", [])),
            comment=data.get("comment"),
        )


@dataclass
class TasksFile:
    """Parsed tasks descriptor file."""

    tasks: list[TaskDescriptor]
    clusters: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TasksFile:
        return cls(
            tasks=[TaskDescriptor.from_dict(t) for t in data.get("tasks", [])],
            clusters=data.get("clusters", {}),
        )


@dataclass(frozen=True)
class Link(Generic[T]):
    """Directed edge: ``target`` requires ``source``."""

    source: T
    target: T


@dataclass(frozen=True)
class TaskGraph:
    """Snapshot of the dependency graph built from one tasks file."""

    index: dict[str, TaskDescriptor]
    links: list[Link[TaskDescriptor]]
    clusters: dict[str, list[str]]

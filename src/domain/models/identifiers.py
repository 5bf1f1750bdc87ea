"""Value objects for task identification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaskId:
    """Identifies a specific KSP task, e.g. ``29-Z1-2``."""

    year: str
    is_z: bool
    series: str
    problem: str

    def __str__(self) -> str:
        """Canonical string representation."""
        marker = "Z" if self.is_z else ""
        return f"{self.year}-{marker}{self.series}-{self.problem}"


@dataclass(frozen=True)
class TaskLocation:
    """Where a task lives: a document path and the anchor where it starts."""

    path: str
    anchor_id: str

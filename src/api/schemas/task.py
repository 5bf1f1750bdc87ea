"""Pydantic schemas for task API endpoints."""

from pydantic import BaseModel


class TaskAssignmentResponse(BaseModel):
    """Assignment or solution of a single task."""

    id: str
    name: str
    points: int | None = None
    description: str  # HTML fragment
    title_html: str

    class Config:
        from_attributes = True


class TaskStatusResponse(BaseModel):
    """Submission status of a single task."""

    id: str
    name: str
    type: str
    submitted: bool
    solved: bool
    points: int
    max_points: int

    class Config:
        from_attributes = True


class TaskDescriptorResponse(BaseModel):
    """One task of the dependency graph."""

    id: str
    requires: list[str]
    comment: str | None = None


class LinkResponse(BaseModel):
    """Edge of the dependency graph, ``target`` requires ``source``."""

    source: str
    target: str


class TaskGraphResponse(BaseModel):
    """Whole dependency graph."""

    tasks: list[TaskDescriptorResponse]
    links: list[LinkResponse]
    clusters: dict[str, list[str]]

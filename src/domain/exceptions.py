"""Domain exceptions for the task grabber."""


class TaskGrabberError(Exception):
    """Base exception for all task grabber errors."""

    pass


class TaskIdParsingError(TaskGrabberError, ValueError):
    """Task id does not match the canonical format."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Can not parse {task_id}")


class ParsingError(TaskGrabberError, ValueError):
    """Error parsing HTML content."""

    pass


class AnchorNotFoundError(ParsingError):
    """Document has no element with the requested anchor id."""

    def __init__(self, anchor_id: str):
        self.anchor_id = anchor_id
        super().__init__(f"Document does not contain {anchor_id}")


class StatusParsingError(ParsingError):
    """Status table row has an unexpected structure."""

    pass


class NotAuthenticatedError(TaskGrabberError):
    """Operation requires an active session."""

    def __init__(self, message: str = "Not logged in"):
        super().__init__(message)


class FetchError(TaskGrabberError):
    """Document could not be fetched."""

    def __init__(self, url: str, status_code: int | None = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        if status_code is not None:
            message = f"Failed to fetch {url}: HTTP {status_code} {reason}".rstrip()
        else:
            message = f"Failed to fetch {url}: {reason}"
        super().__init__(message)


class TaskGraphError(TaskGrabberError, ValueError):
    """Task descriptor set violates an integrity rule."""

    def __init__(self, task_id: str, message: str):
        self.task_id = task_id
        super().__init__(message)


class DuplicateTaskIdError(TaskGraphError):
    """Two descriptors share the same id."""

    def __init__(self, task_id: str):
        super().__init__(task_id, f"Duplicate task id in tasks file: {task_id}")


class MissingPrerequisiteError(TaskGraphError):
    """A descriptor requires an id that is not in the set."""

    def __init__(self, task_id: str):
        super().__init__(task_id, f"Missing task with id {task_id}")

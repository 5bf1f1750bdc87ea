from api.routes.tasks import TaskController

__all__ = ["TaskController"]

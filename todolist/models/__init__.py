from .task import Task, TaskCreate, TaskUpdate, ErrorResponse

__all__ = ["Task", "TaskCreate", "TaskUpdate", "ErrorResponse"]

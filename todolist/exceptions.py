"""任务服务自定义异常"""

from typing import Optional


class TaskError(Exception):
    """任务处理基础异常"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskError):
    """请求字段缺失或类型错误"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class TaskNotFoundError(TaskError):
    """任务不存在"""

    def __init__(self, task_id: str, message: str = "Task not found"):
        super().__init__(message)
        self.task_id = task_id

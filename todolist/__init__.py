"""To-Do List API - 内存任务清单服务"""

__version__ = "1.0.0"

"""任务存储 - 进程内按插入顺序保存任务"""
import logging
import threading
from typing import Any, List

from ..exceptions import TaskNotFoundError, TaskValidationError
from ..models.task import Task

logger = logging.getLogger(__name__)


class _Missing:
    """表示请求中未提供的字段"""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _is_title(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_completed(value: Any) -> bool:
    return isinstance(value, bool)


class TaskStore:
    """
    内存任务存储

    所有操作在同一把锁内完成。接口均为 async def，在事件循环上依次执行；
    当存储在多个线程中使用时（同步接口、后台线程），操作之间也不会交错。

    atomic_updates 为 False 时，update 先写入 title 再校验 completed，
    completed 非法时 title 的修改已经生效；为 True 时先校验全部字段再写入。
    """

    def __init__(self, atomic_updates: bool = False):
        self._tasks: List[Task] = []
        self._lock = threading.Lock()
        self.atomic_updates = atomic_updates

    def create(self, title: Any) -> Task:
        """创建任务并追加到末尾"""
        if not _is_title(title):
            raise TaskValidationError("Title is required and must be a string", field="title")

        with self._lock:
            task = Task(title=title)
            self._tasks.append(task)
            logger.info(f"任务已创建: {task.id}, 标题: {task.title}")
            return task

    def list_all(self) -> List[Task]:
        with self._lock:
            return list(self._tasks)

    def get(self, task_id: str) -> Task:
        with self._lock:
            return self._find(task_id)

    def update(self, task_id: str, title: Any = MISSING, completed: Any = MISSING) -> Task:
        """
        更新任务标题和/或完成状态

        - 未提供的字段保持原值
        - None 视为已提供，校验失败
        - 任务原地修改，位置不变
        """
        with self._lock:
            task = self._find(task_id)

            if self.atomic_updates:
                self._check_title(title)
                self._check_completed(completed)

            if title is not MISSING:
                self._check_title(title)
                task.title = title

            if completed is not MISSING:
                self._check_completed(completed)
                task.completed = completed

            logger.info(f"任务已更新: {task.id}, 标题: {task.title}, 完成: {task.completed}")
            return task

    def delete(self, task_id: str) -> Task:
        """删除任务并返回被删除的任务"""
        with self._lock:
            task = self._find(task_id)
            self._tasks.remove(task)
            logger.info(f"任务已删除: {task_id}")
            return task

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _find(self, task_id: str) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    @staticmethod
    def _check_title(title: Any) -> None:
        if title is not MISSING and not _is_title(title):
            raise TaskValidationError("Title must be a string", field="title")

    @staticmethod
    def _check_completed(completed: Any) -> None:
        if completed is not MISSING and not _is_completed(completed):
            raise TaskValidationError("Completed must be a boolean", field="completed")

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request

from ..models.task import Task, TaskCreate, TaskUpdate, ErrorResponse
from ..storage.task_store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["任务管理"])


def get_task_store(request: Request) -> TaskStore:
    """获取应用持有的任务存储"""
    return request.app.state.task_store


@router.post(
    "",
    response_model=Task,
    status_code=201,
    summary="创建任务",
    responses={400: {"model": ErrorResponse}},
)
async def create_task(
    payload: Optional[TaskCreate] = None,
    store: TaskStore = Depends(get_task_store),
):
    """
    创建新任务

    - **title**: 任务标题，非空字符串
    """
    if payload is None:
        payload = TaskCreate()
    return store.create(payload.title)


@router.get("", response_model=List[Task], summary="列出所有任务")
async def list_tasks(store: TaskStore = Depends(get_task_store)):
    """按创建顺序返回全部任务"""
    return store.list_all()


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="更新任务",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_task(
    task_id: str,
    payload: Optional[TaskUpdate] = None,
    store: TaskStore = Depends(get_task_store),
):
    """
    更新任务

    - **task_id**: 任务唯一标识符
    - **title**: 新标题（可选）
    - **completed**: 完成状态（可选，布尔值）
    """
    if payload is None:
        payload = TaskUpdate()
    return store.update(task_id, **payload.changes())


@router.delete(
    "/{task_id}",
    response_model=Task,
    summary="删除任务",
    responses={404: {"model": ErrorResponse}},
)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """删除任务并返回被删除的任务"""
    return store.delete(task_id)

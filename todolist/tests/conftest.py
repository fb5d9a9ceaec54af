"""测试公共 fixtures"""

import pytest
from fastapi.testclient import TestClient

from todolist.config import Settings
from todolist.main import create_app
from todolist.storage.task_store import TaskStore


@pytest.fixture
def store():
    """空的任务存储（保留 title 先写入的更新行为）"""
    return TaskStore()


@pytest.fixture
def atomic_store():
    """先校验后写入的任务存储"""
    return TaskStore(atomic_updates=True)


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture
def client(app):
    """每个测试使用独立应用实例，任务存储互不影响"""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c

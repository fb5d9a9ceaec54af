from pydantic import BaseModel, Field, model_validator
from typing import Any
import uuid


class Task(BaseModel):
    """任务模型"""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="任务ID")
    title: str = Field(..., min_length=1, description="任务标题")
    completed: bool = Field(default=False, description="是否已完成")


class _TaskPayload(BaseModel):
    """
    任务请求体

    字段类型不在此处校验，由 TaskStore 按 title、completed 的顺序校验。
    非 JSON 对象的请求体（数组、非 JSON Content-Type 的原始内容）视为空对象。
    """

    @model_validator(mode="before")
    @classmethod
    def object_or_empty(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        return data


class TaskCreate(_TaskPayload):
    """创建任务请求"""
    title: Any = Field(None, description="任务标题，非空字符串")


class TaskUpdate(_TaskPayload):
    """更新任务请求，未提供的字段保持原值"""
    title: Any = Field(None, description="新标题（可选）")
    completed: Any = Field(None, description="完成状态（可选，布尔值）")

    def changes(self) -> dict:
        """仅返回请求中出现过的字段，显式的 null 也会保留"""
        return self.model_dump(include=self.model_fields_set)


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str = Field(..., description="错误信息")

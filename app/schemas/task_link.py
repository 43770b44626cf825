"""Task link GraphQL types."""

from typing import Optional

import strawberry

from models import TaskLink as TaskLinkModel

from .base import format_datetime


@strawberry.type
class TaskLink:
    id: int
    task_id: int
    url: str
    title: Optional[str]
    position: int
    created_at: str

    @classmethod
    def from_model(cls, model: TaskLinkModel) -> "TaskLink":
        return cls(
            id=model.id,
            task_id=model.task_id,
            url=model.url,
            title=model.title,
            position=model.position,
            created_at=format_datetime(model.created_at),
        )


@strawberry.input
class AddTaskLinkInput:
    task_id: int
    url: str
    title: Optional[str] = None


@strawberry.input
class UpdateTaskLinkInput:
    title: Optional[str] = strawberry.UNSET
    url: Optional[str] = strawberry.UNSET

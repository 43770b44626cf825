"""Task tag GraphQL types."""

import strawberry

from models import TaskTag as TaskTagModel

from .base import format_datetime


@strawberry.type
class TaskTag:
    id: int
    task_id: int
    tag_name: str
    created_at: str

    @classmethod
    def from_model(cls, model: TaskTagModel) -> "TaskTag":
        return cls(
            id=model.id,
            task_id=model.task_id,
            tag_name=model.tag_name,
            created_at=format_datetime(model.created_at),
        )


@strawberry.input
class AddTaskTagInput:
    task_id: int
    tag_name: str

"""Trash GraphQL types."""

from typing import Optional

import strawberry

from models import TrashItem as TrashItemModel

from .base import format_datetime


@strawberry.type
class TrashItem:
    id: int
    # Snapshot of the deleted task's id, not a live reference
    task_id: str
    task_text: str
    task_date: str
    task_completed: bool
    deleted_at: str
    task_type: str
    someday_list_id: Optional[int]

    @classmethod
    def from_model(cls, model: TrashItemModel) -> "TrashItem":
        return cls(
            id=model.id,
            task_id=model.task_id,
            task_text=model.task_text,
            task_date=format_datetime(model.task_date),
            task_completed=model.task_completed,
            deleted_at=format_datetime(model.deleted_at),
            task_type=model.task_type,
            someday_list_id=model.someday_list_id,
        )


@strawberry.input
class CreateTrashInput:
    task_id: str
    task_text: str
    task_date: str
    task_completed: bool
    task_type: str
    someday_list_id: Optional[int] = None

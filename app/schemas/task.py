"""Task GraphQL types."""

from typing import Optional

import strawberry

from models import Task as TaskModel

from .base import format_datetime


@strawberry.type
class Task:
    """A task on the calendar, in a someday list, or unscheduled."""

    id: int
    title: str
    completed: bool
    # Calendar context
    date: Optional[str]
    # Someday context
    list_id: Optional[int]
    position: Optional[int]
    notes: Optional[str]
    color: Optional[str]
    created_at: str
    updated_at: str

    @classmethod
    def from_model(cls, model: TaskModel) -> "Task":
        return cls(
            id=model.id,
            title=model.title,
            completed=model.completed,
            date=format_datetime(model.date),
            list_id=model.list_id,
            position=model.position,
            notes=model.notes,
            color=model.color,
            created_at=format_datetime(model.created_at),
            updated_at=format_datetime(model.updated_at),
        )


@strawberry.input
class CreateTaskInput:
    title: str
    date: Optional[str] = None
    list_id: Optional[int] = None
    position: Optional[int] = None
    notes: Optional[str] = None
    color: Optional[str] = None


@strawberry.input
class UpdateTaskInput:
    """Omitted fields are left alone; ``null`` clears a nullable field."""

    title: Optional[str] = strawberry.UNSET
    completed: Optional[bool] = strawberry.UNSET
    date: Optional[str] = strawberry.UNSET
    list_id: Optional[int] = strawberry.UNSET
    position: Optional[int] = strawberry.UNSET
    notes: Optional[str] = strawberry.UNSET
    color: Optional[str] = strawberry.UNSET

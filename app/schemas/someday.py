"""Someday list and someday task GraphQL types."""

from typing import Optional

import strawberry

from models import SomedayList as SomedayListModel
from models import Task as TaskModel


@strawberry.type
class SomedayList:
    id: int
    name: str
    position: int

    @classmethod
    def from_model(cls, model: SomedayListModel) -> "SomedayList":
        return cls(id=model.id, name=model.name, position=model.position)


@strawberry.input
class CreateSomedayListInput:
    name: str
    position: int


@strawberry.input
class UpdateSomedayListInput:
    id: int
    name: Optional[str] = strawberry.UNSET
    position: Optional[int] = strawberry.UNSET


@strawberry.type
class SomedayTask:
    """A task in a someday list. ``description`` is stored as the task's notes."""

    id: int
    list_id: Optional[int]
    title: str
    description: Optional[str]
    completed: bool
    position: Optional[int]

    @classmethod
    def from_model(cls, model: TaskModel) -> "SomedayTask":
        return cls(
            id=model.id,
            list_id=model.list_id,
            title=model.title,
            description=model.notes,
            completed=model.completed,
            position=model.position,
        )


@strawberry.input
class CreateSomedayTaskInput:
    list_id: int
    title: str
    description: Optional[str] = None
    position: int = 0


@strawberry.input
class UpdateSomedayTaskInput:
    id: int
    title: Optional[str] = strawberry.UNSET
    description: Optional[str] = strawberry.UNSET
    completed: Optional[bool] = strawberry.UNSET
    position: Optional[int] = strawberry.UNSET
    list_id: Optional[int] = strawberry.UNSET

"""Trash GraphQL queries and mutations."""

import logging

import strawberry
from strawberry.types import Info

from app.exceptions.base import ValidationError
from app.schemas.base import parse_datetime
from app.schemas.trash import CreateTrashInput, TrashItem

logger = logging.getLogger(__name__)

TASK_TYPES = ("calendar", "someday")


@strawberry.type
class TrashQuery:
    @strawberry.field(description="Deleted-task snapshots, newest first")
    async def trash(self, info: Info) -> list[TrashItem]:
        items = await info.context.app_context.trash.find_all()
        return [TrashItem.from_model(item) for item in items]


@strawberry.type
class TrashMutation:
    @strawberry.mutation
    async def create_trash_item(self, info: Info, input: CreateTrashInput) -> TrashItem:
        if input.task_type not in TASK_TYPES:
            raise ValidationError(
                f"Invalid task type: {input.task_type}", details={"allowed": list(TASK_TYPES)}
            )
        item = await info.context.app_context.trash.create(
            task_id=input.task_id,
            task_text=input.task_text,
            task_date=parse_datetime(input.task_date),
            task_completed=input.task_completed,
            task_type=input.task_type,
            someday_list_id=input.someday_list_id,
        )
        return TrashItem.from_model(item)

    @strawberry.mutation
    async def delete_trash_item(self, info: Info, id: int) -> bool:
        return await info.context.app_context.trash.delete(id) > 0

    @strawberry.mutation(description="Purge snapshots older than seven days")
    async def clean_old_trash(self, info: Info) -> bool:
        await info.context.app_context.trash.clean_old()
        return True

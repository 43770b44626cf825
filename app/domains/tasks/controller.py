"""Task GraphQL queries and mutations."""

import logging
from typing import Optional

import strawberry
from strawberry.types import Info

from app.schemas.base import parse_datetime, parse_datetime_update, to_update
from app.schemas.task import CreateTaskInput, Task, UpdateTaskInput

from .context import build_context
from .repository import TaskChanges

logger = logging.getLogger(__name__)


@strawberry.type
class TaskQuery:
    @strawberry.field(description="Every task, calendar and someday alike")
    async def tasks(self, info: Info) -> list[Task]:
        tasks = await info.context.app_context.tasks.find_all()
        return [Task.from_model(task) for task in tasks]

    @strawberry.field(description="A single task by id")
    async def task(self, info: Info, id: int) -> Optional[Task]:
        task = await info.context.app_context.tasks.find_by_id(id)
        return Task.from_model(task) if task else None

    @strawberry.field(description="Tasks that are not completed")
    async def incomplete_tasks(self, info: Info) -> list[Task]:
        tasks = await info.context.app_context.tasks.find_incomplete()
        return [Task.from_model(task) for task in tasks]


@strawberry.type
class TaskMutation:
    @strawberry.mutation(description="Create a new task")
    async def create_task(self, info: Info, input: CreateTaskInput) -> Task:
        date = parse_datetime(input.date) if input.date is not None else None
        context = build_context(date=date, list_id=input.list_id, position=input.position)
        task = await info.context.app_context.tasks.create(
            title=input.title,
            context=context,
            notes=input.notes,
            color=input.color,
        )
        return Task.from_model(task)

    @strawberry.mutation(description="Update an existing task")
    async def update_task(self, info: Info, id: int, input: UpdateTaskInput) -> Task:
        changes = TaskChanges(
            title=to_update(input.title),
            completed=to_update(input.completed),
            date=parse_datetime_update(input.date),
            list_id=to_update(input.list_id),
            position=to_update(input.position),
            notes=to_update(input.notes),
            color=to_update(input.color),
        )
        task = await info.context.app_context.tasks.update(id, changes)
        return Task.from_model(task)

    @strawberry.mutation(description="Delete a task together with its attachments")
    async def delete_task(self, info: Info, id: int) -> bool:
        app_context = info.context.app_context
        # Blobs are not covered by the foreign-key cascade
        await app_context.task_attachments.delete_by_task(id)
        rows_affected = await app_context.tasks.delete(id)
        if rows_affected:
            logger.info("Deleted task %s", id)
        return rows_affected > 0

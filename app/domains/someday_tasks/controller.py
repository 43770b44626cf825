"""Someday task GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from app.schemas.base import to_update
from app.schemas.someday import CreateSomedayTaskInput, SomedayTask, UpdateSomedayTaskInput

from .repository import SomedayTaskChanges


@strawberry.type
class SomedayTaskQuery:
    @strawberry.field(description="All tasks that belong to a someday list")
    async def someday_tasks(self, info: Info) -> list[SomedayTask]:
        tasks = await info.context.app_context.someday_tasks.find_all()
        return [SomedayTask.from_model(task) for task in tasks]

    @strawberry.field
    async def someday_tasks_by_list(self, info: Info, list_id: int) -> list[SomedayTask]:
        tasks = await info.context.app_context.someday_tasks.find_by_list(list_id)
        return [SomedayTask.from_model(task) for task in tasks]


@strawberry.type
class SomedayTaskMutation:
    @strawberry.mutation
    async def create_someday_task(self, info: Info, input: CreateSomedayTaskInput) -> SomedayTask:
        task = await info.context.app_context.someday_tasks.create(
            list_id=input.list_id,
            title=input.title,
            description=input.description,
            position=input.position,
        )
        return SomedayTask.from_model(task)

    @strawberry.mutation
    async def update_someday_task(self, info: Info, input: UpdateSomedayTaskInput) -> SomedayTask:
        changes = SomedayTaskChanges(
            title=to_update(input.title),
            description=to_update(input.description),
            completed=to_update(input.completed),
            position=to_update(input.position),
            list_id=to_update(input.list_id),
        )
        task = await info.context.app_context.someday_tasks.update(input.id, changes)
        return SomedayTask.from_model(task)

    @strawberry.mutation
    async def toggle_someday_task(self, info: Info, id: int) -> SomedayTask:
        task = await info.context.app_context.someday_tasks.toggle_completed(id)
        return SomedayTask.from_model(task)

    @strawberry.mutation
    async def delete_someday_task(self, info: Info, id: int) -> bool:
        app_context = info.context.app_context
        if await app_context.someday_tasks.find_by_id(id) is None:
            return False
        await app_context.task_attachments.delete_by_task(id)
        return await app_context.someday_tasks.delete(id) > 0

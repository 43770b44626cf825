"""Task tag GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from app.schemas.task_tag import AddTaskTagInput, TaskTag


@strawberry.type
class TaskTagQuery:
    @strawberry.field
    async def task_tags(self, info: Info, task_id: int) -> list[TaskTag]:
        tags = await info.context.app_context.task_tags.find_by_task(task_id)
        return [TaskTag.from_model(tag) for tag in tags]

    @strawberry.field(description="Distinct tag names in use, sorted")
    async def all_tag_names(self, info: Info) -> list[str]:
        return await info.context.app_context.task_tags.all_tag_names()


@strawberry.type
class TaskTagMutation:
    @strawberry.mutation
    async def add_task_tag(self, info: Info, input: AddTaskTagInput) -> TaskTag:
        tag = await info.context.app_context.task_tags.add_tag(input.task_id, input.tag_name)
        return TaskTag.from_model(tag)

    @strawberry.mutation
    async def remove_task_tag(self, info: Info, id: int) -> bool:
        return await info.context.app_context.task_tags.delete(id) > 0

    @strawberry.mutation
    async def remove_all_task_tags(self, info: Info, task_id: int) -> bool:
        return await info.context.app_context.task_tags.delete_by_task(task_id) > 0

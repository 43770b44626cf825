"""Task link GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from app.schemas.base import to_update
from app.schemas.task_link import AddTaskLinkInput, TaskLink, UpdateTaskLinkInput

from .repository import TaskLinkChanges


@strawberry.type
class TaskLinkQuery:
    @strawberry.field(description="Links of a task in position order")
    async def task_links(self, info: Info, task_id: int) -> list[TaskLink]:
        links = await info.context.app_context.task_links.find_by_task(task_id)
        return [TaskLink.from_model(link) for link in links]


@strawberry.type
class TaskLinkMutation:
    @strawberry.mutation
    async def add_task_link(self, info: Info, input: AddTaskLinkInput) -> TaskLink:
        link = await info.context.app_context.task_links.add_link(
            input.task_id, input.url, input.title
        )
        return TaskLink.from_model(link)

    @strawberry.mutation
    async def update_task_link(self, info: Info, id: int, input: UpdateTaskLinkInput) -> TaskLink:
        changes = TaskLinkChanges(title=to_update(input.title), url=to_update(input.url))
        link = await info.context.app_context.task_links.update(id, changes)
        return TaskLink.from_model(link)

    @strawberry.mutation
    async def delete_task_link(self, info: Info, id: int) -> bool:
        return await info.context.app_context.task_links.delete(id) > 0

    @strawberry.mutation
    async def delete_all_task_links(self, info: Info, task_id: int) -> bool:
        return await info.context.app_context.task_links.delete_by_task(task_id) > 0

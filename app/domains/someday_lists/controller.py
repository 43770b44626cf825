"""Someday list GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from app.schemas.base import to_update
from app.schemas.someday import CreateSomedayListInput, SomedayList, UpdateSomedayListInput

from .repository import SomedayListChanges


@strawberry.type
class SomedayListQuery:
    @strawberry.field(description="All someday lists in position order")
    async def someday_lists(self, info: Info) -> list[SomedayList]:
        lists = await info.context.app_context.someday_lists.find_all()
        return [SomedayList.from_model(someday_list) for someday_list in lists]


@strawberry.type
class SomedayListMutation:
    @strawberry.mutation
    async def create_someday_list(self, info: Info, input: CreateSomedayListInput) -> SomedayList:
        someday_list = await info.context.app_context.someday_lists.create(
            name=input.name, position=input.position
        )
        return SomedayList.from_model(someday_list)

    @strawberry.mutation
    async def update_someday_list(self, info: Info, input: UpdateSomedayListInput) -> SomedayList:
        changes = SomedayListChanges(name=to_update(input.name), position=to_update(input.position))
        someday_list = await info.context.app_context.someday_lists.update(input.id, changes)
        return SomedayList.from_model(someday_list)

    @strawberry.mutation(description="Delete a list; its tasks stay, detached from any list")
    async def delete_someday_list(self, info: Info, id: int) -> bool:
        return await info.context.app_context.someday_lists.delete(id) > 0

"""Tag preset GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from app.schemas.preset import CreateTagPresetInput, TagPreset


@strawberry.type
class TagPresetQuery:
    @strawberry.field(description="Tag presets, most used first")
    async def tag_presets(self, info: Info) -> list[TagPreset]:
        presets = await info.context.app_context.tag_presets.find_all()
        return [TagPreset.from_model(preset) for preset in presets]


@strawberry.type
class TagPresetMutation:
    @strawberry.mutation
    async def create_tag_preset(self, info: Info, input: CreateTagPresetInput) -> TagPreset:
        preset = await info.context.app_context.tag_presets.create(input.name)
        return TagPreset.from_model(preset)

    @strawberry.mutation
    async def rename_tag_preset(self, info: Info, id: int, new_name: str) -> TagPreset:
        preset = await info.context.app_context.tag_presets.rename(id, new_name)
        return TagPreset.from_model(preset)

    @strawberry.mutation
    async def delete_tag_preset(self, info: Info, id: int) -> bool:
        return await info.context.app_context.tag_presets.delete(id) > 0

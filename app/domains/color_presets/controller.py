"""Color preset GraphQL queries and mutations."""

import strawberry
from strawberry.types import Info

from app.schemas.base import to_update
from app.schemas.preset import ColorPreset, CreateColorPresetInput, UpdateColorPresetInput

from .repository import ColorPresetChanges


@strawberry.type
class ColorPresetQuery:
    @strawberry.field(description="Color presets in position order")
    async def color_presets(self, info: Info) -> list[ColorPreset]:
        presets = await info.context.app_context.color_presets.find_all()
        return [ColorPreset.from_model(preset) for preset in presets]


@strawberry.type
class ColorPresetMutation:
    @strawberry.mutation
    async def create_color_preset(self, info: Info, input: CreateColorPresetInput) -> ColorPreset:
        preset = await info.context.app_context.color_presets.create(input.name, input.hex_value)
        return ColorPreset.from_model(preset)

    @strawberry.mutation
    async def update_color_preset(
        self, info: Info, id: int, input: UpdateColorPresetInput
    ) -> ColorPreset:
        changes = ColorPresetChanges(name=to_update(input.name), hex_value=to_update(input.hex_value))
        preset = await info.context.app_context.color_presets.update(id, changes)
        return ColorPreset.from_model(preset)

    @strawberry.mutation(description="Give each preset the position of its id in the list")
    async def reorder_color_presets(self, info: Info, ids: list[int]) -> list[ColorPreset]:
        presets = await info.context.app_context.color_presets.reorder(ids)
        return [ColorPreset.from_model(preset) for preset in presets]

    @strawberry.mutation
    async def delete_color_preset(self, info: Info, id: int) -> bool:
        return await info.context.app_context.color_presets.delete(id) > 0

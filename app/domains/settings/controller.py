"""Settings GraphQL query and mutations."""

import strawberry
from strawberry.types import Info

from app.schemas.base import to_update
from app.schemas.settings import Settings, UpdateSettingsInput
from app.shared.updates import Set

from .repository import SettingsChanges


@strawberry.type
class SettingsQuery:
    @strawberry.field(description="Display settings, created with defaults on first read")
    async def settings(self, info: Info) -> Settings:
        settings = await info.context.app_context.settings.get()
        return Settings.from_model(settings)


@strawberry.type
class SettingsMutation:
    @strawberry.mutation(description="Update only the supplied settings")
    async def update_settings(self, info: Info, input: UpdateSettingsInput) -> Settings:
        theme = to_update(input.theme)
        if isinstance(theme, Set):
            theme = Set(theme.value.value)
        changes = SettingsChanges(
            column_min_width=to_update(input.column_min_width),
            today_shows_previous=to_update(input.today_shows_previous),
            single_arrow_days=to_update(input.single_arrow_days),
            double_arrow_days=to_update(input.double_arrow_days),
            auto_column_breakpoints=to_update(input.auto_column_breakpoints),
            auto_column_counts=to_update(input.auto_column_counts),
            drawer_height=to_update(input.drawer_height),
            drawer_is_open=to_update(input.drawer_is_open),
            theme=theme,
        )
        settings = await info.context.app_context.settings.update(changes)
        return Settings.from_model(settings)

    @strawberry.mutation(description="Restore every setting to its default")
    async def reset_settings(self, info: Info) -> Settings:
        settings = await info.context.app_context.settings.reset()
        return Settings.from_model(settings)

# app/domains/settings/repository.py
"""Settings repository for the singleton display-preferences row."""

from dataclasses import dataclass, fields

from sqlalchemy import select

from app.shared.repository import BaseRepository
from app.shared.updates import KEEP, FieldUpdate, Set, apply_update
from models import AppSettings
from models.base import utcnow
from models.settings import DEFAULT_AUTO_COLUMN_BREAKPOINTS, DEFAULT_AUTO_COLUMN_COUNTS

DEFAULT_SETTINGS = {
    "column_min_width": 300,
    "today_shows_previous": False,
    "single_arrow_days": 1,
    "double_arrow_days": 7,
    "auto_column_breakpoints": DEFAULT_AUTO_COLUMN_BREAKPOINTS,
    "auto_column_counts": DEFAULT_AUTO_COLUMN_COUNTS,
    "drawer_height": 300,
    "drawer_is_open": True,
    "theme": "light",
}


@dataclass
class SettingsChanges:
    column_min_width: FieldUpdate = KEEP
    today_shows_previous: FieldUpdate = KEEP
    single_arrow_days: FieldUpdate = KEEP
    double_arrow_days: FieldUpdate = KEEP
    auto_column_breakpoints: FieldUpdate = KEEP
    auto_column_counts: FieldUpdate = KEEP
    drawer_height: FieldUpdate = KEEP
    drawer_is_open: FieldUpdate = KEEP
    theme: FieldUpdate = KEEP


class SettingsRepository(BaseRepository):
    """Repository for the application's settings row."""

    model = AppSettings

    async def get(self) -> AppSettings:
        """
        Get the settings row, creating it with defaults if it doesn't exist.

        Returns:
            AppSettings: The settings object

        Raises:
            DatabaseError: If database operation fails
        """
        async with self.session() as session:
            result = await session.execute(select(AppSettings).order_by(AppSettings.id).limit(1))
            settings = result.scalar_one_or_none()

            if not settings:
                # Create default settings
                settings = AppSettings(**DEFAULT_SETTINGS)
                session.add(settings)
                await session.commit()
                await session.refresh(settings)

            return settings

    async def update(self, changes: SettingsChanges) -> AppSettings:
        """
        Update settings with provided values.

        Every settings column is non-nullable, so a cleared field is rejected.

        Args:
            changes: Per-field update intents

        Returns:
            AppSettings: Updated settings object

        Raises:
            ValidationError: If a field is cleared
            DatabaseError: If database operation fails
        """
        # Get or create settings
        current = await self.get()

        async with self.session() as session:
            settings = await session.get(AppSettings, current.id)
            # Update only provided fields
            for field in fields(changes):
                apply_update(settings, field.name, getattr(changes, field.name), nullable=False)
            settings.updated_at = utcnow()
            await session.commit()
            await session.refresh(settings)
            return settings

    async def reset(self) -> AppSettings:
        """Reset every setting to its default."""
        return await self.update(
            SettingsChanges(**{name: Set(value) for name, value in DEFAULT_SETTINGS.items()})
        )

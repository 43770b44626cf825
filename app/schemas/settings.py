"""Settings GraphQL types."""

from enum import Enum
from typing import Optional

import strawberry

from models import AppSettings


@strawberry.enum
class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Theme":
        """Read a stored theme; anything unrecognised falls back to light."""
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.LIGHT


@strawberry.type
class Settings:
    id: int
    column_min_width: int
    today_shows_previous: bool
    single_arrow_days: int
    double_arrow_days: int
    # JSON strings owned by the client, passed through untouched
    auto_column_breakpoints: str
    auto_column_counts: str
    drawer_height: int
    drawer_is_open: bool
    theme: Theme

    @classmethod
    def from_model(cls, model: AppSettings) -> "Settings":
        return cls(
            id=model.id,
            column_min_width=model.column_min_width,
            today_shows_previous=model.today_shows_previous,
            single_arrow_days=model.single_arrow_days,
            double_arrow_days=model.double_arrow_days,
            auto_column_breakpoints=model.auto_column_breakpoints,
            auto_column_counts=model.auto_column_counts,
            drawer_height=model.drawer_height,
            drawer_is_open=model.drawer_is_open,
            theme=Theme.parse(model.theme),
        )


@strawberry.input
class UpdateSettingsInput:
    column_min_width: Optional[int] = strawberry.UNSET
    today_shows_previous: Optional[bool] = strawberry.UNSET
    single_arrow_days: Optional[int] = strawberry.UNSET
    double_arrow_days: Optional[int] = strawberry.UNSET
    auto_column_breakpoints: Optional[str] = strawberry.UNSET
    auto_column_counts: Optional[str] = strawberry.UNSET
    drawer_height: Optional[int] = strawberry.UNSET
    drawer_is_open: Optional[bool] = strawberry.UNSET
    theme: Optional[Theme] = strawberry.UNSET

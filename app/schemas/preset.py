"""Tag preset and color preset GraphQL types."""

from typing import Optional

import strawberry

from models import ColorPreset as ColorPresetModel
from models import TagPreset as TagPresetModel

from .base import format_datetime


@strawberry.type
class TagPreset:
    id: int
    name: str
    usage_count: int
    created_at: str

    @classmethod
    def from_model(cls, model: TagPresetModel) -> "TagPreset":
        return cls(
            id=model.id,
            name=model.name,
            usage_count=model.usage_count,
            created_at=format_datetime(model.created_at),
        )


@strawberry.input
class CreateTagPresetInput:
    name: str


@strawberry.type
class ColorPreset:
    id: int
    name: str
    hex_value: str
    position: int
    created_at: str

    @classmethod
    def from_model(cls, model: ColorPresetModel) -> "ColorPreset":
        return cls(
            id=model.id,
            name=model.name,
            hex_value=model.hex_value,
            position=model.position,
            created_at=format_datetime(model.created_at),
        )


@strawberry.input
class CreateColorPresetInput:
    name: str
    hex_value: str


@strawberry.input
class UpdateColorPresetInput:
    name: Optional[str] = strawberry.UNSET
    hex_value: Optional[str] = strawberry.UNSET

"""Color preset repository."""

import logging
from dataclasses import dataclass

from sqlalchemy import select, update

from app.exceptions.base import NotFoundError
from app.shared.repository import BaseRepository
from app.shared.updates import KEEP, FieldUpdate, apply_update
from models import ColorPreset

logger = logging.getLogger(__name__)


@dataclass
class ColorPresetChanges:
    name: FieldUpdate = KEEP
    hex_value: FieldUpdate = KEEP


class ColorPresetRepository(BaseRepository):
    """The ordered color palette. ``position`` is unique across all presets."""

    model = ColorPreset

    async def create(self, name: str, hex_value: str) -> ColorPreset:
        async with self.session() as session:
            position = await self.next_position(session, ColorPreset.position)
            preset = ColorPreset(name=name, hex_value=hex_value, position=position)
            session.add(preset)
            await session.commit()
            await session.refresh(preset)
            return preset

    async def find_all(self) -> list[ColorPreset]:
        async with self.session() as session:
            result = await session.execute(select(ColorPreset).order_by(ColorPreset.position))
            return list(result.scalars().all())

    async def update(self, preset_id: int, changes: ColorPresetChanges) -> ColorPreset:
        async with self.session() as session:
            preset = await session.get(ColorPreset, preset_id)
            if preset is None:
                raise NotFoundError(f"Color preset {preset_id} not found")
            apply_update(preset, "name", changes.name, nullable=False)
            apply_update(preset, "hex_value", changes.hex_value, nullable=False)
            await session.commit()
            await session.refresh(preset)
            return preset

    async def reorder(self, ids: list[int]) -> list[ColorPreset]:
        """
        Set each preset's position to its index in ``ids``.

        Every row gets its own UPDATE; a failure part-way leaves a mix of old
        and new positions. Rows are parked on negative positions first so the
        unique index on ``position`` never sees a duplicate.

        Args:
            ids: Preset ids in their new order

        Returns:
            list[ColorPreset]: All presets in position order
        """
        async with self.session() as session:
            for index, preset_id in enumerate(ids):
                await session.execute(
                    update(ColorPreset).where(ColorPreset.id == preset_id).values(position=-(index + 1))
                )
                await session.commit()
            for index, preset_id in enumerate(ids):
                await session.execute(
                    update(ColorPreset).where(ColorPreset.id == preset_id).values(position=index)
                )
                await session.commit()
        logger.info("Reordered %d color presets", len(ids))
        return await self.find_all()

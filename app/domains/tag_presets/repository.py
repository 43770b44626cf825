"""Tag preset repository."""

from sqlalchemy import select, update

from app.exceptions.base import NotFoundError
from app.shared.repository import BaseRepository
from models import TagPreset


class TagPresetRepository(BaseRepository):
    """The global catalog of reusable tag names."""

    model = TagPreset

    async def create(self, name: str) -> TagPreset:
        preset = TagPreset(name=name, usage_count=0)
        async with self.session() as session:
            session.add(preset)
            await session.commit()
            await session.refresh(preset)
            return preset

    async def find_all(self) -> list[TagPreset]:
        """Most used first, then alphabetical."""
        async with self.session() as session:
            result = await session.execute(
                select(TagPreset).order_by(TagPreset.usage_count.desc(), TagPreset.name)
            )
            return list(result.scalars().all())

    async def find_by_name(self, name: str) -> TagPreset | None:
        async with self.session() as session:
            result = await session.execute(select(TagPreset).where(TagPreset.name == name))
            return result.scalar_one_or_none()

    async def rename(self, preset_id: int, new_name: str) -> TagPreset:
        async with self.session() as session:
            preset = await session.get(TagPreset, preset_id)
            if preset is None:
                raise NotFoundError(f"Tag preset {preset_id} not found")
            preset.name = new_name
            await session.commit()
            await session.refresh(preset)
            return preset


    async def increment_usage(self, name: str) -> int:
        """Bump the usage count of the preset called ``name``; returns rows affected."""
        async with self.session() as session:
            result = await session.execute(
                update(TagPreset)
                .where(TagPreset.name == name)
                .values(usage_count=TagPreset.usage_count + 1)
            )
            await session.commit()
            return result.rowcount

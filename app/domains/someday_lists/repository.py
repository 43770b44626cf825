"""Someday list repository."""

from dataclasses import dataclass

from sqlalchemy import select

from app.exceptions.base import NotFoundError
from app.shared.repository import BaseRepository
from app.shared.updates import KEEP, FieldUpdate, apply_update
from models import SomedayList
from models.base import utcnow


@dataclass
class SomedayListChanges:
    name: FieldUpdate = KEEP
    position: FieldUpdate = KEEP


class SomedayListRepository(BaseRepository):
    """
    Named columns of undated tasks.

    Deleting a list detaches its tasks (``list_id`` becomes NULL through the
    foreign key) rather than deleting them.
    """

    model = SomedayList

    async def find_all(self) -> list[SomedayList]:
        async with self.session() as session:
            result = await session.execute(
                select(SomedayList).order_by(SomedayList.position, SomedayList.id)
            )
            return list(result.scalars().all())

    async def create(self, name: str, position: int) -> SomedayList:
        someday_list = SomedayList(name=name, position=position)
        async with self.session() as session:
            session.add(someday_list)
            await session.commit()
            await session.refresh(someday_list)
            return someday_list

    async def update(self, list_id: int, changes: SomedayListChanges) -> SomedayList:
        async with self.session() as session:
            someday_list = await session.get(SomedayList, list_id)
            if someday_list is None:
                raise NotFoundError(f"Someday list {list_id} not found")
            apply_update(someday_list, "name", changes.name, nullable=False)
            apply_update(someday_list, "position", changes.position, nullable=False)
            someday_list.updated_at = utcnow()
            await session.commit()
            await session.refresh(someday_list)
            return someday_list

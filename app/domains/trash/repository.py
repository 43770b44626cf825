"""Trash repository: snapshots of deleted tasks."""

import logging
from datetime import datetime, timedelta

from sqlalchemy import delete, select

from app.shared.repository import BaseRepository
from models import TrashItem
from models.base import utcnow

logger = logging.getLogger(__name__)

RETENTION_DAYS = 7


class TrashRepository(BaseRepository):
    """Append-only log of deleted tasks, purged on request."""

    model = TrashItem

    async def find_all(self) -> list[TrashItem]:
        """Newest deletions first."""
        async with self.session() as session:
            result = await session.execute(
                select(TrashItem).order_by(TrashItem.deleted_at.desc(), TrashItem.id.desc())
            )
            return list(result.scalars().all())

    async def create(
        self,
        task_id: str,
        task_text: str,
        task_date: datetime,
        task_completed: bool,
        task_type: str,
        someday_list_id: int | None = None,
    ) -> TrashItem:
        item = TrashItem(
            task_id=task_id,
            task_text=task_text,
            task_date=task_date,
            task_completed=task_completed,
            task_type=task_type,
            someday_list_id=someday_list_id,
        )
        async with self.session() as session:
            session.add(item)
            await session.commit()
            await session.refresh(item)
            return item

    async def clean_old(self, days: int = RETENTION_DAYS) -> int:
        """
        Purge snapshots deleted more than ``days`` days ago.

        Returns:
            int: Number of snapshots removed
        """
        cutoff = utcnow() - timedelta(days=days)
        async with self.session() as session:
            result = await session.execute(delete(TrashItem).where(TrashItem.deleted_at < cutoff))
            await session.commit()
        logger.info("Purged %d trash items older than %d days", result.rowcount, days)
        return result.rowcount

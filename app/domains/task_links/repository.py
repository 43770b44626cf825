"""Task link repository."""

from dataclasses import dataclass

from sqlalchemy import delete, select

from app.exceptions.base import NotFoundError
from app.shared.repository import BaseRepository
from app.shared.updates import KEEP, FieldUpdate, apply_update
from models import TaskLink


@dataclass
class TaskLinkChanges:
    title: FieldUpdate = KEEP
    url: FieldUpdate = KEEP


class TaskLinkRepository(BaseRepository):
    """Ordered URLs per task. Positions grow monotonically and are never reused."""

    model = TaskLink

    async def add_link(self, task_id: int, url: str, title: str | None = None) -> TaskLink:
        async with self.session() as session:
            position = await self.next_position(session, TaskLink.position, TaskLink.task_id == task_id)
            link = TaskLink(task_id=task_id, url=url, title=title, position=position)
            session.add(link)
            await session.commit()
            await session.refresh(link)
            return link

    async def find_by_task(self, task_id: int) -> list[TaskLink]:
        async with self.session() as session:
            result = await session.execute(
                select(TaskLink).where(TaskLink.task_id == task_id).order_by(TaskLink.position)
            )
            return list(result.scalars().all())

    async def update(self, link_id: int, changes: TaskLinkChanges) -> TaskLink:
        async with self.session() as session:
            link = await session.get(TaskLink, link_id)
            if link is None:
                raise NotFoundError(f"Task link {link_id} not found")
            apply_update(link, "title", changes.title)
            apply_update(link, "url", changes.url, nullable=False)
            await session.commit()
            await session.refresh(link)
            return link

    async def delete_by_task(self, task_id: int) -> int:
        async with self.session() as session:
            result = await session.execute(delete(TaskLink).where(TaskLink.task_id == task_id))
            await session.commit()
            return result.rowcount

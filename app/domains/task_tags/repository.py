"""Task tag repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domains.tag_presets.repository import TagPresetRepository
from app.shared.repository import BaseRepository
from models import TaskTag


class TaskTagRepository(BaseRepository):
    """Free-text tags attached to tasks."""

    model = TaskTag

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        tag_presets: TagPresetRepository,
    ):
        super().__init__(session_factory)
        self.tag_presets = tag_presets

    async def add_tag(self, task_id: int, tag_name: str) -> TaskTag:
        """
        Attach a tag to a task.

        Once the tag is stored, a tag preset with the same name has its usage
        count bumped.

        Args:
            task_id: Task to tag
            tag_name: Tag text

        Returns:
            TaskTag: The new association

        Raises:
            DatabaseError: If the task does not exist or the insert fails
        """
        tag = TaskTag(task_id=task_id, tag_name=tag_name)
        async with self.session() as session:
            session.add(tag)
            await session.commit()
            await session.refresh(tag)
        await self.tag_presets.increment_usage(tag_name)
        return tag

    async def find_by_task(self, task_id: int) -> list[TaskTag]:
        async with self.session() as session:
            result = await session.execute(
                select(TaskTag).where(TaskTag.task_id == task_id).order_by(TaskTag.id)
            )
            return list(result.scalars().all())

    async def delete_by_task(self, task_id: int) -> int:
        async with self.session() as session:
            result = await session.execute(delete(TaskTag).where(TaskTag.task_id == task_id))
            await session.commit()
            return result.rowcount

    async def all_tag_names(self) -> list[str]:
        """Every distinct tag name in use, sorted."""
        async with self.session() as session:
            result = await session.execute(
                select(TaskTag.tag_name).distinct().order_by(TaskTag.tag_name)
            )
            return list(result.scalars().all())

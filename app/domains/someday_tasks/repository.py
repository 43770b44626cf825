"""Someday task repository.

Someday tasks are rows of the unified ``tasks`` table that belong to a list.
The someday-specific ``description`` is the task's ``notes`` column.
"""

from dataclasses import dataclass

from sqlalchemy import delete, select

from app.domains.tasks.context import apply_context_changes, context_columns, context_of
from app.exceptions.base import NotFoundError
from app.shared.repository import BaseRepository
from app.shared.updates import KEEP, FieldUpdate, apply_update
from models import Task
from models.base import utcnow


@dataclass
class SomedayTaskChanges:
    title: FieldUpdate = KEEP
    description: FieldUpdate = KEEP
    completed: FieldUpdate = KEEP
    position: FieldUpdate = KEEP
    list_id: FieldUpdate = KEEP


class SomedayTaskRepository(BaseRepository):
    """Tasks placed in someday lists."""

    model = Task

    @staticmethod
    def _someday_query():
        return select(Task).where(Task.list_id.is_not(None))

    async def find_by_id(self, entity_id: int) -> Task | None:
        async with self.session() as session:
            result = await session.execute(self._someday_query().where(Task.id == entity_id))
            return result.scalar_one_or_none()

    async def find_by_list(self, list_id: int) -> list[Task]:
        async with self.session() as session:
            result = await session.execute(
                select(Task).where(Task.list_id == list_id).order_by(Task.position, Task.id)
            )
            return list(result.scalars().all())

    async def find_all(self) -> list[Task]:
        async with self.session() as session:
            result = await session.execute(
                self._someday_query().order_by(Task.list_id, Task.position, Task.id)
            )
            return list(result.scalars().all())

    async def create(
        self, list_id: int, title: str, description: str | None, position: int
    ) -> Task:
        """
        Add a task to a someday list.

        Raises:
            DatabaseError: If the list does not exist or the insert fails
        """
        task = Task(
            title=title,
            completed=False,
            list_id=list_id,
            position=position,
            notes=description,
        )
        async with self.session() as session:
            session.add(task)
            await session.commit()
            await session.refresh(task)
            return task

    async def _load(self, session, task_id: int) -> Task:
        result = await session.execute(self._someday_query().where(Task.id == task_id))
        task = result.scalar_one_or_none()
        if task is None:
            raise NotFoundError(f"Someday task {task_id} not found", details={"task_id": task_id})
        return task

    async def update(self, task_id: int, changes: SomedayTaskChanges) -> Task:
        """
        Apply changes to a someday task.

        Raises:
            NotFoundError: If no task in a someday list has this id
            ValidationError: If the title is cleared
            DatabaseError: If database operation fails
        """
        async with self.session() as session:
            task = await self._load(session, task_id)
            apply_update(task, "title", changes.title, nullable=False)
            apply_update(task, "notes", changes.description)
            apply_update(task, "completed", changes.completed, nullable=False)

            context = apply_context_changes(
                context_of(task), list_id=changes.list_id, position=changes.position
            )
            for column, value in context_columns(context).items():
                setattr(task, column, value)

            task.updated_at = utcnow()
            await session.commit()
            await session.refresh(task)
            return task

    async def toggle_completed(self, task_id: int) -> Task:
        async with self.session() as session:
            task = await self._load(session, task_id)
            task.completed = not task.completed
            task.updated_at = utcnow()
            await session.commit()
            await session.refresh(task)
            return task

    async def delete(self, entity_id: int) -> int:
        """Delete a someday task; calendar and unscheduled tasks are left alone."""
        async with self.session() as session:
            result = await session.execute(
                delete(Task).where(Task.id == entity_id, Task.list_id.is_not(None))
            )
            await session.commit()
            return result.rowcount

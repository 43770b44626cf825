"""Task repository over the unified ``tasks`` table."""

import logging
from dataclasses import dataclass

from sqlalchemy import select

from app.exceptions.task import TaskNotFoundError
from app.shared.repository import BaseRepository
from app.shared.updates import KEEP, FieldUpdate, apply_update
from models import Task
from models.base import utcnow

from .context import UNSCHEDULED, TaskContext, apply_context_changes, context_columns, context_of

logger = logging.getLogger(__name__)


@dataclass
class TaskChanges:
    """Update intents for every mutable task column."""

    title: FieldUpdate = KEEP
    completed: FieldUpdate = KEEP
    date: FieldUpdate = KEEP
    list_id: FieldUpdate = KEEP
    position: FieldUpdate = KEEP
    notes: FieldUpdate = KEEP
    color: FieldUpdate = KEEP


class TaskRepository(BaseRepository):
    """Create, read, update and delete unified tasks."""

    model = Task

    async def create(
        self,
        title: str,
        context: TaskContext = UNSCHEDULED,
        notes: str | None = None,
        color: str | None = None,
    ) -> Task:
        """
        Insert a new task.

        Args:
            title: Task title
            context: Calendar, someday or unscheduled placement
            notes: Free-form notes
            color: Color name or hex value

        Returns:
            Task: The persisted task

        Raises:
            DatabaseError: If database operation fails
        """
        task = Task(title=title, completed=False, notes=notes, color=color, **context_columns(context))
        async with self.session() as session:
            session.add(task)
            await session.commit()
            await session.refresh(task)
        logger.info("Created task %s", task.id)
        return task

    async def find_all(self) -> list[Task]:
        async with self.session() as session:
            result = await session.execute(select(Task).order_by(Task.id))
            return list(result.scalars().all())

    async def find_incomplete(self) -> list[Task]:
        async with self.session() as session:
            result = await session.execute(
                select(Task).where(Task.completed.is_(False)).order_by(Task.id)
            )
            return list(result.scalars().all())

    async def update(self, task_id: int, changes: TaskChanges) -> Task:
        """
        Apply changes to a task. ``updated_at`` is always refreshed.

        Args:
            task_id: The task's identifier
            changes: Per-field update intents

        Returns:
            Task: Updated task

        Raises:
            TaskNotFoundError: If no task has this id
            InvalidTaskContextError: If the change mixes calendar and someday fields
            DatabaseError: If database operation fails
        """
        async with self.session() as session:
            task = await session.get(Task, task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            apply_update(task, "title", changes.title, nullable=False)
            apply_update(task, "completed", changes.completed, nullable=False)
            apply_update(task, "notes", changes.notes)
            apply_update(task, "color", changes.color)

            context = apply_context_changes(
                context_of(task),
                date=changes.date,
                list_id=changes.list_id,
                position=changes.position,
            )
            for column, value in context_columns(context).items():
                setattr(task, column, value)

            task.updated_at = utcnow()
            await session.commit()
            await session.refresh(task)
            return task

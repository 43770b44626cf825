"""Task attachment repository: metadata rows plus their blobs."""

import logging

from sqlalchemy import select

from app.services.storage_service import StorageService
from app.shared.repository import BaseRepository
from models import TaskAttachment

logger = logging.getLogger(__name__)


class TaskAttachmentRepository(BaseRepository):
    """
    Attachment metadata backed by the object store.

    Deleting an attachment removes the blob first and only then the row, so a
    row never outlives a blob that still exists. The two steps are not
    atomic: if the row delete fails after the blob is gone, the row points at
    a missing object until it is deleted again.
    """

    model = TaskAttachment

    def __init__(self, session_factory, storage: StorageService):
        """Initialize repository with the session factory and blob storage."""
        super().__init__(session_factory)
        self.storage = storage

    async def create(
        self,
        task_id: int,
        file_name: str,
        file_size: int,
        mime_type: str,
        storage_path: str,
    ) -> TaskAttachment:
        attachment = TaskAttachment(
            task_id=task_id,
            file_name=file_name,
            file_size=file_size,
            mime_type=mime_type,
            storage_path=storage_path,
        )
        async with self.session() as session:
            session.add(attachment)
            await session.commit()
            await session.refresh(attachment)
            return attachment

    async def find_by_task(self, task_id: int) -> list[TaskAttachment]:
        async with self.session() as session:
            result = await session.execute(
                select(TaskAttachment)
                .where(TaskAttachment.task_id == task_id)
                .order_by(TaskAttachment.uploaded_at, TaskAttachment.id)
            )
            return list(result.scalars().all())

    async def delete(self, entity_id: int) -> int:
        """
        Delete an attachment's blob, then its row.

        Returns:
            int: Rows affected, 0 when the attachment does not exist

        Raises:
            StorageError: If the blob delete fails; the row is left untouched
            DatabaseError: If database operation fails
        """
        attachment = await self.find_by_id(entity_id)
        if attachment is None:
            return 0
        await self.storage.delete_file(attachment.storage_path)
        return await super().delete(entity_id)

    async def delete_by_task(self, task_id: int) -> int:
        deleted = 0
        for attachment in await self.find_by_task(task_id):
            deleted += await self.delete(attachment.id)
        if deleted:
            logger.info("Deleted %d attachments of task %s", deleted, task_id)
        return deleted

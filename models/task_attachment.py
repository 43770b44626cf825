"""
TaskAttachment model for file attachments.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String

from .base import IdentityModel, utcnow


class TaskAttachment(IdentityModel):
    """
    Metadata for one blob stored in the object store.

    ``storage_path`` is the object key, not a filesystem path.
    """

    __tablename__ = "task_attachments"

    task_id = Column(
        Integer,
        ForeignKey("tasks.id", name="fk_task_attachments_task_id", ondelete="CASCADE"),
        nullable=False,
    )
    file_name = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    mime_type = Column(String, nullable=False)
    storage_path = Column(String, nullable=False)
    uploaded_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (Index("idx_task_attachments_task_id", "task_id"),)

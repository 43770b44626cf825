"""
TaskTag model: free-text tags attached to a task.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String

from .base import IdentityModel, utcnow


class TaskTag(IdentityModel):
    __tablename__ = "task_tags"

    task_id = Column(
        Integer,
        ForeignKey("tasks.id", name="fk_task_tags_task_id", ondelete="CASCADE"),
        nullable=False,
    )
    tag_name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_task_tags_name", "tag_name"),
        Index("idx_task_tags_task_id", "task_id"),
    )

"""
TrashItem model: append-only snapshots of deleted tasks.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from .base import IdentityModel, utcnow


class TrashItem(IdentityModel):
    """
    A snapshot of a task taken when it was deleted.

    ``task_id`` is stored as text and is not a foreign key, so the snapshot
    outlives the task it describes.
    """

    __tablename__ = "trash"

    task_id = Column(String, nullable=False)
    task_text = Column(String, nullable=False)
    task_date = Column(DateTime(timezone=True), nullable=False)
    task_completed = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    task_type = Column(String, nullable=False)  # calendar, someday
    someday_list_id = Column(Integer)

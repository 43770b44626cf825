"""
TaskLink model: an ordered list of URLs per task.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from .base import IdentityModel, utcnow


class TaskLink(IdentityModel):
    __tablename__ = "task_links"

    task_id = Column(
        Integer,
        ForeignKey("tasks.id", name="fk_task_links_task_id", ondelete="CASCADE"),
        nullable=False,
    )
    url = Column(Text, nullable=False)
    title = Column(String)
    position = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

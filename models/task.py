"""
The unified ``Task`` ORM model.

One table holds both calendar tasks (``date`` set) and someday tasks
(``list_id``/``position`` set). The two field groups are mutually exclusive by
convention only; ``app.domains.tasks.context`` turns a row into an explicit
context value.
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text

from .base import BaseModel


class Task(BaseModel):
    __tablename__ = "tasks"

    title = Column(String, nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    # Calendar context
    date = Column(DateTime(timezone=True))

    # Someday context. Deleting a list detaches its tasks instead of removing them.
    list_id = Column(
        Integer,
        ForeignKey(
            "someday_lists.id",
            name="fk_tasks_list_id",
            ondelete="SET NULL",
            onupdate="CASCADE",
        ),
    )
    position = Column(Integer)

    notes = Column(Text)
    color = Column(String)

    __table_args__ = (
        Index("idx_tasks_date", "date"),
        Index("idx_tasks_list_position", "list_id", "position"),
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} title={self.title!r}>"

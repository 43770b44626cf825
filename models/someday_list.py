"""
SomedayList model: a named, ordered column of undated tasks.
"""

from sqlalchemy import Column, Integer, String

from .base import BaseModel


class SomedayList(BaseModel):
    __tablename__ = "someday_lists"

    name = Column(String, nullable=False)
    # Client-supplied ordinal; lists are not renumbered when one moves
    position = Column(Integer, nullable=False)

"""
TagPreset model: the global catalog of reusable tag names.
"""

from sqlalchemy import Column, DateTime, Index, Integer, String

from .base import IdentityModel, utcnow


class TagPreset(IdentityModel):
    __tablename__ = "tag_presets"

    name = Column(String, nullable=False, unique=True)
    usage_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (Index("idx_tag_presets_name", "name"),)

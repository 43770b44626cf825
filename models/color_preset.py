"""
ColorPreset model: the global, explicitly ordered color palette.
"""

from sqlalchemy import Column, DateTime, Index, Integer, String

from .base import IdentityModel, utcnow


class ColorPreset(IdentityModel):
    __tablename__ = "color_presets"

    name = Column(String, nullable=False)
    hex_value = Column(String, nullable=False)
    position = Column(Integer, nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (Index("idx_color_presets_position", "position"),)

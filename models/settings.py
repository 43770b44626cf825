"""
App settings model for storing display preferences.

This module defines the AppSettings model, a singleton row holding the
calendar layout, drawer state and theme preferences.
"""

from sqlalchemy import Boolean, Column, Integer, String, Text

from .base import BaseModel

DEFAULT_AUTO_COLUMN_BREAKPOINTS = '{"small":640,"medium":1024,"large":1536,"xlarge":2048}'
DEFAULT_AUTO_COLUMN_COUNTS = '{"small":1,"medium":2,"large":3,"xlarge":5,"xxlarge":7}'


class AppSettings(BaseModel):
    """
    Represents the application's display settings.

    Only one row is expected; it is created with defaults the first time it
    is read.

    :ivar column_min_width: Minimum width of a calendar column in pixels.
    :type column_min_width: int
    :ivar today_shows_previous: Whether the "today" view also shows yesterday.
    :type today_shows_previous: bool
    :ivar single_arrow_days: Days moved by the single-arrow navigation.
    :type single_arrow_days: int
    :ivar double_arrow_days: Days moved by the double-arrow navigation.
    :type double_arrow_days: int
    :ivar auto_column_breakpoints: JSON object mapping size names to pixel widths.
    :type auto_column_breakpoints: str
    :ivar auto_column_counts: JSON object mapping size names to column counts.
    :type auto_column_counts: str
    :ivar drawer_height: Height of the someday drawer in pixels.
    :type drawer_height: int
    :ivar drawer_is_open: Whether the someday drawer is open.
    :type drawer_is_open: bool
    :ivar theme: UI theme (light, dark).
    :type theme: str
    """

    __tablename__ = "settings"

    # Calendar layout
    column_min_width = Column(Integer, default=300, nullable=False)
    today_shows_previous = Column(Boolean, default=False, nullable=False)
    single_arrow_days = Column(Integer, default=1, nullable=False)
    double_arrow_days = Column(Integer, default=7, nullable=False)

    # Opaque JSON blobs owned by the client
    auto_column_breakpoints = Column(Text, default=DEFAULT_AUTO_COLUMN_BREAKPOINTS, nullable=False)
    auto_column_counts = Column(Text, default=DEFAULT_AUTO_COLUMN_COUNTS, nullable=False)

    # Someday drawer
    drawer_height = Column(Integer, default=300, nullable=False)
    drawer_is_open = Column(Boolean, default=True, nullable=False)

    theme = Column(String, default="light", nullable=False)

"""
Defines a base model for SQLAlchemy ORM with common attributes.

This module provides the declarative base shared by every table plus abstract
base classes carrying the integer surrogate key and the standard creation and
modification timestamps.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class IdentityModel(Base):
    """
    Abstract model carrying only the auto-incrementing integer primary key.

    :ivar id: Unique identifier for the record, assigned by the database.
    :type id: int
    """
    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)


class BaseModel(IdentityModel):
    """
    Base model class for mutable database entities.

    Adds creation and modification timestamps. ``updated_at`` is rewritten on
    every UPDATE issued through the ORM.

    :ivar created_at: Timestamp representing when the record was created.
    :type created_at: datetime
    :ivar updated_at: Timestamp representing when the record was last updated.
    :type updated_at: datetime
    """
    __abstract__ = True

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

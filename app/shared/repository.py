"""Shared repository plumbing."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.exceptions.base import DatabaseError

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base class for the per-table repositories.

    A repository shares the process-wide session factory and opens a fresh
    session for every call, so concurrent requests never share a session.
    """

    model: Any = None

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """Initialize repository with the shared session factory."""
        self.session_factory = session_factory

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session, rolling back and wrapping any SQLAlchemy failure.

        Raises:
            DatabaseError: If a database operation fails
        """
        async with self.session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                reason = str(getattr(e, "orig", None) or e)
                logger.error("Database error in %s: %s", type(self).__name__, reason)
                raise DatabaseError(reason) from e

    async def find_by_id(self, entity_id: int) -> Any | None:
        async with self.session() as session:
            return await session.get(self.model, entity_id)

    async def delete(self, entity_id: int) -> int:
        """
        Delete one row by primary key.

        Returns:
            int: Rows affected, 0 when nothing matched
        """
        async with self.session() as session:
            result = await session.execute(delete(self.model).where(self.model.id == entity_id))
            await session.commit()
            return result.rowcount

    @staticmethod
    async def next_position(session: AsyncSession, column, *criteria) -> int:
        """Current maximum of ``column`` plus one; the first position is 0."""
        query = select(func.coalesce(func.max(column), -1))
        if criteria:
            query = query.where(*criteria)
        current = (await session.execute(query)).scalar_one()
        return current + 1

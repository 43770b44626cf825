"""Schema migration runner and helpers used by the alembic revisions.

Migrations run once at startup, before the app serves a request. A failing
revision raises and aborts startup.
"""

import logging
from pathlib import Path

import sqlalchemy as sa
from alembic import command, op
from alembic.config import Config
from sqlalchemy.ext.asyncio import create_async_engine

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "migrations"


def build_alembic_config(database_url: str) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation treats % specially
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def _upgrade(connection, config: Config, revision: str) -> None:
    config.attributes["connection"] = connection
    command.upgrade(config, revision)


def _downgrade(connection, config: Config, revision: str) -> None:
    config.attributes["connection"] = connection
    command.downgrade(config, revision)


async def run_migrations(database_url: str, revision: str = "head") -> None:
    """
    Upgrade the database to ``revision``.

    Uses a dedicated engine without the SQLite foreign-key pragma: table
    rebuilds drop and recreate ``tasks``, which would otherwise cascade into
    its satellite tables.

    Args:
        database_url: SQLAlchemy async URL
        revision: Target revision, ``head`` by default

    Raises:
        Exception: Whatever the failing revision raised
    """
    engine = create_async_engine(database_url)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_upgrade, build_alembic_config(database_url), revision)
            await connection.commit()
    finally:
        await engine.dispose()
    logger.info("Database schema is at revision %s", revision)


async def rollback_migrations(database_url: str, revision: str) -> None:
    """Downgrade the database to ``revision``."""
    engine = create_async_engine(database_url)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_downgrade, build_alembic_config(database_url), revision)
            await connection.commit()
    finally:
        await engine.dispose()
    logger.info("Database schema rolled back to revision %s", revision)


# ===== Helpers for revision scripts =====


def dialect_name() -> str:
    return op.get_bind().dialect.name


def table_exists(name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(name)


def column_exists(table: str, column: str) -> bool:
    if not table_exists(table):
        return False
    return column in {c["name"] for c in sa.inspect(op.get_bind()).get_columns(table)}


def index_exists(table: str, name: str) -> bool:
    if not table_exists(table):
        return False
    return name in {i["name"] for i in sa.inspect(op.get_bind()).get_indexes(table)}


def scalar(sql: str):
    return op.get_bind().execute(sa.text(sql)).scalar()

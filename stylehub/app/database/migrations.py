"""Startup schema migration.

Brings the schema up to date before the application serves requests:
- creates any missing tables
- drops the legacy unique index on ``users.account_id`` left behind by the
  old account model, which blocks signups once more than one user exists
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.logging import get_logger
from app.models.database import Base

logger = get_logger(__name__)

LEGACY_INDEXES = ("ix_users_account_id",)


async def drop_legacy_indexes(connection) -> None:
    for index_name in LEGACY_INDEXES:
        await connection.execute(text(f"DROP INDEX IF EXISTS {index_name}"))
    logger.info("Legacy index cleanup completed", indexes=list(LEGACY_INDEXES))


async def run_startup_migrations(engine: AsyncEngine) -> None:
    """Create tables and drop legacy indexes in one transaction."""
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
        await drop_legacy_indexes(connection)
    logger.info("Startup migrations completed")

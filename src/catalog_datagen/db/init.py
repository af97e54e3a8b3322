"""
Database initialization and schema management.

Provides utilities for creating and dropping the catalog tables. Production
stores normally already carry the schema; these helpers back local runs,
``--create-schema`` and the test suite.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from catalog_datagen.db.models.base import Base

logger = logging.getLogger(__name__)


async def init_schema(engine: AsyncEngine) -> None:
    """
    Create all catalog tables that do not exist yet.

    Args:
        engine: AsyncEngine to create tables in

    Example:
        >>> engine = create_engine("sqlite+aiosqlite:///data/catalog.db")
        >>> await init_schema(engine)

    Note:
        This function uses SQLAlchemy's create_all() which is idempotent.
        It will not recreate existing tables.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Created catalog tables for engine: {engine.url.render_as_string(hide_password=True)}")


async def drop_schema(engine: AsyncEngine) -> None:
    """
    Drop all catalog tables.

    WARNING: This is a destructive operation that will delete all data!

    Args:
        engine: AsyncEngine to drop tables from
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning(f"Dropped catalog tables for engine: {engine.url.render_as_string(hide_password=True)}")

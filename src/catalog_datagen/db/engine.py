"""
Database engine creation and management.

Provides async SQLAlchemy engines for PostgreSQL (production loads) and
SQLite (local runs and tests), with pragma enforcement, search-path
selection and pool sizing.
"""

import logging
import sqlite3
from datetime import datetime

from sqlalchemy import event, text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from catalog_datagen.config.models import DatabaseSettings
from catalog_datagen.db.config import DatabaseConfig

logger = logging.getLogger(__name__)


def _adapt_datetime(value: datetime) -> str:
    """Store timestamps as ISO-8601 text, the layout SQLAlchemy reads back."""
    return value.isoformat(" ")


def build_database_url(settings: DatabaseSettings) -> URL:
    """
    Build a SQLAlchemy URL from loader database settings.

    Bare ``postgres://`` / ``postgresql://`` URLs are mapped to the async
    psycopg driver; explicit credentials override any embedded in the URL.

    Args:
        settings: Database settings from the loader configuration

    Returns:
        SQLAlchemy URL object
    """
    raw = settings.url
    if raw.startswith("postgres://"):
        raw = "postgresql://" + raw[len("postgres://") :]

    url = make_url(raw)
    if url.drivername == "postgresql":
        url = url.set(drivername=DatabaseConfig.POSTGRES_DRIVER)

    if settings.username:
        url = url.set(username=settings.username)
    if settings.password:
        url = url.set(password=settings.password)
    return url


def create_engine(
    url: str | URL,
    pragmas: dict[str, str | int] | None = None,
    echo: bool = False,
    schema_name: str | None = None,
    pool_size: int = DatabaseConfig.POOL_SIZE,
    max_overflow: int = DatabaseConfig.MAX_OVERFLOW,
    pool_recycle: int = DatabaseConfig.POOL_RECYCLE,
) -> AsyncEngine:
    """
    Create an async SQLAlchemy engine with proper configuration.

    This function creates an engine with:
    - PRAGMA enforcement via connection event listeners (SQLite)
    - search_path selection and pool sizing (PostgreSQL)
    - Optional SQL query logging

    Args:
        url: Database URL (e.g. ``sqlite+aiosqlite:///data/catalog.db`` or
            ``postgresql+psycopg://host/db``)
        pragmas: SQLite PRAGMA settings applied on each connection.
            If None, uses DatabaseConfig.SQLITE_PRAGMAS
        echo: If True, log all SQL queries (useful for debugging)
        schema_name: PostgreSQL schema placed first on the search_path
        pool_size: Persistent pooled connections (PostgreSQL)
        max_overflow: Extra connections above pool_size (PostgreSQL)
        pool_recycle: Connection max lifetime in seconds (PostgreSQL)

    Returns:
        Configured AsyncEngine instance

    Example:
        >>> engine = create_engine("sqlite+aiosqlite:///data/catalog.db")
        >>> async with engine.begin() as conn:
        ...     await conn.execute(text("SELECT 1"))
    """
    url = make_url(url) if isinstance(url, str) else url

    if url.get_backend_name() == "sqlite":
        if pragmas is None:
            pragmas = DatabaseConfig.SQLITE_PRAGMAS

        # Loader statements bind raw datetimes through the driver
        sqlite3.register_adapter(datetime, _adapt_datetime)

        engine = create_async_engine(url, echo=echo)

        # Register event listener to set PRAGMAs on each connection
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """Set SQLite PRAGMAs on each new connection."""
            cursor = dbapi_connection.cursor()
            try:
                for pragma, value in pragmas.items():
                    cursor.execute(f"PRAGMA {pragma}={value}")
                logger.debug(f"Applied {len(pragmas)} PRAGMAs to connection for {url.database}")
            except Exception as e:
                logger.error(f"Failed to apply PRAGMAs to {url.database}: {e}")
                raise
            finally:
                cursor.close()

        logger.info(f"Created async engine for SQLite database: {url.database}")
        return engine

    connect_args = {}
    if schema_name:
        connect_args["options"] = f"-csearch_path={schema_name}"

    engine = create_async_engine(
        url,
        echo=echo,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=pool_recycle,
        pool_timeout=DatabaseConfig.POOL_TIMEOUT,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    logger.info(
        f"Created async engine for {url.get_backend_name()} database "
        f"{url.host}/{url.database} (schema: {schema_name or 'default'})"
    )
    return engine


def create_engine_from_settings(settings: DatabaseSettings) -> AsyncEngine:
    """Create an engine from loader database settings."""
    return create_engine(
        build_database_url(settings),
        echo=settings.echo,
        schema_name=settings.schema_name,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_recycle=settings.pool_recycle,
    )


async def check_engine_health(engine: AsyncEngine) -> bool:
    """
    Check if a database engine is healthy and can execute queries.

    Args:
        engine: AsyncEngine to check

    Returns:
        True if engine is healthy, False otherwise
    """
    try:
        async with engine.begin() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.scalar()
        return True
    except Exception as e:
        logger.error(f"Engine health check failed: {e}")
        return False

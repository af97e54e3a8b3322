"""
Database engine, schema and query helpers for the catalog data generator.

Usage:
    from catalog_datagen.db import create_engine, init_schema

    engine = create_engine("sqlite+aiosqlite:///data/catalog.db")
    await init_schema(engine)
"""

from catalog_datagen.db.config import DatabaseConfig
from catalog_datagen.db.engine import (
    build_database_url,
    check_engine_health,
    create_engine,
    create_engine_from_settings,
)
from catalog_datagen.db.init import drop_schema, init_schema

__all__ = [
    "DatabaseConfig",
    "build_database_url",
    "check_engine_health",
    "create_engine",
    "create_engine_from_settings",
    "init_schema",
    "drop_schema",
]

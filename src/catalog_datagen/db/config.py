"""
Database configuration constants and settings.

Defines SQLite pragmas for local runs and the connection pool settings used
against PostgreSQL.
"""


class DatabaseConfig:
    """Configuration for store connections."""

    # Driver used when a bare postgres:// or postgresql:// URL is given
    POSTGRES_DRIVER: str = "postgresql+psycopg"

    # SQLite pragmas for local runs and tests
    # Applied on each connection via event listeners
    SQLITE_PRAGMAS: dict[str, str | int] = {
        # Write-Ahead Logging mode for better concurrency
        # Allows readers and writers to operate simultaneously
        "journal_mode": "WAL",
        # Balance between safety and performance
        # NORMAL is sufficient for most use cases with WAL
        "synchronous": "NORMAL",
        # Enable foreign key constraints (disabled by default in SQLite)
        "foreign_keys": 1,
        # Store temporary tables in memory for better performance
        "temp_store": "MEMORY",
        # Negative value = size in KB (64MB cache)
        "cache_size": -64000,
        # Busy timeout in milliseconds
        # Concurrent workers queue on the single SQLite writer lock
        "busy_timeout": 30000,
    }

    # Connection pool settings (PostgreSQL)
    POOL_SIZE: int = 50
    MAX_OVERFLOW: int = 25
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 300  # seconds (5 minutes)

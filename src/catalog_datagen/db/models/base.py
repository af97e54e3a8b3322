"""
Base class for all SQLAlchemy ORM models.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Uses SQLAlchemy 2.0 declarative base pattern. The loader writes through
    raw multi-row INSERT statements; the models document the target schema,
    back ``init_schema`` and give typed columns to the read-side queries.
    """
    pass

"""
SQLAlchemy ORM models for the catalog data generator.

This module contains all database models split into:
- base.py: Base class
- catalog.py: Category tree, tags, products and product relation tables
"""

from catalog_datagen.db.models.base import Base
from catalog_datagen.db.models.catalog import (
    Category,
    Product,
    ProductDownload,
    ProductProductCategory,
    ProductPromo,
    ProductTag,
    Tag,
)

__all__ = [
    # Base
    "Base",
    # Catalog tables
    "Category",
    "Tag",
    "Product",
    "ProductProductCategory",
    "ProductTag",
    "ProductPromo",
    "ProductDownload",
]

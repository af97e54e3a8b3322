"""
Default catalog profile for data generation.

This module re-exports the active default profile's data.
Change the import source to switch profiles.

Usage:
    from catalog_datagen.sourcedata.default import CATEGORIES, NOUNS
"""

# Default profile: marketplace
from catalog_datagen.sourcedata.marketplace import (
    ADJECTIVES,
    CATEGORIES,
    NOUNS,
    PROMO_STATUSES,
    PROMO_TYPES,
    SUBCATEGORIES,
    SUBCATEGORY_PREFIXES,
    SUBCATEGORY_SUFFIXES,
)

__all__ = [
    "CATEGORIES",
    "SUBCATEGORIES",
    "ADJECTIVES",
    "NOUNS",
    "SUBCATEGORY_PREFIXES",
    "SUBCATEGORY_SUFFIXES",
    "PROMO_TYPES",
    "PROMO_STATUSES",
]

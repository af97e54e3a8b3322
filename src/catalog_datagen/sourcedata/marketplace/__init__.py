"""
Marketplace catalog profile source data.

This profile describes a digital-goods marketplace (graphics, fonts,
crafts, embroidery, ...) with a heavily skewed category mix.

All data is synthetic and safe for load-testing purposes.
"""

from catalog_datagen.sourcedata.marketplace.categories import CATEGORIES
from catalog_datagen.sourcedata.marketplace.subcategories import SUBCATEGORIES
from catalog_datagen.sourcedata.marketplace.words import (
    ADJECTIVES,
    NOUNS,
    PROMO_STATUSES,
    PROMO_TYPES,
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

"""
Source data module for catalog data generation.

This module provides curated reference tables organized by profile. Each
profile contains the category tree, per-category weights and the word
lists used for slugs and titles.

## Usage

Import from default profile (recommended):
    from catalog_datagen.sourcedata.default import CATEGORIES, SUBCATEGORIES

Import from a specific profile:
    from catalog_datagen.sourcedata import marketplace
    categories = marketplace.CATEGORIES

Reference tables are read once per run into an immutable
``catalog_datagen.shared.models.ReferenceData`` and passed explicitly to
every worker.
"""

AVAILABLE_PROFILES = ["marketplace"]

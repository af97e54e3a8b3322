"""
Catalog Data Generator

A synthetic catalog data loader supporting:
- Static category seeding and synthetic subcategory generation
- Parallel, batched tag and product generation with weighted category skew
- Promotion upserts and download event logs for existing products
"""

__version__ = "1.0.0"
__author__ = "Catalog DataGen"

"""
Pytest configuration and fixtures for catalog data generator tests.

Provides a temporary SQLite store created from the ORM models, reference
data for a two-category catalog and helpers to pre-populate upstream rows.
"""

import sqlite3
from datetime import UTC, datetime

import pytest
import pytest_asyncio
from sqlalchemy import insert

from catalog_datagen.db import create_engine, init_schema
from catalog_datagen.db.models import Category, Tag
from catalog_datagen.shared.models import CategoryDict, ReferenceData

K1 = 1
K2 = 2
# Subcategory ids per top-level category in the two-category catalog
TWO_CATEGORY_TREE = {K1: [101, 102, 103], K2: [201]}


def _sqlite_variable_limit() -> int:
    """Maximum bind parameters per statement in the linked SQLite library."""
    conn = sqlite3.connect(":memory:")
    try:
        return conn.getlimit(sqlite3.SQLITE_LIMIT_VARIABLE_NUMBER)
    finally:
        conn.close()


async def _seed_categories(engine, tree: dict[int, list[int]]) -> None:
    """Insert top-level categories and their subcategories."""
    now = datetime.now(UTC)
    top_level = [
        {
            "category_id": parent_id,
            "parent_category_id": None,
            "default_name": f"category-{parent_id}",
            "default_description": f"Description for category-{parent_id}",
            "url_path": f"category-{parent_id}",
            "created_at": now,
            "updated_at": now,
        }
        for parent_id in tree
    ]
    children = [
        {
            "category_id": child_id,
            "parent_category_id": parent_id,
            "default_name": f"subcategory-{child_id}",
            "default_description": f"Description for subcategory-{child_id}",
            "url_path": f"subcategory-{child_id}",
            "created_at": now,
            "updated_at": now,
        }
        for parent_id, child_ids in tree.items()
        for child_id in child_ids
    ]
    async with engine.begin() as conn:
        await conn.execute(insert(Category), top_level)
        if children:
            await conn.execute(insert(Category), children)


async def _seed_tags(engine, count: int) -> None:
    """Insert tags 1..count."""
    rows = [
        {"tag_id": tag_id, "slug": f"tag-{tag_id}", "in_landing_page": False, "category": False, "curated": False}
        for tag_id in range(1, count + 1)
    ]
    async with engine.begin() as conn:
        await conn.execute(insert(Tag), rows)


@pytest.fixture
def two_category_reference() -> ReferenceData:
    """Reference data with categories K1 (90%) and K2 (10%)."""
    return ReferenceData.from_profile(
        categories=(
            CategoryDict(CategoryID=K1, Slug="k1", Percentage=0.9),
            CategoryDict(CategoryID=K2, Slug="k2", Percentage=0.1),
        ),
        subcategories=(),
    )


@pytest.fixture
def reference() -> ReferenceData:
    """Default marketplace reference data."""
    return ReferenceData.from_profile()


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Temporary SQLite store with the catalog schema."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def sqlite_limit() -> int:
    return _sqlite_variable_limit()


@pytest.fixture
def seed_categories():
    """Async helper: ``await seed_categories(engine, {parent: [children]})``."""
    return _seed_categories


@pytest.fixture
def seed_tags():
    """Async helper: ``await seed_tags(engine, count)``."""
    return _seed_tags


@pytest.fixture
def two_category_tree() -> dict[int, list[int]]:
    return {parent: list(children) for parent, children in TWO_CATEGORY_TREE.items()}

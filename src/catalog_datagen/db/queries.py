"""
Read-side queries used before and during a load.

All functions take an open ``AsyncConnection`` so they can run either in a
short-lived coordinator connection or inside a worker's batch transaction.
"""

import logging
from collections import defaultdict

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncConnection

from catalog_datagen.db.models import Category, Product, Tag

logger = logging.getLogger(__name__)


async def get_max_id(
    conn: AsyncConnection,
    column,
    default: int = 0,
    *criteria,
) -> int:
    """
    Return ``max(column)`` over the rows matching ``criteria``, or ``default``.

    Args:
        conn: Open async connection
        column: ORM column attribute, e.g. ``Product.product_id``
        default: Value returned when no rows match
        *criteria: Optional WHERE clauses

    Returns:
        Highest existing id (or default)
    """
    stmt = select(func.coalesce(func.max(column), default))
    if criteria:
        stmt = stmt.where(*criteria)
    result = await conn.execute(stmt)
    return int(result.scalar_one())


async def count_rows(conn: AsyncConnection, model, *criteria) -> int:
    """Return the number of rows in a model's table matching criteria."""
    stmt = select(func.count()).select_from(model)
    if criteria:
        stmt = stmt.where(*criteria)
    result = await conn.execute(stmt)
    return int(result.scalar_one())


async def fetch_top_level_category_ids(conn: AsyncConnection) -> list[int]:
    """Return ids of categories without a parent."""
    result = await conn.execute(
        select(Category.category_id)
        .where(Category.parent_category_id.is_(None))
        .order_by(Category.category_id)
    )
    return [int(row) for row in result.scalars()]


async def fetch_subcategory_adjacency(conn: AsyncConnection) -> dict[int, list[int]]:
    """
    Load the parent category -> subcategory ids mapping.

    Returns:
        Dict keyed by parent category id; values are subcategory ids in
        ascending order
    """
    result = await conn.execute(
        select(Category.category_id, Category.parent_category_id)
        .where(Category.parent_category_id.is_not(None))
        .order_by(Category.category_id)
    )

    adjacency: dict[int, list[int]] = defaultdict(list)
    for subcategory_id, parent_id in result:
        adjacency[int(parent_id)].append(int(subcategory_id))

    logger.debug(
        f"Loaded {sum(len(v) for v in adjacency.values())} subcategories "
        f"under {len(adjacency)} parent categories"
    )
    return dict(adjacency)


async def get_max_tag_id(conn: AsyncConnection) -> int:
    """Return the highest tag id, 0 when the tag table is empty."""
    return await get_max_id(conn, Tag.tag_id, 0)


async def fetch_random_product_ids(conn: AsyncConnection, limit: int) -> list[int]:
    """Return up to ``limit`` distinct product ids in random order."""
    result = await conn.execute(
        select(Product.product_id).order_by(func.random()).limit(limit)
    )
    return [int(row) for row in result.scalars()]

"""
Multi-row INSERT statement construction.

Statements are rendered as driver-level SQL with positional placeholders
and a flat parameter tuple, and executed with
``AsyncConnection.exec_driver_sql``. Every value group is produced by
``placeholder_group`` so the placeholder count always equals the number of
parameters.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from catalog_datagen.config.models import DEFAULT_PARAMETER_LIMIT
from catalog_datagen.generators.batching import chunked, max_batch_size
from catalog_datagen.shared.exceptions import StatementBuildError

logger = logging.getLogger(__name__)

# DB-API paramstyle -> placeholder template ({} receives the 1-based position)
PLACEHOLDER_FORMATS: dict[str, str] = {
    "qmark": "?",
    "format": "%s",
    "pyformat": "%s",
    "numeric": ":{}",
    "numeric_dollar": "${}",
}


@dataclass(frozen=True)
class InsertTarget:
    """A table, its column order and the conflict clause used on insert."""

    table: str
    columns: tuple[str, ...]
    on_conflict: str = ""

    @property
    def width(self) -> int:
        """Bind parameters per row."""
        return len(self.columns)


@dataclass(frozen=True)
class InsertStatement:
    sql: str
    params: tuple[Any, ...]
    row_count: int


CATEGORY_TARGET = InsertTarget(
    table="category",
    columns=(
        "category_id",
        "parent_category_id",
        "default_name",
        "default_description",
        "url_path",
        "created_at",
        "updated_at",
    ),
    on_conflict="ON CONFLICT (category_id) DO NOTHING",
)

TAG_TARGET = InsertTarget(
    table="tag",
    columns=("tag_id", "slug", "in_landing_page", "category", "curated"),
    on_conflict="ON CONFLICT (tag_id) DO NOTHING",
)

PRODUCT_TARGET = InsertTarget(
    table="product",
    columns=(
        "product_id",
        "author_id",
        "category_id",
        "price_in_cents",
        "title",
        "slug",
        "description",
        "main_image",
        "images",
        "assets",
        "product_type",
        "product_status",
        "metadata",
        "created_at",
        "status",
    ),
    on_conflict="ON CONFLICT (product_id) DO NOTHING",
)

PRODUCT_CATEGORY_TARGET = InsertTarget(
    table="product_product_category",
    columns=("product_id", "category_id"),
    on_conflict="ON CONFLICT DO NOTHING",
)

PRODUCT_TAG_TARGET = InsertTarget(
    table="product_tag",
    columns=("product_id", "tag_id"),
    on_conflict="ON CONFLICT DO NOTHING",
)

# At most one promo per product: re-running overwrites instead of skipping
PROMO_TARGET = InsertTarget(
    table="product_promo",
    columns=(
        "product_promo_id",
        "product_id",
        "promo_type",
        "status",
        "expires_at",
        "created_at",
        "last_updated_at",
    ),
    on_conflict=(
        "ON CONFLICT (product_id) DO UPDATE SET "
        "promo_type = EXCLUDED.promo_type, "
        "status = EXCLUDED.status, "
        "expires_at = EXCLUDED.expires_at, "
        "last_updated_at = EXCLUDED.last_updated_at"
    ),
)

DOWNLOAD_TARGET = InsertTarget(
    table="product_download",
    columns=("download_id", "product_id", "downloaded_at", "downloaded_at_day_normalized"),
    on_conflict="ON CONFLICT (download_id) DO NOTHING",
)


def placeholder_group(first_position: int, width: int, paramstyle: str) -> str:
    """
    Render one ``(...)`` value group of ``width`` sequential placeholders.

    Example:
        >>> placeholder_group(4, 3, "numeric_dollar")
        '($4, $5, $6)'
    """
    try:
        template = PLACEHOLDER_FORMATS[paramstyle]
    except KeyError:
        raise StatementBuildError(f"Unsupported paramstyle '{paramstyle}'") from None
    return "(" + ", ".join(template.format(first_position + i) for i in range(width)) + ")"


class StatementBuilder:
    """
    Builds parameter-limit-safe multi-row INSERT statements.

    Args:
        paramstyle: DB-API paramstyle of the executing driver
            (``conn.dialect.paramstyle``)
        parameter_limit: Maximum bind parameters per statement; a statement
            must stay strictly below it
    """

    def __init__(
        self,
        paramstyle: str = "numeric_dollar",
        parameter_limit: int = DEFAULT_PARAMETER_LIMIT,
    ):
        if paramstyle not in PLACEHOLDER_FORMATS:
            raise StatementBuildError(f"Unsupported paramstyle '{paramstyle}'")
        self.paramstyle = paramstyle
        self.parameter_limit = parameter_limit

    def max_rows(self, target: InsertTarget) -> int:
        """Most rows of ``target`` that fit in one statement."""
        return max_batch_size(target.width, self.parameter_limit)

    def build(self, target: InsertTarget, rows: Sequence[Sequence[Any]]) -> InsertStatement:
        """
        Build one INSERT for all ``rows``.

        Raises:
            StatementBuildError: If rows is empty, a row has the wrong width,
                the statement would reach the parameter limit, or the
                placeholder and parameter counts disagree
        """
        if not rows:
            raise StatementBuildError("No rows to insert", table=target.table)

        width = target.width
        total_params = len(rows) * width
        if total_params >= self.parameter_limit:
            raise StatementBuildError(
                f"Statement needs {total_params} parameters, limit is {self.parameter_limit}",
                table=target.table,
            )

        groups: list[str] = []
        params: list[Any] = []
        for row in rows:
            if len(row) != width:
                raise StatementBuildError(
                    f"Row has {len(row)} values, expected {width}",
                    table=target.table,
                )
            groups.append(placeholder_group(len(params) + 1, width, self.paramstyle))
            params.extend(row)

        placeholders = len(groups) * width
        if placeholders != len(params):
            raise StatementBuildError(
                "Placeholder/argument mismatch",
                table=target.table,
                placeholders=placeholders,
                arguments=len(params),
            )

        sql = (
            f"INSERT INTO {target.table} ({', '.join(target.columns)}) "
            f"VALUES {', '.join(groups)}"
        )
        if target.on_conflict:
            sql = f"{sql} {target.on_conflict}"

        return InsertStatement(sql=sql, params=tuple(params), row_count=len(rows))

    def build_chunked(
        self,
        target: InsertTarget,
        rows: Sequence[Sequence[Any]],
        max_rows: int | None = None,
    ) -> list[InsertStatement]:
        """
        Split ``rows`` into as many statements as needed.

        Args:
            target: Insert target
            rows: All rows, e.g. the flattened relation tuples of a batch
            max_rows: Rows per statement; clamped to what the parameter
                limit allows

        Returns:
            Statements in row order (empty list for no rows)
        """
        size = max_batch_size(target.width, self.parameter_limit, max_rows)
        return [self.build(target, chunk) for chunk in chunked(rows, size)]

"""
Tests for multi-row INSERT construction.
"""

import re

import pytest

from catalog_datagen.generators.statements import (
    DOWNLOAD_TARGET,
    PRODUCT_TAG_TARGET,
    PRODUCT_TARGET,
    PROMO_TARGET,
    TAG_TARGET,
    InsertTarget,
    StatementBuilder,
    placeholder_group,
)
from catalog_datagen.shared.exceptions import StatementBuildError

_DOLLAR = re.compile(r"\$(\d+)")


def _tag_rows(n: int) -> list[tuple]:
    return [(i, f"tag-{i}", False, False, False) for i in range(1, n + 1)]


class TestPlaceholderGroup:
    """Test rendering of a single value group."""

    @pytest.mark.parametrize(
        "paramstyle,expected",
        [
            ("numeric_dollar", "($4, $5, $6)"),
            ("numeric", "(:4, :5, :6)"),
            ("qmark", "(?, ?, ?)"),
            ("format", "(%s, %s, %s)"),
            ("pyformat", "(%s, %s, %s)"),
        ],
    )
    def test_styles(self, paramstyle, expected):
        assert placeholder_group(4, 3, paramstyle) == expected

    def test_unknown_style_rejected(self):
        with pytest.raises(StatementBuildError):
            placeholder_group(1, 2, "named")


class TestStatementBuilder:
    """Test statement construction and parameter-limit enforcement."""

    def test_single_row_parity(self):
        builder = StatementBuilder("numeric_dollar")
        statement = builder.build(TAG_TARGET, _tag_rows(1))

        positions = [int(p) for p in _DOLLAR.findall(statement.sql)]
        assert positions == [1, 2, 3, 4, 5]
        assert len(statement.params) == 5
        assert statement.row_count == 1

    def test_max_rows_parity(self):
        """Test that the largest allowed batch has sequential placeholders matching its params."""
        builder = StatementBuilder("numeric_dollar", parameter_limit=65535)
        max_rows = builder.max_rows(TAG_TARGET)
        statement = builder.build(TAG_TARGET, _tag_rows(max_rows))

        positions = [int(p) for p in _DOLLAR.findall(statement.sql)]
        assert positions == list(range(1, max_rows * 5 + 1))
        assert len(statement.params) == max_rows * 5 < 65535

    def test_max_rows_plus_one_rejected(self):
        builder = StatementBuilder("numeric_dollar", parameter_limit=65535)
        max_rows = builder.max_rows(TAG_TARGET)

        with pytest.raises(StatementBuildError) as exc_info:
            builder.build(TAG_TARGET, _tag_rows(max_rows + 1))
        assert exc_info.value.table == "tag"

    def test_chunked_splits_oversized_input(self):
        """Test that max+1 rows become two statements with consistent parity."""
        builder = StatementBuilder("qmark", parameter_limit=65535)
        max_rows = builder.max_rows(TAG_TARGET)
        statements = builder.build_chunked(TAG_TARGET, _tag_rows(max_rows + 1))

        assert [s.row_count for s in statements] == [max_rows, 1]
        for statement in statements:
            assert statement.sql.count("?") == len(statement.params)

    def test_params_follow_row_order(self):
        builder = StatementBuilder("qmark")
        rows = [(1, 10), (2, 20), (3, 30)]
        statement = builder.build(PRODUCT_TAG_TARGET, rows)
        assert statement.params == (1, 10, 2, 20, 3, 30)

    def test_relation_chunk_size_honoured(self):
        builder = StatementBuilder("qmark")
        rows = [(1, i) for i in range(25)]
        statements = builder.build_chunked(PRODUCT_TAG_TARGET, rows, max_rows=10)
        assert [s.row_count for s in statements] == [10, 10, 5]

    def test_chunked_empty_rows(self):
        assert StatementBuilder("qmark").build_chunked(PRODUCT_TAG_TARGET, []) == []

    def test_empty_rows_rejected(self):
        with pytest.raises(StatementBuildError):
            StatementBuilder().build(TAG_TARGET, [])

    def test_row_width_mismatch_rejected(self):
        with pytest.raises(StatementBuildError):
            StatementBuilder().build(TAG_TARGET, [(1, "slug")])

    def test_unknown_paramstyle_rejected(self):
        with pytest.raises(StatementBuildError):
            StatementBuilder("named")

    def test_insert_ignore_clause(self):
        sql = StatementBuilder("qmark").build(TAG_TARGET, _tag_rows(2)).sql
        assert sql.startswith("INSERT INTO tag (tag_id, slug, in_landing_page, category, curated) VALUES ")
        assert sql.endswith("ON CONFLICT (tag_id) DO NOTHING")

    def test_promo_upsert_clause(self):
        """Test that promos overwrite the existing promo of a product."""
        row = (1, 7, "discount", "active", None, None, None)
        sql = StatementBuilder("qmark").build(PROMO_TARGET, [row]).sql
        assert "ON CONFLICT (product_id) DO UPDATE SET" in sql
        for column in ("promo_type", "status", "expires_at", "last_updated_at"):
            assert f"{column} = EXCLUDED.{column}" in sql

    def test_target_widths(self):
        assert TAG_TARGET.width == 5
        assert PRODUCT_TARGET.width == 15
        assert PROMO_TARGET.width == 7
        assert DOWNLOAD_TARGET.width == 4
        assert PRODUCT_TAG_TARGET.width == 2

    def test_target_without_conflict_clause(self):
        target = InsertTarget(table="t", columns=("a", "b"))
        sql = StatementBuilder("format").build(target, [(1, 2)]).sql
        assert sql == "INSERT INTO t (a, b) VALUES (%s, %s)"

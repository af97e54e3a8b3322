"""
End-to-end import tests against a temporary SQLite store.

SQLite caps bind parameters per statement lower than PostgreSQL, so runs
that would exceed it use the linked library's limit.
"""

from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select, text

from catalog_datagen.config import BatchSizeConfig, GenerationConfig, ImportMode, ImportRequest
from catalog_datagen.db.models import (
    Category,
    Product,
    ProductDownload,
    ProductProductCategory,
    ProductPromo,
    ProductTag,
    Tag,
)
from catalog_datagen.generators.batching import batch_count, max_batch_size
from catalog_datagen.generators.catalog_loader import CatalogLoader
from catalog_datagen.shared.exceptions import ImportRunError, PreconditionError

pytestmark = pytest.mark.integration


async def _count(engine, model, *criteria) -> int:
    stmt = select(func.count()).select_from(model)
    if criteria:
        stmt = stmt.where(*criteria)
    async with engine.connect() as conn:
        return (await conn.execute(stmt)).scalar_one()


class TestCategories:
    @pytest.mark.asyncio
    async def test_insert_then_skip(self, engine, reference):
        """Test that a second run reports every category as skipped."""
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=reference)

        first = await loader.import_categories()
        second = await loader.import_categories()

        total = len(reference.categories)
        assert (first.inserted, first.skipped) == (total, 0)
        assert (second.inserted, second.skipped) == (0, total)
        assert await _count(engine, Category, Category.parent_category_id.is_(None)) == total


class TestSubcategories:
    @pytest.mark.asyncio
    async def test_generated_under_top_level_parents(self, engine, reference):
        loader = CatalogLoader(
            engine,
            GenerationConfig(workers=2, seed=3),
            BatchSizeConfig(subcategories=20),
            reference=reference,
        )
        await loader.import_categories()

        summary = await loader.import_subcategories(50)

        assert summary.inserted == 50
        assert summary.start_id == 10_001
        assert summary.batches_committed == 3

        async with engine.connect() as conn:
            rows = (
                await conn.execute(
                    select(Category.category_id, Category.parent_category_id, Category.url_path)
                    .where(Category.parent_category_id.is_not(None))
                    .order_by(Category.category_id)
                )
            ).all()

        top_level = {c.CategoryID for c in reference.categories}
        assert [r.category_id for r in rows] == list(range(10_001, 10_051))
        assert all(r.parent_category_id in top_level for r in rows)
        assert all(r.url_path.endswith(f"-{r.category_id}") for r in rows)

    @pytest.mark.asyncio
    async def test_next_run_continues_after_existing(self, engine, reference):
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=reference)
        await loader.import_categories()
        await loader.import_subcategories(5)

        summary = await loader.import_subcategories(5)

        assert summary.start_id == 10_006

    @pytest.mark.asyncio
    async def test_requires_top_level_categories(self, engine, reference):
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=reference)
        with pytest.raises(PreconditionError):
            await loader.import_subcategories(10)
        assert await _count(engine, Category) == 0


class TestTags:
    @pytest.mark.asyncio
    async def test_fills_id_space(self, engine, reference, sqlite_limit):
        """Test 25,000 tags in batches of up to 10,000 with one worker."""
        generation = GenerationConfig(workers=1, seed=11, parameter_limit=sqlite_limit)
        loader = CatalogLoader(engine, generation, BatchSizeConfig(tags=10_000), reference=reference)

        summary = await loader.import_tags(25_000)

        expected_size = max_batch_size(5, sqlite_limit, 10_000)
        assert summary.batches_committed == batch_count(25_000, expected_size)
        assert summary.inserted == 25_000

        async with engine.connect() as conn:
            stats = (
                await conn.execute(select(func.count(), func.min(Tag.tag_id), func.max(Tag.tag_id)))
            ).one()
            slugs = (await conn.execute(select(Tag.slug))).scalars().all()

        assert tuple(stats) == (25_000, 1, 25_000)

        nouns = set(reference.nouns)
        valid = nouns | {f"{a}-{n}" for a in reference.adjectives for n in nouns}
        assert set(slugs) <= valid

    @pytest.mark.asyncio
    async def test_rerun_is_idempotent(self, engine, reference):
        loader = CatalogLoader(engine, GenerationConfig(workers=3), BatchSizeConfig(tags=100), reference=reference)

        await loader.import_tags(500)
        again = await loader.import_tags(500)

        assert again.inserted == 0
        assert again.skipped == 500
        assert await _count(engine, Tag) == 500

    @pytest.mark.asyncio
    async def test_default_count_is_tag_space(self, engine, reference):
        loader = CatalogLoader(engine, GenerationConfig(workers=2, tag_space=300), reference=reference)
        summary = await loader.import_tags()
        assert summary.requested == 300
        assert await _count(engine, Tag) == 300


class TestProducts:
    @pytest.mark.asyncio
    async def test_category_skew_and_fan_out(
        self, engine, two_category_reference, two_category_tree, seed_categories, seed_tags, sqlite_limit
    ):
        """Test 4,001 products land on K1/K2 with a 90/10 split and consistent relations."""
        await seed_categories(engine, two_category_tree)
        await seed_tags(engine, 200)

        generation = GenerationConfig(
            workers=4,
            seed=2024,
            parameter_limit=sqlite_limit,
            avg_tags_per_product=3,
            tag_variance=1,
        )
        loader = CatalogLoader(engine, generation, reference=two_category_reference)

        summary = await loader.import_products(4001)

        assert summary.inserted == 4001
        assert summary.start_id == 1
        assert summary.batches_failed == 0

        async with engine.connect() as conn:
            k1 = (
                await conn.execute(select(func.count()).select_from(Product).where(Product.category_id == 1))
            ).scalar_one()
            mismatched = (
                await conn.execute(
                    select(func.count())
                    .select_from(ProductProductCategory)
                    .join(Product, Product.product_id == ProductProductCategory.product_id)
                    .join(Category, Category.category_id == ProductProductCategory.category_id)
                    .where(Category.parent_category_id != Product.category_id)
                )
            ).scalar_one()
            products_without_subcategory = (
                await conn.execute(
                    select(func.count())
                    .select_from(Product)
                    .where(
                        ~Product.product_id.in_(select(ProductProductCategory.product_id))
                    )
                )
            ).scalar_one()
            max_tag = (await conn.execute(select(func.max(ProductTag.tag_id)))).scalar_one()

        assert abs(k1 / 4001 - 0.9) <= 0.02
        assert mismatched == 0
        assert products_without_subcategory == 0
        assert max_tag <= 200
        assert await _count(engine, Product) == 4001

    @pytest.mark.asyncio
    async def test_continues_after_max_product_id(
        self, engine, two_category_reference, two_category_tree, seed_categories, seed_tags
    ):
        await seed_categories(engine, two_category_tree)
        await seed_tags(engine, 50)
        loader = CatalogLoader(
            engine,
            GenerationConfig(workers=2, avg_tags_per_product=2, tag_variance=0),
            reference=two_category_reference,
        )

        await loader.import_products(10)
        summary = await loader.import_products(5)

        assert summary.start_id == 11
        assert await _count(engine, Product) == 15
        assert await _count(engine, ProductTag) <= 30

    @pytest.mark.asyncio
    async def test_requires_subcategories(self, engine, two_category_reference, seed_categories):
        await seed_categories(engine, {1: [], 2: []})
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=two_category_reference)

        with pytest.raises(PreconditionError):
            await loader.import_products(10)
        assert await _count(engine, Product) == 0

    @pytest.mark.asyncio
    async def test_failed_batches_raise_after_drain(
        self, engine, two_category_reference, two_category_tree, seed_categories
    ):
        """Test that missing tags fail every batch and the run reports a summary."""
        await seed_categories(engine, two_category_tree)
        loader = CatalogLoader(
            engine,
            GenerationConfig(workers=2, tag_space=10, avg_tags_per_product=2, tag_variance=0),
            BatchSizeConfig(products=5),
            reference=two_category_reference,
        )

        with pytest.raises(ImportRunError) as exc_info:
            await loader.import_products(20)

        summary = exc_info.value.summary
        assert summary.batches_failed == 4
        assert summary.batches_committed == 0
        assert await _count(engine, Product) == 0


class TestPromos:
    async def _seed_products(self, engine, reference, tree, seed_categories, seed_tags, count):
        await seed_categories(engine, tree)
        await seed_tags(engine, 20)
        loader = CatalogLoader(
            engine,
            GenerationConfig(workers=1, avg_tags_per_product=2, tag_variance=0),
            reference=reference,
        )
        await loader.import_products(count)

    @pytest.mark.asyncio
    async def test_requires_products(self, engine, reference):
        """Test that promos on an empty product table fail before any write."""
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=reference)

        with pytest.raises(PreconditionError):
            await loader.import_promos(10)
        assert await _count(engine, ProductPromo) == 0

    @pytest.mark.asyncio
    async def test_one_promo_per_product(
        self, engine, two_category_reference, two_category_tree, seed_categories, seed_tags
    ):
        await self._seed_products(
            engine, two_category_reference, two_category_tree, seed_categories, seed_tags, 30
        )
        loader = CatalogLoader(
            engine,
            GenerationConfig(workers=1, seed=5),
            BatchSizeConfig(promos=50),
            reference=two_category_reference,
        )

        summary = await loader.import_promos(20)

        assert summary.inserted == 20
        async with engine.connect() as conn:
            product_ids = (await conn.execute(select(ProductPromo.product_id))).scalars().all()
        assert len(product_ids) == len(set(product_ids)) == 20

    @pytest.mark.asyncio
    async def test_second_run_overwrites(
        self, engine, two_category_reference, two_category_tree, seed_categories, seed_tags
    ):
        """Test that promoting the same product twice keeps the row and refreshes its promo fields."""
        await self._seed_products(
            engine, two_category_reference, two_category_tree, seed_categories, seed_tags, 1
        )
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=two_category_reference)

        await loader.import_promos(1)
        async with engine.begin() as conn:
            await conn.execute(
                text(
                    "UPDATE product_promo SET promo_type = 'stale', status = 'stale', "
                    "expires_at = '2000-01-01 00:00:00', created_at = '1999-01-01 00:00:00', "
                    "last_updated_at = '2000-01-01 00:00:00'"
                )
            )

        summary = await loader.import_promos(1)

        assert summary.inserted == 1
        async with engine.connect() as conn:
            rows = (
                await conn.execute(
                    text(
                        "SELECT product_promo_id, product_id, promo_type, status, "
                        "expires_at, created_at, last_updated_at FROM product_promo"
                    )
                )
            ).all()
        assert len(rows) == 1
        row = rows[0]
        assert row.product_id == 1
        assert row.product_promo_id == 1
        assert row.created_at == "1999-01-01 00:00:00"
        assert row.promo_type in two_category_reference.promo_types
        assert row.status in two_category_reference.promo_statuses
        assert row.expires_at != "2000-01-01 00:00:00"
        assert row.last_updated_at != "2000-01-01 00:00:00"
        assert row.last_updated_at.startswith(str(datetime.now(UTC).year))

    @pytest.mark.asyncio
    async def test_more_promos_than_products(
        self, engine, two_category_reference, two_category_tree, seed_categories, seed_tags
    ):
        await self._seed_products(
            engine, two_category_reference, two_category_tree, seed_categories, seed_tags, 5
        )
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=two_category_reference)

        summary = await loader.import_promos(12)

        assert await _count(engine, ProductPromo) == 5
        assert summary.inserted == 5
        assert summary.skipped == 7


class TestDownloads:
    @pytest.mark.asyncio
    async def test_downloads_reference_products(
        self, engine, two_category_reference, two_category_tree, seed_categories, seed_tags
    ):
        await seed_categories(engine, two_category_tree)
        await seed_tags(engine, 20)
        generation = GenerationConfig(workers=3, seed=8, avg_tags_per_product=2, tag_variance=0)
        loader = CatalogLoader(
            engine, generation, BatchSizeConfig(downloads=500), reference=two_category_reference
        )
        await loader.import_products(12)

        summary = await loader.import_downloads(1200)

        assert summary.inserted == 1200
        assert summary.batches_committed == 3

        async with engine.connect() as conn:
            stats = (
                await conn.execute(
                    select(
                        func.min(ProductDownload.product_id),
                        func.max(ProductDownload.product_id),
                        func.min(ProductDownload.download_id),
                        func.max(ProductDownload.download_id),
                    )
                )
            ).one()
            buckets = (
                await conn.exec_driver_sql(
                    "SELECT downloaded_at_day_normalized, "
                    "CAST(strftime('%s', downloaded_at) AS INTEGER) FROM product_download"
                )
            ).all()

        assert stats[0] >= 1 and stats[1] <= 12
        assert (stats[2], stats[3]) == (1, 1200)
        assert all(day == seconds // 86400 for day, seconds in buckets)

        today = int(datetime.now(UTC).timestamp()) // 86400
        assert all(today - 15 <= day <= today for day, _ in buckets)

    @pytest.mark.asyncio
    async def test_requires_products(self, engine, reference):
        loader = CatalogLoader(engine, GenerationConfig(workers=1), reference=reference)
        with pytest.raises(PreconditionError):
            await loader.import_downloads(10)


class TestRun:
    @pytest.mark.asyncio
    async def test_dispatches_on_mode(self, engine, reference):
        loader = CatalogLoader(engine, GenerationConfig(workers=2), reference=reference)

        summary = await loader.run(ImportRequest(mode="tags", count=40))

        assert summary.mode is ImportMode.TAGS
        assert await _count(engine, Tag) == 40

    @pytest.mark.asyncio
    async def test_progress_factory_receives_total(self, engine, reference):
        calls = []

        def factory(total, description):
            calls.append((total, description))
            return lambda k: None

        loader = CatalogLoader(
            engine, GenerationConfig(workers=1), reference=reference, progress_factory=factory
        )
        await loader.import_tags(25)

        assert calls == [(25, "Tags")]

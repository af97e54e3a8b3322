"""
Run coordination for catalog imports.

``CatalogLoader`` implements one coroutine per import mode. Each mode checks
its upstream preconditions, computes the starting identifier from the
store, builds the shared read-only sampling tables once, partitions the
requested count and hands the batches to a ``BatchDispatcher``.
"""

import logging
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from catalog_datagen.config.models import (
    BatchSizeConfig,
    GenerationConfig,
    ImportMode,
    ImportRequest,
    LoaderConfig,
)
from catalog_datagen.db.models import Category, Product, ProductDownload, ProductPromo
from catalog_datagen.db.queries import (
    count_rows,
    fetch_random_product_ids,
    fetch_subcategory_adjacency,
    fetch_top_level_category_ids,
    get_max_id,
    get_max_tag_id,
)
from catalog_datagen.generators.batching import (
    BatchDescriptor,
    batch_count,
    max_batch_size,
    partition,
)
from catalog_datagen.generators.dispatcher import BatchDispatcher, DispatchResult
from catalog_datagen.generators.progress import (
    ProgressFactory,
    ProgressReporter,
    ProgressSink,
)
from catalog_datagen.generators.records import CategoryRecord, RecordFactory, hourly_timestamps
from catalog_datagen.generators.sampling import SubcategoryPicker, WeightedChoice
from catalog_datagen.generators.statements import (
    CATEGORY_TARGET,
    DOWNLOAD_TARGET,
    PRODUCT_CATEGORY_TARGET,
    PRODUCT_TAG_TARGET,
    PRODUCT_TARGET,
    PROMO_TARGET,
    TAG_TARGET,
    InsertStatement,
    InsertTarget,
    StatementBuilder,
)
from catalog_datagen.shared.exceptions import ImportRunError, PreconditionError
from catalog_datagen.shared.models import ReferenceData

logger = logging.getLogger(__name__)

# Generated subcategory ids start above this floor
SUBCATEGORY_ID_FLOOR = 10000


@dataclass
class ImportSummary:
    """Outcome of one import mode run."""

    mode: ImportMode
    requested: int
    inserted: int = 0
    skipped: int = 0
    batches_committed: int = 0
    batches_failed: int = 0
    elapsed_seconds: float = 0.0
    start_id: int | None = None

    def __str__(self) -> str:
        return (
            f"{self.mode.value}: inserted {self.inserted}, skipped {self.skipped} "
            f"of {self.requested} in {self.elapsed_seconds:.1f}s "
            f"({self.batches_committed} batches committed, {self.batches_failed} failed)"
        )


def _default_progress(total: int, description: str) -> ProgressSink:
    return ProgressReporter(total, description)


def _close_progress(progress: ProgressSink) -> None:
    close = getattr(progress, "close", None)
    if close is not None:
        close()


class CatalogLoader:
    """
    Coordinates synthetic catalog imports against one store.

    Args:
        engine: Shared async engine (pooled connections for the workers)
        generation: Worker pool and data shape settings
        batches: Preferred per-entity batch sizes
        reference: Static reference tables (defaults to the marketplace profile)
        progress_factory: Builds a progress sink from (total, description)

    Example:
        >>> loader = CatalogLoader(engine, GenerationConfig(workers=4))
        >>> summary = await loader.import_tags(100_000)
    """

    def __init__(
        self,
        engine: AsyncEngine,
        generation: GenerationConfig | None = None,
        batches: BatchSizeConfig | None = None,
        reference: ReferenceData | None = None,
        progress_factory: ProgressFactory | None = None,
    ):
        self.engine = engine
        self.generation = generation or GenerationConfig()
        self.batches = batches or BatchSizeConfig()
        self.reference = reference or ReferenceData.from_profile()
        self.progress_factory = progress_factory or _default_progress

        self.builder = StatementBuilder(
            paramstyle=engine.dialect.paramstyle,
            parameter_limit=self.generation.parameter_limit,
        )
        self.factory = RecordFactory(
            self.reference,
            avg_tags_per_product=self.generation.avg_tags_per_product,
            tag_variance=self.generation.tag_variance,
        )

    @classmethod
    def from_config(cls, engine: AsyncEngine, config: LoaderConfig, **kwargs) -> "CatalogLoader":
        return cls(engine, generation=config.generation, batches=config.batches, **kwargs)

    async def run(self, request: ImportRequest) -> ImportSummary:
        """Run the import selected by ``request.mode``."""
        if request.mode is ImportMode.CATEGORIES:
            return await self.import_categories()
        if request.mode is ImportMode.SUBCATEGORIES:
            return await self.import_subcategories(request.count)
        if request.mode is ImportMode.TAGS:
            return await self.import_tags(request.count)
        if request.mode is ImportMode.PRODUCTS:
            return await self.import_products(request.count)
        if request.mode is ImportMode.PROMOS:
            return await self.import_promos(request.count)
        return await self.import_downloads(request.count)

    # ================================
    # MODES
    # ================================

    async def import_categories(self) -> ImportSummary:
        """
        Insert the static top-level categories.

        Existing categories are left untouched; the summary reports them as
        skipped.
        """
        started = time.perf_counter()
        now = datetime.now(UTC)
        rows = [
            CategoryRecord(
                category_id=c.CategoryID,
                parent_category_id=None,
                name=c.Slug,
                description=f"Description for {c.Slug}",
                url_path=c.Slug,
                created_at=now,
                updated_at=now,
            ).as_row()
            for c in self.reference.categories
        ]
        logger.info(f"Importing {len(rows)} categories")

        async with self.engine.begin() as conn:
            inserted = 0
            for statement in self.builder.build_chunked(CATEGORY_TARGET, rows):
                inserted += await self._execute(conn, statement)

        progress = self.progress_factory(len(rows), "Categories")
        progress(len(rows))
        _close_progress(progress)

        summary = ImportSummary(
            mode=ImportMode.CATEGORIES,
            requested=len(rows),
            inserted=inserted,
            skipped=len(rows) - inserted,
            batches_committed=1,
            elapsed_seconds=time.perf_counter() - started,
        )
        logger.info(str(summary))
        return summary

    async def import_subcategories(self, count: int) -> ImportSummary:
        """Generate ``count`` subcategories under random top-level parents."""
        async with self.engine.connect() as conn:
            parent_ids = await fetch_top_level_category_ids(conn)
            if not parent_ids:
                raise PreconditionError(
                    "No top-level categories found; run categories mode first",
                    table="category",
                )
            max_id = await get_max_id(
                conn,
                Category.category_id,
                SUBCATEGORY_ID_FLOOR,
                Category.parent_category_id.is_not(None),
            )

        start_id = max(max_id, SUBCATEGORY_ID_FLOOR) + 1
        now = datetime.now(UTC)

        async def handle(conn: AsyncConnection, batch: BatchDescriptor, rng: random.Random) -> int:
            rows = [
                self.factory.make_subcategory(category_id, parent_ids, rng, now).as_row()
                for category_id in batch.ids()
            ]
            return await self._execute(conn, self.builder.build(CATEGORY_TARGET, rows))

        return await self._dispatch(
            ImportMode.SUBCATEGORIES,
            count,
            start_id,
            self._batch_size("subcategories", CATEGORY_TARGET),
            handle,
            "Subcategories",
        )

    async def import_tags(self, count: int | None = None) -> ImportSummary:
        """
        Fill the tag id space ``1..count``.

        Existing ids are skipped by the insert, so re-running is a no-op for
        tags that are already present.
        """
        count = count or self.generation.tag_space

        async def handle(conn: AsyncConnection, batch: BatchDescriptor, rng: random.Random) -> int:
            rows = [self.factory.make_tag(tag_id, rng).as_row() for tag_id in batch.ids()]
            return await self._execute(conn, self.builder.build(TAG_TARGET, rows))

        return await self._dispatch(
            ImportMode.TAGS,
            count,
            1,
            self._batch_size("tags", TAG_TARGET),
            handle,
            "Tags",
        )

    async def import_products(self, count: int) -> ImportSummary:
        """
        Generate ``count`` products with subcategory and tag assignments.

        The category distribution comes from the reference weights of the
        categories present in the store; subcategories are loaded once and
        weighted per parent.
        """
        async with self.engine.connect() as conn:
            adjacency = await fetch_subcategory_adjacency(conn)
            if not adjacency:
                raise PreconditionError(
                    "No subcategories found; run subcategories mode first",
                    table="category",
                )
            top_level = set(await fetch_top_level_category_ids(conn))
            max_product_id = await get_max_id(conn, Product.product_id, 0)
            tag_space = await get_max_tag_id(conn)

        known = [c for c in self.reference.categories if c.CategoryID in top_level]
        if not known:
            raise PreconditionError(
                "None of the reference categories exist in the store; run categories mode first",
                table="category",
            )
        categories = WeightedChoice(
            [c.CategoryID for c in known],
            [c.Percentage for c in known],
        )
        picker = SubcategoryPicker(adjacency, self.reference.subcategory_weights)

        if tag_space <= 0:
            tag_space = self.generation.tag_space
            logger.warning(f"Tag table is empty, drawing tag ids from 1..{tag_space}")

        logger.info(
            f"Product sampling: {len(categories)} categories, "
            f"{picker.total_subcategories} subcategories, tag space {tag_space}"
        )

        relation_chunk = self.batches.relation_tuples
        now = datetime.now(UTC)

        async def handle(conn: AsyncConnection, batch: BatchDescriptor, rng: random.Random) -> int:
            products = [
                self.factory.make_product(product_id, rng, categories, picker, tag_space, now)
                for product_id in batch.ids()
            ]
            written = await self._execute(
                conn, self.builder.build(PRODUCT_TARGET, [p.as_row() for p in products])
            )

            subcategory_rows = [row for p in products for row in p.subcategory_rows()]
            tag_rows = [row for p in products for row in p.tag_rows()]
            await self._execute_all(conn, PRODUCT_CATEGORY_TARGET, subcategory_rows, relation_chunk)
            await self._execute_all(conn, PRODUCT_TAG_TARGET, tag_rows, relation_chunk)
            return written

        return await self._dispatch(
            ImportMode.PRODUCTS,
            count,
            max_product_id + 1,
            self._batch_size("products", PRODUCT_TARGET),
            handle,
            "Products",
        )

    async def import_promos(self, count: int) -> ImportSummary:
        """
        Attach ``count`` promos to random distinct products.

        A product keeps at most one promo: promos for products that already
        have one overwrite it.
        """
        async with self.engine.connect() as conn:
            product_count = await count_rows(conn, Product)
            if product_count == 0:
                raise PreconditionError(
                    "No products found; run products mode first", table="product"
                )
            max_promo_id = await get_max_id(conn, ProductPromo.product_promo_id, 0)

        now = datetime.now(UTC)

        async def handle(conn: AsyncConnection, batch: BatchDescriptor, rng: random.Random) -> int:
            product_ids = await fetch_random_product_ids(conn, batch.count)

            target = min(batch.count, product_count)
            if len(product_ids) < target:
                chosen = set(product_ids)
                while len(product_ids) < target:
                    candidate = rng.randint(1, product_count)
                    if candidate not in chosen:
                        chosen.add(candidate)
                        product_ids.append(candidate)

            rows = [
                self.factory.make_promo(promo_id, product_id, rng, now).as_row()
                for promo_id, product_id in zip(batch.ids(), product_ids)
            ]
            if len(rows) < batch.count:
                logger.debug(
                    f"Promo batch at {batch.start_id}: only {len(rows)} distinct products available"
                )
            if not rows:
                return 0
            return await self._execute(conn, self.builder.build(PROMO_TARGET, rows))

        return await self._dispatch(
            ImportMode.PROMOS,
            count,
            max_promo_id + 1,
            self._batch_size("promos", PROMO_TARGET),
            handle,
            "Promos",
        )

    async def import_downloads(self, count: int) -> ImportSummary:
        """Generate ``count`` download events over the recent hourly window."""
        async with self.engine.connect() as conn:
            product_count = await count_rows(conn, Product)
            if product_count == 0:
                raise PreconditionError(
                    "No products found; run products mode first", table="product"
                )
            max_download_id = await get_max_id(conn, ProductDownload.download_id, 0)

        timestamps = hourly_timestamps(self.generation.download_window_days)

        async def handle(conn: AsyncConnection, batch: BatchDescriptor, rng: random.Random) -> int:
            rows = [
                self.factory.make_download(download_id, rng, product_count, timestamps).as_row()
                for download_id in batch.ids()
            ]
            return await self._execute(conn, self.builder.build(DOWNLOAD_TARGET, rows))

        return await self._dispatch(
            ImportMode.DOWNLOADS,
            count,
            max_download_id + 1,
            self._batch_size("downloads", DOWNLOAD_TARGET),
            handle,
            "Downloads",
        )

    # ================================
    # HELPERS
    # ================================

    def _batch_size(self, entity: str, target: InsertTarget) -> int:
        """Configured batch size for an entity, clamped to the parameter limit."""
        preferred = getattr(self.batches, entity)
        size = max_batch_size(target.width, self.generation.parameter_limit, preferred)
        if size < preferred:
            logger.warning(
                f"Batch size for {entity} reduced from {preferred} to {size} "
                f"to stay under {self.generation.parameter_limit} parameters"
            )
        return size

    async def _execute(self, conn: AsyncConnection, statement: InsertStatement) -> int:
        result = await conn.exec_driver_sql(statement.sql, statement.params)
        # Some drivers report -1 when the count is unknown
        return result.rowcount if result.rowcount >= 0 else statement.row_count

    async def _execute_all(
        self,
        conn: AsyncConnection,
        target: InsertTarget,
        rows: Sequence[Sequence[Any]],
        max_rows: int,
    ) -> int:
        written = 0
        for statement in self.builder.build_chunked(target, rows, max_rows):
            written += await self._execute(conn, statement)
        return written

    async def _dispatch(
        self,
        mode: ImportMode,
        count: int,
        start_id: int,
        batch_size: int,
        handler,
        description: str,
    ) -> ImportSummary:
        started = time.perf_counter()
        logger.info(
            f"Importing {count} {mode.value} starting at id {start_id} "
            f"({batch_count(count, batch_size)} batches of up to {batch_size}, "
            f"{self.generation.workers} workers)"
        )

        progress = self.progress_factory(count, description)
        dispatcher = BatchDispatcher(
            self.engine,
            workers=self.generation.workers,
            queue_size=self.generation.queue_size,
            seed=self.generation.seed,
            progress=progress,
            label=mode.value,
        )
        try:
            result: DispatchResult = await dispatcher.run(
                partition(count, batch_size, start_id), handler
            )
        finally:
            _close_progress(progress)

        summary = ImportSummary(
            mode=mode,
            requested=count,
            inserted=result.rows_written,
            skipped=result.completed - result.rows_written,
            batches_committed=result.committed_batches,
            batches_failed=result.failed_batches,
            elapsed_seconds=time.perf_counter() - started,
            start_id=start_id,
        )

        if result.first_error is not None:
            logger.error(f"Import of {mode.value} finished with errors: {summary}")
            raise ImportRunError(
                f"{result.failed_batches} {mode.value} batch(es) failed: {result.first_error}",
                summary=summary,
            ) from result.first_error

        logger.info(str(summary))
        return summary

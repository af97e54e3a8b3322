"""
Synthetic record generation for catalog entities.

Each ``make_*`` method is a pure function of (identifier, random stream,
reference data): it only consumes the caller's random stream. Records are
plain dataclasses whose ``as_row()`` returns values in the column order of
the matching insert target in ``catalog_datagen.generators.statements``.
"""

import json
import random
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from catalog_datagen.generators.sampling import SubcategoryPicker, WeightedChoice
from catalog_datagen.shared.models import ReferenceData

SECONDS_PER_DAY = 86400

MAX_AUTHOR_ID = 10000
MIN_PRICE_IN_CENTS = 99
MAX_PRICE_IN_CENTS = 10098
MAX_PROMO_DAYS_AHEAD = 90
MAX_PROMO_DAYS_AGO = 29


@dataclass
class CategoryRecord:
    """A category row; top-level when parent_category_id is None."""

    category_id: int
    parent_category_id: int | None
    name: str
    description: str
    url_path: str
    created_at: datetime
    updated_at: datetime

    def as_row(self) -> tuple:
        return (
            self.category_id,
            self.parent_category_id,
            self.name,
            self.description,
            self.url_path,
            self.created_at,
            self.updated_at,
        )


@dataclass
class TagRecord:
    tag_id: int
    slug: str
    in_landing_page: bool = False
    category: bool = False
    curated: bool = False

    def as_row(self) -> tuple:
        return (self.tag_id, self.slug, self.in_landing_page, self.category, self.curated)


@dataclass
class ProductRecord:
    """A product plus its fan-out (subcategory and tag assignments)."""

    product_id: int
    author_id: int
    category_id: int
    price_in_cents: int
    title: str
    slug: str
    created_at: datetime
    subcategory_ids: list[int] = field(default_factory=list)
    tag_ids: list[int] = field(default_factory=list)

    def as_row(self) -> tuple:
        return (
            self.product_id,
            self.author_id,
            self.category_id,
            self.price_in_cents,
            json.dumps({"en": self.title}),
            json.dumps({"en": self.slug}),
            json.dumps({"en": f"Description for {self.title}"}),
            "{}",  # main_image
            "[]",  # images
            "[]",  # assets
            "digital",
            "published",
            "{}",  # metadata
            self.created_at,
            "publish",
        )

    def subcategory_rows(self) -> list[tuple[int, int]]:
        return [(self.product_id, sid) for sid in self.subcategory_ids]

    def tag_rows(self) -> list[tuple[int, int]]:
        return [(self.product_id, tid) for tid in self.tag_ids]


@dataclass
class PromoRecord:
    product_promo_id: int
    product_id: int
    promo_type: str
    status: str
    expires_at: datetime
    created_at: datetime
    last_updated_at: datetime

    def as_row(self) -> tuple:
        return (
            self.product_promo_id,
            self.product_id,
            self.promo_type,
            self.status,
            self.expires_at,
            self.created_at,
            self.last_updated_at,
        )


@dataclass
class DownloadRecord:
    download_id: int
    product_id: int
    downloaded_at: datetime

    @property
    def day_normalized(self) -> int:
        """Unix day bucket of the download timestamp."""
        return int(self.downloaded_at.timestamp()) // SECONDS_PER_DAY

    def as_row(self) -> tuple:
        return (self.download_id, self.product_id, self.downloaded_at, self.day_normalized)


def hourly_timestamps(days: int, now: datetime | None = None) -> list[datetime]:
    """
    Hour-aligned timestamps covering the last ``days`` days, newest first.

    Args:
        days: Window length in days
        now: Reference time (defaults to current UTC time)

    Returns:
        ``days * 24`` timestamps one hour apart
    """
    now = now or datetime.now(UTC)
    current_hour = now.replace(minute=0, second=0, microsecond=0)
    return [current_hour - timedelta(hours=i) for i in range(days * 24)]


class RecordFactory:
    """
    Builds synthetic records from reference data.

    The factory holds only read-only state (reference data and sizing
    settings) and is shared by all workers; every method takes the calling
    worker's random stream.
    """

    def __init__(
        self,
        reference: ReferenceData,
        avg_tags_per_product: int = 25,
        tag_variance: int = 5,
    ):
        self.reference = reference
        self.avg_tags_per_product = avg_tags_per_product
        self.tag_variance = tag_variance

    def tag_slug(self, rng: random.Random) -> str:
        """Return ``adjective-noun`` or a bare ``noun``, chosen uniformly."""
        if rng.randrange(2) == 0:
            adjective = rng.choice(self.reference.adjectives)
            noun = rng.choice(self.reference.nouns)
            return f"{adjective}-{noun}"
        return rng.choice(self.reference.nouns)

    def make_tag(self, tag_id: int, rng: random.Random) -> TagRecord:
        return TagRecord(tag_id=tag_id, slug=self.tag_slug(rng))

    def make_subcategory(
        self,
        category_id: int,
        parent_ids: list[int],
        rng: random.Random,
        now: datetime,
    ) -> CategoryRecord:
        """Build a subcategory under a uniformly chosen top-level parent."""
        parent_id = rng.choice(parent_ids)
        prefix = rng.choice(self.reference.subcategory_prefixes)
        suffix = rng.choice(self.reference.subcategory_suffixes)
        slug = f"{prefix.lower()}-{suffix.lower()}-{category_id}"
        return CategoryRecord(
            category_id=category_id,
            parent_category_id=parent_id,
            name=slug,
            description=f"Description for {slug}",
            url_path=slug,
            created_at=now,
            updated_at=now,
        )

    def tag_count(self, rng: random.Random) -> int:
        """Number of tags for one product: average +/- variance, at least 1."""
        count = self.avg_tags_per_product + rng.randint(-self.tag_variance, self.tag_variance)
        return max(count, 1)

    def make_product(
        self,
        product_id: int,
        rng: random.Random,
        categories: WeightedChoice[int],
        subcategories: SubcategoryPicker,
        tag_space: int,
        now: datetime,
    ) -> ProductRecord:
        """
        Build one product with its weighted category and fan-out.

        Tag ids are drawn uniformly from ``1..tag_space``; duplicates are
        kept and left to the conflict-ignore insert.
        """
        category_id = categories.choose(rng)
        subcategory_ids = subcategories.pick(category_id, rng)
        tag_ids = [rng.randint(1, tag_space) for _ in range(self.tag_count(rng))]

        adjective = rng.choice(self.reference.adjectives)
        noun = rng.choice(self.reference.nouns)

        return ProductRecord(
            product_id=product_id,
            author_id=rng.randint(1, MAX_AUTHOR_ID),
            category_id=category_id,
            price_in_cents=rng.randint(MIN_PRICE_IN_CENTS, MAX_PRICE_IN_CENTS),
            title=f"Product {product_id} - {adjective} {noun}",
            slug=f"product-{product_id}",
            created_at=now,
            subcategory_ids=subcategory_ids,
            tag_ids=tag_ids,
        )

    def make_promo(
        self,
        promo_id: int,
        product_id: int,
        rng: random.Random,
        now: datetime,
    ) -> PromoRecord:
        return PromoRecord(
            product_promo_id=promo_id,
            product_id=product_id,
            promo_type=rng.choice(self.reference.promo_types),
            status=rng.choice(self.reference.promo_statuses),
            expires_at=now + timedelta(days=rng.randint(1, MAX_PROMO_DAYS_AHEAD)),
            created_at=now - timedelta(days=rng.randint(0, MAX_PROMO_DAYS_AGO)),
            last_updated_at=now,
        )

    def make_download(
        self,
        download_id: int,
        rng: random.Random,
        product_count: int,
        timestamps: list[datetime],
    ) -> DownloadRecord:
        return DownloadRecord(
            download_id=download_id,
            product_id=rng.randint(1, product_count),
            downloaded_at=rng.choice(timestamps),
        )

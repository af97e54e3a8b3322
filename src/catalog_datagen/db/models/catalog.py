"""
SQLAlchemy ORM models for the catalog tables.

This module defines the target schema the loader writes to:
- Category (category) - self-referencing tree, NULL parent = top level
- Tag (tag)
- Product (product)
- ProductProductCategory (product_product_category) - product <-> subcategory
- ProductTag (product_tag) - product <-> tag
- ProductPromo (product_promo) - at most one promo per product
- ProductDownload (product_download) - append-only download log

Identifiers are assigned by the loader (max existing + 1), never by the
database, so no primary key autoincrements.
"""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from catalog_datagen.db.models.base import Base


class Category(Base):
    """
    Category tree (category).

    Top-level categories have a NULL parent; subcategories point at their
    parent category.
    """

    __tablename__ = "category"

    category_id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False, comment="Primary key"
    )
    parent_category_id: Mapped[int | None] = mapped_column(
        BigInteger,
        ForeignKey("category.category_id"),
        nullable=True,
        index=True,
        comment="Parent category (NULL for top-level)",
    )
    default_name: Mapped[str] = mapped_column(Text, nullable=False)
    default_description: Mapped[str] = mapped_column(Text, nullable=False)
    url_path: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.category_id}, parent={self.parent_category_id}, name='{self.default_name}')>"


class Tag(Base):
    """Tag dictionary (tag)."""

    __tablename__ = "tag"

    tag_id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False, comment="Primary key"
    )
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    in_landing_page: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    category: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    curated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Tag(id={self.tag_id}, slug='{self.slug}')>"


class Product(Base):
    """
    Product catalog (product).

    Localized text columns hold JSON documents such as ``{"en": "..."}``.
    """

    __tablename__ = "product"

    product_id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False, comment="Primary key"
    )
    author_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    category_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("category.category_id"), nullable=False, index=True
    )
    price_in_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    main_image: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[str] = mapped_column(Text, nullable=False)
    assets: Mapped[str] = mapped_column(Text, nullable=False)
    product_type: Mapped[str] = mapped_column(String(50), nullable=False)
    product_status: Mapped[str] = mapped_column(String(50), nullable=False)
    # "metadata" is reserved on declarative classes
    product_metadata: Mapped[str] = mapped_column("metadata", Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<Product(id={self.product_id}, category={self.category_id})>"


class ProductProductCategory(Base):
    """Product to subcategory assignment (product_product_category)."""

    __tablename__ = "product_product_category"

    product_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("product.product_id"), primary_key=True
    )
    category_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("category.category_id"), primary_key=True
    )


class ProductTag(Base):
    """Product to tag assignment (product_tag)."""

    __tablename__ = "product_tag"

    product_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("product.product_id"), primary_key=True
    )
    tag_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("tag.tag_id"), primary_key=True
    )

    __table_args__ = (Index("idx_product_tag_tag", "tag_id"),)


class ProductPromo(Base):
    """
    Product promotion (product_promo).

    The unique constraint on product_id models "at most one active promo per
    product"; the loader upserts on it.
    """

    __tablename__ = "product_promo"

    product_promo_id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False, comment="Primary key"
    )
    product_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("product.product_id"), nullable=False, unique=True
    )
    promo_type: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    last_updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __repr__(self) -> str:
        return f"<ProductPromo(id={self.product_promo_id}, product={self.product_id}, type='{self.promo_type}')>"


class ProductDownload(Base):
    """Product download event log (product_download)."""

    __tablename__ = "product_download"

    download_id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False, comment="Primary key"
    )
    product_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("product.product_id"), nullable=False, index=True
    )
    downloaded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    downloaded_at_day_normalized: Mapped[int] = mapped_column(
        Integer, nullable=False, comment="Unix day bucket (seconds // 86400)"
    )

    __table_args__ = (
        Index(
            "idx_product_download_product_day",
            "product_id",
            "downloaded_at_day_normalized",
        ),
    )

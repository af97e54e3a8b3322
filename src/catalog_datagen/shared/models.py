"""
Core data models for the catalog data generator.

This module contains the reference-table models (static category tree and
word lists) and the immutable ``ReferenceData`` bundle handed to every
worker for the duration of a run.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ================================
# REFERENCE TABLE MODELS
# ================================


class CategoryDict(BaseModel):
    """Reference model for a top-level category."""

    model_config = ConfigDict(frozen=True)

    CategoryID: int = Field(..., gt=0, description="Store-assigned category id")
    Slug: str = Field(..., min_length=1, description="Display slug / name")
    Percentage: float = Field(
        ..., ge=0.0, le=1.0, description="Share of products in this category"
    )


class SubcategoryDict(BaseModel):
    """Reference model for a subcategory; weight is relative within its parent."""

    model_config = ConfigDict(frozen=True)

    CategoryID: int = Field(..., gt=0, description="Store-assigned category id")
    Slug: str = Field(..., min_length=1, description="Display slug / name")
    ParentCategoryID: int = Field(..., gt=0, description="Parent category id")
    Percentage: float = Field(
        ..., ge=0.0, le=1.0, description="Share of products in this subcategory"
    )


class ReferenceData(BaseModel):
    """
    Immutable reference tables for one run.

    Loaded once, validated, and passed explicitly to every worker. Never
    mutated after construction.
    """

    model_config = ConfigDict(frozen=True)

    categories: tuple[CategoryDict, ...]
    subcategories: tuple[SubcategoryDict, ...] = ()
    adjectives: tuple[str, ...]
    nouns: tuple[str, ...]
    subcategory_prefixes: tuple[str, ...]
    subcategory_suffixes: tuple[str, ...]
    promo_types: tuple[str, ...]
    promo_statuses: tuple[str, ...]

    @field_validator(
        "adjectives",
        "nouns",
        "subcategory_prefixes",
        "subcategory_suffixes",
        "promo_types",
        "promo_statuses",
    )
    @classmethod
    def validate_word_list(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Word lists must be non-empty and contain no blank entries."""
        if not v:
            raise ValueError("Word list must not be empty")
        if any(not word.strip() for word in v):
            raise ValueError("Word list must not contain blank entries")
        return v

    @model_validator(mode="after")
    def validate_categories(self) -> "ReferenceData":
        """Categories must be non-empty, unique and carry positive total weight."""
        if not self.categories:
            raise ValueError("At least one category is required")

        ids = [c.CategoryID for c in self.categories]
        if len(ids) != len(set(ids)):
            raise ValueError("Category ids must be unique")

        if sum(c.Percentage for c in self.categories) <= 0:
            raise ValueError("Category weights must sum to a positive value")
        return self

    @property
    def subcategory_weights(self) -> dict[int, float]:
        """Static subcategory id -> weight lookup."""
        return {s.CategoryID: s.Percentage for s in self.subcategories}

    @classmethod
    def from_profile(cls, **overrides) -> "ReferenceData":
        """
        Build reference data from the default source-data profile.

        Args:
            **overrides: Replacement values for individual tables (e.g. a
                custom ``categories`` tuple in tests)

        Returns:
            ReferenceData: Validated, frozen reference tables
        """
        from catalog_datagen.sourcedata.default import (
            ADJECTIVES,
            CATEGORIES,
            NOUNS,
            PROMO_STATUSES,
            PROMO_TYPES,
            SUBCATEGORIES,
            SUBCATEGORY_PREFIXES,
            SUBCATEGORY_SUFFIXES,
        )

        data = {
            "categories": tuple(CategoryDict(**c) for c in CATEGORIES),
            "subcategories": tuple(SubcategoryDict(**s) for s in SUBCATEGORIES),
            "adjectives": tuple(ADJECTIVES),
            "nouns": tuple(NOUNS),
            "subcategory_prefixes": tuple(SUBCATEGORY_PREFIXES),
            "subcategory_suffixes": tuple(SUBCATEGORY_SUFFIXES),
            "promo_types": tuple(PROMO_TYPES),
            "promo_statuses": tuple(PROMO_STATUSES),
        }
        data.update(overrides)
        return cls(**data)

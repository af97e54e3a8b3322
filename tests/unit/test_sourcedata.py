"""
Tests for the reference data bundle and the marketplace profile.
"""

import pytest
from pydantic import ValidationError

from catalog_datagen.shared.models import CategoryDict, ReferenceData
from catalog_datagen.sourcedata import AVAILABLE_PROFILES
from catalog_datagen.sourcedata.default import CATEGORIES, SUBCATEGORIES


class TestMarketplaceProfile:
    def test_profile_listed(self):
        assert "marketplace" in AVAILABLE_PROFILES

    def test_category_weights_sum_to_one(self):
        assert sum(c["Percentage"] for c in CATEGORIES) == pytest.approx(1.0, abs=0.01)

    def test_subcategory_parents_are_top_level(self):
        top_level = {c["CategoryID"] for c in CATEGORIES}
        assert all(s["ParentCategoryID"] in top_level for s in SUBCATEGORIES)

    def test_subcategory_ids_unique(self):
        ids = [s["CategoryID"] for s in SUBCATEGORIES]
        assert len(ids) == len(set(ids))


class TestReferenceData:
    def test_from_profile(self):
        reference = ReferenceData.from_profile()
        assert len(reference.categories) == len(CATEGORIES)
        assert reference.subcategory_weights[1804] == pytest.approx(0.2723225)
        assert "flash-sale" in reference.promo_types

    def test_frozen(self):
        reference = ReferenceData.from_profile()
        with pytest.raises(ValidationError):
            reference.nouns = ("x",)

    def test_overrides(self):
        reference = ReferenceData.from_profile(
            categories=(CategoryDict(CategoryID=1, Slug="only", Percentage=1.0),)
        )
        assert [c.CategoryID for c in reference.categories] == [1]

    def test_empty_word_list_rejected(self):
        with pytest.raises(ValidationError):
            ReferenceData.from_profile(nouns=())

    def test_blank_word_rejected(self):
        with pytest.raises(ValidationError):
            ReferenceData.from_profile(adjectives=("bold", " "))

    def test_duplicate_category_ids_rejected(self):
        duplicate = CategoryDict(CategoryID=1, Slug="a", Percentage=0.5)
        with pytest.raises(ValidationError):
            ReferenceData.from_profile(categories=(duplicate, duplicate))

    def test_zero_total_weight_rejected(self):
        with pytest.raises(ValidationError):
            ReferenceData.from_profile(
                categories=(CategoryDict(CategoryID=1, Slug="a", Percentage=0.0),)
            )

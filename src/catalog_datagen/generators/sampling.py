"""
Weighted random selection over discrete distributions.

Weight tables are cumulative sums of (entity, weight) pairs. A uniform draw
is mapped to the first entry whose cumulative weight reaches it; draws that
land past the last entry (floating-point drift) clamp to the last index.

All functions take the random stream from the caller. Nothing here keeps
mutable state, so one ``WeightedChoice`` or ``SubcategoryPicker`` can be
shared read-only by every worker while each worker brings its own
``random.Random``.
"""

import logging
import random
from bisect import bisect_left
from collections.abc import Iterable, Mapping, Sequence
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_SUBCATEGORIES_PER_PRODUCT = 1
MAX_SUBCATEGORIES_PER_PRODUCT = 3


def build_weight_table(weights: Iterable[float]) -> list[float]:
    """
    Build a cumulative weight table.

    Args:
        weights: Non-negative weights in entity order

    Returns:
        Non-decreasing list of running sums

    Raises:
        ValueError: If a weight is negative or the table would be empty
    """
    cumulative: list[float] = []
    running = 0.0
    for weight in weights:
        if weight < 0:
            raise ValueError(f"Weights must be non-negative, got {weight}")
        running += weight
        cumulative.append(running)

    if not cumulative:
        raise ValueError("Cannot build a weight table from no weights")
    return cumulative


def select_index(cumulative: Sequence[float], draw: float) -> int:
    """
    Return the first index whose cumulative weight is >= draw.

    Draws beyond the last cumulative weight return the last index, so the
    result is always in range.

    Example:
        >>> select_index([0.3, 0.7, 1.0], 0.5)
        1
    """
    index = bisect_left(cumulative, draw)
    if index >= len(cumulative):
        return len(cumulative) - 1
    return index


class WeightedChoice(Generic[T]):
    """Immutable weighted distribution over a fixed set of entities."""

    def __init__(self, entities: Sequence[T], weights: Sequence[float]):
        if len(entities) != len(weights):
            raise ValueError(
                f"Got {len(entities)} entities but {len(weights)} weights"
            )
        self._entities = tuple(entities)
        self._cumulative = tuple(build_weight_table(weights))
        self.total = self._cumulative[-1]
        if self.total <= 0:
            raise ValueError("Weights must sum to a positive value")

    def choose(self, rng: random.Random) -> T:
        """Draw one entity; the draw is scaled to the table total."""
        return self._entities[select_index(self._cumulative, rng.random() * self.total)]

    def __len__(self) -> int:
        return len(self._entities)


def sample_without_replacement(
    entities: Sequence[T],
    weights: Sequence[float],
    k: int,
    rng: random.Random,
) -> list[T]:
    """
    Draw up to ``k`` distinct entities, weighted.

    After each pick the chosen entity is removed and the remaining weights
    are re-normalized. Requests for more entities than exist clamp to the
    population size.

    Args:
        entities: Candidate entities
        weights: Weight per entity (same order)
        k: Number of entities requested
        rng: Caller-owned random stream

    Returns:
        Picked entities in draw order
    """
    remaining = list(entities)
    remaining_weights = list(weights)
    picked: list[T] = []

    for _ in range(min(k, len(remaining))):
        total = sum(remaining_weights)
        if total <= 0:
            # Only zero-weight entities left: fall back to uniform
            index = rng.randrange(len(remaining))
        else:
            cumulative = build_weight_table(remaining_weights)
            index = select_index(cumulative, rng.random() * total)
        picked.append(remaining.pop(index))
        remaining_weights.pop(index)

    return picked


class SubcategoryPicker:
    """
    Per-category subcategory distributions, built once per run.

    Subcategories found in the store are weighted by the static reference
    table. Subcategories missing from it get the mean known weight of their
    parent, or a uniform weight when none of the siblings are known.
    """

    def __init__(
        self,
        adjacency: Mapping[int, Sequence[int]],
        static_weights: Mapping[int, float] | None = None,
    ):
        static_weights = static_weights or {}
        self._tables: dict[int, tuple[tuple[int, ...], tuple[float, ...]]] = {}

        for parent_id, subcategory_ids in adjacency.items():
            if not subcategory_ids:
                continue

            known = [
                static_weights[sid] for sid in subcategory_ids if sid in static_weights
            ]
            fallback = sum(known) / len(known) if known else 1.0
            if fallback <= 0:
                fallback = 1.0

            weights = tuple(
                static_weights.get(sid, fallback) for sid in subcategory_ids
            )
            self._tables[parent_id] = (tuple(subcategory_ids), weights)

        logger.debug(f"Built subcategory weight tables for {len(self._tables)} categories")

    @property
    def total_subcategories(self) -> int:
        return sum(len(ids) for ids, _ in self._tables.values())

    def pick(self, category_id: int, rng: random.Random) -> list[int]:
        """
        Pick 1-3 distinct subcategories of a category.

        Returns an empty list when the category has no subcategories.
        """
        table = self._tables.get(category_id)
        if table is None:
            return []

        subcategory_ids, weights = table
        k = rng.randint(MIN_SUBCATEGORIES_PER_PRODUCT, MAX_SUBCATEGORIES_PER_PRODUCT)
        return sample_without_replacement(subcategory_ids, weights, k, rng)

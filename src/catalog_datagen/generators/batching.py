"""
Batch partitioning for bulk loads.

A run's identifier range is split into contiguous, bounded batches before
dispatch. Relation rows whose volume is only known after generation are
re-chunked separately with ``chunked``.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class BatchDescriptor:
    """A contiguous identifier range ``[start_id, start_id + count)``."""

    start_id: int
    count: int

    @property
    def end_id(self) -> int:
        """Last identifier in the batch (inclusive)."""
        return self.start_id + self.count - 1

    def ids(self) -> range:
        return range(self.start_id, self.start_id + self.count)


def max_batch_size(
    params_per_record: int,
    parameter_limit: int,
    preferred: int | None = None,
) -> int:
    """
    Largest batch size whose parameter count stays strictly below the limit.

    Args:
        params_per_record: Bind parameters contributed by one record
        parameter_limit: Store's per-statement parameter ceiling
        preferred: Optional upper bound (e.g. configured batch size)

    Returns:
        Batch size with ``size * params_per_record < parameter_limit``

    Raises:
        ValueError: If a single record cannot fit under the limit
    """
    if params_per_record <= 0:
        raise ValueError(f"params_per_record must be > 0, got {params_per_record}")

    largest = (parameter_limit - 1) // params_per_record
    if largest < 1:
        raise ValueError(
            f"A record with {params_per_record} parameters does not fit under "
            f"the limit of {parameter_limit}"
        )

    if preferred is not None:
        if preferred <= 0:
            raise ValueError(f"preferred batch size must be > 0, got {preferred}")
        return min(preferred, largest)
    return largest


def partition(
    total: int,
    batch_size: int,
    start_id: int = 1,
) -> Iterator[BatchDescriptor]:
    """
    Split ``total`` records starting at ``start_id`` into batches.

    Yields ``ceil(total / batch_size)`` descriptors covering
    ``[start_id, start_id + total)`` without gaps or overlaps; only the last
    one may be shorter. Descriptors are produced lazily.

    Raises:
        ValueError: If total is negative or batch_size is not positive
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be > 0, got {batch_size}")
    if total < 0:
        raise ValueError(f"total must be >= 0, got {total}")

    current = start_id
    remaining = total
    while remaining > 0:
        count = min(batch_size, remaining)
        yield BatchDescriptor(start_id=current, count=count)
        current += count
        remaining -= count


def batch_count(total: int, batch_size: int) -> int:
    """Number of batches ``partition`` will produce."""
    return -(-total // batch_size) if total > 0 else 0


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    if size <= 0:
        raise ValueError(f"size must be > 0, got {size}")
    for i in range(0, len(items), size):
        yield items[i : i + size]

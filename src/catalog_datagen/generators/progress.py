"""
Progress reporting for bulk loads.

A progress sink is any callable ``sink(k)`` meaning "advance by k records".
The dispatcher calls it under its progress lock, so sinks never see
concurrent calls.
"""

import logging
import math
from collections.abc import Callable

from tqdm import tqdm

logger = logging.getLogger(__name__)

ProgressSink = Callable[[int], None]
ProgressFactory = Callable[[int, str], ProgressSink]


class ProgressReporter:
    """Logs progress of a long-running load every 10% and at completion."""

    def __init__(self, total_items: int, description: str = "Processing"):
        """
        Initialize progress reporter.

        Args:
            total_items: Total number of items to process
            description: Description of the operation
        """
        self.total_items = total_items
        self.description = description
        self.processed_items = 0
        self.last_reported_percent = 0

    def update(self, increment: int = 1) -> None:
        """
        Update progress and report if significant progress made.

        Args:
            increment: Number of items processed in this update
        """
        self.processed_items += increment
        if self.total_items <= 0:
            return

        current_percent = (self.processed_items / self.total_items) * 100

        if (
            current_percent >= self.last_reported_percent + 10
            or self.processed_items >= self.total_items
        ):
            logger.info(
                f"{self.description}: {self.processed_items}/{self.total_items} "
                f"({current_percent:.1f}%)"
            )
            self.last_reported_percent = math.floor(current_percent / 10) * 10

    __call__ = update

    def complete(self) -> None:
        """Mark progress as complete and report final status."""
        self.processed_items = self.total_items
        logger.info(f"{self.description}: Complete ({self.total_items}/{self.total_items})")


class TqdmProgress:
    """Progress sink rendering a tqdm bar on stderr; close() when done."""

    def __init__(self, total_items: int, description: str = "Processing"):
        self.bar = tqdm(total=total_items, desc=description, unit="rec")

    def __call__(self, increment: int) -> None:
        self.bar.update(increment)

    def close(self) -> None:
        self.bar.close()


def null_progress(increment: int) -> None:
    """Sink that discards progress."""

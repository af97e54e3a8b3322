"""
Generators module for catalog data generation.

This module contains the sampling, record generation, partitioning,
statement building and worker pool pieces, plus the ``CatalogLoader`` that
wires them together for each import mode.
"""

from .batching import BatchDescriptor, batch_count, chunked, max_batch_size, partition
from .catalog_loader import CatalogLoader, ImportSummary
from .dispatcher import BatchDispatcher, DispatchResult, DispatchState
from .progress import ProgressReporter, TqdmProgress
from .records import RecordFactory
from .sampling import SubcategoryPicker, WeightedChoice, select_index
from .statements import InsertStatement, InsertTarget, StatementBuilder, placeholder_group

__all__ = [
    "CatalogLoader",
    "ImportSummary",
    "BatchDispatcher",
    "DispatchResult",
    "DispatchState",
    "BatchDescriptor",
    "partition",
    "batch_count",
    "chunked",
    "max_batch_size",
    "StatementBuilder",
    "InsertTarget",
    "InsertStatement",
    "placeholder_group",
    "RecordFactory",
    "WeightedChoice",
    "SubcategoryPicker",
    "select_index",
    "ProgressReporter",
    "TqdmProgress",
]

"""
Custom exceptions for the catalog data generator.

This module contains specialized exception classes for configuration
problems, missing upstream data, statement construction and per-batch
execution failures.
"""

from typing import Any


class CatalogDataGenException(Exception):
    """Base exception for all catalog data generator errors."""

    pass


class ConfigurationError(CatalogDataGenException):
    """Exception raised when run settings are invalid before any store I/O."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field

        if field:
            message = f"Invalid setting '{field}': {message}"

        super().__init__(message)


class PreconditionError(CatalogDataGenException):
    """Exception raised when required upstream rows are missing from the store."""

    def __init__(self, message: str, table: str | None = None):
        self.table = table

        if table:
            message = f"{message} (table: {table})"

        super().__init__(message)


class StatementBuildError(CatalogDataGenException):
    """Exception raised when a multi-row insert cannot be built safely."""

    def __init__(
        self,
        message: str,
        table: str | None = None,
        placeholders: int | None = None,
        arguments: int | None = None,
    ):
        self.table = table
        self.placeholders = placeholders
        self.arguments = arguments

        error_parts = [message]

        if table:
            error_parts.append(f"Table: {table}")

        if placeholders is not None:
            error_parts.append(f"Placeholders: {placeholders}")

        if arguments is not None:
            error_parts.append(f"Arguments: {arguments}")

        super().__init__(" | ".join(error_parts))


class BatchExecutionError(CatalogDataGenException):
    """Exception raised when a single batch fails and its transaction is rolled back."""

    def __init__(
        self,
        worker_id: int,
        start_id: int,
        count: int,
        original_error: Exception | None = None,
    ):
        self.worker_id = worker_id
        self.start_id = start_id
        self.count = count
        self.original_error = original_error

        message = (
            f"worker {worker_id}: batch starting at {start_id} "
            f"({count} records) failed"
        )

        if original_error:
            message = f"{message}: {original_error}"

        super().__init__(message)


class ImportRunError(CatalogDataGenException):
    """Exception raised when a run finished draining but at least one batch failed."""

    def __init__(self, message: str, summary: Any | None = None):
        self.summary = summary
        super().__init__(message)

"""
CLI entry point for catalog imports.

Usage:
    python -m catalog_datagen --mode categories --db-url postgresql://host/db
    python -m catalog_datagen --mode subcategories --count 500 --db-url ...
    python -m catalog_datagen --mode tags --db-url ...
    python -m catalog_datagen --mode products --count 1000000 --workers 20 --db-url ...
    python -m catalog_datagen --mode promos --count 50000 --db-url ...
    python -m catalog_datagen --mode downloads --count 5000000 --db-url ...

Exit codes: 0 on success, 1 when the import fails, 2 for invalid settings
or an unreachable store (reported before any batch work starts).
"""

import argparse
import asyncio
import logging
import sys
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from catalog_datagen.config import ImportMode, ImportRequest, LoaderConfig, load_config
from catalog_datagen.db import check_engine_health, create_engine_from_settings, init_schema
from catalog_datagen.generators import CatalogLoader, TqdmProgress
from catalog_datagen.shared.exceptions import (
    CatalogDataGenException,
    ConfigurationError,
    ImportRunError,
    PreconditionError,
)
from catalog_datagen.shared.logging_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def format_duration(seconds: float | None) -> str:
    """Format duration in seconds to human-readable string."""
    if seconds is None:
        return "N/A"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    elif minutes > 0:
        return f"{minutes}m {secs}s"
    else:
        return f"{secs}s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Generate synthetic catalog data and bulk-load it into a SQL store",
        prog="python -m catalog_datagen",
    )
    parser.add_argument(
        "--mode",
        required=True,
        choices=[mode.value for mode in ImportMode],
        help="Entity to import",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Number of records (required for subcategories, products, promos, downloads; "
        "tags default to the configured tag space)",
    )
    parser.add_argument("--db-url", default=None, help="Database URL")
    parser.add_argument("--username", default=None, help="Database username")
    parser.add_argument("--password", default=None, help="Database password")
    parser.add_argument("--schema", default=None, help="Target schema (default: public)")
    parser.add_argument("--workers", type=int, default=None, help="Concurrent workers (default: 20)")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for reproducible runs")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing catalog tables before importing",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--config", default=None, help="JSON settings file")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> tuple[LoaderConfig, ImportRequest]:
    """
    Validate the request and merge CLI flags over file and environment settings.

    Raises:
        ConfigurationError: If any setting is invalid
    """
    try:
        request = ImportRequest(mode=args.mode, count=args.count)
    except ValidationError as e:
        raise ConfigurationError(_first_error(e), field="count") from e

    overrides: dict[str, Any] = {
        "database": {
            "url": args.db_url,
            "username": args.username,
            "password": args.password,
            "schema_name": args.schema,
        },
        "generation": {
            "workers": args.workers,
            "seed": args.seed,
        },
    }

    try:
        config = load_config(args.config, overrides=overrides)
    except ValidationError as e:
        raise ConfigurationError(_first_error(e)) from e
    except (FileNotFoundError, ValueError) as e:
        raise ConfigurationError(str(e), field="config") from e

    return config, request


def _first_error(error: ValidationError) -> str:
    details = error.errors()[0]
    location = ".".join(str(part) for part in details.get("loc", ())) or "request"
    return f"{location}: {details['msg']}"


async def run_import(
    config: LoaderConfig,
    request: ImportRequest,
    create_schema: bool = False,
) -> int:
    """
    Run one import against the configured store.

    Returns:
        Exit code (0 for success, 1 for failure, 2 for an unreachable store)
    """
    engine = create_engine_from_settings(config.database)
    try:
        if not await check_engine_health(engine):
            print("\nERROR: Database is unreachable, nothing was imported.")
            return EXIT_CONFIG

        if create_schema:
            await init_schema(engine)

        loader = CatalogLoader.from_config(engine, config, progress_factory=TqdmProgress)
        print(f"\n=== Importing {request.mode.value} ===\n")

        try:
            summary = await loader.run(request)
        except PreconditionError as e:
            print(f"\nERROR: {e}")
            return EXIT_FAILED
        except ImportRunError as e:
            print(f"\nERROR: {e}")
            if e.summary is not None:
                print(f"  Partial result: {e.summary}")
            return EXIT_FAILED

        print(f"\n✓ {request.mode.value.capitalize()} import completed successfully!")
        print(f"  Inserted: {summary.inserted:,}, Skipped: {summary.skipped:,}")
        print(f"  Duration: {format_duration(summary.elapsed_seconds)}\n")
        return EXIT_OK
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        config, request = build_settings(args)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG

    try:
        return asyncio.run(run_import(config, request, create_schema=args.create_schema))
    except (CatalogDataGenException, SQLAlchemyError) as e:
        logger.error(f"Import failed: {e}")
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())

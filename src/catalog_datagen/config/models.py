"""
Configuration models for the catalog data generator.

These models define the structure and validation for the loader settings
file and for a single import request.
"""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

# PostgreSQL refuses statements with more bind parameters than this
DEFAULT_PARAMETER_LIMIT = 65535


class ImportMode(str, Enum):
    """Closed set of import modes accepted by the loader."""

    CATEGORIES = "categories"
    SUBCATEGORIES = "subcategories"
    TAGS = "tags"
    PRODUCTS = "products"
    PROMOS = "promos"
    DOWNLOADS = "downloads"

    @property
    def requires_count(self) -> bool:
        """Whether the mode needs an explicit positive record count."""
        return self in (
            ImportMode.SUBCATEGORIES,
            ImportMode.PRODUCTS,
            ImportMode.PROMOS,
            ImportMode.DOWNLOADS,
        )


class DatabaseSettings(BaseModel):
    """Connection settings for the target store."""

    url: str = Field(
        ..., min_length=1, description="SQLAlchemy or libpq style database URL"
    )
    username: str | None = Field(default=None, description="Database username")
    password: str | None = Field(default=None, description="Database password")
    schema_name: str = Field(
        default="public", min_length=1, description="Target schema to populate"
    )
    pool_size: int = Field(
        default=50, gt=0, description="Maximum persistent pooled connections"
    )
    max_overflow: int = Field(
        default=25, ge=0, description="Extra connections allowed above pool_size"
    )
    pool_recycle: int = Field(
        default=300, gt=0, description="Connection max lifetime in seconds"
    )
    echo: bool = Field(default=False, description="Log every SQL statement")

    @field_validator("schema_name")
    @classmethod
    def validate_schema_name(cls, v: str) -> str:
        """Schema name is interpolated into search_path, so keep it an identifier."""
        if not v.replace("_", "").isalnum():
            raise ValueError(f"Schema name must be a plain identifier, got '{v}'")
        return v


class BatchSizeConfig(BaseModel):
    """Preferred batch sizes per entity; clamped to the parameter limit at run time."""

    subcategories: int = Field(1000, gt=0, description="Subcategories per batch")
    tags: int = Field(10000, gt=0, description="Tags per batch")
    products: int = Field(4000, gt=0, description="Products per batch")
    promos: int = Field(1000, gt=0, description="Promos per batch")
    downloads: int = Field(5000, gt=0, description="Downloads per batch")
    relation_tuples: int = Field(
        10000,
        gt=0,
        description="Product relation tuples per insert statement",
    )


class GenerationConfig(BaseModel):
    """Worker pool and synthetic data shape settings."""

    workers: int = Field(
        20, gt=0, description="Number of concurrent batch workers"
    )
    queue_size: int = Field(
        100, gt=0, description="Capacity of the bounded batch queue"
    )
    parameter_limit: int = Field(
        DEFAULT_PARAMETER_LIMIT,
        gt=1,
        description="Maximum bind parameters accepted in one statement",
    )
    tag_space: int = Field(
        12_000_000,
        gt=0,
        description="Tag id space used when the tag table is empty",
    )
    avg_tags_per_product: int = Field(
        25, gt=0, description="Average number of tags attached to a product"
    )
    tag_variance: int = Field(
        5, ge=0, description="Maximum deviation from the average tag count"
    )
    download_window_days: int = Field(
        14, gt=0, description="Days of hourly download timestamps to draw from"
    )
    seed: int | None = Field(
        default=None,
        description="Base seed for worker random streams (None = wall clock)",
    )


class LoaderConfig(BaseModel):
    """Top-level settings for a loader process."""

    database: DatabaseSettings
    batches: BatchSizeConfig = Field(default_factory=BatchSizeConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    @classmethod
    def from_file(cls, config_path: str | Path) -> "LoaderConfig":
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the JSON configuration file

        Returns:
            LoaderConfig: Validated configuration

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or fails validation
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration file: {e}") from e

        logger.debug(f"Loaded configuration from {config_path}")
        return cls(**data)

    def to_file(self, output_path: str | Path) -> None:
        """Write configuration to a JSON file (credentials excluded)."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(exclude={"database": {"password"}})
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


class ImportRequest(BaseModel):
    """One invocation of the loader: a mode plus its record count."""

    mode: ImportMode
    count: int | None = Field(
        default=None, description="Number of records to generate"
    )

    @model_validator(mode="after")
    def validate_count_for_mode(self) -> "ImportRequest":
        """Count-driven modes need a positive count; tags accept an optional one."""
        if self.mode.requires_count and (self.count is None or self.count <= 0):
            raise ValueError(
                f"count is required and must be > 0 for '{self.mode.value}' mode"
            )
        if self.count is not None and self.count <= 0 and self.mode is ImportMode.TAGS:
            raise ValueError("count must be > 0 when given for 'tags' mode")
        return self

"""
Configuration loading and management for the catalog data generator.

This module provides utilities for loading settings from a JSON file,
``CATALOG_DATAGEN_*`` environment variables and explicit overrides (CLI
flags), in increasing order of precedence.
"""

import json
import os
from pathlib import Path
from typing import Any

from .models import LoaderConfig

# Environment variable -> dotted path inside LoaderConfig
ENV_VARS: dict[str, str] = {
    "CATALOG_DATAGEN_DB_URL": "database.url",
    "CATALOG_DATAGEN_DB_USERNAME": "database.username",
    "CATALOG_DATAGEN_DB_PASSWORD": "database.password",
    "CATALOG_DATAGEN_DB_SCHEMA": "database.schema_name",
    "CATALOG_DATAGEN_WORKERS": "generation.workers",
    "CATALOG_DATAGEN_SEED": "generation.seed",
    "CATALOG_DATAGEN_TAG_SPACE": "generation.tag_space",
    "CATALOG_DATAGEN_PARAMETER_LIMIT": "generation.parameter_limit",
}


def _set_dotted(data: dict[str, Any], dotted: str, value: Any) -> None:
    """Assign value at a dotted path, creating intermediate dicts."""
    parts = dotted.split(".")
    node = data
    for part in parts[:-1]:
        node = node.setdefault(part, {})
    node[parts[-1]] = value


def get_overrides_from_env() -> dict[str, Any]:
    """
    Collect configuration overrides from environment variables.

    Returns:
        Nested dict suitable for merging into the loader settings
    """
    overrides: dict[str, Any] = {}
    for env_name, dotted in ENV_VARS.items():
        value = os.getenv(env_name)
        if value:
            _set_dotted(overrides, dotted, value)
    return overrides


def _merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict):
            current = merged.get(key)
            merged[key] = _merge(current if isinstance(current, dict) else {}, value)
        elif value is not None:
            merged[key] = value
    return merged


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> LoaderConfig:
    """
    Build loader configuration from file, environment and explicit overrides.

    Args:
        config_path: Optional JSON settings file. Falls back to the
            CATALOG_DATAGEN_CONFIG_FILE environment variable.
        overrides: Nested dict of values that win over file and environment
            (None values are ignored)

    Returns:
        LoaderConfig: Validated configuration

    Raises:
        FileNotFoundError: If an explicit config file is missing
        ValueError: If the merged settings are invalid
    """
    if config_path is None:
        config_path = os.getenv("CATALOG_DATAGEN_CONFIG_FILE")

    data: dict[str, Any] = {}
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)

    data = _merge(data, get_overrides_from_env())
    if overrides:
        data = _merge(data, overrides)

    return LoaderConfig(**data)

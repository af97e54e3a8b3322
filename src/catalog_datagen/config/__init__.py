"""
Configuration models and loaders for the catalog data generator.
"""

from .models import (
    DEFAULT_PARAMETER_LIMIT,
    BatchSizeConfig,
    DatabaseSettings,
    GenerationConfig,
    ImportMode,
    ImportRequest,
    LoaderConfig,
)
from .settings import load_config

__all__ = [
    "DEFAULT_PARAMETER_LIMIT",
    "BatchSizeConfig",
    "DatabaseSettings",
    "GenerationConfig",
    "ImportMode",
    "ImportRequest",
    "LoaderConfig",
    "load_config",
]

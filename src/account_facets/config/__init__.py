"""
Configuration Package - YAML Config with Pydantic Validation.

Files:
    - config/default.yaml: shipped defaults
    - config/profiles/*.yaml: overlays merged on top (parallel, strict)
"""

from account_facets.config.loader import ConfigLoader, ProfileNotFoundError, load_config
from account_facets.config.models import (
    EngineConfig,
    FacetConfig,
    FilterDefaultsConfig,
    LoggingConfig,
    PipelineConfig,
    RevenueRangeConfig,
    ValidationConfig,
)

__all__ = [
    "ConfigLoader",
    "EngineConfig",
    "FacetConfig",
    "FilterDefaultsConfig",
    "LoggingConfig",
    "PipelineConfig",
    "ProfileNotFoundError",
    "RevenueRangeConfig",
    "ValidationConfig",
    "load_config",
]

"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, model_validator

from account_facets.domain.value_objects import (
    DEFAULT_CENTER_INC_YEAR_RANGE,
    DEFAULT_REVENUE_RANGE,
    DEFAULT_YEARS_IN_INDIA_RANGE,
)


class LoggingConfig(BaseModel):
    """Logging settings passed to configure_logging()."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")


class FilterDefaultsConfig(BaseModel):
    """Ranges and include-null flags of a freshly created filter spec."""

    account_hq_revenue_range: Tuple[float, float] = DEFAULT_REVENUE_RANGE
    account_years_in_india_range: Tuple[float, float] = DEFAULT_YEARS_IN_INDIA_RANGE
    center_inc_year_range: Tuple[float, float] = DEFAULT_CENTER_INC_YEAR_RANGE
    account_hq_revenue_include_null: bool = True
    years_in_india_include_null: bool = True
    center_inc_year_include_null: bool = True


class PipelineConfig(BaseModel):
    """Configuration for the cross-entity pipeline."""

    software_separator: str = Field(default=" | ", min_length=1)


class FacetConfig(BaseModel):
    """Configuration for the facet option calculator."""

    parallel: bool = False
    max_workers: int = Field(default=4, ge=1, le=64)


class RevenueRangeConfig(BaseModel):
    """Bounds used when no account has a positive revenue."""

    fallback_min: float = Field(default=0.0, ge=0)
    fallback_max: float = Field(default=1_000_000.0, ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "RevenueRangeConfig":
        if self.fallback_min > self.fallback_max:
            raise ValueError("fallback_min must not exceed fallback_max")
        return self

    @property
    def fallback(self) -> Tuple[float, float]:
        return (self.fallback_min, self.fallback_max)


class ValidationConfig(BaseModel):
    """Configuration for filter spec validation."""

    enabled: bool = True
    strict: bool = False


class EngineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    filter_defaults: FilterDefaultsConfig = Field(default_factory=FilterDefaultsConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    facets: FacetConfig = Field(default_factory=FacetConfig)
    revenue_range: RevenueRangeConfig = Field(default_factory=RevenueRangeConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    model_config = {"populate_by_name": True}

"""
Facet Engine - Facade over Pipeline, Facets and Ranges.

Wires configuration, metrics and validation around the pure pipeline
functions so a dashboard backend has one object to call:

    engine = FacetEngine(load_config("config/default.yaml"))
    spec = engine.default_filters()
    filtered = engine.filter(dataset, spec)
    options = engine.available_options(dataset, spec)
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Protocol, Sequence

from account_facets.adapters.metrics_collector import InMemoryMetricsCollector
from account_facets.config.models import EngineConfig
from account_facets.domain.entities import Account, Dataset
from account_facets.domain.value_objects import (
    AvailableOptions,
    BaseRanges,
    FilteredData,
    FilterSpec,
    NumericRange,
)
from account_facets.facets.calculator import FacetOptionCalculator
from account_facets.facets.registry import FacetRegistry
from account_facets.interfaces.metrics_collector import MetricsCollector
from account_facets.pipeline.cross_entity import CrossEntityPipeline
from account_facets.pipeline.ranges import calculate_base_ranges, dynamic_revenue_range
from account_facets.validation.filter_validator import FilterValidator

logger = logging.getLogger(__name__)


class FilterValidatorProtocol(Protocol):
    """Protocol for filter validators."""

    def validate(self, spec: FilterSpec) -> List:
        ...


class FacetEngine:
    """Main entry point for filtering and facet counting."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        metrics_collector: Optional[MetricsCollector] = None,
        validator: Optional[FilterValidatorProtocol] = None,
        registry: Optional[FacetRegistry] = None,
    ) -> None:
        """
        Initialize engine with its dependencies.

        Args:
            config: Engine configuration (defaults when omitted)
            metrics_collector: For timings and row counts
            validator: Filter spec validator; built from
                ``config.validation`` when omitted and enabled
            registry: Facet definitions (defaults to the standard facets)
        """
        self.config = config or EngineConfig()
        self.metrics_collector = metrics_collector or InMemoryMetricsCollector()

        if validator is None and self.config.validation.enabled:
            validator = FilterValidator(strict=self.config.validation.strict)
        self.validator = validator

        self.pipeline = CrossEntityPipeline(
            software_separator=self.config.pipeline.software_separator
        )
        self.calculator = FacetOptionCalculator(
            self.pipeline,
            registry,
            parallel=self.config.facets.parallel,
            max_workers=self.config.facets.max_workers,
        )

    def default_filters(self) -> FilterSpec:
        """Spec with empty selectors and the configured ranges and flags."""
        return FilterSpec.model_validate(self.config.filter_defaults.model_dump())

    def filter(self, dataset: Dataset, spec: FilterSpec) -> FilteredData:
        """
        Compute the consistent filtered view of a dataset.

        Raises:
            FilterValidationError: If the validator is strict and the
                spec is malformed
        """
        self._validate(spec)
        start = time.perf_counter()

        result = self.pipeline.run(dataset, spec)

        self.metrics_collector.record_timing("filter_seconds", time.perf_counter() - start)
        for entity, count in result.counts().items():
            self.metrics_collector.record_count(f"filtered_{entity}_total", count)

        logger.info(
            f"Filtered {len(dataset.accounts)} accounts to {len(result.accounts)}, "
            f"{len(dataset.centers)} centers to {len(result.centers)}"
        )
        return result

    def available_options(self, dataset: Dataset, spec: FilterSpec) -> AvailableOptions:
        """Available values with counts for every facet."""
        self._validate(spec)
        start = time.perf_counter()

        options = self.calculator.available_options(dataset, spec)

        duration = time.perf_counter() - start
        self.metrics_collector.record_timing(
            "facet_options_seconds",
            duration,
            {"parallel": str(self.calculator.parallel).lower()},
        )
        logger.info(f"Computed options for {len(options)} facets in {duration:.3f}s")
        return options

    def dynamic_revenue_range(
        self, accounts: Sequence[Account], spec: FilterSpec
    ) -> NumericRange:
        return dynamic_revenue_range(
            accounts, spec, fallback=self.config.revenue_range.fallback
        )

    def base_ranges(self, dataset: Dataset) -> BaseRanges:
        return calculate_base_ranges(
            dataset.accounts,
            dataset.centers,
            fallback=self.config.revenue_range.fallback,
        )

    def _validate(self, spec: FilterSpec) -> None:
        if self.validator is not None:
            self.validator.validate(spec)

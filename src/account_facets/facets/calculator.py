"""
Facet Option Calculator.

For every registered facet answers: "if only this facet's selector were
cleared, which values would be available and how many rows carry each?"

Facets whose selector is already empty share one base pipeline run.
Every other facet gets its own scoped rerun with that selector cleared;
scoped results are memoized per call only and discarded on return.
Services are never filtered here, facet counts do not need them.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional, Union

from account_facets.domain.entities import Dataset
from account_facets.domain.value_objects import (
    AvailableOptions,
    FilteredData,
    FilterOption,
    FilterSpec,
)
from account_facets.facets.registry import (
    FacetDefinition,
    FacetRegistry,
    create_default_registry,
)
from account_facets.pipeline.cross_entity import CrossEntityPipeline
from account_facets.pipeline.data_context import DataContext

logger = logging.getLogger(__name__)


def count_values(rows: Iterable[Any], definition: FacetDefinition) -> List[FilterOption]:
    """
    Count facet values over rows.

    Returns:
        Options sorted by descending count; ties keep first-seen order
    """
    counts: Counter = Counter(definition.value_of(row) for row in rows)
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [FilterOption(value=value, count=count) for value, count in ordered]


class FacetOptionCalculator:
    """Computes available options with counts for every facet."""

    def __init__(
        self,
        pipeline: Optional[CrossEntityPipeline] = None,
        registry: Optional[FacetRegistry] = None,
        *,
        parallel: bool = False,
        max_workers: int = 4,
    ) -> None:
        """
        Initialize calculator.

        Args:
            pipeline: Pipeline used for base and scoped runs
            registry: Facet definitions (defaults to the 22 standard facets)
            parallel: Run scoped recomputations on a thread pool
            max_workers: Thread pool size when parallel
        """
        self.pipeline = pipeline or CrossEntityPipeline()
        self.registry = registry or create_default_registry()
        self.parallel = parallel
        self.max_workers = max_workers

    def available_options(
        self,
        data: Union[Dataset, DataContext],
        spec: FilterSpec,
    ) -> AvailableOptions:
        """
        Compute the options of every registered facet.

        Args:
            data: Dataset, or a prebuilt DataContext
            spec: Current filter state

        Returns:
            Facet key -> options sorted by descending count
        """
        start = time.perf_counter()
        context = data if isinstance(data, DataContext) else self.pipeline.build_context(data)
        definitions = self.registry.definitions()

        base = self.pipeline.run(context, spec, include_services=False)
        scoped = self._scoped_results(
            context,
            spec,
            [d.key for d in definitions if spec.selector(d.key)],
        )

        options: AvailableOptions = {}
        for definition in definitions:
            data_for_facet = scoped.get(definition.key, base)
            options[definition.key] = count_values(
                data_for_facet.rows_for(definition.entity), definition
            )

        logger.debug(
            f"Computed {len(options)} facets with {len(scoped)} scoped reruns "
            f"in {time.perf_counter() - start:.3f}s"
        )
        return options

    def facet_data(
        self,
        data: Union[Dataset, DataContext],
        spec: FilterSpec,
        key: str,
    ) -> FilteredData:
        """Pipeline result a single facet's counts are taken from."""
        if self.registry.get(key) is None:
            raise KeyError(f"Unknown facet: {key}")
        scoped_spec = spec.cleared(key) if spec.selector(key) else spec
        return self.pipeline.run(data, scoped_spec, include_services=False)

    def _scoped_results(
        self,
        context: DataContext,
        spec: FilterSpec,
        keys: List[str],
    ) -> Dict[str, FilteredData]:
        """Rerun the pipeline once per key with that key's selector cleared."""
        if not keys:
            return {}

        def run_scoped(key: str) -> FilteredData:
            return self.pipeline.run(context, spec.cleared(key), include_services=False)

        if self.parallel and len(keys) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return dict(zip(keys, executor.map(run_scoped, keys)))

        return {key: run_scoped(key) for key in keys}


def get_available_options(dataset: Dataset, spec: FilterSpec) -> AvailableOptions:
    """Convenience function using the default pipeline and registry."""
    return FacetOptionCalculator().available_options(dataset, spec)

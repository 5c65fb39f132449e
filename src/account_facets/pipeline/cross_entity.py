"""
Cross-Entity Filter Pipeline - Main Orchestrator.

Runs the passes in ``account_facets.pipeline.passes`` in dependency order
and produces a FilteredData in which every collection agrees with the
others:

    - every filtered Account is referenced by a filtered Center
    - every filtered Function/Service references a filtered Center key
    - every filtered Prospect references a filtered Account name

Function and prospect filters back-propagate: a center with no matching
function, or an account with no matching prospect, is dropped even if it
passes all of its own checks. Center filters do not back-propagate onto
accounts beyond the closing pass.
"""

from __future__ import annotations

import logging
import time
from typing import List, Union

from account_facets.domain.entities import Dataset
from account_facets.domain.value_objects import FilteredData, FilterSpec, PassResult
from account_facets.pipeline import passes
from account_facets.pipeline.data_context import DEFAULT_SOFTWARE_SEPARATOR, DataContext
from account_facets.pipeline.predicates import (
    account_predicate,
    center_predicate,
    function_matcher,
    has_account_filters,
    has_function_filters,
    has_prospect_filters,
    has_software_filters,
    prospect_predicate,
    software_matcher,
)

logger = logging.getLogger(__name__)


class CrossEntityPipeline:
    """Computes the mutually consistent filtered view of a dataset."""

    def __init__(self, software_separator: str = DEFAULT_SOFTWARE_SEPARATOR) -> None:
        """
        Initialize pipeline.

        Args:
            software_separator: Separator for the per-center software
                index when a Dataset (not a DataContext) is passed to run()
        """
        self.software_separator = software_separator

    def build_context(self, dataset: Dataset) -> DataContext:
        return DataContext(dataset, software_separator=self.software_separator)

    def run(
        self,
        data: Union[Dataset, DataContext],
        spec: FilterSpec,
        *,
        include_services: bool = True,
    ) -> FilteredData:
        """
        Filter every collection consistently.

        Args:
            data: Dataset, or a prebuilt DataContext to reuse its indexes
            spec: Filter state
            include_services: Filter the Service collection too; facet
                counting never needs it

        Returns:
            FilteredData with the five filtered collections and the
            per-pass audit trail
        """
        context = data if isinstance(data, DataContext) else self.build_context(data)
        dataset = context.dataset
        trail: List[PassResult] = []

        account_join = has_account_filters(spec)
        function_active = has_function_filters(spec)
        prospect_active = has_prospect_filters(spec)

        # 1. Accounts
        start = time.perf_counter()
        accounts, account_names = passes.filter_accounts(
            dataset.accounts, account_predicate(spec)
        )
        trail.append(self._record("accounts", len(dataset.accounts), len(accounts), start))

        # 2. Centers
        start = time.perf_counter()
        centers, center_keys = passes.filter_centers(
            dataset.centers,
            account_names if account_join else None,
            center_predicate(spec),
            software_matcher(spec) if has_software_filters(spec) else None,
            context.center_software,
        )
        trail.append(self._record("centers", len(dataset.centers), len(centers), start))

        # 3. Functions, narrowing centers to those with a matching function
        start = time.perf_counter()
        functions, function_keys = passes.filter_functions(
            dataset.functions,
            center_keys,
            function_matcher(spec) if function_active else None,
        )
        if function_keys is not None:
            centers, center_keys = passes.narrow_centers_to_keys(centers, function_keys)
        trail.append(
            self._record("functions", len(dataset.functions), len(functions), start)
        )

        # 4. Prospects, narrowing accounts and centers to those with a match
        start = time.perf_counter()
        prospects = passes.filter_prospects(
            dataset.prospects,
            account_names if account_join else None,
            prospect_predicate(spec) if prospect_active else None,
        )
        if prospect_active:
            accounts, centers, account_names, center_keys = passes.narrow_to_prospects(
                accounts, centers, prospects
            )
        trail.append(
            self._record("prospects", len(dataset.prospects), len(prospects), start)
        )

        # 5. Services
        start = time.perf_counter()
        services = (
            passes.filter_services(dataset.services, center_keys)
            if include_services
            else []
        )
        trail.append(self._record("services", len(dataset.services), len(services), start))

        # 6. Closing pass
        start = time.perf_counter()
        before_close = len(accounts)
        accounts, functions, prospects = passes.close_result(
            accounts, centers, functions, prospects, center_keys
        )
        trail.append(self._record("closing", before_close, len(accounts), start))

        logger.debug(
            f"Filtered to {len(accounts)} accounts, {len(centers)} centers, "
            f"{len(functions)} functions, {len(services)} services, "
            f"{len(prospects)} prospects"
        )

        return FilteredData(
            accounts=accounts,
            centers=centers,
            functions=functions,
            services=services,
            prospects=prospects,
            audit_trail=trail,
        )

    def _record(
        self, pass_name: str, input_count: int, output_count: int, start: float
    ) -> PassResult:
        duration = time.perf_counter() - start
        logger.debug(f"Pass {pass_name}: {input_count} -> {output_count} ({duration:.4f}s)")
        return PassResult(
            pass_name=pass_name,
            input_count=input_count,
            output_count=output_count,
            duration_seconds=duration,
        )


def get_filtered_data(
    dataset: Dataset,
    spec: FilterSpec,
    *,
    include_services: bool = True,
) -> FilteredData:
    """Convenience function running a default pipeline once."""
    return CrossEntityPipeline().run(dataset, spec, include_services=include_services)

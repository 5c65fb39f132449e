"""
Facet Invariant Verification.

Checks, over randomized filter scenarios, that the counts reported by
the facet calculator for a facet equal the counts obtained by running
the full pipeline (services included) with only that facet's selector
cleared and tallying the facet's field directly.

Scenarios are drawn the way a dashboard user plays with the filters:
    - a baseline using the full-data ranges
    - a few include selectors picked from the baseline options
    - short prefixes typed into the name/title/software keyword boxes
    - sub-ranges of the numeric sliders with random include-null flags
"""

from __future__ import annotations

import logging
import math
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from account_facets.domain.entities import Dataset
from account_facets.domain.filter_summary import with_base_ranges
from account_facets.domain.value_objects import (
    BaseRanges,
    FilterSpec,
    FilterValue,
    NumericRange,
    RangeBounds,
)
from account_facets.facets.calculator import FacetOptionCalculator
from account_facets.facets.registry import FacetRegistry, create_default_registry
from account_facets.pipeline.cross_entity import CrossEntityPipeline
from account_facets.pipeline.ranges import calculate_base_ranges

logger = logging.getLogger(__name__)

SELECTOR_PROBABILITY = 0.22
KEYWORD_PROBABILITY = 0.28
RANGE_PROBABILITY = 0.4
KEYWORD_PREFIX_LENGTH = 6


@dataclass(frozen=True)
class Scenario:
    name: str
    spec: FilterSpec


@dataclass(frozen=True)
class InvariantViolation:
    """A facet whose reported counts differ from direct recomputation."""

    scenario: str
    facet: str
    expected_size: int
    actual_size: int
    expected_rows: int


@dataclass
class VerificationReport:
    """Outcome of a verification run."""

    scenario_count: int
    facet_count: int
    violations: List[InvariantViolation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.violations

    def summary(self) -> str:
        if self.passed:
            return (
                f"PASS: {self.facet_count} facets validated across "
                f"{self.scenario_count} scenarios"
            )
        return f"FAILED: {len(self.violations)} invariant violations"


def _random_range(rng: random.Random, bounds: NumericRange) -> RangeBounds:
    lo, hi = bounds.min, bounds.max
    if not (math.isfinite(lo) and math.isfinite(hi)) or lo >= hi:
        return (lo, hi)
    start = lo + rng.random() * (hi - lo) * 0.7
    end = start + rng.random() * (hi - start)
    return (float(math.floor(start)), float(math.ceil(end)))


def _distinct(values: Sequence[Optional[str]]) -> List[str]:
    return list(dict.fromkeys(v.strip() for v in values if v and v.strip()))


class FacetInvariantVerifier:
    """Randomized check of facet counts against direct pipeline runs."""

    def __init__(
        self,
        registry: Optional[FacetRegistry] = None,
        pipeline: Optional[CrossEntityPipeline] = None,
        calculator: Optional[FacetOptionCalculator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize verifier.

        Args:
            registry: Facets to verify (defaults to the standard facets)
            pipeline: Pipeline used for the direct recomputation
            calculator: Calculator under test (built from registry and
                pipeline when omitted)
            seed: Seed for scenario generation
        """
        self.registry = registry or create_default_registry()
        self.pipeline = pipeline or CrossEntityPipeline()
        self.calculator = calculator or FacetOptionCalculator(self.pipeline, self.registry)
        self._rng = random.Random(seed)

    def generate_scenarios(self, dataset: Dataset, count: int = 30) -> List[Scenario]:
        """
        Build the baseline plus ``count`` random scenarios.

        Args:
            dataset: Data the option values and ranges are drawn from
            count: Number of random scenarios

        Returns:
            Scenarios, baseline first
        """
        ranges = calculate_base_ranges(dataset.accounts, dataset.centers)
        baseline = with_base_ranges(FilterSpec(), ranges)
        options = self.calculator.available_options(dataset, baseline)

        option_values: Dict[str, List[str]] = {
            key: [o.value for o in facet if o.value.strip()]
            for key, facet in options.items()
        }
        keywords: Dict[str, List[str]] = {
            "account_global_legal_name_keywords": _distinct(
                [a.account_global_legal_name for a in dataset.accounts]
            ),
            "prospect_title_keywords": _distinct(
                [p.prospect_title for p in dataset.prospects]
            ),
            "tech_software_in_use_keywords": _distinct(
                [t.software_in_use for t in dataset.tech]
            ),
        }

        scenarios = [Scenario("baseline", baseline)]
        for index in range(1, count + 1):
            spec = self._random_spec(baseline, ranges, option_values, keywords)
            scenarios.append(Scenario(f"random_{index}", spec))
        return scenarios

    def verify(
        self,
        dataset: Dataset,
        scenarios: Optional[Sequence[Scenario]] = None,
    ) -> VerificationReport:
        """
        Compare calculator output with direct recomputation.

        Args:
            dataset: Data to filter
            scenarios: Scenarios to check (generated when omitted)

        Returns:
            VerificationReport listing every violation
        """
        if scenarios is None:
            scenarios = self.generate_scenarios(dataset)

        definitions = self.registry.definitions()
        report = VerificationReport(
            scenario_count=len(scenarios), facet_count=len(definitions)
        )
        context = self.pipeline.build_context(dataset)

        for scenario in scenarios:
            actual = self.calculator.available_options(context, scenario.spec)
            for definition in definitions:
                expected_data = self.pipeline.run(
                    context, scenario.spec.cleared(definition.key)
                )
                rows = expected_data.rows_for(definition.entity)
                expected = Counter(definition.value_of(row) for row in rows)
                reported = {o.value: o.count for o in actual.get(definition.key, [])}

                if dict(expected) != reported:
                    report.violations.append(
                        InvariantViolation(
                            scenario=scenario.name,
                            facet=definition.key,
                            expected_size=len(expected),
                            actual_size=len(reported),
                            expected_rows=len(rows),
                        )
                    )

        if report.passed:
            logger.info(report.summary())
        else:
            logger.error(f"{report.summary()}; first: {report.violations[:3]}")
        return report

    def _random_spec(
        self,
        baseline: FilterSpec,
        ranges: BaseRanges,
        option_values: Dict[str, List[str]],
        keywords: Dict[str, List[str]],
    ) -> FilterSpec:
        rng = self._rng
        update: Dict[str, object] = {}

        for key in self.registry.keys():
            if rng.random() < SELECTOR_PROBABILITY and option_values.get(key):
                update[key] = (FilterValue.include(rng.choice(option_values[key])),)

        for key, candidates in keywords.items():
            if rng.random() < KEYWORD_PROBABILITY and candidates:
                text = rng.choice(candidates)[:KEYWORD_PREFIX_LENGTH]
                update[key] = (FilterValue.include(text),)

        slider_fields: Tuple[Tuple[str, str, NumericRange], ...] = (
            ("account_hq_revenue_range", "account_hq_revenue_include_null", ranges.revenue),
            (
                "account_years_in_india_range",
                "years_in_india_include_null",
                ranges.years_in_india,
            ),
            ("center_inc_year_range", "center_inc_year_include_null", ranges.center_inc_year),
        )
        for range_field, null_flag, bounds in slider_fields:
            if rng.random() < RANGE_PROBABILITY:
                update[range_field] = _random_range(rng, bounds)
                update[null_flag] = rng.random() < 0.5

        return baseline.model_copy(update=update)

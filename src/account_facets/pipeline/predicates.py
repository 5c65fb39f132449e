"""
Entity Predicates.

Builds, from one FilterSpec, the row predicates used by the pipeline
passes. A predicate is an ordered list of (record field, matcher)
checks; a row passes when every check accepts the row's field value.

The selector tables below are the single mapping between FilterSpec
fields and record fields. The facet registry builds its default facets
from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from account_facets.domain.value_objects import MAX_SAFE_INTEGER, FilterSpec
from account_facets.matching.matchers import (
    KeywordMatcher,
    Matcher,
    RangeMatcher,
    ValueMatcher,
)
from account_facets.matching.parsing import parse_revenue

# FilterSpec selector field -> record field
ACCOUNT_SELECTORS: Dict[str, str] = {
    "account_hq_region_values": "account_hq_region",
    "account_hq_country_values": "account_hq_country",
    "account_hq_industry_values": "account_hq_industry",
    "account_data_coverage_values": "account_data_coverage",
    "account_source_values": "account_source",
    "account_type_values": "account_type",
    "account_primary_category_values": "account_primary_category",
    "account_primary_nature_values": "account_primary_nature",
    "account_nasscom_status_values": "account_nasscom_status",
    "account_hq_employee_range_values": "account_hq_employee_range",
    "account_center_employees_range_values": "account_center_employees_range",
}

CENTER_SELECTORS: Dict[str, str] = {
    "center_type_values": "center_type",
    "center_focus_values": "center_focus",
    "center_city_values": "center_city",
    "center_state_values": "center_state",
    "center_country_values": "center_country",
    "center_employees_range_values": "center_employees_range",
    "center_status_values": "center_status",
}

FUNCTION_SELECTORS: Dict[str, str] = {
    "function_name_values": "function_name",
}

PROSPECT_SELECTORS: Dict[str, str] = {
    "prospect_department_values": "prospect_department",
    "prospect_level_values": "prospect_level",
    "prospect_city_values": "prospect_city",
}


@dataclass(frozen=True)
class FieldCheck:
    """One matcher applied to one record field."""

    field: str
    matcher: Matcher

    def accepts(self, row: Any) -> bool:
        return self.matcher.accepts(getattr(row, self.field, None))


class EntityPredicate:
    """Conjunction of field checks over one entity type."""

    def __init__(self, checks: Sequence[FieldCheck]) -> None:
        self.checks = tuple(checks)

    @property
    def active(self) -> bool:
        """True if any check can reject a row."""
        return any(check.matcher.active for check in self.checks)

    def accepts(self, row: Any) -> bool:
        return all(check.accepts(row) for check in self.checks)

    def rejection_reason(self, row: Any) -> Optional[str]:
        """Describe the first failing check, or None if the row passes."""
        for check in self.checks:
            if not check.accepts(row):
                value = getattr(row, check.field, None)
                return f"{check.field}={value!r} rejected by {check.matcher!r}"
        return None

    def __len__(self) -> int:
        return len(self.checks)


def _value_checks(spec: FilterSpec, selectors: Dict[str, str]) -> List[FieldCheck]:
    return [
        FieldCheck(field, ValueMatcher(spec.selector(key)))
        for key, field in selectors.items()
    ]


def account_predicate(
    spec: FilterSpec,
    *,
    include_revenue: bool = True,
    include_name: bool = True,
) -> EntityPredicate:
    """
    Build the account-level predicate.

    Args:
        spec: Filter state
        include_revenue: Apply the revenue range check
        include_name: Apply the account-name keyword check

    Returns:
        EntityPredicate over Account rows
    """
    checks = _value_checks(spec, ACCOUNT_SELECTORS)
    if include_revenue:
        checks.append(
            FieldCheck(
                "account_hq_revenue",
                RangeMatcher(
                    spec.account_hq_revenue_range,
                    spec.account_hq_revenue_include_null,
                    parser=parse_revenue,
                ),
            )
        )
    checks.append(
        FieldCheck(
            "years_in_india",
            RangeMatcher(
                spec.account_years_in_india_range,
                spec.years_in_india_include_null,
            ),
        )
    )
    if include_name:
        checks.append(
            FieldCheck(
                "account_global_legal_name",
                KeywordMatcher(spec.account_global_legal_name_keywords),
            )
        )
    return EntityPredicate(checks)


def center_predicate(spec: FilterSpec) -> EntityPredicate:
    """Center-level categorical and incorporation-year checks."""
    checks = _value_checks(spec, CENTER_SELECTORS)
    checks.append(
        FieldCheck(
            "center_inc_year",
            RangeMatcher(spec.center_inc_year_range, spec.center_inc_year_include_null),
        )
    )
    return EntityPredicate(checks)


def software_matcher(spec: FilterSpec) -> KeywordMatcher:
    """Keyword matcher applied to a center's joined software text."""
    return KeywordMatcher(spec.tech_software_in_use_keywords)


def function_matcher(spec: FilterSpec) -> ValueMatcher:
    return ValueMatcher(spec.function_name_values)


def prospect_predicate(spec: FilterSpec) -> EntityPredicate:
    """Prospect department/level/city checks plus the title keyword check."""
    checks = _value_checks(spec, PROSPECT_SELECTORS)
    checks.append(
        FieldCheck("prospect_title", KeywordMatcher(spec.prospect_title_keywords))
    )
    return EntityPredicate(checks)


def has_account_filters(spec: FilterSpec) -> bool:
    """
    Whether centers and prospects must join against surviving accounts.

    Any account selector or name keyword counts, as does a numeric range
    that is not fully open, or an include-null flag that is set.
    """
    if any(spec.selector(key) for key in ACCOUNT_SELECTORS):
        return True
    if spec.account_global_legal_name_keywords:
        return True
    for bounds in (spec.account_hq_revenue_range, spec.account_years_in_india_range):
        if bounds[0] > 0 or bounds[1] < MAX_SAFE_INTEGER:
            return True
    return spec.account_hq_revenue_include_null or spec.years_in_india_include_null


def has_function_filters(spec: FilterSpec) -> bool:
    return bool(spec.function_name_values)


def has_software_filters(spec: FilterSpec) -> bool:
    return bool(spec.tech_software_in_use_keywords)


def has_prospect_filters(spec: FilterSpec) -> bool:
    return bool(
        spec.prospect_department_values
        or spec.prospect_level_values
        or spec.prospect_city_values
        or spec.prospect_title_keywords
    )

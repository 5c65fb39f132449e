"""
Filter Defaults and Summary.

Helpers around FilterSpec used by the dashboard layer:
    - building default specs (optionally seeded with data ranges)
    - restoring partial/saved specs onto the defaults
    - counting how many filters are active
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic.alias_generators import to_snake

from account_facets.domain.value_objects import (
    DEFAULT_CENTER_INC_YEAR_RANGE,
    DEFAULT_REVENUE_RANGE,
    DEFAULT_YEARS_IN_INDIA_RANGE,
    KEYWORD_FIELDS,
    RANGE_FIELDS,
    SELECTOR_FIELDS,
    BaseRanges,
    FilterSpec,
    RangeBounds,
)

logger = logging.getLogger(__name__)

DEFAULT_RANGES: Dict[str, RangeBounds] = {
    "account_hq_revenue_range": DEFAULT_REVENUE_RANGE,
    "account_years_in_india_range": DEFAULT_YEARS_IN_INDIA_RANGE,
    "center_inc_year_range": DEFAULT_CENTER_INC_YEAR_RANGE,
}


def create_default_filters(**overrides: Any) -> FilterSpec:
    """
    Create a spec with every selector empty and default ranges.

    Args:
        **overrides: Field values (snake_case or camelCase) to set

    Returns:
        Validated FilterSpec
    """
    return FilterSpec.model_validate(overrides)


def with_base_ranges(spec: FilterSpec, base_ranges: BaseRanges) -> FilterSpec:
    """Replace the three numeric ranges with the full-data bounds."""
    return spec.model_copy(
        update={
            "account_hq_revenue_range": base_ranges.revenue.as_tuple(),
            "account_years_in_india_range": base_ranges.years_in_india.as_tuple(),
            "center_inc_year_range": base_ranges.center_inc_year.as_tuple(),
        }
    )


def with_filter_defaults(raw: Optional[Mapping[str, Any]]) -> FilterSpec:
    """
    Restore a partial or saved filter mapping onto the defaults.

    Keys may be snake_case or camelCase. Any range that is not a
    two-element sequence falls back to its default; range elements are
    coerced to float.

    Args:
        raw: Partial filter mapping, or None

    Returns:
        Validated FilterSpec
    """
    data: Dict[str, Any] = {}
    for key, value in (raw or {}).items():
        data[to_snake(key)] = value

    for range_field, default in DEFAULT_RANGES.items():
        data[range_field] = _coerce_range(data.get(range_field), default)

    return FilterSpec.model_validate(data)


def _coerce_range(value: Any, fallback: RangeBounds) -> RangeBounds:
    """Return ``value`` as a float pair, or the fallback if it is not one."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return fallback
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError):
        logger.warning(f"Unparsable range {value!r}, using default {fallback}")
        return fallback


def count_active_filters(
    spec: FilterSpec,
    reference: Optional[Union[BaseRanges, Mapping[str, RangeBounds]]] = None,
) -> int:
    """
    Count active filters the way the dashboard badge does.

    Every selector/keyword term counts once, every range that differs
    from its reference counts once and every include-null flag that is
    set counts once.

    Args:
        spec: Filter state
        reference: Ranges considered "unfiltered" (defaults, or BaseRanges)

    Returns:
        Number of active filters
    """
    if reference is None:
        reference_ranges: Mapping[str, RangeBounds] = DEFAULT_RANGES
    elif isinstance(reference, BaseRanges):
        reference_ranges = {
            "account_hq_revenue_range": reference.revenue.as_tuple(),
            "account_years_in_india_range": reference.years_in_india.as_tuple(),
            "center_inc_year_range": reference.center_inc_year.as_tuple(),
        }
    else:
        reference_ranges = reference

    total = 0
    for key in SELECTOR_FIELDS + KEYWORD_FIELDS:
        total += len(spec.selector(key))

    for range_field, null_flag in RANGE_FIELDS.items():
        lo, hi = getattr(spec, range_field)
        ref_lo, ref_hi = reference_ranges[range_field]
        if lo != ref_lo or hi != ref_hi:
            total += 1
        if getattr(spec, null_flag):
            total += 1

    return total

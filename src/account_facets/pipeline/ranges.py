"""
Range Helpers for Numeric Sliders.

    - dynamic_revenue_range: revenue bounds of the accounts that pass the
      other account filters, used to auto-scale the revenue slider
    - calculate_base_ranges: full-data bounds of every numeric filter
    - get_account_names: distinct account names for the name picker

None of these affect the cross-entity pipeline.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Sequence

from account_facets.domain.entities import Account, Center
from account_facets.domain.value_objects import (
    BaseRanges,
    FilterSpec,
    NumericRange,
    RangeBounds,
)
from account_facets.matching.parsing import normalize_number, parse_revenue
from account_facets.pipeline.predicates import account_predicate

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_RANGE: RangeBounds = (0.0, 1_000_000.0)


def _positive_bounds(
    values: Iterable[Any],
    parser: Callable[[Any], float],
    fallback: RangeBounds,
) -> NumericRange:
    """Min/max of the values that parse to a positive number."""
    parsed = [number for number in (parser(value) for value in values) if number > 0]
    if not parsed:
        return NumericRange(min=fallback[0], max=fallback[1])
    return NumericRange(min=min(parsed), max=max(parsed))


def dynamic_revenue_range(
    accounts: Sequence[Account],
    spec: FilterSpec,
    fallback: RangeBounds = DEFAULT_FALLBACK_RANGE,
) -> NumericRange:
    """
    Revenue bounds of the accounts passing every other account filter.

    The account categorical selectors and the years-in-India range are
    applied; the revenue range and the name keywords are not.

    Args:
        accounts: Account rows
        spec: Filter state
        fallback: Bounds returned when no account has a positive revenue

    Returns:
        NumericRange of the remaining positive revenues
    """
    predicate = account_predicate(spec, include_revenue=False, include_name=False)
    remaining = [account for account in accounts if predicate.accepts(account)]
    result = _positive_bounds(
        (account.account_hq_revenue for account in remaining), parse_revenue, fallback
    )
    logger.debug(
        f"Dynamic revenue range over {len(remaining)} accounts: "
        f"{result.min:g}..{result.max:g}"
    )
    return result


def calculate_base_ranges(
    accounts: Sequence[Account],
    centers: Sequence[Center],
    fallback: RangeBounds = DEFAULT_FALLBACK_RANGE,
) -> BaseRanges:
    """
    Full-data bounds of revenue, years in India and incorporation year.

    Args:
        accounts: Account rows
        centers: Center rows
        fallback: Bounds for a field with no positive value

    Returns:
        BaseRanges
    """
    return BaseRanges(
        revenue=_positive_bounds(
            (a.account_hq_revenue for a in accounts), parse_revenue, fallback
        ),
        years_in_india=_positive_bounds(
            (a.years_in_india for a in accounts), normalize_number, fallback
        ),
        center_inc_year=_positive_bounds(
            (c.center_inc_year for c in centers), normalize_number, fallback
        ),
    )


def get_account_names(accounts: Sequence[Account]) -> List[str]:
    """Distinct non-empty account names in first-seen order."""
    return list(
        dict.fromkeys(
            account.account_global_legal_name
            for account in accounts
            if account.account_global_legal_name
        )
    )

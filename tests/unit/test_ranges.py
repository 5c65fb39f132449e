"""
Unit Tests for Range Helpers.

Test Aspects Covered:
    ✅ Business Logic: Dynamic revenue range, base ranges, account names
    ✅ Edge Cases: No positive values (fallback), revenue/name filters ignored
"""

from __future__ import annotations

from account_facets.domain.entities import Account, Dataset
from account_facets.domain.value_objects import FilterSpec, FilterValue, NumericRange
from account_facets.pipeline.ranges import (
    DEFAULT_FALLBACK_RANGE,
    calculate_base_ranges,
    dynamic_revenue_range,
    get_account_names,
)

inc = FilterValue.include


class TestDynamicRevenueRange:
    """Test cases for dynamic_revenue_range."""

    def test_bounds_of_remaining_accounts(self, dataset: Dataset) -> None:
        """
        SCENARIO: No account filters beyond defaults
        EXPECTED: Min/max of the positive revenues ($2M and 500000)
        """
        result = dynamic_revenue_range(dataset.accounts, FilterSpec())

        assert result == NumericRange(min=500_000, max=2_000_000)

    def test_other_account_filters_apply(self, dataset: Dataset) -> None:
        """
        SCENARIO: Region APAC (Alpha $2M, Gamma no revenue)
        EXPECTED: Range collapses to Alpha's revenue
        """
        spec = FilterSpec(account_hq_region_values=(inc("APAC"),))

        result = dynamic_revenue_range(dataset.accounts, spec)

        assert result.as_tuple() == (2_000_000, 2_000_000)

    def test_revenue_range_and_name_are_ignored(self, dataset: Dataset) -> None:
        """
        SCENARIO: Revenue window and name keyword that exclude everything
        EXPECTED: Same bounds as without them
        """
        spec = FilterSpec(
            account_hq_revenue_range=(1, 2),
            account_hq_revenue_include_null=False,
            account_global_legal_name_keywords=(inc("zzz"),),
        )

        result = dynamic_revenue_range(dataset.accounts, spec)

        assert result.as_tuple() == (500_000, 2_000_000)

    def test_years_in_india_applies(self, dataset: Dataset) -> None:
        spec = FilterSpec(
            account_years_in_india_range=(6, 20), years_in_india_include_null=False
        )

        assert dynamic_revenue_range(dataset.accounts, spec).as_tuple() == (
            2_000_000,
            2_000_000,
        )

    def test_fallback_when_nothing_remains(self, dataset: Dataset) -> None:
        spec = FilterSpec(account_hq_region_values=(inc("Nowhere"),))

        result = dynamic_revenue_range(dataset.accounts, spec)

        assert result.as_tuple() == DEFAULT_FALLBACK_RANGE

    def test_custom_fallback(self) -> None:
        accounts = [Account(account_global_legal_name="A", account_hq_revenue="n/a")]

        result = dynamic_revenue_range(accounts, FilterSpec(), fallback=(10, 20))

        assert result.as_tuple() == (10, 20)


class TestBaseRanges:
    """Test cases for calculate_base_ranges."""

    def test_full_data_bounds(self, dataset: Dataset) -> None:
        """
        SCENARIO: Hand-built dataset
        EXPECTED: Bounds over positive values of each numeric field
        """
        ranges = calculate_base_ranges(dataset.accounts, dataset.centers)

        assert ranges.revenue.as_tuple() == (500_000, 2_000_000)
        assert ranges.years_in_india.as_tuple() == (5, 10)
        assert ranges.center_inc_year.as_tuple() == (2001, 2015)

    def test_empty_collections_fall_back(self) -> None:
        ranges = calculate_base_ranges([], [])

        assert ranges.revenue.as_tuple() == DEFAULT_FALLBACK_RANGE
        assert ranges.center_inc_year.as_tuple() == DEFAULT_FALLBACK_RANGE


def test_get_account_names_distinct_in_order() -> None:
    """
    SCENARIO: Duplicate and empty names
    EXPECTED: Distinct non-empty names, first-seen order
    """
    accounts = [
        Account(account_global_legal_name="Beta"),
        Account(account_global_legal_name=""),
        Account(account_global_legal_name="Alpha"),
        Account(account_global_legal_name="Beta"),
    ]

    assert get_account_names(accounts) == ["Beta", "Alpha"]

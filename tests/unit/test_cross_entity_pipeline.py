"""
Unit Tests for CrossEntityPipeline.

Test Aspects Covered:
    ✅ Business Logic: Worked scenarios over the hand-built dataset
    ✅ Business Logic: Function/prospect back-propagation vs center filters
    ✅ Invariants: Idempotence, monotonicity, cross-entity consistency
    ✅ Edge Cases: Revenue nulls, orphan centers, empty dataset
"""

from __future__ import annotations

from typing import List

import pytest

from account_facets.domain.entities import Center, Dataset
from account_facets.domain.value_objects import (
    MAX_SAFE_INTEGER,
    FilteredData,
    FilterSpec,
    FilterValue,
)
from account_facets.pipeline.cross_entity import CrossEntityPipeline, get_filtered_data
from account_facets.pipeline.data_context import DataContext

inc = FilterValue.include
exc = FilterValue.exclude


def names(rows) -> List[str]:
    return [row.account_global_legal_name for row in rows]


def keys(rows) -> List[str]:
    return [row.cn_unique_key for row in rows]


def assert_consistent(result: FilteredData) -> None:
    center_keys = set(keys(result.centers))
    account_names = set(names(result.accounts))
    assert set(names(result.centers)) <= account_names
    assert account_names <= set(names(result.centers))
    assert set(keys(result.functions)) <= center_keys
    assert set(keys(result.services)) <= center_keys
    assert set(names(result.prospects)) <= set(names(result.centers))


@pytest.fixture
def pipeline() -> CrossEntityPipeline:
    return CrossEntityPipeline()


class TestScenarios:
    """Worked scenarios over the conftest dataset."""

    def test_open_spec_keeps_everything(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: No selectors, ranges covering every value, nulls included
        EXPECTED: Every collection unchanged
        """
        result = pipeline.run(dataset, open_spec)

        assert result.accounts == dataset.accounts
        assert result.centers == dataset.centers
        assert result.functions == dataset.functions
        assert result.services == dataset.services
        assert result.prospects == dataset.prospects

    def test_single_account_filter(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Region include APAC
        EXPECTED: Alpha and Gamma with their centers, functions, services, prospects
        """
        spec = open_spec.model_copy(update={"account_hq_region_values": (inc("APAC"),)})

        result = pipeline.run(dataset, spec)

        assert names(result.accounts) == ["Alpha Corp", "Gamma Inc"]
        assert keys(result.centers) == ["C1", "C2", "C4"]
        assert keys(result.functions) == ["C1", "C1", "C2", "C4"]
        assert keys(result.services) == ["C1", "C4"]
        assert names(result.prospects) == ["Alpha Corp", "Alpha Corp"]

    def test_function_filter_drills_down(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Function include Finance
        EXPECTED: Only centers with a Finance function, and their accounts
        """
        spec = open_spec.model_copy(update={"function_name_values": (inc("Finance"),)})

        result = pipeline.run(dataset, spec)

        assert keys(result.centers) == ["C1", "C3"]
        assert names(result.accounts) == ["Alpha Corp", "Beta Ltd"]
        assert [f.function_name for f in result.functions] == ["Finance", "Finance"]
        assert keys(result.services) == ["C1", "C3"]
        assert names(result.prospects) == ["Alpha Corp", "Alpha Corp", "Beta Ltd"]

    def test_revenue_nulls_excluded(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Revenue window 1M..3M with include-null off
        EXPECTED: Only Alpha ("$2M"); Gamma (no revenue) dropped
        """
        spec = open_spec.model_copy(
            update={
                "account_hq_revenue_range": (1e6, 3e6),
                "account_hq_revenue_include_null": False,
            }
        )

        result = pipeline.run(dataset, spec)

        assert names(result.accounts) == ["Alpha Corp"]
        assert keys(result.centers) == ["C1", "C2"]

    def test_revenue_nulls_included(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Same window with include-null on
        EXPECTED: Gamma (no revenue) kept alongside Alpha
        """
        spec = open_spec.model_copy(update={"account_hq_revenue_range": (1e6, 3e6)})

        result = pipeline.run(dataset, spec)

        assert names(result.accounts) == ["Alpha Corp", "Gamma Inc"]

    def test_software_keyword(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Software keyword "sap"
        EXPECTED: Only Beta's center C3; functions and services follow
        """
        spec = open_spec.model_copy(
            update={"tech_software_in_use_keywords": (inc("sap"),)}
        )

        result = pipeline.run(dataset, spec)

        assert keys(result.centers) == ["C3"]
        assert names(result.accounts) == ["Beta Ltd"]
        assert keys(result.functions) == ["C3"]
        assert keys(result.services) == ["C3"]

    def test_prospect_title_keyword(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Title keyword "engineering"
        EXPECTED: Alpha only, with both of its centers
        """
        spec = open_spec.model_copy(update={"prospect_title_keywords": (inc("engineering"),)})

        result = pipeline.run(dataset, spec)

        assert [p.prospect_full_name for p in result.prospects] == ["Asha Iyer"]
        assert names(result.accounts) == ["Alpha Corp"]
        assert keys(result.centers) == ["C1", "C2"]


class TestBackPropagation:
    """Function/prospect filters remove parents; center filters do not."""

    def test_center_filter_keeps_account_with_other_center(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Exclude city Pune (Alpha's C2)
        EXPECTED: Alpha stays through C1; its prospects stay too
        """
        spec = open_spec.model_copy(update={"center_city_values": (exc("Pune"),)})

        result = pipeline.run(dataset, spec)

        assert keys(result.centers) == ["C1", "C3", "C4"]
        assert "Alpha Corp" in names(result.accounts)
        assert names(result.prospects).count("Alpha Corp") == 2
        assert keys(result.functions) == ["C1", "C1", "C3", "C4"]

    def test_center_filter_does_not_filter_prospects_by_center(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Center city Bengaluru
        EXPECTED: Alpha's Pune prospect is kept; prospects follow accounts, not cities
        """
        spec = open_spec.model_copy(update={"center_city_values": (inc("Bengaluru"),)})

        result = pipeline.run(dataset, spec)

        assert keys(result.centers) == ["C1", "C3"]
        assert "Rahul Sharma" in [p.prospect_full_name for p in result.prospects]

    def test_function_filter_removes_center_without_match(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Function include HR (only C2 has it)
        EXPECTED: C1 dropped even though it passes every center check
        """
        spec = open_spec.model_copy(update={"function_name_values": (inc("HR"),)})

        result = pipeline.run(dataset, spec)

        assert keys(result.centers) == ["C2"]
        assert names(result.accounts) == ["Alpha Corp"]
        assert keys(result.services) == []

    def test_prospect_filter_removes_account_without_match(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        """
        SCENARIO: Prospect level Manager (only Beta has one)
        EXPECTED: Alpha and Gamma dropped along with their centers
        """
        spec = open_spec.model_copy(update={"prospect_level_values": (inc("Manager"),)})

        result = pipeline.run(dataset, spec)

        assert names(result.accounts) == ["Beta Ltd"]
        assert keys(result.centers) == ["C3"]
        assert keys(result.functions) == ["C3"]


class TestInvariants:
    """Idempotence, monotonicity and consistency."""

    SPECS = [
        {},
        {"account_hq_region_values": (inc("APAC"),)},
        {"center_city_values": (inc("Bengaluru"),)},
        {"function_name_values": (inc("Engineering"),)},
        {"prospect_department_values": (inc("Finance"),)},
        {"tech_software_in_use_keywords": (inc("sales"),)},
        {"center_inc_year_range": (2005, 2020), "center_inc_year_include_null": False},
    ]

    @pytest.mark.parametrize("update", SPECS)
    def test_idempotent(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec, update
    ) -> None:
        """
        SCENARIO: Filter the already filtered data again
        EXPECTED: Same result
        """
        spec = open_spec.model_copy(update=update)
        first = pipeline.run(dataset, spec)
        refiltered = Dataset(
            accounts=first.accounts,
            centers=first.centers,
            functions=first.functions,
            services=first.services,
            prospects=first.prospects,
            tech=dataset.tech,
        )

        second = pipeline.run(refiltered, spec)

        assert second.counts() == first.counts()
        assert keys(second.centers) == keys(first.centers)

    @pytest.mark.parametrize("update", SPECS)
    def test_consistent(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec, update
    ) -> None:
        assert_consistent(pipeline.run(dataset, open_spec.model_copy(update=update)))

    @pytest.mark.parametrize("update", SPECS[1:])
    def test_adding_an_include_never_grows_result(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec, update
    ) -> None:
        """
        SCENARIO: Tighten the open spec with one more constraint
        EXPECTED: Every collection is a subset of the unconstrained result
        """
        loose = pipeline.run(dataset, open_spec)
        tight = pipeline.run(dataset, open_spec.model_copy(update=update))

        for kind in ("accounts", "centers", "functions", "services", "prospects"):
            assert len(getattr(tight, kind)) <= len(getattr(loose, kind))
            for row in getattr(tight, kind):
                assert row in getattr(loose, kind)


class TestEdgeCases:
    """Orphans, empty data and context reuse."""

    def test_orphan_center_survives_without_account_filters(
        self, pipeline: CrossEntityPipeline, dataset: Dataset
    ) -> None:
        """
        SCENARIO: Center whose account is missing; account filters inactive
        EXPECTED: Center kept (no join applies)
        """
        orphan = Center(cn_unique_key="C9", account_global_legal_name="Orphan Co")
        data = dataset.model_copy(update={"centers": dataset.centers + [orphan]})
        spec = FilterSpec(
            account_hq_revenue_range=(0, MAX_SAFE_INTEGER),
            account_years_in_india_range=(0, MAX_SAFE_INTEGER),
            center_inc_year_range=(0, MAX_SAFE_INTEGER),
            account_hq_revenue_include_null=False,
            years_in_india_include_null=False,
        )

        result = pipeline.run(data, spec)

        assert "C9" in keys(result.centers)

    def test_orphan_center_dropped_when_accounts_join(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        orphan = Center(cn_unique_key="C9", account_global_legal_name="Orphan Co")
        data = dataset.model_copy(update={"centers": dataset.centers + [orphan]})

        result = pipeline.run(data, open_spec)

        assert "C9" not in keys(result.centers)

    def test_empty_dataset(self, pipeline: CrossEntityPipeline) -> None:
        result = pipeline.run(Dataset(), FilterSpec())

        assert result.counts() == {
            "accounts": 0, "centers": 0, "functions": 0, "services": 0, "prospects": 0
        }

    def test_services_can_be_skipped(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        result = pipeline.run(dataset, open_spec, include_services=False)

        assert result.services == []
        assert len(result.centers) == 4

    def test_context_and_dataset_give_same_result(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        spec = open_spec.model_copy(update={"tech_software_in_use_keywords": (inc("sales"),)})

        from_context = pipeline.run(DataContext(dataset), spec)
        from_dataset = get_filtered_data(dataset, spec)

        assert from_context.counts() == from_dataset.counts()

    def test_audit_trail_records_every_pass(
        self, pipeline: CrossEntityPipeline, dataset: Dataset, open_spec: FilterSpec
    ) -> None:
        result = pipeline.run(dataset, open_spec)

        assert [p.pass_name for p in result.audit_trail] == [
            "accounts", "centers", "functions", "prospects", "services", "closing"
        ]
        assert result.audit_trail[0].input_count == 3

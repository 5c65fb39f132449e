"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests. The ``dataset``
fixture is a small hand-built dataset whose expected filter results
can be worked out by reading it:

    Alpha Corp  APAC/India  "$2M"   10y   centers C1 (Bengaluru), C2 (Pune)
    Beta Ltd    EMEA/UK     500000  None  center  C3 (Bengaluru)
    Gamma Inc   APAC/Japan  None    5y    center  C4 (Hyderabad)
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest

from account_facets.adapters.metrics_collector import InMemoryMetricsCollector
from account_facets.adapters.mock_provider import MockDatasetProvider
from account_facets.config.models import EngineConfig
from account_facets.domain.entities import (
    Account,
    Center,
    Dataset,
    Function,
    Prospect,
    Service,
    Tech,
)
from account_facets.domain.value_objects import MAX_SAFE_INTEGER, FilterSpec


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def dataset() -> Dataset:
    """Small consistent dataset: every account has a center."""
    return Dataset(
        accounts=[
            Account(
                account_global_legal_name="Alpha Corp",
                account_hq_region="APAC",
                account_hq_country="India",
                account_hq_industry="Technology",
                account_type="Enterprise",
                account_hq_revenue="$2M",
                years_in_india="10",
            ),
            Account(
                account_global_legal_name="Beta Ltd",
                account_hq_region="EMEA",
                account_hq_country="United Kingdom",
                account_hq_industry="Financial Services",
                account_type="Enterprise",
                account_hq_revenue=500000,
                years_in_india=None,
            ),
            Account(
                account_global_legal_name="Gamma Inc",
                account_hq_region="APAC",
                account_hq_country="Japan",
                account_hq_industry="Technology",
                account_type="Startup",
                account_hq_revenue=None,
                years_in_india=5,
            ),
        ],
        centers=[
            Center(
                cn_unique_key="C1",
                account_global_legal_name="Alpha Corp",
                center_type="GCC",
                center_city="Bengaluru",
                center_country="India",
                center_inc_year=2010,
            ),
            Center(
                cn_unique_key="C2",
                account_global_legal_name="Alpha Corp",
                center_type="Captive",
                center_city="Pune",
                center_country="India",
                center_inc_year="2015",
            ),
            Center(
                cn_unique_key="C3",
                account_global_legal_name="Beta Ltd",
                center_type="GCC",
                center_city="Bengaluru",
                center_country="India",
                center_inc_year=None,
            ),
            Center(
                cn_unique_key="C4",
                account_global_legal_name="Gamma Inc",
                center_type="GCC",
                center_city="Hyderabad",
                center_country="India",
                center_inc_year=2001,
            ),
        ],
        functions=[
            Function(cn_unique_key="C1", function_name="Engineering"),
            Function(cn_unique_key="C1", function_name="Finance"),
            Function(cn_unique_key="C2", function_name="HR"),
            Function(cn_unique_key="C3", function_name="Finance"),
            Function(cn_unique_key="C4", function_name="Engineering"),
        ],
        services=[
            Service(cn_unique_key="C1", primary_service="Application Development"),
            Service(cn_unique_key="C3", primary_service="Finance Ops"),
            Service(cn_unique_key="C4", primary_service="Cloud"),
        ],
        prospects=[
            Prospect(
                account_global_legal_name="Alpha Corp",
                prospect_full_name="Asha Iyer",
                prospect_title="Head of Engineering",
                prospect_department="Engineering",
                prospect_level="VP",
                prospect_city="Bengaluru",
            ),
            Prospect(
                account_global_legal_name="Alpha Corp",
                prospect_full_name="Rahul Sharma",
                prospect_title="Chief Financial Officer",
                prospect_department="Finance",
                prospect_level="C-Level",
                prospect_city="Pune",
            ),
            Prospect(
                account_global_legal_name="Beta Ltd",
                prospect_full_name="Meera Nair",
                prospect_title="Finance Manager",
                prospect_department="Finance",
                prospect_level="Manager",
                prospect_city="Bengaluru",
            ),
        ],
        tech=[
            Tech(cn_unique_key="C1", software_in_use="Salesforce"),
            Tech(cn_unique_key="C1", software_in_use=" Workday "),
            Tech(cn_unique_key="C2", software_in_use="   "),
            Tech(cn_unique_key="C3", software_in_use="SAP S/4HANA"),
            Tech(cn_unique_key=None, software_in_use="Tableau"),
        ],
    )


@pytest.fixture
def open_spec() -> FilterSpec:
    """Spec with empty selectors and ranges that cover every value."""
    return FilterSpec(
        account_hq_revenue_range=(0, MAX_SAFE_INTEGER),
        account_years_in_india_range=(0, MAX_SAFE_INTEGER),
        center_inc_year_range=(0, MAX_SAFE_INTEGER),
    )


@pytest.fixture
def mock_provider() -> MockDatasetProvider:
    """Create mock provider for testing."""
    return MockDatasetProvider(seed=42)


@pytest.fixture
def metrics_collector() -> InMemoryMetricsCollector:
    """Create metrics collector for testing."""
    return InMemoryMetricsCollector()


@pytest.fixture
def default_config() -> EngineConfig:
    """Create default engine configuration."""
    return EngineConfig()

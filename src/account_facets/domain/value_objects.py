"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the filter state and the
engine's results but have no conceptual identity.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from account_facets.domain.entities import (
    Account,
    Center,
    EntityKind,
    Function,
    Prospect,
    Service,
)


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Closed numeric interval [min, max]
RangeBounds = Tuple[float, float]

# Facet key -> options sorted by descending count
AvailableOptions = Dict[str, List["FilterOption"]]

# Largest integer a browser slider can round-trip; ranges reaching it are open.
MAX_SAFE_INTEGER = 2**53 - 1

DEFAULT_REVENUE_RANGE: RangeBounds = (0.0, 1_000_000.0)
DEFAULT_YEARS_IN_INDIA_RANGE: RangeBounds = (0.0, 1_000_000.0)
DEFAULT_CENTER_INC_YEAR_RANGE: RangeBounds = (0.0, 1_000_000.0)


class FilterMode(str, Enum):
    """Whether a selector term keeps or drops matching rows."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


class FilterValue(BaseModel):
    """One selector term: a value (or keyword fragment) and its mode."""

    value: str
    mode: FilterMode = FilterMode.INCLUDE

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"value": data}
        return data

    @classmethod
    def include(cls, value: str) -> "FilterValue":
        return cls(value=value, mode=FilterMode.INCLUDE)

    @classmethod
    def exclude(cls, value: str) -> "FilterValue":
        return cls(value=value, mode=FilterMode.EXCLUDE)


Selector = Tuple[FilterValue, ...]


class FilterSpec(BaseModel):
    """
    Complete filter state for one engine call.

    Field names are snake_case; the camelCase names used by the dashboard
    UI (``accountHqRegionValues`` ...) are accepted as aliases so saved
    filters can be validated directly.
    """

    # Account selectors
    account_hq_region_values: Selector = ()
    account_hq_country_values: Selector = ()
    account_hq_industry_values: Selector = ()
    account_data_coverage_values: Selector = ()
    account_source_values: Selector = ()
    account_type_values: Selector = ()
    account_primary_category_values: Selector = ()
    account_primary_nature_values: Selector = ()
    account_nasscom_status_values: Selector = ()
    account_hq_employee_range_values: Selector = ()
    account_center_employees_range_values: Selector = ()
    account_global_legal_name_keywords: Selector = ()

    # Account ranges
    account_hq_revenue_range: RangeBounds = DEFAULT_REVENUE_RANGE
    account_hq_revenue_include_null: bool = True
    account_years_in_india_range: RangeBounds = DEFAULT_YEARS_IN_INDIA_RANGE
    years_in_india_include_null: bool = True

    # Center selectors and range
    center_type_values: Selector = ()
    center_focus_values: Selector = ()
    center_city_values: Selector = ()
    center_state_values: Selector = ()
    center_country_values: Selector = ()
    center_employees_range_values: Selector = ()
    center_status_values: Selector = ()
    center_inc_year_range: RangeBounds = DEFAULT_CENTER_INC_YEAR_RANGE
    center_inc_year_include_null: bool = True

    # Function / tech
    function_name_values: Selector = ()
    tech_software_in_use_keywords: Selector = ()

    # Prospect
    prospect_department_values: Selector = ()
    prospect_level_values: Selector = ()
    prospect_city_values: Selector = ()
    prospect_title_keywords: Selector = ()

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def selector(self, key: str) -> Selector:
        """Selector terms stored under a selector or keyword field."""
        if key not in SELECTOR_FIELDS and key not in KEYWORD_FIELDS:
            raise KeyError(f"Not a selector field: {key}")
        return getattr(self, key)

    def cleared(self, key: str) -> "FilterSpec":
        """Copy of this spec with one selector emptied."""
        self.selector(key)
        return self.model_copy(update={key: ()})

    def to_ui_dict(self) -> Dict[str, Any]:
        """Serialize with the dashboard's camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


# Value-matched selector fields, all of which are facets by default.
SELECTOR_FIELDS: Tuple[str, ...] = (
    "account_hq_region_values",
    "account_hq_country_values",
    "account_hq_industry_values",
    "account_data_coverage_values",
    "account_source_values",
    "account_type_values",
    "account_primary_category_values",
    "account_primary_nature_values",
    "account_nasscom_status_values",
    "account_hq_employee_range_values",
    "account_center_employees_range_values",
    "center_type_values",
    "center_focus_values",
    "center_city_values",
    "center_state_values",
    "center_country_values",
    "center_employees_range_values",
    "center_status_values",
    "function_name_values",
    "prospect_department_values",
    "prospect_level_values",
    "prospect_city_values",
)

KEYWORD_FIELDS: Tuple[str, ...] = (
    "account_global_legal_name_keywords",
    "tech_software_in_use_keywords",
    "prospect_title_keywords",
)

# Range field -> companion include-null flag
RANGE_FIELDS: Dict[str, str] = {
    "account_hq_revenue_range": "account_hq_revenue_include_null",
    "account_years_in_india_range": "years_in_india_include_null",
    "center_inc_year_range": "center_inc_year_include_null",
}


class FilterOption(BaseModel):
    """One available value of a facet and the rows carrying it."""

    value: str
    count: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class NumericRange(BaseModel):
    """Inclusive numeric bounds, e.g. for a range slider."""

    min: float
    max: float

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> RangeBounds:
        return (self.min, self.max)


class BaseRanges(BaseModel):
    """Full-data bounds of every numeric filter."""

    revenue: NumericRange
    years_in_india: NumericRange
    center_inc_year: NumericRange

    model_config = ConfigDict(frozen=True)


class PassResult(BaseModel):
    """Row counts of one pipeline pass for the audit trail."""

    pass_name: str
    input_count: int
    output_count: int
    duration_seconds: float = 0.0

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all filtered)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


class FilteredData(BaseModel):
    """Mutually consistent filtered view of every collection."""

    accounts: List[Account] = Field(default_factory=list)
    centers: List[Center] = Field(default_factory=list)
    functions: List[Function] = Field(default_factory=list)
    services: List[Service] = Field(default_factory=list)
    prospects: List[Prospect] = Field(default_factory=list)
    audit_trail: List[PassResult] = Field(default_factory=list)

    def rows_for(self, kind: EntityKind) -> List[Any]:
        """Filtered collection for an entity kind."""
        return getattr(self, kind.value)

    def counts(self) -> Dict[str, int]:
        return {kind.value: len(self.rows_for(kind)) for kind in EntityKind}

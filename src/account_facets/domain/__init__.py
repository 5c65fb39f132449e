"""
Domain Layer - Dataset Records and Value Objects.

Entities:
    - Account, Center, Function, Service, Tech, Prospect: dataset rows
    - Dataset: the collections supplied to one engine call

Value Objects:
    - FilterValue / FilterSpec: selector terms and the full filter state
    - FilteredData / PassResult: pipeline output and its audit trail
    - FilterOption: one facet value with its count
    - NumericRange / BaseRanges: slider bounds

Design Principles:
    - Immutable (frozen Pydantic models)
    - Missing values are None, never sentinel strings
    - No infrastructure dependencies
"""

from account_facets.domain.entities import (
    Account,
    Center,
    Dataset,
    EntityKind,
    Function,
    Prospect,
    Service,
    Tech,
)
from account_facets.domain.value_objects import (
    BaseRanges,
    FilteredData,
    FilterMode,
    FilterOption,
    FilterSpec,
    FilterValue,
    NumericRange,
    PassResult,
)

__all__ = [
    "Account",
    "BaseRanges",
    "Center",
    "Dataset",
    "EntityKind",
    "FilteredData",
    "FilterMode",
    "FilterOption",
    "FilterSpec",
    "FilterValue",
    "Function",
    "NumericRange",
    "PassResult",
    "Prospect",
    "Service",
    "Tech",
]

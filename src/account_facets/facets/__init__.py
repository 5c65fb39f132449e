"""
Facets Package - Facet Definitions and Option Counting.

Components:
    - FacetRegistry: facet key -> counted entity and field
    - FacetOptionCalculator: available options with counts per facet

Design Principles:
    - A facet's counts ignore that facet's own selector only
    - Scoped reruns are memoized per call, never across calls
"""

from account_facets.facets.calculator import (
    FacetOptionCalculator,
    count_values,
    get_available_options,
)
from account_facets.facets.registry import (
    FacetDefinition,
    FacetRegistry,
    create_default_registry,
)

__all__ = [
    "FacetDefinition",
    "FacetOptionCalculator",
    "FacetRegistry",
    "count_values",
    "create_default_registry",
    "get_available_options",
]

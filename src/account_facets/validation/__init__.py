"""
Validation Package - Filter Spec Checks.

Components:
    - FilterValidator: Inverted ranges, blank and duplicate terms
"""

from account_facets.validation.filter_validator import (
    FilterValidationError,
    FilterValidator,
    ValidationIssue,
)

__all__ = [
    "FilterValidationError",
    "FilterValidator",
    "ValidationIssue",
]

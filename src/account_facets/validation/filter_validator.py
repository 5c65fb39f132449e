"""
Filter Validator - Sanity Checks on a FilterSpec.

Catches filter states that are legal to build but almost certainly
mistakes before a pipeline run:
    - Range with min greater than max (matches nothing but null rows)
    - Blank selector or keyword value
    - The same term listed twice in one selector

Design Notes:
    - Strict mode fails fast with the first issue
    - Non-strict mode logs a warning per issue and carries on
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from account_facets.domain.value_objects import (
    KEYWORD_FIELDS,
    RANGE_FIELDS,
    SELECTOR_FIELDS,
    FilterSpec,
)

logger = logging.getLogger(__name__)


class FilterValidationError(Exception):
    """Raised when a filter spec fails strict validation."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    message: str


class FilterValidator:
    """
    Validates filter specs before filtering.

    Validates:
        - Every range has min <= max
        - No selector or keyword term is blank
        - No selector lists the same (value, mode) twice
    """

    def __init__(self, strict: bool = False) -> None:
        """
        Initialize filter validator.

        Args:
            strict: Raise FilterValidationError instead of logging
        """
        self.strict = strict

    def validate(self, spec: FilterSpec) -> List[ValidationIssue]:
        """
        Validate a filter spec.

        Args:
            spec: Filter state to check

        Returns:
            Issues found (empty when the spec is clean)

        Raises:
            FilterValidationError: In strict mode, on the first issue
        """
        issues = self._collect(spec)

        if issues and self.strict:
            first = issues[0]
            raise FilterValidationError(
                f"Invalid filter {first.field}: {first.message}", field=first.field
            )

        for issue in issues:
            logger.warning(f"Filter {issue.field}: {issue.message}")
        return issues

    def _collect(self, spec: FilterSpec) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []

        for range_field in RANGE_FIELDS:
            lo, hi = getattr(spec, range_field)
            if lo > hi:
                issues.append(
                    ValidationIssue(range_field, f"min {lo:g} exceeds max {hi:g}")
                )

        for key in SELECTOR_FIELDS + KEYWORD_FIELDS:
            seen = set()
            for term in spec.selector(key):
                if not term.value.strip():
                    issues.append(ValidationIssue(key, "blank value"))
                    continue
                marker = (term.value, term.mode)
                if marker in seen:
                    issues.append(
                        ValidationIssue(key, f"duplicate term '{term.value}'")
                    )
                seen.add(marker)

        return issues

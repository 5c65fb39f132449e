"""
Verification Package - Randomized Facet Invariant Checks.
"""

from account_facets.verification.facet_invariant import (
    FacetInvariantVerifier,
    InvariantViolation,
    Scenario,
    VerificationReport,
)

__all__ = [
    "FacetInvariantVerifier",
    "InvariantViolation",
    "Scenario",
    "VerificationReport",
]

"""
Matching Package - Field Matchers and Number Parsing.

Matchers:
    - ValueMatcher: exact include/exclude selector terms
    - KeywordMatcher: case-insensitive substring terms
    - RangeMatcher: inclusive numeric interval with null policy

Parsers:
    - normalize_number: plain numbers and numeric strings
    - parse_revenue: formatted amounts ("$1.2B", "USD 3,500")

Design Principles:
    - Pure functions of their inputs
    - Malformed values normalize to "" or 0.0, never raise
"""

from account_facets.matching.matchers import (
    KeywordMatcher,
    Matcher,
    RangeMatcher,
    ValueMatcher,
)
from account_facets.matching.parsing import normalize_number, parse_revenue

__all__ = [
    "KeywordMatcher",
    "Matcher",
    "RangeMatcher",
    "ValueMatcher",
    "normalize_number",
    "parse_revenue",
]

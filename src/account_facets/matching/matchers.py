"""
Field Matchers.

Three matcher kinds decide whether a single field value passes one
attribute's filter:

    - ValueMatcher: exact include/exclude terms (categorical fields)
    - KeywordMatcher: case-insensitive substring include/exclude terms
    - RangeMatcher: closed numeric interval with a null/zero policy

All three satisfy the ``Matcher`` protocol, so predicates can hold them
side by side without branching on the field type.
"""

from __future__ import annotations

from typing import Any, Callable, FrozenSet, Iterable, Protocol, Tuple, runtime_checkable

from account_facets.domain.value_objects import FilterMode, FilterValue, RangeBounds
from account_facets.matching.parsing import normalize_number

NumberParser = Callable[[Any], float]


@runtime_checkable
class Matcher(Protocol):
    """Accepts or rejects one candidate field value."""

    @property
    def active(self) -> bool:
        """False when the matcher accepts everything."""
        ...

    def accepts(self, candidate: Any) -> bool:
        ...


def _as_text(candidate: Any) -> str:
    return "" if candidate is None else str(candidate)


def _split_terms(terms: Iterable[FilterValue]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    includes = tuple(t.value for t in terms if t.mode is FilterMode.INCLUDE)
    excludes = tuple(t.value for t in terms if t.mode is FilterMode.EXCLUDE)
    return includes, excludes


class ValueMatcher:
    """Exact-match selector for a categorical field."""

    def __init__(self, terms: Iterable[FilterValue] = ()) -> None:
        includes, excludes = _split_terms(terms)
        self._includes: FrozenSet[str] = frozenset(includes)
        self._excludes: FrozenSet[str] = frozenset(excludes)

    @property
    def active(self) -> bool:
        return bool(self._includes or self._excludes)

    def accepts(self, candidate: Any) -> bool:
        value = _as_text(candidate)
        if self._includes and value not in self._includes:
            return False
        return value not in self._excludes

    def __repr__(self) -> str:
        return (
            f"ValueMatcher(includes={sorted(self._includes)}, "
            f"excludes={sorted(self._excludes)})"
        )


class KeywordMatcher:
    """Case-insensitive substring selector for a free-text field."""

    def __init__(self, terms: Iterable[FilterValue] = ()) -> None:
        includes, excludes = _split_terms(terms)
        self._includes = tuple(term.lower() for term in includes)
        self._excludes = tuple(term.lower() for term in excludes)

    @property
    def active(self) -> bool:
        return bool(self._includes or self._excludes)

    def accepts(self, candidate: Any) -> bool:
        text = _as_text(candidate).lower()
        if self._includes and not any(term in text for term in self._includes):
            return False
        return not any(term in text for term in self._excludes)

    def __repr__(self) -> str:
        return f"KeywordMatcher(includes={list(self._includes)}, excludes={list(self._excludes)})"


class RangeMatcher:
    """
    Closed-interval matcher for a loosely typed numeric field.

    A value that parses to 0 (true zero, None, empty or unparsable) is
    decided by ``include_null`` alone, regardless of the bounds.
    """

    def __init__(
        self,
        bounds: RangeBounds,
        include_null: bool,
        parser: NumberParser = normalize_number,
    ) -> None:
        self.bounds = (float(bounds[0]), float(bounds[1]))
        self.include_null = include_null
        self._parser = parser

    @property
    def active(self) -> bool:
        # A range always constrains non-null values.
        return True

    def accepts(self, candidate: Any) -> bool:
        parsed = self._parser(candidate)
        if parsed == 0 or candidate is None or candidate == "":
            return self.include_null
        lo, hi = self.bounds
        return lo <= parsed <= hi

    def __repr__(self) -> str:
        return f"RangeMatcher(bounds={self.bounds}, include_null={self.include_null})"

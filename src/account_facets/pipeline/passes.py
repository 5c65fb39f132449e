"""
Cross-Entity Passes.

Each pass is a pure function from the current collections and identifier
sets (account names, center keys) to narrowed collections and sets. The
pipeline runs them in order:

    1. filter_accounts         accounts -> account names
    2. filter_centers          names (join) + center checks -> center keys
    3. filter_functions        center keys -> functions (+ keys they reference)
       narrow_centers_to_keys  function back-propagation onto centers
    4. filter_prospects        names (join) + prospect checks -> prospects
       narrow_to_prospects     prospect back-propagation onto accounts/centers
    5. filter_services         center keys -> services
    6. close_result            names referenced by centers -> final accounts,
                               functions, prospects

Inputs are never mutated and relative row order is preserved.
"""

from __future__ import annotations

from typing import (
    AbstractSet,
    Callable,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
    TypeVar,
)

from account_facets.domain.entities import Account, Center, Function, Prospect, Service
from account_facets.matching.matchers import KeywordMatcher, ValueMatcher
from account_facets.pipeline.predicates import EntityPredicate

RowT = TypeVar("RowT")


def narrow(
    rows: Sequence[RowT],
    key: Callable[[RowT], str],
    allowed: AbstractSet[str],
) -> List[RowT]:
    """Keep rows whose key is in ``allowed``."""
    return [row for row in rows if key(row) in allowed]


def _account_name(row: object) -> str:
    return getattr(row, "account_global_legal_name")


def _center_key(row: object) -> str:
    return getattr(row, "cn_unique_key")


def filter_accounts(
    accounts: Sequence[Account],
    predicate: EntityPredicate,
) -> Tuple[List[Account], Set[str]]:
    """Apply account-level checks; return survivors and their names."""
    kept = [account for account in accounts if predicate.accepts(account)]
    return kept, {account.account_global_legal_name for account in kept}


def filter_centers(
    centers: Sequence[Center],
    account_names: Optional[AbstractSet[str]],
    predicate: EntityPredicate,
    software: Optional[KeywordMatcher] = None,
    software_text: Callable[[str], str] = lambda key: "",
) -> Tuple[List[Center], Set[str]]:
    """
    Apply the account join and center-level checks.

    Args:
        centers: Center rows
        account_names: Surviving account names, or None when the account
            filters are inactive and no join applies
        predicate: Center categorical/range checks
        software: Software keyword matcher, or None when inactive
        software_text: Center key -> joined software text

    Returns:
        Surviving centers and their keys
    """
    kept: List[Center] = []
    for center in centers:
        if account_names is not None and center.account_global_legal_name not in account_names:
            continue
        if not predicate.accepts(center):
            continue
        if software is not None and not software.accepts(software_text(center.cn_unique_key)):
            continue
        kept.append(center)
    return kept, {center.cn_unique_key for center in kept}


def filter_functions(
    functions: Sequence[Function],
    center_keys: AbstractSet[str],
    matcher: Optional[ValueMatcher] = None,
) -> Tuple[List[Function], Optional[Set[str]]]:
    """
    Keep functions of surviving centers that pass the function-name filter.

    Returns:
        Surviving functions, and the center keys they reference when a
        function filter is active (None otherwise)
    """
    kept: List[Function] = []
    for func in functions:
        if func.cn_unique_key not in center_keys:
            continue
        if matcher is None or matcher.accepts(func.function_name):
            kept.append(func)
    if matcher is None:
        return kept, None
    return kept, {func.cn_unique_key for func in kept}


def narrow_centers_to_keys(
    centers: Sequence[Center],
    center_keys: AbstractSet[str],
) -> Tuple[List[Center], Set[str]]:
    """Keep only centers referenced by ``center_keys``."""
    return narrow(centers, _center_key, center_keys), set(center_keys)


def filter_prospects(
    prospects: Sequence[Prospect],
    account_names: Optional[AbstractSet[str]],
    predicate: Optional[EntityPredicate] = None,
) -> List[Prospect]:
    """
    Apply the account join and, when active, the prospect checks.

    Args:
        prospects: Prospect rows
        account_names: Account names from the account pass, or None
            when no join applies
        predicate: Prospect checks, or None when no prospect filter is
            active (every joined prospect passes)
    """
    kept: List[Prospect] = []
    for prospect in prospects:
        if account_names is not None and prospect.account_global_legal_name not in account_names:
            continue
        if predicate is None or predicate.accepts(prospect):
            kept.append(prospect)
    return kept


def narrow_to_prospects(
    accounts: Sequence[Account],
    centers: Sequence[Center],
    prospects: Sequence[Prospect],
) -> Tuple[List[Account], List[Center], Set[str], Set[str]]:
    """
    Back-propagate prospect survival onto accounts, then centers.

    Returns:
        Accounts, centers, account names (those with surviving
        prospects) and the recomputed center keys
    """
    names = {prospect.account_global_legal_name for prospect in prospects}
    kept_accounts = narrow(accounts, _account_name, names)
    kept_centers = narrow(centers, _account_name, names)
    return kept_accounts, kept_centers, names, {c.cn_unique_key for c in kept_centers}


def filter_services(
    services: Sequence[Service],
    center_keys: AbstractSet[str],
) -> List[Service]:
    """Keep services of surviving centers."""
    return narrow(services, _center_key, center_keys)


def close_result(
    accounts: Sequence[Account],
    centers: Sequence[Center],
    functions: Sequence[Function],
    prospects: Sequence[Prospect],
    center_keys: AbstractSet[str],
) -> Tuple[List[Account], List[Function], List[Prospect]]:
    """
    Make accounts, functions and prospects agree with the final centers.

    Accounts and prospects are kept only when their account name is
    referenced by a surviving center; functions only when their center
    key survives.
    """
    final_names = {center.account_global_legal_name for center in centers}
    return (
        narrow(accounts, _account_name, final_names),
        narrow(functions, _center_key, center_keys),
        narrow(prospects, _account_name, final_names),
    )

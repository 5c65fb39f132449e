"""
Dataset Provider Protocol.

Any source of the dashboard collections (mock, warehouse export, API)
implements this protocol to feed the engine. Loading from storage is
outside this package; only the mock adapter ships here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from account_facets.domain.entities import Dataset


@runtime_checkable
class DatasetProvider(Protocol):
    """Abstract interface for dataset access."""

    def get_dataset(self) -> Dataset:
        """
        Return the full set of entity collections.

        Returns:
            Dataset with accounts, centers, functions, services,
            prospects and tech rows
        """
        ...

"""
Data Context - Per-Call Data Container.

The DataContext wraps the collections of one engine call together with
the data derived from them that every pass needs, namely the per-center
software index built from the Tech rows.

Design Notes:
    - Built once per filtering pass (or once per facet calculation and
      shared by its scoped reruns)
    - Read-only after construction; safe to share between threads
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from account_facets.domain.entities import Dataset, Tech

logger = logging.getLogger(__name__)

DEFAULT_SOFTWARE_SEPARATOR = " | "


def build_center_software_index(
    tech: Sequence[Tech],
    separator: str = DEFAULT_SOFTWARE_SEPARATOR,
) -> Dict[str, str]:
    """
    Join every center's software names into one searchable string.

    Rows with no center key or a blank software name are skipped. Names
    are trimmed and appended in input order.

    Args:
        tech: Tech rows
        separator: Text placed between two software names

    Returns:
        Center key -> joined software text
    """
    parts: Dict[str, List[str]] = {}
    for row in tech:
        software = (row.software_in_use or "").strip()
        if not software or not row.cn_unique_key:
            continue
        parts.setdefault(row.cn_unique_key, []).append(software)
    return {key: separator.join(names) for key, names in parts.items()}


class DataContext:
    """In-memory container for one call's collections and derived indexes."""

    def __init__(
        self,
        dataset: Dataset,
        *,
        software_separator: str = DEFAULT_SOFTWARE_SEPARATOR,
    ) -> None:
        """
        Initialize data context.

        Args:
            dataset: Collections supplied by the caller
            software_separator: Separator used in the software index
        """
        self._dataset = dataset
        self._software_index = build_center_software_index(
            dataset.tech, software_separator
        )
        logger.debug(
            f"Software index built for {len(self._software_index)} centers "
            f"from {len(dataset.tech)} tech rows"
        )

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def software_index(self) -> Dict[str, str]:
        return self._software_index

    def center_software(self, center_key: str) -> str:
        """Joined software text for a center, empty if it has none."""
        return self._software_index.get(center_key, "")

    def __len__(self) -> int:
        """Number of rows across all collections."""
        return self._dataset.row_count

    def __repr__(self) -> str:
        return (
            f"DataContext(accounts={len(self._dataset.accounts)}, "
            f"centers={len(self._dataset.centers)}, "
            f"indexed_centers={len(self._software_index)})"
        )

"""
Facet Registry - Facet Definition Management.

A thread-safe registry mapping each facet key (a FilterSpec selector
field) to the entity collection and record field whose values it counts.

Usage:
    registry = create_default_registry()
    definition = registry.get("center_city_values")
    rows = filtered.rows_for(definition.entity)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, List, Optional

from account_facets.domain.entities import EntityKind
from account_facets.domain.value_objects import SELECTOR_FIELDS
from account_facets.pipeline.predicates import (
    ACCOUNT_SELECTORS,
    CENTER_SELECTORS,
    FUNCTION_SELECTORS,
    PROSPECT_SELECTORS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FacetDefinition:
    """Where a facet's values are counted."""

    key: str
    entity: EntityKind
    field: str
    description: str = ""

    def value_of(self, row: Any) -> str:
        """The row's facet value, None normalized to ""."""
        value = getattr(row, self.field, None)
        return "" if value is None else str(value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "entity": self.entity.value,
            "field": self.field,
            "description": self.description,
        }


class FacetRegistry:
    """
    Thread-safe registry of facet definitions.

    Facets are kept in registration order, which is also the key order
    of the facet calculator's output.
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._facets: Dict[str, FacetDefinition] = {}
        self._lock = RLock()

    def register(
        self,
        key: str,
        entity: EntityKind,
        field: str,
        description: str = "",
    ) -> FacetDefinition:
        """
        Register a facet.

        Args:
            key: FilterSpec selector field cleared when computing the facet
            entity: Collection whose rows are counted
            field: Record field whose values are counted
            description: Optional description

        Returns:
            The stored FacetDefinition

        Raises:
            ValueError: If the key is already registered, is not a
                selector field, or the entity is Service
        """
        with self._lock:
            if key in self._facets:
                raise ValueError(
                    f"Facet '{key}' is already registered. Use unregister() first."
                )
            if key not in SELECTOR_FIELDS:
                raise ValueError(f"Facet key '{key}' is not a FilterSpec selector field")
            if entity is EntityKind.SERVICE:
                raise ValueError("Services are never counted as a facet")

            definition = FacetDefinition(
                key=key, entity=entity, field=field, description=description
            )
            self._facets[key] = definition
            logger.debug(f"Registered facet: {key} -> {entity.value}.{field}")
            return definition

    def unregister(self, key: str) -> bool:
        """
        Unregister a facet by key.

        Returns:
            True if the facet was removed, False if not found
        """
        with self._lock:
            if key not in self._facets:
                logger.warning(f"Cannot unregister: facet '{key}' not found")
                return False
            del self._facets[key]
            logger.info(f"Unregistered facet: {key}")
            return True

    def get(self, key: str) -> Optional[FacetDefinition]:
        with self._lock:
            return self._facets.get(key)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._facets)

    def definitions(self) -> List[FacetDefinition]:
        with self._lock:
            return list(self._facets.values())

    def list_all(self) -> Dict[str, FacetDefinition]:
        with self._lock:
            return dict(self._facets)

    @property
    def registered_count(self) -> int:
        with self._lock:
            return len(self._facets)

    def clear(self) -> None:
        """Remove all registered facets."""
        with self._lock:
            self._facets.clear()
            logger.info("Cleared all facets from registry")

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._facets


def create_default_registry() -> FacetRegistry:
    """Registry with one facet per value-matched selector field."""
    registry = FacetRegistry()
    for entity, selectors in (
        (EntityKind.ACCOUNT, ACCOUNT_SELECTORS),
        (EntityKind.CENTER, CENTER_SELECTORS),
        (EntityKind.FUNCTION, FUNCTION_SELECTORS),
        (EntityKind.PROSPECT, PROSPECT_SELECTORS),
    ):
        for key, field in selectors.items():
            registry.register(key, entity, field)
    return registry

"""
Interfaces Layer - Abstract Protocols for Dependencies.

High-level modules depend on these protocols, not on concrete adapters.

Protocols:
    - DatasetProvider: Supplies the entity collections
    - MetricsCollector: Timing and count metrics

Design Principles:
    - Use typing.Protocol (not ABC) for structural subtyping
    - Small, focused interfaces
"""

from account_facets.interfaces.dataset_provider import DatasetProvider
from account_facets.interfaces.metrics_collector import MetricsCollector

__all__ = [
    "DatasetProvider",
    "MetricsCollector",
]

"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the protocols in the interfaces package.

Providers:
    - MockDatasetProvider: Deterministic fake data for development/testing

Metrics:
    - InMemoryMetricsCollector: Simple in-memory collection

Design Principles:
    - All adapters implement their respective protocols
    - Easily swappable via Dependency Injection
    - No business logic in adapters
"""

from account_facets.adapters.metrics_collector import InMemoryMetricsCollector
from account_facets.adapters.mock_provider import MockDatasetProvider

__all__ = [
    "InMemoryMetricsCollector",
    "MockDatasetProvider",
]

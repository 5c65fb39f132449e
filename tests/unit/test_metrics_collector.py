"""
Unit Tests for InMemoryMetricsCollector.

Test Aspects Covered:
    ✅ Business Logic: Summary per metric, raw samples, clear
    ✅ Concurrency: Recording from several threads
"""

from __future__ import annotations

import threading

from account_facets.adapters.metrics_collector import InMemoryMetricsCollector
from account_facets.interfaces.metrics_collector import MetricsCollector


class TestInMemoryMetricsCollector:
    """Test cases for InMemoryMetricsCollector."""

    def test_summary(self, metrics_collector: InMemoryMetricsCollector) -> None:
        """
        SCENARIO: Three timings under one name
        EXPECTED: count/total/min/max/last summarized
        """
        for value in (0.5, 0.25, 1.0):
            metrics_collector.record_timing("filter_seconds", value)

        summary = metrics_collector.get_metrics()["filter_seconds"]

        assert summary == {
            "type": "timing",
            "count": 3,
            "total": 1.75,
            "min": 0.25,
            "max": 1.0,
            "last": 1.0,
        }

    def test_tags_kept_on_samples(self, metrics_collector: InMemoryMetricsCollector) -> None:
        metrics_collector.record_count("filtered_accounts_total", 7, {"profile": "strict"})

        sample = metrics_collector.samples("filtered_accounts_total")[0]

        assert sample["value"] == 7
        assert sample["tags"] == {"profile": "strict"}

    def test_clear(self, metrics_collector: InMemoryMetricsCollector) -> None:
        metrics_collector.record_gauge("dataset_rows", 12)
        metrics_collector.clear()

        assert metrics_collector.get_metrics() == {}
        assert metrics_collector.samples("dataset_rows") == []

    def test_concurrent_recording(self, metrics_collector: InMemoryMetricsCollector) -> None:
        def worker() -> None:
            for _ in range(100):
                metrics_collector.record_count("hits", 1)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert metrics_collector.get_metrics()["hits"]["total"] == 800

    def test_satisfies_protocol(self, metrics_collector: InMemoryMetricsCollector) -> None:
        assert isinstance(metrics_collector, MetricsCollector)

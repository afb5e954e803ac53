# SPDX-License-Identifier: Apache-2.0
"""
Unit tests for the observability collector module.

Tests cover:
- MetricDefinition and the predefined client metrics
- Counter and histogram operations on the dict snapshot
- Prometheus export on a private CollectorRegistry
- Label cardinality protection
- Singleton pattern: get_metrics_collector, reset_metrics_collector
"""

from __future__ import annotations

import threading
from unittest.mock import patch

import pytest
from prometheus_client import CollectorRegistry

from watsonx_data.observability.collector import (
    METRIC_DEFINITIONS,
    MetricDefinition,
    UnifiedMetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from watsonx_data.observability.constants import (
    PAGES_FETCHED_TOTAL,
    REQUEST_DURATION_SECONDS,
    REQUEST_RETRIES_TOTAL,
    REQUESTS_TOTAL,
)

# =============================================================================
# MetricDefinition Tests
# =============================================================================


class TestMetricDefinition:
    """Test MetricDefinition dataclass."""

    def test_counter_definition(self) -> None:
        defn = MetricDefinition(
            name="test_counter_total",
            metric_type="counter",
            description="A test counter",
            label_names=("operation",),
        )
        assert defn.label_names == ("operation",)
        assert defn.buckets is None

    def test_predefined_metrics_exist(self) -> None:
        """The client's metrics are predefined with their label names."""
        assert METRIC_DEFINITIONS[REQUESTS_TOTAL].label_names == (
            "operation",
            "method",
            "outcome",
        )
        assert METRIC_DEFINITIONS[REQUEST_RETRIES_TOTAL].label_names == (
            "operation",
            "reason",
        )
        assert METRIC_DEFINITIONS[REQUEST_DURATION_SECONDS].metric_type == "histogram"
        assert METRIC_DEFINITIONS[PAGES_FETCHED_TOTAL].metric_type == "counter"

    def test_metric_names_prefixed(self) -> None:
        assert all(name.startswith("watsonx_data_") for name in METRIC_DEFINITIONS)


# =============================================================================
# Counter Operations Tests
# =============================================================================


class TestCounterOperations:
    """Test counter operations."""

    @pytest.fixture
    def collector(self) -> UnifiedMetricsCollector:
        """Create a fresh collector without Prometheus."""
        return UnifiedMetricsCollector(enable_prometheus=False)

    def test_inc_counter_basic(self, collector: UnifiedMetricsCollector) -> None:
        collector.inc_counter("test_counter")
        assert collector.get_counter("test_counter") == 1

    def test_inc_counter_accumulates(self, collector: UnifiedMetricsCollector) -> None:
        collector.inc_counter("test_counter", value=3)
        collector.inc_counter("test_counter", value=7)
        assert collector.get_counter("test_counter") == 10

    def test_inc_counter_with_labels(self, collector: UnifiedMetricsCollector) -> None:
        labels = {"operation": "list_catalogs", "method": "GET"}
        collector.inc_counter("test_counter", labels=labels)
        collector.inc_counter("test_counter", labels=labels)
        collector.inc_counter("test_counter", labels={"operation": "get_catalog"})

        assert collector.get_counter("test_counter", labels) == 2
        snapshot = collector.get_metrics()["counters"]["test_counter"]
        assert snapshot == {
            "method=GET,operation=list_catalogs": 2,
            "operation=get_catalog": 1,
        }

    def test_inc_counter_negative_value_raises(
        self, collector: UnifiedMetricsCollector
    ) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            collector.inc_counter("test_counter", value=-1)

    def test_unknown_counter_is_zero(self, collector: UnifiedMetricsCollector) -> None:
        assert collector.get_counter("never_seen") == 0

    def test_thread_safety(self, collector: UnifiedMetricsCollector) -> None:
        def worker() -> None:
            for _ in range(500):
                collector.inc_counter("concurrent_total")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert collector.get_counter("concurrent_total") == 4000


# =============================================================================
# Histogram Operations Tests
# =============================================================================


class TestHistogramOperations:
    @pytest.fixture
    def collector(self) -> UnifiedMetricsCollector:
        return UnifiedMetricsCollector(enable_prometheus=False)

    def test_summary_statistics(self, collector: UnifiedMetricsCollector) -> None:
        for value in (0.1, 0.2, 0.3):
            collector.observe_histogram("latency", value, {"operation": "op"})

        summary = collector.get_metrics()["histograms"]["latency"]["operation=op"]
        assert summary["count"] == 3
        assert summary["min"] == 0.1
        assert summary["max"] == 0.3
        assert summary["sum"] == pytest.approx(0.6)
        assert summary["avg"] == pytest.approx(0.2)

    def test_observations_bounded(self, collector: UnifiedMetricsCollector) -> None:
        for i in range(10001):
            collector.observe_histogram("latency", float(i))
        summary = collector.get_metrics()["histograms"]["latency"][""]
        assert summary["count"] == 5000
        assert summary["max"] == 10000.0


# =============================================================================
# Cardinality and reset
# =============================================================================


class TestCardinality:
    def test_label_combinations_capped(self) -> None:
        collector = UnifiedMetricsCollector(enable_prometheus=False)
        with patch.object(UnifiedMetricsCollector, "MAX_LABEL_COMBINATIONS", 2):
            for op in ("a", "b", "c"):
                collector.inc_counter("capped_total", labels={"operation": op})

        assert collector.get_counter("capped_total", {"operation": "a"}) == 1
        assert collector.get_counter("capped_total", {"operation": "b"}) == 1
        assert collector.get_counter("capped_total", {"operation": "c"}) == 0

    def test_reset_clears_snapshot(self) -> None:
        collector = UnifiedMetricsCollector(enable_prometheus=False)
        collector.inc_counter("x_total")
        collector.observe_histogram("y_seconds", 1.0)
        collector.reset()
        assert collector.get_metrics() == {"counters": {}, "histograms": {}}


# =============================================================================
# Prometheus Tests
# =============================================================================


class TestPrometheusExport:
    @pytest.fixture
    def registry(self) -> CollectorRegistry:
        return CollectorRegistry()

    def test_counter_exported(self, registry: CollectorRegistry) -> None:
        collector = UnifiedMetricsCollector(registry=registry)
        labels = {"operation": "list_catalogs", "method": "GET", "outcome": "success"}
        collector.inc_counter(REQUESTS_TOTAL, labels=labels)
        collector.inc_counter(REQUESTS_TOTAL, labels=labels)

        assert registry.get_sample_value(REQUESTS_TOTAL, labels) == 2.0

    def test_histogram_exported(self, registry: CollectorRegistry) -> None:
        collector = UnifiedMetricsCollector(registry=registry)
        collector.observe_histogram(
            REQUEST_DURATION_SECONDS, 0.2, {"operation": "get_catalog"}
        )

        count = registry.get_sample_value(
            f"{REQUEST_DURATION_SECONDS}_count", {"operation": "get_catalog"}
        )
        assert count == 1.0

    def test_prometheus_disabled_registers_nothing(
        self, registry: CollectorRegistry
    ) -> None:
        collector = UnifiedMetricsCollector(enable_prometheus=False, registry=registry)
        collector.inc_counter(
            PAGES_FETCHED_TOTAL, labels={"operation": "list_ingestion_jobs"}
        )
        assert collector.prometheus_enabled is False
        assert (
            registry.get_sample_value(
                PAGES_FETCHED_TOTAL, {"operation": "list_ingestion_jobs"}
            )
            is None
        )

    def test_duplicate_registration_keeps_snapshot(
        self, registry: CollectorRegistry
    ) -> None:
        """A second collector on the same registry still records the snapshot."""
        UnifiedMetricsCollector(registry=registry).inc_counter(
            PAGES_FETCHED_TOTAL, labels={"operation": "op"}
        )
        second = UnifiedMetricsCollector(registry=registry)
        second.inc_counter(PAGES_FETCHED_TOTAL, labels={"operation": "op"})
        assert second.get_counter(PAGES_FETCHED_TOTAL, {"operation": "op"}) == 1

    def test_start_http_server(self, registry: CollectorRegistry) -> None:
        collector = UnifiedMetricsCollector(registry=registry)
        with patch(
            "watsonx_data.observability.collector._start_http_server"
        ) as start:
            assert collector.start_http_server(port=9999) is True
            assert collector.start_http_server(port=9999) is True

        start.assert_called_once_with(9999, addr="127.0.0.1", registry=registry)
        assert collector.server_running is True

    def test_start_http_server_failure(self, registry: CollectorRegistry) -> None:
        collector = UnifiedMetricsCollector(registry=registry)
        with patch(
            "watsonx_data.observability.collector._start_http_server",
            side_effect=OSError("address in use"),
        ):
            assert collector.start_http_server() is False
        assert collector.server_running is False

    def test_start_http_server_without_prometheus(self) -> None:
        collector = UnifiedMetricsCollector(enable_prometheus=False)
        assert collector.start_http_server() is False


# =============================================================================
# Singleton Tests
# =============================================================================


class TestSingleton:
    def test_same_instance(self) -> None:
        reset_metrics_collector()
        assert get_metrics_collector() is get_metrics_collector()

    def test_reset_creates_new_instance(self) -> None:
        first = get_metrics_collector(enable_prometheus=False)
        reset_metrics_collector()
        second = get_metrics_collector(enable_prometheus=False)
        assert first is not second

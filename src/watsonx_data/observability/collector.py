# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client metrics: an in-memory snapshot mirrored to Prometheus.

The executor records one outcome counter and one duration observation per
HTTP attempt, plus a retry counter; pagers count fetched pages. Each update
is applied to a thread-safe snapshot (exposed by get_metrics() for JSON
export and assertions) and, when enabled, to the prometheus_client metric of
the same name on the collector's registry.

Every metric caps its distinct label sets at MAX_LABEL_COMBINATIONS; further
combinations are dropped with a warning.

Usage:
    >>> from watsonx_data.observability.collector import get_metrics_collector
    >>> collector = get_metrics_collector()
    >>> collector.start_http_server(port=9090)
    >>> snapshot = collector.get_metrics()
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, ClassVar

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram
from prometheus_client import start_http_server as _start_http_server

from .constants import (
    LATENCY_BUCKETS,
    PAGES_FETCHED_TOTAL,
    REQUEST_DURATION_SECONDS,
    REQUEST_RETRIES_TOTAL,
    REQUESTS_TOTAL,
)

logger = logging.getLogger(__name__)

# Histogram snapshots keep at most this many recent observations per series.
_MAX_OBSERVATIONS = 10000
_TRIMMED_OBSERVATIONS = 5000


@dataclass
class MetricDefinition:
    """Schema of a metric: its type, description, labels and buckets."""

    name: str
    metric_type: str  # 'counter', 'histogram'
    description: str
    label_names: tuple[str, ...] = ()
    buckets: list[float] | None = None


METRIC_DEFINITIONS: dict[str, MetricDefinition] = {
    definition.name: definition
    for definition in (
        MetricDefinition(
            REQUESTS_TOTAL,
            "counter",
            "Total operation calls by outcome",
            ("operation", "method", "outcome"),
        ),
        MetricDefinition(
            REQUEST_RETRIES_TOTAL,
            "counter",
            "Total automatic retries",
            ("operation", "reason"),
        ),
        MetricDefinition(
            REQUEST_DURATION_SECONDS,
            "histogram",
            "Duration of individual HTTP attempts",
            ("operation",),
            buckets=LATENCY_BUCKETS,
        ),
        MetricDefinition(
            PAGES_FETCHED_TOTAL,
            "counter",
            "Total pages fetched by pagers",
            ("operation",),
        ),
    )
}


def _series_key(labels: dict[str, str] | None) -> str:
    """Stable snapshot key for a label set: ``k1=v1,k2=v2`` sorted by name."""
    if not labels:
        return ""
    return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))


def _summarize(observations: list[float]) -> dict[str, Any]:
    total = sum(observations)
    return {
        "count": len(observations),
        "sum": total,
        "avg": total / len(observations),
        "min": min(observations),
        "max": max(observations),
    }


class UnifiedMetricsCollector:
    """
    Records client metrics in memory and, optionally, in Prometheus.

    Prometheus metrics are created on first use. Names found in
    METRIC_DEFINITIONS get their declared labels and buckets; any other name
    is registered without labels.

    Args:
        enable_prometheus: Mirror updates to prometheus_client metrics
        registry: CollectorRegistry to register on (default: the global
            REGISTRY). Tests pass a fresh registry to avoid duplicate
            registration errors.
    """

    MAX_LABEL_COMBINATIONS: ClassVar[int] = 1000

    def __init__(
        self,
        enable_prometheus: bool = True,
        registry: CollectorRegistry | None = None,
    ) -> None:
        self._enable_prometheus = enable_prometheus
        self._registry = registry if registry is not None else REGISTRY
        self._lock = threading.RLock()

        self._counters: dict[str, dict[str, int]] = defaultdict(dict)
        self._observations: dict[str, dict[str, list[float]]] = defaultdict(dict)
        self._series: dict[str, set[str]] = defaultdict(set)

        # name -> prometheus metric, or None once registration has failed
        self._exported: dict[str, Counter | Histogram | None] = {}
        self._server_running = False

        logger.debug(
            f"Metrics collector created (prometheus="
            f"{'on' if enable_prometheus else 'off'})"
        )

    def _admit(self, name: str, key: str) -> bool:
        """Track a new label set for ``name`` unless the metric is full."""
        known = self._series[name]
        if key in known:
            return True
        if len(known) >= self.MAX_LABEL_COMBINATIONS:
            logger.warning(
                f"{name}: {self.MAX_LABEL_COMBINATIONS} label sets recorded, "
                f"dropping {key}"
            )
            return False
        known.add(key)
        return True

    def _exported_metric(self, name: str, kind: str) -> Counter | Histogram | None:
        if not self._enable_prometheus:
            return None

        with self._lock:
            if name in self._exported:
                return self._exported[name]

            defn = METRIC_DEFINITIONS.get(name)
            description = defn.description if defn else name
            label_names = list(defn.label_names) if defn else []
            buckets = defn.buckets if defn and defn.buckets else LATENCY_BUCKETS
            metric: Counter | Histogram | None
            try:
                if kind == "counter":
                    metric = Counter(
                        name, description, label_names, registry=self._registry
                    )
                else:
                    metric = Histogram(
                        name,
                        description,
                        label_names,
                        buckets=buckets,
                        registry=self._registry,
                    )
            except ValueError as e:
                logger.warning(f"Prometheus {kind} {name} not exported: {e}")
                metric = None
            self._exported[name] = metric
            return metric

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Add ``value`` to a counter.

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError("Counter increment must be non-negative")

        key = _series_key(labels)
        with self._lock:
            if not self._admit(name, key):
                return
            series = self._counters[name]
            series[key] = series.get(key, 0) + value

        counter = self._exported_metric(name, "counter")
        if counter is None:
            return
        try:
            (counter.labels(**labels) if labels else counter).inc(value)
        except ValueError as e:
            logger.debug(f"{name}: Prometheus update skipped: {e}")

    def observe_histogram(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None:
        key = _series_key(labels)
        with self._lock:
            if not self._admit(name, key):
                return
            observations = self._observations[name].setdefault(key, [])
            observations.append(value)
            if len(observations) > _MAX_OBSERVATIONS:
                del observations[:-_TRIMMED_OBSERVATIONS]

        histogram = self._exported_metric(name, "histogram")
        if histogram is None:
            return
        try:
            (histogram.labels(**labels) if labels else histogram).observe(value)
        except ValueError as e:
            logger.debug(f"{name}: Prometheus observation skipped: {e}")

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        with self._lock:
            return self._counters.get(name, {}).get(_series_key(labels), 0)

    def get_metrics(self) -> dict[str, Any]:
        """
        Snapshot of every recorded series.

        Returns:
            {
                "counters": {name: {series_key: value}},
                "histograms": {name: {series_key: {count, sum, avg, min, max}}}
            }
        """
        with self._lock:
            return {
                "counters": {
                    name: dict(series) for name, series in self._counters.items()
                },
                "histograms": {
                    name: {
                        key: _summarize(observations)
                        for key, observations in series.items()
                        if observations
                    }
                    for name, series in self._observations.items()
                },
            }

    def reset(self) -> None:
        """Clear the snapshot. Exported Prometheus metrics keep their values."""
        with self._lock:
            self._counters.clear()
            self._observations.clear()
            self._series.clear()

    def start_http_server(self, host: str = "127.0.0.1", port: int = 9090) -> bool:
        """
        Expose the registry for Prometheus scraping.

        Returns:
            True if the server is running after the call
        """
        if not self._enable_prometheus:
            logger.warning("Prometheus export is disabled; metrics server not started")
            return False
        if self._server_running:
            return True

        try:
            _start_http_server(port, addr=host, registry=self._registry)
        except OSError as e:
            logger.error(f"Metrics server failed to bind {host}:{port}: {e}")
            return False
        self._server_running = True
        logger.info(f"Metrics server listening on {host}:{port}")
        return True

    @property
    def prometheus_enabled(self) -> bool:
        return self._enable_prometheus

    @property
    def server_running(self) -> bool:
        return self._server_running


_global_collector: UnifiedMetricsCollector | None = None
_collector_lock = threading.Lock()


def get_metrics_collector(enable_prometheus: bool = True) -> UnifiedMetricsCollector:
    """
    Return the process-wide collector, creating it on first call.

    ``enable_prometheus`` only applies to that first call.
    """
    global _global_collector

    with _collector_lock:
        if _global_collector is None:
            _global_collector = UnifiedMetricsCollector(enable_prometheus)
        return _global_collector


def reset_metrics_collector() -> None:
    """Drop the process-wide collector (mainly for testing)."""
    global _global_collector
    with _collector_lock:
        if _global_collector is not None:
            _global_collector.reset()
        _global_collector = None


__all__ = [
    "METRIC_DEFINITIONS",
    "MetricDefinition",
    "UnifiedMetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]

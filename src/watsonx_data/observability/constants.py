# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

All metric names use the `watsonx_data_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Histogram metrics for time end with `_seconds`

Label Best Practices:
    To prevent label cardinality explosion, use only:
    - `operation` - Operation identifier (categorical: list_ingestion_jobs)
    - `method` - HTTP method
    - `outcome` - success, http_error, transport_error, auth_error
    - `reason` - Retry reason (status_503, transport)

    NEVER use resource identifiers (bucket ids, job ids) or URLs as labels.
"""

METRIC_PREFIX = "watsonx_data"
"""Prefix for all Prometheus metrics in this library."""

REQUESTS_TOTAL = f"{METRIC_PREFIX}_requests_total"
"""Total operation calls, by final outcome."""

REQUEST_RETRIES_TOTAL = f"{METRIC_PREFIX}_request_retries_total"
"""Total automatic retries issued by the executor."""

REQUEST_DURATION_SECONDS = f"{METRIC_PREFIX}_request_duration_seconds"
"""Duration of each individual HTTP attempt."""

PAGES_FETCHED_TOTAL = f"{METRIC_PREFIX}_pages_fetched_total"
"""Total pages fetched by pagers."""

LATENCY_BUCKETS = [0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0]
"""Histogram buckets for HTTP attempt latency, in seconds."""

OUTCOME_SUCCESS = "success"
OUTCOME_HTTP_ERROR = "http_error"
OUTCOME_TRANSPORT_ERROR = "transport_error"
OUTCOME_AUTH_ERROR = "auth_error"

__all__ = [
    "LATENCY_BUCKETS",
    "METRIC_PREFIX",
    "OUTCOME_AUTH_ERROR",
    "OUTCOME_HTTP_ERROR",
    "OUTCOME_SUCCESS",
    "OUTCOME_TRANSPORT_ERROR",
    "PAGES_FETCHED_TOTAL",
    "REQUEST_DURATION_SECONDS",
    "REQUEST_RETRIES_TOTAL",
    "REQUESTS_TOTAL",
]

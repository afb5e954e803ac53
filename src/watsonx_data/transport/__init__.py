# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Transport layer: HTTP transport, retry policy and the request executor.

- HttpxTransport: default TransportProtocol implementation on httpx
- RetryPolicy: immutable exponential-backoff retry configuration
- RequestExecutor: authenticates, sends and retries requests
"""

from .executor import RequestExecutor, build_http_error, decode_response
from .httpx_transport import HttpxTransport
from .retry import (
    DEFAULT_RETRY_METHODS,
    DEFAULT_RETRY_STATUSES,
    RetryPolicy,
    parse_retry_after,
)

__all__ = [
    "DEFAULT_RETRY_METHODS",
    "DEFAULT_RETRY_STATUSES",
    "HttpxTransport",
    "RequestExecutor",
    "RetryPolicy",
    "build_http_error",
    "decode_response",
    "parse_retry_after",
]

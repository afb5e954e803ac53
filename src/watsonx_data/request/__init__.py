# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Request construction: validation, path/query/body routing and headers."""

from .builder import (
    HEADERS_PARAM,
    SDK_ANALYTICS_HEADER,
    USER_AGENT,
    RequestBuilder,
    get_sdk_headers,
    merge_headers,
    validate_params,
)

__all__ = [
    "HEADERS_PARAM",
    "SDK_ANALYTICS_HEADER",
    "USER_AGENT",
    "RequestBuilder",
    "get_sdk_headers",
    "merge_headers",
    "validate_params",
]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Core data types for the watsonx.data client.

- OperationDescriptor / ParameterSpec: static operation declarations
- RequestDescriptor: a resolved, ready-to-send request
- RawResponse / DetailedResponse: transport result and caller-facing envelope
"""

from .operation import (
    JSON_MEDIA_TYPE,
    MERGE_PATCH_MEDIA_TYPE,
    ArrayStyle,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
)
from .request import FilePart, RequestDescriptor
from .response import DetailedResponse, RawResponse

__all__ = [
    "JSON_MEDIA_TYPE",
    "MERGE_PATCH_MEDIA_TYPE",
    "ArrayStyle",
    "DetailedResponse",
    "FilePart",
    "OperationDescriptor",
    "ParameterLocation",
    "ParameterSpec",
    "RawResponse",
    "RequestDescriptor",
]

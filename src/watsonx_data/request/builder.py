# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request construction for watsonx.data operations.

RequestBuilder turns an OperationDescriptor plus caller parameters into a
RequestDescriptor. It validates parameters, substitutes path placeholders,
serializes the query string, assembles the JSON or multipart body and resolves
headers. It performs no I/O.

Header resolution order (later wins, names compared case-insensitively):
    1. SDK analytics headers (User-Agent, X-IBMCloud-SDK-Analytics)
    2. Service-wide default headers from ServiceConfig
    3. Computed headers (Accept, Content-Type, operation header parameters)
    4. Caller-supplied ``headers``
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from .. import __version__
from ..exceptions import InvalidParameterError, MissingRequiredParameterError
from ..types.operation import (
    ArrayStyle,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
)
from ..types.request import FilePart, RequestDescriptor

logger = logging.getLogger(__name__)

HEADERS_PARAM = "headers"
DEFAULT_BINARY_CONTENT_TYPE = "application/octet-stream"
SDK_ANALYTICS_HEADER = "X-IBMCloud-SDK-Analytics"
USER_AGENT = f"watsonx-data-python-sdk/{__version__}"


def get_sdk_headers(
    service_name: str, service_version: str, operation_id: str
) -> dict[str, str]:
    """Analytics headers attached to every request."""
    return {
        "User-Agent": USER_AGENT,
        SDK_ANALYTICS_HEADER: (
            f"service_name={service_name};"
            f"service_version={service_version};"
            f"operation_id={operation_id}"
        ),
    }


def merge_headers(*layers: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Merge header layers left to right, later layers winning.

    Names are compared case-insensitively; the spelling of the winning layer is
    kept. None values are skipped, so an unset optional header never clobbers
    a lower layer.
    """
    merged: dict[str, str] = {}
    for layer in layers:
        if not layer:
            continue
        for name, value in layer.items():
            if value is None:
                continue
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = str(value)
    return merged


def validate_params(operation: OperationDescriptor, params: Mapping[str, Any]) -> None:
    """
    Check required and unexpected parameters.

    Raises:
        MissingRequiredParameterError: naming every required parameter that is
            absent or None
        InvalidParameterError: naming every parameter the operation does not
            declare
    """
    missing = [
        spec.name
        for spec in operation.required_parameters
        if params.get(spec.name) is None
    ]
    if missing:
        raise MissingRequiredParameterError(missing, operation.operation_id)

    invalid = set(params) - operation.parameter_names
    if invalid:
        raise InvalidParameterError(invalid, operation.operation_id)


def encode_path_segment(value: Any) -> str:
    """Percent-encode a single path segment, including '/'."""
    return quote(_to_string(value), safe="")


def serialize_query_value(spec: ParameterSpec, value: Any) -> str | list[str]:
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [_to_string(v) for v in value]
        if spec.array_style is ArrayStyle.MULTI:
            return items
        return ",".join(items)
    return _to_string(value)


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _to_json_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(value, Mapping):
        return {k: _to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    return value


def _is_binary(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) or hasattr(value, "read")


def _form_part(spec: ParameterSpec, value: Any, params: Mapping[str, Any]) -> FilePart:
    if _is_binary(value):
        content_type = None
        if spec.content_type_param:
            content_type = params.get(spec.content_type_param)
        filename = os.path.basename(str(getattr(value, "name", "") or "")) or spec.key
        return (filename, value, content_type or DEFAULT_BINARY_CONTENT_TYPE)
    if isinstance(value, (Mapping, list, BaseModel)):
        encoded = json.dumps(_to_json_value(value)).encode("utf-8")
        return (None, encoded, "application/json")
    return (None, _to_string(value).encode("utf-8"), None)


class RequestBuilder:
    """
    Builds RequestDescriptors for one service endpoint.

    The builder holds only immutable configuration and is safe to share
    between concurrent calls.

    Example:
        builder = RequestBuilder("https://example.com/lakehouse/api/v2")
        request = builder.build(GET_BUCKET_REGISTRATION, {"bucket_id": "abc"})
        request.url  # https://example.com/lakehouse/api/v2/bucket_registrations/abc
    """

    def __init__(
        self,
        service_url: str,
        default_headers: Mapping[str, str] | None = None,
        service_name: str = "watsonx_data",
        service_version: str = "V2",
    ) -> None:
        self.service_url = service_url.rstrip("/")
        self.default_headers = dict(default_headers or {})
        self.service_name = service_name
        self.service_version = service_version

    def build(
        self,
        operation: OperationDescriptor,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, Any] | None = None,
    ) -> RequestDescriptor:
        """
        Resolve one call into a RequestDescriptor.

        Args:
            operation: The operation being invoked
            params: Caller parameters keyed by caller-facing name. A
                ``headers`` entry is treated as caller header overrides.
            headers: Caller header overrides; merged over ``params['headers']``

        Raises:
            MissingRequiredParameterError: before anything else is built
            InvalidParameterError: for undeclared parameters
        """
        call_params = dict(params or {})
        caller_headers = merge_headers(call_params.pop(HEADERS_PARAM, None), headers)

        validate_params(operation, call_params)

        url = self.service_url + self._resolve_path(operation, call_params)
        query: dict[str, str | list[str]] = {}
        body: dict[str, Any] | None = None
        files: list[tuple[str, FilePart]] = []
        header_params: dict[str, Any] = {}

        for spec in operation.parameters:
            location = spec.location
            value = call_params.get(spec.name)
            if location is ParameterLocation.BODY:
                if body is None:
                    body = {}
                if value is not None:
                    body[spec.key] = _to_json_value(value)
            elif location is ParameterLocation.FORM_DATA:
                if value is not None:
                    files.append((spec.key, _form_part(spec, value, call_params)))
            elif value is None or location is ParameterLocation.PATH:
                continue
            elif location is ParameterLocation.QUERY:
                query[spec.key] = serialize_query_value(spec, value)
            elif location is ParameterLocation.HEADER:
                header_params[spec.key] = _to_string(value)

        computed: dict[str, Any] = {"Accept": operation.accept}
        if operation.is_multipart:
            # multipart boundary is chosen by the transport
            body = None
            body_kind = "multipart"
        elif body is not None:
            computed["Content-Type"] = operation.content_type
            body_kind = "json"
        else:
            body_kind = "none"
        computed.update(header_params)

        final_headers = merge_headers(
            get_sdk_headers(
                self.service_name, self.service_version, operation.operation_id
            ),
            self.default_headers,
            computed,
            caller_headers,
        )

        logger.debug(
            f"Built {operation.method} {url} for {operation.operation_id} "
            f"(query={sorted(query)}, body={body_kind})"
        )

        return RequestDescriptor(
            operation_id=operation.operation_id,
            method=operation.method,
            url=url,
            query=query,
            headers=final_headers,
            json=body,
            files=files if operation.is_multipart else None,
            retry_safe=operation.retry_safe,
        )

    def _resolve_path(
        self, operation: OperationDescriptor, params: Mapping[str, Any]
    ) -> str:
        resolved = operation.path
        for spec in operation.parameters:
            if spec.location is ParameterLocation.PATH:
                resolved = resolved.replace(
                    "{" + spec.key + "}", encode_path_segment(params[spec.name])
                )
        return resolved


__all__ = [
    "DEFAULT_BINARY_CONTENT_TYPE",
    "HEADERS_PARAM",
    "SDK_ANALYTICS_HEADER",
    "USER_AGENT",
    "RequestBuilder",
    "encode_path_segment",
    "get_sdk_headers",
    "merge_headers",
    "serialize_query_value",
    "validate_params",
]

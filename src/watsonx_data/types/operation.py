# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Operation descriptor types.

An OperationDescriptor is the static description of one REST call: its HTTP
method, path template, declared parameters and content negotiation. Descriptors
are defined once at import time and never mutated.
"""

from dataclasses import dataclass, field
from enum import Enum

JSON_MEDIA_TYPE = "application/json"
MERGE_PATCH_MEDIA_TYPE = "application/merge-patch+json"


class ParameterLocation(Enum):
    """Where a parameter travels on the wire.

    - PATH: substituted into a ``{placeholder}`` of the path template
    - QUERY: appended to the query string
    - BODY: a field of the JSON request body
    - HEADER: a request header
    - FORM_DATA: a part of a multipart/form-data body
    """

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    HEADER = "header"
    FORM_DATA = "formData"


class ArrayStyle(Enum):
    """Serialization style for array-valued query parameters."""

    CSV = "csv"  # state=a,b
    MULTI = "multi"  # state=a&state=b


@dataclass(frozen=True)
class ParameterSpec:
    """
    Declaration of a single operation parameter.

    Attributes:
        name: Caller-facing keyword name (e.g. ``bucket_display_name``)
        location: Where the value is placed in the request
        required: Whether the call fails without it
        wire_name: Name used on the wire; defaults to ``name``
        array_style: Serialization for list values in the query string
        content_type_param: For binary form parts, the caller parameter that
            carries the part's content type
    """

    name: str
    location: ParameterLocation
    required: bool = False
    wire_name: str | None = None
    array_style: ArrayStyle = ArrayStyle.CSV
    content_type_param: str | None = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name


def path(name: str, wire_name: str | None = None) -> ParameterSpec:
    """Declare a (always required) path parameter."""
    return ParameterSpec(name, ParameterLocation.PATH, True, wire_name)


def query(
    name: str,
    required: bool = False,
    wire_name: str | None = None,
    array_style: ArrayStyle = ArrayStyle.CSV,
) -> ParameterSpec:
    return ParameterSpec(
        name, ParameterLocation.QUERY, required, wire_name, array_style=array_style
    )


def body(
    name: str, required: bool = False, wire_name: str | None = None
) -> ParameterSpec:
    return ParameterSpec(name, ParameterLocation.BODY, required, wire_name)


def header(name: str, wire_name: str, required: bool = False) -> ParameterSpec:
    return ParameterSpec(name, ParameterLocation.HEADER, required, wire_name)


def form(
    name: str,
    required: bool = False,
    wire_name: str | None = None,
    content_type_param: str | None = None,
) -> ParameterSpec:
    return ParameterSpec(
        name,
        ParameterLocation.FORM_DATA,
        required,
        wire_name,
        content_type_param=content_type_param,
    )


def auth_instance_id(required: bool = False) -> ParameterSpec:
    """The tenant correlation header threaded through every call."""
    return header("auth_instance_id", "AuthInstanceId", required)


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Immutable description of one REST operation.

    Attributes:
        operation_id: Stable identifier (e.g. ``get_bucket_registration``),
            reported in analytics headers, logs and metrics
        method: HTTP method (GET, POST, PATCH, DELETE)
        path: Path template relative to the service URL, with ``{wire_name}``
            placeholders for path parameters
        parameters: Declared parameters in declaration order
        accept: Accept header value, or None to send none
        content_type: Content type of a JSON body; PATCH operations use
            merge-patch. Ignored for multipart bodies.
        retry_safe: Allow automatic retries even when the method is not
            idempotent
    """

    operation_id: str
    method: str
    path: str
    parameters: tuple[ParameterSpec, ...] = field(default_factory=tuple)
    accept: str | None = JSON_MEDIA_TYPE
    content_type: str | None = None
    retry_safe: bool = False

    def __post_init__(self) -> None:
        method = self.method.upper()
        object.__setattr__(self, "method", method)
        if self.content_type is None:
            default = MERGE_PATCH_MEDIA_TYPE if method == "PATCH" else JSON_MEDIA_TYPE
            object.__setattr__(self, "content_type", default)
        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in {self.operation_id}")
        for spec in self.parameters:
            if spec.location is ParameterLocation.PATH:
                placeholder = "{" + spec.key + "}"
                if placeholder not in self.path:
                    raise ValueError(
                        f"Path parameter {spec.name} has no placeholder in {self.path}"
                    )

    @property
    def parameter_names(self) -> frozenset[str]:
        """Names a caller may pass, including binary part content types."""
        names = {p.name for p in self.parameters}
        names.update(
            p.content_type_param for p in self.parameters if p.content_type_param
        )
        return frozenset(names)

    @property
    def required_parameters(self) -> tuple[ParameterSpec, ...]:
        return tuple(p for p in self.parameters if p.required)

    @property
    def is_multipart(self) -> bool:
        return any(p.location is ParameterLocation.FORM_DATA for p in self.parameters)


__all__ = [
    "JSON_MEDIA_TYPE",
    "MERGE_PATCH_MEDIA_TYPE",
    "ArrayStyle",
    "OperationDescriptor",
    "ParameterLocation",
    "ParameterSpec",
    "auth_instance_id",
    "body",
    "form",
    "header",
    "path",
    "query",
]

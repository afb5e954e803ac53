# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request descriptor type.

A RequestDescriptor is the fully resolved form of one call: everything the
transport needs to put bytes on the wire. It is created fresh for every call
and discarded once the call completes.
"""

from dataclasses import dataclass, field
from typing import Any

# (filename, content, content_type); a None filename marks a plain form field
FilePart = tuple[str | None, Any, str | None]


@dataclass
class RequestDescriptor:
    """
    Resolved HTTP request for a single operation invocation.

    Attributes:
        operation_id: Identifier of the operation this request was built for
        method: Upper-case HTTP method
        url: Absolute URL with path parameters substituted
        query: Query parameters; list values are sent as repeated keys
        headers: Final header map (caller overrides already applied)
        json: JSON body, or None when the operation sends no JSON
        files: Multipart parts as (field name, FilePart) pairs, or None
        retry_safe: Whether the operation was declared safe to retry
            regardless of method
    """

    operation_id: str
    method: str
    url: str
    query: dict[str, str | list[str]] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    json: dict[str, Any] | None = None
    files: list[tuple[str, FilePart]] | None = None
    retry_safe: bool = False

    def get_header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


__all__ = ["FilePart", "RequestDescriptor"]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for HTTP transports."""

from typing import Protocol, runtime_checkable

from ..types.request import RequestDescriptor
from ..types.response import RawResponse


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Minimal protocol for sending one HTTP request.

    A transport only moves bytes: it does not authenticate, retry or interpret
    status codes. Non-2xx responses are returned normally; only failures where
    no response exists (DNS, connection reset, timeout) raise, and they raise
    watsonx_data.exceptions.TransportError.
    """

    async def send(self, request: RequestDescriptor) -> RawResponse:
        """Send the request and return the undecoded response."""
        ...

    async def aclose(self) -> None:
        """Release pooled connections."""
        ...

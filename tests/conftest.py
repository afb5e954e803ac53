# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures: fake collaborators implementing the client protocols.

Tests substitute these fakes for the transport and authenticator instead of
patching the client.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest
from prometheus_client import CollectorRegistry

from watsonx_data.observability.collector import (
    UnifiedMetricsCollector,
    reset_metrics_collector,
)
from watsonx_data.types.request import RequestDescriptor
from watsonx_data.types.response import RawResponse


def make_json_response(
    status: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> RawResponse:
    response_headers = {"Content-Type": "application/json"}
    response_headers.update(headers or {})
    content = json.dumps(body).encode("utf-8") if body is not None else b""
    return RawResponse(status_code=status, headers=response_headers, content=content)


class RecordingTransport:
    """TransportProtocol fake that records requests and replays a script.

    Each scripted item is either a RawResponse to return or an exception to
    raise. Once the script runs out, an empty 200 JSON object is returned.
    """

    def __init__(self, script: list[RawResponse | BaseException] | None = None):
        self.script = list(script or [])
        self.requests: list[RequestDescriptor] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> RequestDescriptor:
        return self.requests[-1]

    async def send(self, request: RequestDescriptor) -> RawResponse:
        self.requests.append(request)
        if not self.script:
            return make_json_response(200, {})
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    async def aclose(self) -> None:
        self.closed = True


class StaticAuthenticator:
    """AuthenticatorProtocol fake adding a fixed bearer token."""

    authentication_type = "bearerToken"

    def __init__(self, token: str = "test-token"):
        self.token = token
        self.calls = 0

    async def authenticate(self, headers: dict[str, str]) -> None:
        self.calls += 1
        headers["Authorization"] = f"Bearer {self.token}"


@pytest.fixture
def json_response() -> Callable[..., RawResponse]:
    return make_json_response


@pytest.fixture
def transport_factory() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def authenticator() -> StaticAuthenticator:
    return StaticAuthenticator()


@pytest.fixture
def no_sleep() -> AsyncMock:
    """Replacement for asyncio.sleep that records delays without waiting."""
    return AsyncMock(return_value=None)


@pytest.fixture
def metrics() -> UnifiedMetricsCollector:
    """Collector on a private registry so Prometheus names never collide."""
    return UnifiedMetricsCollector(registry=CollectorRegistry())


@pytest.fixture(autouse=True)
def _reset_global_collector():
    yield
    reset_metrics_collector()

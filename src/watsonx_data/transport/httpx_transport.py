# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Default transport built on httpx.AsyncClient."""

from __future__ import annotations

import logging

import httpx

from ..exceptions import ApiError, TransportError
from ..types.request import RequestDescriptor
from ..types.response import RawResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """
    TransportProtocol implementation using a pooled httpx.AsyncClient.

    The transport only moves bytes. Status codes are returned as-is; only
    httpx.TransportError (connect, read, write, pool, timeout, protocol
    failures) is converted to the retryable watsonx_data.exceptions.TransportError.
    Any other httpx.RequestError (undecodable content, redirect loops) becomes a
    plain, non-retryable ApiError.

    Args:
        client: Pre-configured client to use. When omitted the transport
            creates and owns one, and aclose() closes it.
        timeout: Request timeout in seconds for an owned client
        verify: TLS verification for an owned client
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 60.0,
        verify: bool = True,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, verify=verify)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def send(self, request: RequestDescriptor) -> RawResponse:
        try:
            response = await self._client.request(
                request.method,
                request.url,
                params=request.query or None,
                headers=request.headers,
                json=request.json,
                files=request.files or None,
            )
        except httpx.TransportError as e:
            logger.debug(f"{request.method} {request.url} failed: {type(e).__name__}")
            raise TransportError(f"{type(e).__name__}: {e}") from e
        except httpx.RequestError as e:
            logger.debug(f"{request.method} {request.url} failed: {type(e).__name__}")
            raise ApiError(f"{type(e).__name__}: {e}") from e

        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            content=response.content,
            reason_phrase=response.reason_phrase,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpxTransport"]

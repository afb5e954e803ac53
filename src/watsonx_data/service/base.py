# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
BaseService: wiring shared by every versioned watsonx.data client.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from typing_extensions import Self

from ..observability.collector import UnifiedMetricsCollector, get_metrics_collector
from ..protocols.authenticator import AuthenticatorProtocol
from ..protocols.transport import TransportProtocol
from ..request.builder import RequestBuilder
from ..transport.executor import RequestExecutor, SleepFunc
from ..transport.httpx_transport import HttpxTransport
from ..transport.retry import RetryPolicy
from ..types.operation import OperationDescriptor
from ..types.response import DetailedResponse
from .config import ServiceConfig

logger = logging.getLogger(__name__)


class BaseService:
    """
    Builds, authenticates and sends operations for one service endpoint.

    A service is safe to share between concurrent tasks: it holds only
    immutable configuration and collaborators, and every call builds its own
    request and retry state.

    Args:
        authenticator: Attaches credentials to every attempt
        config: Endpoint, headers, timeouts and the default retry policy
        transport: HTTP transport; when omitted an HttpxTransport is created
            from the config and closed by aclose()
        metrics: Collector to record on. When omitted, the global collector
            is used if ``config.metrics_enabled`` is set.
        sleep: Awaitable sleep between retries (injectable for tests)
    """

    service_version: ClassVar[str] = "V1"

    def __init__(
        self,
        authenticator: AuthenticatorProtocol,
        config: ServiceConfig | None = None,
        transport: TransportProtocol | None = None,
        metrics: UnifiedMetricsCollector | None = None,
        sleep: SleepFunc | None = None,
    ) -> None:
        self.config = config or ServiceConfig()
        self.authenticator = authenticator

        self._owns_transport = transport is None
        self.transport: TransportProtocol = transport or HttpxTransport(
            timeout=self.config.timeout, verify=self.config.verify_ssl
        )

        if metrics is None and self.config.metrics_enabled:
            metrics = get_metrics_collector()
        self.metrics = metrics

        self.builder = RequestBuilder(
            self.config.service_url,
            default_headers=self.config.default_headers,
            service_name=self.config.service_name,
            service_version=self.service_version,
        )
        executor_kwargs: dict[str, Any] = {}
        if sleep is not None:
            executor_kwargs["sleep"] = sleep
        self.executor = RequestExecutor(
            self.transport,
            authenticator,
            retry_policy=self.config.retry_policy,
            metrics=self.metrics,
            **executor_kwargs,
        )

        logger.info(
            f"{self.__class__.__name__} initialized for {self.config.service_url} "
            f"(auth={authenticator.authentication_type}, "
            f"retries={'enabled' if self.config.retry_policy.enabled else 'disabled'})"
        )

    @property
    def service_url(self) -> str:
        return self.builder.service_url

    async def invoke(
        self,
        operation: OperationDescriptor,
        params: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> DetailedResponse:
        """
        Run one operation.

        Args:
            operation: The operation to run
            params: Caller parameters; may carry a ``headers`` override map
            headers: Additional caller headers, applied over ``params['headers']``
            retry_policy: Per-call override of the configured policy

        Raises:
            ParameterValidationError: before any I/O for invalid parameters
            AuthenticationError: when credentials cannot be attached
            ApiError: TransportError or HttpStatusError from the exchange
        """
        request = self.builder.build(operation, params, headers)
        return await self.executor.send(request, retry_policy)

    async def aclose(self) -> None:
        """Close the transport if this service created it."""
        if self._owns_transport:
            await self.transport.aclose()
            logger.debug(f"{self.__class__.__name__} transport closed")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()


__all__ = ["BaseService"]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request executor: authentication, retries and response decoding.

RequestExecutor.send() is the single path every operation takes to the wire:

1. Ask the authenticator to attach credentials to a copy of the headers.
   Any failure is AuthenticationError and the request is not sent.
2. Hand the request to the transport.
3. Decode a 2xx response into a DetailedResponse, or turn a non-2xx
   response into HttpStatusError.
4. On a retryable failure, sleep per the RetryPolicy and go back to 1.

Retry state is local to one send() call; the executor itself holds only
immutable collaborators and is safe to share between concurrent calls.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import replace
from typing import Any

from ..exceptions import (
    ApiError,
    AuthenticationError,
    HttpStatusError,
)
from ..observability.collector import UnifiedMetricsCollector
from ..observability.constants import (
    OUTCOME_AUTH_ERROR,
    OUTCOME_HTTP_ERROR,
    OUTCOME_SUCCESS,
    OUTCOME_TRANSPORT_ERROR,
    REQUEST_DURATION_SECONDS,
    REQUEST_RETRIES_TOTAL,
    REQUESTS_TOTAL,
)
from ..protocols.authenticator import AuthenticatorProtocol
from ..protocols.transport import TransportProtocol
from ..types.request import RequestDescriptor
from ..types.response import DetailedResponse, RawResponse
from .retry import RetryPolicy, parse_retry_after

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[Any]]


def _is_json_media_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _decode_json(raw: RawResponse) -> Any:
    return json.loads(raw.content.decode("utf-8"))


def _extract_error_message(body: Any) -> str | None:
    """Find the human-readable message in a watsonx.data / IBM Cloud error body."""
    if not isinstance(body, dict):
        return None

    errors = body.get("errors")
    if isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, dict) and first.get("message"):
            return str(first["message"])

    error = body.get("error")
    if isinstance(error, str) and error:
        return error
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])

    for key in ("message", "errorMessage"):
        if body.get(key):
            return str(body[key])
    return None


def build_http_error(raw: RawResponse) -> HttpStatusError:
    """Turn a non-2xx response into a structured HttpStatusError."""
    body: Any = None
    if raw.content:
        try:
            body = _decode_json(raw)
        except (UnicodeDecodeError, json.JSONDecodeError):
            body = raw.content.decode("utf-8", errors="replace")

    message = _extract_error_message(body)
    if message is None:
        message = raw.reason_phrase or f"HTTP {raw.status_code}"

    trace = None
    if isinstance(body, dict) and body.get("trace"):
        trace = str(body["trace"])

    return HttpStatusError(
        message,
        status_code=raw.status_code,
        body=body,
        headers=raw.headers,
        trace=trace,
    )


def decode_response(raw: RawResponse, accept: str | None) -> DetailedResponse:
    """
    Decode a successful response according to its content type.

    JSON is parsed when the response declares a JSON media type, or declares
    none and the request asked for JSON. text/* bodies are returned as str,
    anything else as bytes. An empty body yields result None.

    Raises:
        ApiError: when a JSON body cannot be parsed
    """
    result: Any = None
    if raw.content:
        content_type = raw.get_header("Content-Type")
        if _is_json_media_type(content_type) or (
            content_type is None and _is_json_media_type(accept)
        ):
            try:
                result = _decode_json(raw)
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                raise ApiError(
                    f"Error processing the HTTP response: {e}",
                    status_code=raw.status_code,
                    body=raw.content,
                    headers=raw.headers,
                ) from e
        elif content_type and content_type.lower().startswith("text/"):
            result = raw.content.decode("utf-8", errors="replace")
        else:
            result = raw.content

    return DetailedResponse(
        status=raw.status_code, headers=dict(raw.headers), result=result
    )


class RequestExecutor:
    """
    Sends RequestDescriptors with authentication and an optional retry policy.

    Args:
        transport: Collaborator that performs the HTTP exchange
        authenticator: Collaborator that attaches credentials
        retry_policy: Default policy for calls that do not pass one
        metrics: Collector to record request metrics on, or None
        sleep: Awaitable sleep used between retries (injectable for tests)
    """

    def __init__(
        self,
        transport: TransportProtocol,
        authenticator: AuthenticatorProtocol,
        retry_policy: RetryPolicy | None = None,
        metrics: UnifiedMetricsCollector | None = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self.transport = transport
        self.authenticator = authenticator
        self.retry_policy = retry_policy or RetryPolicy.disabled()
        self.metrics = metrics
        self._sleep = sleep

    async def send(
        self,
        request: RequestDescriptor,
        retry_policy: RetryPolicy | None = None,
    ) -> DetailedResponse:
        """
        Send a request, retrying per policy.

        Args:
            request: The resolved request
            retry_policy: Per-call override of the executor's default policy

        Returns:
            DetailedResponse for a 2xx answer

        Raises:
            AuthenticationError: the authenticator failed (never retried)
            TransportError: no response was received and retries, if any,
                were exhausted
            ApiError: the transport failed in a way that is never retried
            HttpStatusError: a non-2xx response that is not retryable, or
                the last one once retries were exhausted
        """
        policy = retry_policy or self.retry_policy
        accept = request.get_header("Accept")
        attempt = 0

        while True:
            attempt_request = await self._authenticate(request)

            started = time.monotonic()
            try:
                raw = await self.transport.send(attempt_request)
            except ApiError as e:
                error: ApiError = e
                outcome = OUTCOME_TRANSPORT_ERROR
            else:
                if 200 <= raw.status_code < 300:
                    self._observe_duration(request, time.monotonic() - started)
                    response = decode_response(raw, accept)
                    self._record_outcome(request, OUTCOME_SUCCESS)
                    return response
                error = build_http_error(raw)
                outcome = OUTCOME_HTTP_ERROR
            self._observe_duration(request, time.monotonic() - started)

            if not policy.should_retry(
                error, request.method, attempt, retry_safe=request.retry_safe
            ):
                self._record_outcome(request, outcome)
                raise error

            retry_after = parse_retry_after(error) if error.status_code else None
            delay = policy.compute_delay(attempt, retry_after)
            reason = (
                "transport"
                if error.status_code is None
                else f"status_{error.status_code}"
            )
            logger.warning(
                f"{request.operation_id}: attempt {attempt + 1} failed ({reason}: "
                f"{error.message}); retrying in {delay:.2f}s"
            )
            if self.metrics is not None:
                self.metrics.inc_counter(
                    REQUEST_RETRIES_TOTAL,
                    labels={"operation": request.operation_id, "reason": reason},
                )
            await self._sleep(delay)
            attempt += 1

    async def _authenticate(self, request: RequestDescriptor) -> RequestDescriptor:
        headers = dict(request.headers)
        try:
            await self.authenticator.authenticate(headers)
        except AuthenticationError:
            self._record_outcome(request, OUTCOME_AUTH_ERROR)
            raise
        except Exception as e:
            self._record_outcome(request, OUTCOME_AUTH_ERROR)
            raise AuthenticationError(
                f"Failed to authenticate {request.operation_id}: {e}"
            ) from e
        return replace(request, headers=headers)

    def _record_outcome(self, request: RequestDescriptor, outcome: str) -> None:
        if self.metrics is None:
            return
        self.metrics.inc_counter(
            REQUESTS_TOTAL,
            labels={
                "operation": request.operation_id,
                "method": request.method,
                "outcome": outcome,
            },
        )

    def _observe_duration(self, request: RequestDescriptor, seconds: float) -> None:
        if self.metrics is None:
            return
        self.metrics.observe_histogram(
            REQUEST_DURATION_SECONDS,
            seconds,
            labels={"operation": request.operation_id},
        )


__all__ = [
    "RequestExecutor",
    "SleepFunc",
    "build_http_error",
    "decode_response",
]

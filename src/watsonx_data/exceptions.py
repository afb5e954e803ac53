# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the watsonx.data client library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from WatsonxDataError, making it easy to catch
every client-originated error with a single except clause.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

# Statuses that mark an HttpStatusError as retryable.
RETRYABLE_STATUSES = frozenset({429, 500, 502, 503, 504})


class WatsonxDataError(Exception):
    """Base exception for all watsonx.data client errors.

    Example:
        try:
            await service.list_bucket_registrations()
        except WatsonxDataError as e:
            logger.error(f"watsonx.data call failed: {e}")
    """

    pass


class ConfigurationError(WatsonxDataError):
    """Raised when service or retry configuration is invalid.

    Common causes include:
    - A service URL that is not an absolute http(s) URL
    - Negative retry counts or delays
    - A non-positive request timeout
    """

    pass


class ParameterValidationError(WatsonxDataError, ValueError):
    """Base class for errors detected while building a request.

    These are raised before any network I/O and are never retried.

    Attributes:
        operation_id: The operation whose parameters failed validation.
    """

    def __init__(self, message: str, operation_id: str | None = None):
        super().__init__(message)
        self.operation_id = operation_id


class MissingRequiredParameterError(ParameterValidationError):
    """Raised when one or more required parameters are absent or None.

    All missing parameters are collected, so a single error names every
    parameter the caller must supply.

    Attributes:
        missing: Names of the missing parameters, in declaration order.

    Example:
        try:
            await service.get_bucket_registration()
        except MissingRequiredParameterError as e:
            print(e.missing)  # ('bucket_id',)
    """

    def __init__(self, missing: Iterable[str], operation_id: str | None = None):
        self.missing = tuple(missing)
        names = ", ".join(self.missing)
        super().__init__(f"Missing required parameters: {names}", operation_id)


class InvalidParameterError(ParameterValidationError):
    """Raised when a caller supplies parameters the operation does not declare.

    Attributes:
        invalid: Names of the unexpected parameters, sorted.
    """

    def __init__(self, invalid: Iterable[str], operation_id: str | None = None):
        self.invalid = tuple(sorted(invalid))
        names = ", ".join(self.invalid)
        super().__init__(f"Found invalid parameters: {names}", operation_id)


class AuthenticationError(WatsonxDataError):
    """Raised when the authenticator cannot produce credentials.

    This is fatal for the call and is never retried.
    """

    pass


class ApiError(WatsonxDataError):
    """Base class for failures while talking to the service.

    Attributes:
        status_code: HTTP status of the response, or None when no response
            was received.
        message: Human-readable message, taken from the error body when present.
        body: Parsed JSON error body, or the raw text when it is not JSON.
        headers: Response headers (empty when no response was received).
        trace: Server-side trace identifier, if the error body carried one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        trace: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.headers = dict(headers or {})
        self.trace = trace

    @property
    def retryable(self) -> bool:
        """Whether a retry policy may re-issue the request."""
        return False


class TransportError(ApiError):
    """Raised on network-level failures with no HTTP response.

    DNS failures, refused or reset connections and timeouts all land here.
    Always retryable under an enabled retry policy.
    """

    def __init__(self, message: str):
        super().__init__(message, status_code=None)

    @property
    def retryable(self) -> bool:
        return True


class HttpStatusError(ApiError):
    """Raised when the service answers with a non-2xx status.

    Retryable only for the statuses in RETRYABLE_STATUSES (429 and the
    transient 5xx codes); other statuses, 501 included, are fatal.

    Example:
        try:
            await service.get_bucket_registration(bucket_id="missing")
        except HttpStatusError as e:
            if e.status_code == 404:
                ...
    """

    @property
    def retryable(self) -> bool:
        return self.status_code in RETRYABLE_STATUSES


class PaginationStateError(WatsonxDataError):
    """Raised when get_next() is called on an exhausted pager."""

    pass


__all__ = [
    "RETRYABLE_STATUSES",
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "HttpStatusError",
    "InvalidParameterError",
    "MissingRequiredParameterError",
    "PaginationStateError",
    "ParameterValidationError",
    "TransportError",
    "WatsonxDataError",
]

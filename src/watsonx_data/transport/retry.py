# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Retry policy for the request executor.

RetryPolicy is an immutable value: it is injected into the service at
construction and may be overridden per call, but it is never toggled in place.
All retry bookkeeping (attempt counter, last error) lives inside a single
RequestExecutor.send() call.

Backoff curve:
    delay(attempt) = min(base_delay * backoff_base ** attempt, max_delay)
    delay += uniform(0, jitter_ratio * delay)

A ``Retry-After`` header on a 429/503 response replaces the computed delay
(capped at max_delay) when respect_retry_after is set.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from email.utils import parsedate_to_datetime

from ..exceptions import (
    RETRYABLE_STATUSES,
    ApiError,
    ConfigurationError,
    HttpStatusError,
)

logger = logging.getLogger(__name__)

DEFAULT_RETRY_STATUSES = RETRYABLE_STATUSES
DEFAULT_RETRY_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


@dataclass(frozen=True)
class RetryPolicy:
    """
    Automatic retry configuration.

    Only idempotent methods (retry_methods) are retried, unless the operation
    is declared retry_safe. Only errors whose ``retryable`` property is true
    are re-issued, and an HttpStatusError must also carry a status in
    retry_statuses; everything else propagates on the first failure.
    """

    max_retries: int = 4
    """Retries after the first attempt (0 disables retrying)."""

    base_delay: float = 1.0
    """Delay before the first retry, in seconds."""

    backoff_base: float = 2.0
    """Multiplier applied per attempt."""

    max_delay: float = 30.0
    """Upper bound of the computed delay, in seconds."""

    jitter_ratio: float = 0.25
    """Upper bound of the additive jitter as a fraction of the delay."""

    retry_statuses: frozenset[int] = field(default=DEFAULT_RETRY_STATUSES)
    """HTTP statuses that trigger a retry, among the retryable ones."""

    retry_methods: frozenset[str] = field(default=DEFAULT_RETRY_METHODS)
    """Methods retried without an explicit retry_safe declaration."""

    respect_retry_after: bool = True
    """Honor a Retry-After response header."""

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must be non-negative")
        if self.base_delay < 0:
            raise ConfigurationError("base_delay must be non-negative")
        if self.backoff_base < 1.0:
            raise ConfigurationError("backoff_base must be at least 1.0")
        if self.max_delay < self.base_delay:
            raise ConfigurationError("max_delay must be >= base_delay")
        if not 0 <= self.jitter_ratio <= 1.0:
            raise ConfigurationError("jitter_ratio must be between 0 and 1.0")
        object.__setattr__(
            self, "retry_methods", frozenset(m.upper() for m in self.retry_methods)
        )
        object.__setattr__(self, "retry_statuses", frozenset(self.retry_statuses))

    @classmethod
    def disabled(cls) -> RetryPolicy:
        return cls(max_retries=0)

    @property
    def enabled(self) -> bool:
        return self.max_retries > 0

    def allows_method(self, method: str, retry_safe: bool = False) -> bool:
        return retry_safe or method.upper() in self.retry_methods

    def should_retry(
        self,
        error: BaseException,
        method: str,
        attempt: int,
        retry_safe: bool = False,
    ) -> bool:
        """
        Decide whether a failed attempt is re-issued.

        Args:
            error: The failure of the attempt
            method: HTTP method of the request
            attempt: Zero-based index of the attempt that failed
            retry_safe: Operation-level override for non-idempotent methods
        """
        if attempt >= self.max_retries:
            return False
        if not self.allows_method(method, retry_safe):
            return False
        if not isinstance(error, ApiError) or not error.retryable:
            return False
        if isinstance(error, HttpStatusError):
            return error.status_code in self.retry_statuses
        return True

    def compute_delay(
        self,
        attempt: int,
        retry_after: float | None = None,
        rng: Callable[[], float] = random.random,
    ) -> float:
        """
        Calculate the wait before retry number ``attempt + 1``.

        Args:
            attempt: Zero-based index of the attempt that failed
            retry_after: Server-suggested delay in seconds, if any
            rng: Source of uniform [0, 1) values for jitter
        """
        if retry_after is not None and self.respect_retry_after:
            return min(max(retry_after, 0.0), self.max_delay)

        delay = min(self.base_delay * (self.backoff_base**attempt), self.max_delay)
        jitter = delay * self.jitter_ratio * rng()  # noqa: S311  # nosec B311
        delay += jitter
        logger.debug(f"Calculated backoff for attempt {attempt}: {delay:.2f}s")
        return delay


def parse_retry_after(error: ApiError) -> float | None:
    """
    Read a Retry-After header as seconds.

    Accepts both delta-seconds and HTTP-date forms. Malformed values are
    ignored with a warning.
    """
    value = None
    for name, header_value in error.headers.items():
        if name.lower() == "retry-after":
            value = header_value
            break
    if not value:
        return None

    value = value.strip()
    try:
        return max(0.0, float(value))
    except ValueError:
        pass

    try:
        retry_at = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid Retry-After header: {value}")
        return None
    return max(0.0, retry_at.timestamp() - time.time())


__all__ = [
    "DEFAULT_RETRY_METHODS",
    "DEFAULT_RETRY_STATUSES",
    "RetryPolicy",
    "parse_retry_after",
]

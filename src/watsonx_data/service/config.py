# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Service configuration for the watsonx.data client.

ServiceConfig is read-only for the lifetime of a client: every call reads the
same base URL, default headers and retry policy, and nothing mutates them.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import urlparse

from ..exceptions import ConfigurationError
from ..transport.retry import RetryPolicy

DEFAULT_SERVICE_URL = "https://region.lakehouse.cloud.ibm.com/lakehouse/api/v2"
DEFAULT_SERVICE_NAME = "watsonx_data"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class ServiceConfig:
    """
    Configuration for a WatsonxDataV2 client.

    Retries are opt-in: the default policy never retries.
    """

    service_url: str = DEFAULT_SERVICE_URL
    """Base URL every operation path is appended to."""

    service_name: str = DEFAULT_SERVICE_NAME
    """Name reported in analytics headers and used as environment prefix."""

    default_headers: Mapping[str, str] = field(default_factory=dict)
    """Headers sent with every request, below computed and caller headers."""

    timeout: float = 60.0
    """Per-request timeout in seconds for the default transport."""

    verify_ssl: bool = True
    """TLS certificate verification for the default transport."""

    retry_policy: RetryPolicy = field(default_factory=RetryPolicy.disabled)
    """Default retry policy; operations may override it per call."""

    metrics_enabled: bool = False
    """Record request metrics on the global collector."""

    def __post_init__(self) -> None:
        parsed = urlparse(self.service_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(
                f"service_url must be an absolute http(s) URL, got {self.service_url!r}"
            )
        object.__setattr__(self, "service_url", self.service_url.rstrip("/"))
        object.__setattr__(self, "default_headers", dict(self.default_headers))
        if not self.service_name:
            raise ConfigurationError("service_name must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def from_environment(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        env: Mapping[str, str] | None = None,
    ) -> ServiceConfig:
        """
        Build a config from ``<SERVICE_NAME>_*`` variables.

        Recognized variables (prefix is the upper-cased service name):
            _URL: service URL
            _DISABLE_SSL: "true" disables certificate verification
            _ENABLE_RETRIES: "true" enables the default retry policy
            _MAX_RETRIES: retries after the first attempt
            _RETRY_INTERVAL: maximum delay between retries in seconds

        Raises:
            ConfigurationError: if a numeric variable cannot be parsed
        """
        env = os.environ if env is None else env
        prefix = service_name.upper().replace("-", "_")

        def get(suffix: str) -> str | None:
            value = env.get(f"{prefix}_{suffix}")
            return value.strip() if value is not None else None

        kwargs: dict = {"service_name": service_name}
        url = get("URL")
        if url:
            kwargs["service_url"] = url
        disable_ssl = get("DISABLE_SSL")
        if disable_ssl is not None:
            kwargs["verify_ssl"] = disable_ssl.lower() not in _TRUE_VALUES

        enable_retries = get("ENABLE_RETRIES")
        if enable_retries is not None and enable_retries.lower() in _TRUE_VALUES:
            policy_kwargs: dict = {}
            max_retries = get("MAX_RETRIES")
            if max_retries:
                policy_kwargs["max_retries"] = _parse_number(
                    f"{prefix}_MAX_RETRIES", max_retries, int
                )
            interval = get("RETRY_INTERVAL")
            if interval:
                max_delay = _parse_number(f"{prefix}_RETRY_INTERVAL", interval, float)
                policy_kwargs["max_delay"] = max_delay
                policy_kwargs["base_delay"] = min(RetryPolicy.base_delay, max_delay)
            kwargs["retry_policy"] = RetryPolicy(**policy_kwargs)

        return cls(**kwargs)


def _parse_number(name: str, value: str, kind: type) -> int | float:
    try:
        return kind(value)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from e


__all__ = [
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_SERVICE_URL",
    "ServiceConfig",
]

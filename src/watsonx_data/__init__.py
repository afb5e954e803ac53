# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""watsonx.data SDK - async Python client for the watsonx.data REST API.

The client is layered so every piece can be replaced or tested on its own:

    - RequestBuilder: validates parameters and resolves an OperationDescriptor
      into a RequestDescriptor (URL, query, headers, JSON or multipart body)
    - RequestExecutor: authenticates, sends and retries per RetryPolicy
    - DetailedResponse: the {status, headers, result} envelope
    - Pager: walks token-continued list operations

Quick Start:
    >>> from watsonx_data import BearerTokenAuthenticator, WatsonxDataV2
    >>>
    >>> async with WatsonxDataV2(BearerTokenAuthenticator(token)) as service:
    ...     response = await service.list_bucket_registrations()
    ...     pager = service.ingestion_jobs_pager(auth_instance_id=crn)
    ...     jobs = await pager.get_all()

Main Exports:
    - WatsonxDataV2, ServiceConfig: the service client and its configuration
    - RetryPolicy: exponential backoff configuration
    - Pager, IngestionJobsPager: pagination helpers
    - Authenticators: NoAuth, BearerToken, Basic, ApiKey
    - Exceptions rooted at WatsonxDataError

Version: 1.0.0
"""

__version__ = "1.0.0"

from .auth import (
    ApiKeyAuthenticator,
    BasicAuthenticator,
    BearerTokenAuthenticator,
    NoAuthAuthenticator,
)
from .exceptions import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    HttpStatusError,
    InvalidParameterError,
    MissingRequiredParameterError,
    PaginationStateError,
    ParameterValidationError,
    TransportError,
    WatsonxDataError,
)
from .observability import UnifiedMetricsCollector, get_metrics_collector
from .pagination import Pager
from .protocols import AuthenticatorProtocol, TransportProtocol
from .request import RequestBuilder
from .service import (
    IngestionJob,
    IngestionJobsPager,
    ServiceConfig,
    WatsonxDataV2,
)
from .transport import HttpxTransport, RequestExecutor, RetryPolicy
from .types import (
    DetailedResponse,
    OperationDescriptor,
    ParameterLocation,
    ParameterSpec,
    RawResponse,
    RequestDescriptor,
)

__all__ = [
    "ApiError",
    "ApiKeyAuthenticator",
    "AuthenticationError",
    "AuthenticatorProtocol",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "ConfigurationError",
    "DetailedResponse",
    "HttpStatusError",
    "HttpxTransport",
    "IngestionJob",
    "IngestionJobsPager",
    "InvalidParameterError",
    "MissingRequiredParameterError",
    "NoAuthAuthenticator",
    "OperationDescriptor",
    "Pager",
    "PaginationStateError",
    "ParameterLocation",
    "ParameterSpec",
    "ParameterValidationError",
    "RawResponse",
    "RequestBuilder",
    "RequestDescriptor",
    "RequestExecutor",
    "RetryPolicy",
    "ServiceConfig",
    "TransportError",
    "TransportProtocol",
    "UnifiedMetricsCollector",
    "WatsonxDataV2",
    "WatsonxDataError",
    "__version__",
    "get_metrics_collector",
]

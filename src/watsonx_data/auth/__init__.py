# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Authenticators implementing AuthenticatorProtocol."""

from .authenticators import (
    AUTHORIZATION_HEADER,
    ApiKeyAuthenticator,
    BasicAuthenticator,
    BearerTokenAuthenticator,
    NoAuthAuthenticator,
)

__all__ = [
    "AUTHORIZATION_HEADER",
    "ApiKeyAuthenticator",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "NoAuthAuthenticator",
]

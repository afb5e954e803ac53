# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Static-credential authenticators.

Token acquisition and refresh (IAM, CP4D) are left to the embedding
application: these authenticators attach credentials that the caller already
holds. Anything implementing AuthenticatorProtocol can be used in their place.
"""

import base64

from ..exceptions import ConfigurationError

AUTHORIZATION_HEADER = "Authorization"


class NoAuthAuthenticator:
    """Sends requests without credentials (local or proxied deployments)."""

    authentication_type = "noAuth"

    async def authenticate(self, headers: dict[str, str]) -> None:
        return None


class BearerTokenAuthenticator:
    """
    Attaches a caller-managed bearer token.

    The token can be rotated with set_bearer_token(); the new value is used
    from the next request on.
    """

    authentication_type = "bearerToken"

    def __init__(self, bearer_token: str) -> None:
        self.set_bearer_token(bearer_token)

    def set_bearer_token(self, bearer_token: str) -> None:
        if not bearer_token:
            raise ConfigurationError("bearer_token must be a non-empty string")
        self._bearer_token = bearer_token

    async def authenticate(self, headers: dict[str, str]) -> None:
        headers[AUTHORIZATION_HEADER] = f"Bearer {self._bearer_token}"


class BasicAuthenticator:
    """Attaches HTTP basic credentials."""

    authentication_type = "basic"

    def __init__(self, username: str, password: str) -> None:
        if not username or not password:
            raise ConfigurationError("username and password are required")
        if any(c in username for c in "{}\"") or any(c in password for c in "{}\""):
            raise ConfigurationError(
                "username and password must not contain '{', '}' or '\"'"
            )
        token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
        self._header_value = f"Basic {token}"

    async def authenticate(self, headers: dict[str, str]) -> None:
        headers[AUTHORIZATION_HEADER] = self._header_value


class ApiKeyAuthenticator:
    """
    Attaches a static API key in a configurable header.

    Args:
        api_key: The key value
        header_name: Header that carries the key (default: Authorization)
        prefix: Optional scheme prefix, e.g. "ZenApiKey"
    """

    authentication_type = "apiKey"

    def __init__(
        self,
        api_key: str,
        header_name: str = AUTHORIZATION_HEADER,
        prefix: str | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("api_key must be a non-empty string")
        self._header_name = header_name
        self._header_value = f"{prefix} {api_key}" if prefix else api_key

    async def authenticate(self, headers: dict[str, str]) -> None:
        headers[self._header_name] = self._header_value


__all__ = [
    "AUTHORIZATION_HEADER",
    "ApiKeyAuthenticator",
    "BasicAuthenticator",
    "BearerTokenAuthenticator",
    "NoAuthAuthenticator",
]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for request authentication."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AuthenticatorProtocol(Protocol):
    """
    Protocol for attaching credentials to an outgoing request.

    Implementations add an ``Authorization`` header (bearer token, basic
    credentials) or a key header to the given mapping in place. Any exception
    raised here is surfaced to the caller as AuthenticationError and the
    request is not sent.
    """

    @property
    def authentication_type(self) -> str:
        """Short name of the scheme (e.g. 'bearerToken', 'noAuth')."""
        ...

    async def authenticate(self, headers: dict[str, str]) -> None:
        """
        Attach credentials to the request headers.

        Args:
            headers: Mutable header mapping of the request about to be sent
        """
        ...

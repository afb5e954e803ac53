# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for pluggable collaborators.

Available protocols:
- AuthenticatorProtocol: attaches credentials to outgoing requests
- TransportProtocol: sends a resolved request and returns the raw response

Tests and embedding applications substitute their own implementations of
these protocols instead of patching the client.
"""

from .authenticator import AuthenticatorProtocol
from .transport import TransportProtocol

__all__ = [
    "AuthenticatorProtocol",
    "TransportProtocol",
]

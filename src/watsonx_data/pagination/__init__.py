# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Pagination over token-continued list operations.

- Pager: Active/Exhausted iterator with has_next(), get_next() and get_all()
- extract_page_token: reads a continuation token from a ``next`` member
"""

from .pager import OperationInvoker, Pager, extract_page_token

__all__ = [
    "OperationInvoker",
    "Pager",
    "extract_page_token",
]

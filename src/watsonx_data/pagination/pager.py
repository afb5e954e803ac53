# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token-based pagination over list operations.

A Pager is a two-state machine:

- Active: more pages are believed to exist; get_next() fetches one
- Exhausted: terminal; get_next() raises PaginationStateError

Each get_next() issues exactly one request with the caller's original
parameters plus the current continuation token. Pager state (token and
exhaustion flag) only changes after a page was fetched successfully, so a
failed get_next() can be retried by the caller without skipping or repeating
a page.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any, Generic, Protocol, TypeVar
from urllib.parse import parse_qs, urlparse

from pydantic import BaseModel

from ..exceptions import PaginationStateError
from ..observability.collector import UnifiedMetricsCollector
from ..observability.constants import PAGES_FETCHED_TOTAL
from ..transport.retry import RetryPolicy
from ..types.operation import OperationDescriptor
from ..types.response import DetailedResponse

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")


class OperationInvoker(Protocol):
    """Anything that can run an operation, typically WatsonxDataV2."""

    async def invoke(
        self,
        operation: OperationDescriptor,
        params: Mapping[str, Any] | None = None,
        *,
        retry_policy: RetryPolicy | None = None,
    ) -> DetailedResponse: ...


def extract_page_token(next_page: Any, token_param: str) -> str | None:
    """
    Read the continuation token from a response's ``next`` member.

    Accepts a literal token, an object carrying the token under
    ``token_param``, or an object whose ``href`` has it in the query string.
    """
    if next_page is None:
        return None
    if isinstance(next_page, (str, int)) and not isinstance(next_page, bool):
        return str(next_page) or None
    if not isinstance(next_page, Mapping):
        return None

    literal = next_page.get(token_param)
    if literal is not None and literal != "":
        return str(literal)

    href = next_page.get("href")
    if href:
        values = parse_qs(urlparse(str(href)).query).get(token_param)
        if values and values[0]:
            return values[0]
    return None


class Pager(Generic[ItemT]):
    """
    Cursor-based iterator over the pages of a list operation.

    Args:
        client: Object exposing ``invoke(operation, params)``
        operation: The list operation to page through
        params: Caller parameters; copied, never mutated
        result_field: Response member holding the page's items
        token_param: Query parameter carrying the continuation token
        next_field: Response member describing the next page
        item_model: Optional pydantic model each item is validated into
        metrics: Collector counting fetched pages, or None

    Raises:
        ValueError: if ``params`` already sets the continuation parameter

    Example:
        pager = Pager(service, LIST_INGESTION_JOBS, {"auth_instance_id": crn},
                      result_field="ingestion_jobs", token_param="start")
        while pager.has_next():
            for job in await pager.get_next():
                ...
    """

    def __init__(
        self,
        client: OperationInvoker,
        operation: OperationDescriptor,
        params: Mapping[str, Any] | None = None,
        *,
        result_field: str,
        token_param: str,
        next_field: str = "next",
        item_model: type[BaseModel] | None = None,
        metrics: UnifiedMetricsCollector | None = None,
    ) -> None:
        if params and params.get(token_param) is not None:
            raise ValueError(f"the params.{token_param} field should not be set")

        self._client = client
        self._operation = operation
        self._params: dict[str, Any] = copy.deepcopy(dict(params or {}))
        self._result_field = result_field
        self._token_param = token_param
        self._next_field = next_field
        self._item_model = item_model
        self._metrics = metrics

        self._has_next = True
        self._next_token: str | None = None
        self._pages_fetched = 0

    def has_next(self) -> bool:
        """True if more results may be retrieved by calling get_next()."""
        return self._has_next

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    async def get_next(self) -> list[ItemT]:
        """
        Fetch the next page.

        Returns:
            The items of the page, in server order

        Raises:
            PaginationStateError: if the pager is exhausted
            ApiError: if the request fails; the pager state is unchanged
            pydantic.ValidationError: if an item does not match item_model;
                the pager state is unchanged
        """
        if not self.has_next():
            raise PaginationStateError("No more results available")

        page_params = dict(self._params)
        if self._next_token is not None:
            page_params[self._token_param] = self._next_token

        response = await self._client.invoke(self._operation, page_params)
        result = response.result if isinstance(response.result, Mapping) else {}

        items = list(result.get(self._result_field) or [])
        if self._item_model is not None:
            model = self._item_model
            items = [model.model_validate(item) for item in items]
        next_token = extract_page_token(result.get(self._next_field), self._token_param)

        if next_token is not None and next_token == self._next_token:
            # a server echoing the same token would loop forever
            logger.warning(
                f"{self._operation.operation_id}: continuation token {next_token!r} "
                f"repeated; stopping pagination"
            )
            next_token = None

        self._next_token = next_token
        self._has_next = next_token is not None
        self._pages_fetched += 1
        if self._metrics is not None:
            self._metrics.inc_counter(
                PAGES_FETCHED_TOTAL, labels={"operation": self._operation.operation_id}
            )
        logger.debug(
            f"{self._operation.operation_id}: page {self._pages_fetched} "
            f"with {len(items)} items (has_next={self._has_next})"
        )

        return items

    async def get_all(self) -> list[ItemT]:
        """Fetch every remaining page and concatenate the items in page order."""
        results: list[ItemT] = []
        while self.has_next():
            results.extend(await self.get_next())
        return results

    async def __aiter__(self) -> AsyncIterator[ItemT]:
        while self.has_next():
            for item in await self.get_next():
                yield item


__all__ = [
    "OperationInvoker",
    "Pager",
    "extract_page_token",
]

# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response envelope types.

RawResponse is what a transport hands back; DetailedResponse is the immutable
envelope returned to callers on success.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound="BaseModel")


@dataclass(frozen=True)
class RawResponse:
    """Undecoded transport result."""

    status_code: int
    headers: Mapping[str, str]
    content: bytes = b""
    reason_phrase: str = ""

    def get_header(self, name: str) -> str | None:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None


@dataclass(frozen=True)
class DetailedResponse:
    """
    Successful operation result.

    Attributes:
        status: HTTP status code (2xx)
        headers: Response headers
        result: Parsed JSON body, the raw bytes for non-JSON responses, or
            None when the response had no body
    """

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    result: Any = None

    def get_result(self) -> Any:
        return self.result

    def as_model(self, model: type[ModelT]) -> ModelT:
        """Validate the result into a pydantic model."""
        return model.model_validate(self.result if self.result is not None else {})


__all__ = ["DetailedResponse", "ModelT", "RawResponse"]

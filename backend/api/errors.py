"""
backend.api.errors

Purpose:
    Internal exception types for API error handling.
    Dependencies raise ApiError; the global handler converts it to ErrorResponse.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from backend.api.contracts.error_contract import ApiErrorCode


@dataclass(frozen=True)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    @classmethod
    def forbidden(cls, message: str = "Forbidden") -> "ApiError":
        return cls(status_code=403, error_code=ApiErrorCode.FORBIDDEN, message=message)

"""
backend.api.contracts.error_contract

Purpose:
    Stable error envelope for failures raised by the service itself (key gate, unhandled
    faults). Greeting responses keep their own {message} / {error} bodies.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ApiErrorCode(str, Enum):
    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Relay / access
    FORBIDDEN = "FORBIDDEN"


class ErrorResponse(BaseModel):
    request_id: str = Field(..., description="Request correlation id for debugging")
    error_code: ApiErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")

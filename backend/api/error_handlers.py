"""
backend.api.error_handlers

Purpose:
    Register global exception handlers to return stable ErrorResponse objects.
    Ensures request_id is always included.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.api.contracts.error_contract import ApiErrorCode, ErrorResponse
from backend.api.errors import ApiError
from backend.api.logging.request_context import current_request_id

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str:
    rid = getattr(getattr(request, "state", None), "request_id", None)
    if isinstance(rid, str) and rid:
        return rid

    return current_request_id()


def register_error_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers on the FastAPI app.
    """

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        rid = _get_request_id(request)
        logger.warning("API error: %s", exc)
        payload = ErrorResponse(
            request_id=rid,
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details,
        )
        return JSONResponse(status_code=exc.status_code, content=payload.model_dump())

    @app.exception_handler(Exception)
    async def handle_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception in API request", exc_info=exc)

        rid = _get_request_id(request)
        payload = ErrorResponse(
            request_id=rid,
            error_code=ApiErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            details=None,
        )
        return JSONResponse(status_code=500, content=payload.model_dump())

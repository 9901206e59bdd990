"""
backend.api.middleware.request_id

Purpose:
    Middleware that ensures each request has a request-id and propagates it to responses.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import re
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from backend.api.contracts.request_id_policy import RequestIdPolicy
from backend.api.logging.request_context import request_id_ctx_var


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()
        self._pattern = re.compile(self._policy.id_pattern)

    def _incoming(self, request: Request) -> str | None:
        for header in self._policy.candidate_headers():
            value = request.headers.get(header)
            if value and self._pattern.fullmatch(value):
                return value
        return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = self._incoming(request) or str(uuid.uuid4())

        # Attach for handlers/logging
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)

        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx_var.reset(token)

        # Echo back for client correlation
        response.headers[self._policy.response_header] = request_id
        return response

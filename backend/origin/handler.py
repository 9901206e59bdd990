"""
backend.origin.handler

Purpose:
    Origin request handler for the Say Hi service: greets the caller, simulates transient
    failures (502) and answers cross-origin preflight requests.

Design Notes:
    - Pure request -> response function; the only non-determinism is the injected
      FailureSource.
    - The failure draw runs before the preflight check, so an OPTIONS call can itself
      receive a 502. The edge hook answers such preflights with a 200 (see
      backend.edge.origin_response). Kept as observed behavior.
    - Never raises: every exception is mapped to a status code.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from http import HTTPStatus

from backend.origin.failure import FailureSource
from backend.origin.models import ProxyRequest, ProxyResponse
from backend.origin.schemas import GreetingRequest
from backend.shared.http.cors import cors_context_from_headers, cors_headers_for
from backend.shared.logging.log_context import LogCtx, get_logger, with_ctx
from backend.shared.models.enums import HttpMethod

logger = get_logger(__name__)

RESPONSE_HEADERS = {"Content-Type": "application/json"}


def _respond(status: HTTPStatus, payload: dict, cors_headers: dict[str, str]) -> ProxyResponse:
    return ProxyResponse.from_payload(int(status), payload, {**RESPONSE_HEADERS, **cors_headers})


def handle_greeting(request: ProxyRequest, *, should_fail: FailureSource) -> ProxyResponse:
    method = request.http_method
    cors = cors_context_from_headers(request.headers)
    cors_headers = cors_headers_for(cors)
    log = with_ctx(logger, LogCtx(method=method, is_cors=cors.is_cors))

    try:
        if should_fail():
            log.error("Random 502 error triggered.")
            return _respond(HTTPStatus.BAD_GATEWAY, {"message": "Bad Gateway: Random failure."}, cors_headers)

        if method == HttpMethod.OPTIONS and cors.is_cors:
            return ProxyResponse.from_payload(
                int(HTTPStatus.OK), {"message": "Preflight response"}, cors_headers
            )

        if method != HttpMethod.POST:
            return _respond(HTTPStatus.METHOD_NOT_ALLOWED, {"error": "Method Not Allowed"}, cors_headers)

        try:
            greeting = GreetingRequest.model_validate_json(request.body or "{}")
        except Exception as e:
            log.error("Invalid request body: %s", e)
            return _respond(HTTPStatus.BAD_REQUEST, {"error": "Invalid request body"}, cors_headers)

        return _respond(HTTPStatus.OK, {"message": f"Hi {greeting.name}!"}, cors_headers)

    except Exception:
        log.exception("Unexpected error while handling greeting request")
        return _respond(HTTPStatus.INTERNAL_SERVER_ERROR, {"message": "Internal Server Error."}, cors_headers)

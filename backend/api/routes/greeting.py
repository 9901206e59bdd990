"""
backend.api.routes.greeting

Purpose:
    HTTP route that exposes the origin greeting handler at /api, the way API Gateway
    does in the deployed system.

Notes:
    - Accepts every method; the handler itself answers 405 for anything but POST
      (and cross-origin OPTIONS).
    - The raw body is passed through untouched so that malformed JSON reaches the
      handler's own 400 mapping instead of FastAPI's validation envelope. Bodies that
      are not valid UTF-8 get the same 400 the Lambda adapter returns.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, Request, Response

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.dependencies import get_failure_source, require_api_key
from backend.origin.failure import FailureSource
from backend.origin.handler import RESPONSE_HEADERS, handle_greeting
from backend.origin.models import ProxyRequest, ProxyResponse

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_tags = ApiTags()

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(tags=[_tags.greeting])


@router.api_route(_paths.greeting, methods=ROUTED_METHODS, dependencies=[Depends(require_api_key)])
async def greeting(request: Request, should_fail: FailureSource = Depends(get_failure_source)) -> Response:
    raw_body = await request.body()

    try:
        body = raw_body.decode("utf-8") if raw_body else None
    except UnicodeDecodeError as e:
        logger.warning("greeting: undecodable body method=%s err=%s", request.method, e)
        result = ProxyResponse.from_payload(
            int(HTTPStatus.BAD_REQUEST), {"error": "Invalid request body"}, RESPONSE_HEADERS
        )
        return Response(content=result.body, status_code=result.status_code, headers=result.headers)

    proxy_request = ProxyRequest(http_method=request.method, headers=dict(request.headers), body=body)

    result = handle_greeting(proxy_request, should_fail=should_fail)
    logger.info("greeting: method=%s status=%s", request.method, result.status_code)

    return Response(content=result.body, status_code=result.status_code, headers=result.headers)

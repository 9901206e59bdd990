"""
backend.api.middleware.edge_relay

Purpose:
    Local stand-in for the CDN relay tier. Wraps the greeting route with both edge hooks
    so the full retry protocol can be exercised against a single process:

      viewer request -> viewer-request hook -> origin custom headers -> origin route
      origin response -> origin-response hook -> viewer

Notes:
    - Origin custom headers mirror the distribution config: X-Is-Cors (per behavior),
      X-API-Key (when configured) and, optionally, Host rewritten to the origin host.
    - The relay owns X-Is-Cors; whatever the viewer sent is overwritten.
    - When the hook delivers the original response, its body is passed through as-is.

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.relay_headers import RelayHeaders
from backend.api.settings import Settings
from backend.edge.contracts.redirect_policy import RedirectPolicy
from backend.edge.models import CfRequest, CfResponse, cf_headers
from backend.edge.origin_response import process_origin_response
from backend.edge.viewer_request import annotate_viewer_host
from backend.shared.contracts.cors_policy import CorsPolicy

logger = logging.getLogger(__name__)

_relay_headers = RelayHeaders()
_cors_policy = CorsPolicy()


def _viewer_request(request: Request) -> CfRequest:
    return CfRequest(
        method=request.method,
        uri=request.url.path,
        querystring=request.url.query,
        headers=cf_headers(request.headers.items()),
    )


def _raw_headers(request: CfRequest) -> list[tuple[bytes, bytes]]:
    return [
        (name.encode("latin-1"), h.value.encode("latin-1"))
        for name, entries in request.headers.items()
        for h in entries
    ]


def _to_starlette(response: CfResponse) -> Response:
    out = Response(content=b"", status_code=response.status_code)
    for name, value in response.header_items():
        if name.lower() == "content-length":
            continue
        out.headers.append(name, value)
    return out


class EdgeRelayMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        settings: Settings,
        policy: RedirectPolicy | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(app)
        self._settings = settings
        self._policy = policy or RedirectPolicy()
        self._path = path or ApiPaths().greeting

    def _is_relayed(self, request: Request) -> bool:
        path = request.url.path
        return path == self._path or path.startswith(self._path.rstrip("/") + "/")

    def _origin_request(self, viewer_request: CfRequest) -> CfRequest:
        settings = self._settings

        origin_request = annotate_viewer_host(viewer_request, self._policy)
        origin_request = origin_request.with_header(
            _cors_policy.flag_header, "true" if settings.relay_is_cors else "false"
        )
        if settings.api_key:
            origin_request = origin_request.with_header(_relay_headers.api_key, settings.api_key)
        if settings.relay_origin_host:
            origin_request = origin_request.with_header(_relay_headers.host, settings.relay_origin_host)
        return origin_request

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not self._is_relayed(request):
            return await call_next(request)

        origin_request = self._origin_request(_viewer_request(request))
        request.scope["headers"] = _raw_headers(origin_request)

        response: Response = await call_next(request)
        body = b"".join([chunk async for chunk in response.body_iterator])

        origin_response = CfResponse(status=str(response.status_code), headers=cf_headers(response.headers.items()))
        delivered = process_origin_response(origin_request, origin_response, self._policy)

        if delivered is origin_response:
            return Response(content=body, status_code=response.status_code, headers=response.headers)

        logger.info(
            "relay: replaced origin %s with %s for %s %s",
            origin_response.status,
            delivered.status,
            origin_request.method,
            origin_request.uri,
        )
        return _to_starlette(delivered)

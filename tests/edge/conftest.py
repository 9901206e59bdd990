"""
tests.edge.conftest

Builders for CloudFront-shaped requests/responses.
"""

from __future__ import annotations

from typing import Callable, Optional

import pytest

from backend.edge.models import CfRequest, CfResponse, cf_headers


def make_request(
    method: str = "POST",
    uri: str = "/api",
    *,
    host: Optional[str] = "d111111abcdef8.cloudfront.net",
    viewer_host: Optional[str] = None,
    is_cors: Optional[bool] = None,
    origin: Optional[str] = None,
    cookie: Optional[str] = None,
) -> CfRequest:
    pairs: list[tuple[str, str]] = []
    if host is not None:
        pairs.append(("Host", host))
    if viewer_host is not None:
        pairs.append(("x-viewer-host", viewer_host))
    if is_cors is not None:
        pairs.append(("X-Is-Cors", "true" if is_cors else "false"))
    if origin is not None:
        pairs.append(("Origin", origin))
    if cookie is not None:
        pairs.append(("Cookie", cookie))
    return CfRequest(method=method, uri=uri, headers=cf_headers(pairs))


def make_response(status: str = "502", description: str = "Bad Gateway") -> CfResponse:
    return CfResponse(
        status=status,
        status_description=description,
        headers=cf_headers({"Content-Type": "application/json"}),
    )


@pytest.fixture()
def cf_request() -> Callable[..., CfRequest]:
    return make_request


@pytest.fixture()
def cf_response() -> Callable[..., CfResponse]:
    return make_response

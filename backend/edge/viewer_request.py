"""
backend.edge.viewer_request

Purpose:
    Viewer-request edge hook. Copies the viewer's Host header into x-viewer-host so the
    origin-response hook can rebuild a client-reachable redirect target after the relay
    has rewritten Host for the origin.

Notes:
    - Deterministic and side-effect free; runs again on every retry.

Usage:
    Lambda@Edge handler string: backend.edge.viewer_request.handler

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

from typing import Any, Mapping

from backend.edge.contracts.redirect_policy import RedirectPolicy
from backend.edge.models import CfRequest, cf_record

_DEFAULT_POLICY = RedirectPolicy()


def annotate_viewer_host(request: CfRequest, policy: RedirectPolicy = _DEFAULT_POLICY) -> CfRequest:
    host = request.header_value("host")
    if host is None:
        return request
    return request.with_header(policy.viewer_host_header, host)


def handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    request = CfRequest.model_validate(cf_record(event)["request"])
    return annotate_viewer_host(request).to_event()

"""
backend.edge.origin_response

Purpose:
    Origin-response edge hook: turns a transient origin failure (502) into a bounded,
    cookie-tracked client retry via 307 redirects, for both same-origin and cross-origin
    callers.

Design Notes:
    - The redirect counter lives only in the RedirectCount cookie; nothing is stored here.
    - Only the retry status engages the state machine. Everything else passes through.
    - Cross-origin redirects target https://<x-viewer-host><uri> and need
      SameSite=None; Secure to survive the cross-site hop. Same-origin redirects reuse
      the request uri and omit both attributes.
    - Preflights are never redirected (browsers do not follow them); a failed
      cross-origin preflight is answered locally with 200 + CORS headers.

Usage:
    Lambda@Edge handler string: backend.edge.origin_response.handler

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from backend.edge.contracts.redirect_policy import RedirectPolicy
from backend.edge.models import CfRequest, CfResponse, cf_headers, cf_record
from backend.shared.contracts.cors_policy import CorsPolicy
from backend.shared.http.cookies import format_cookie, parse_cookies, read_counter
from backend.shared.http.cors import build_cors_headers, cors_context
from backend.shared.logging.log_context import LogCtx, configure_function_logging, get_logger, with_ctx
from backend.shared.models.enums import HttpMethod

logger = get_logger(__name__)

_DEFAULT_POLICY = RedirectPolicy()
_CORS = CorsPolicy()


def redirect_count(request: CfRequest, policy: RedirectPolicy = _DEFAULT_POLICY) -> int:
    cookies = parse_cookies(request.header_values("cookie"))
    return read_counter(cookies, policy.cookie_name)


def build_redirect_response(
    location: str,
    count: int,
    *,
    cross_origin: bool,
    origin: Optional[str],
    policy: RedirectPolicy = _DEFAULT_POLICY,
) -> CfResponse:
    cookie = format_cookie(policy.cookie_name, count, policy.cookie_attributes(cross_origin=cross_origin))
    headers = {
        "Location": location,
        "Cache-Control": "no-cache",
        "Set-Cookie": cookie,
    }
    if cross_origin:
        headers.update(build_cors_headers(origin))

    return CfResponse(status="307", status_description="Temporary Redirect", headers=cf_headers(headers))


def build_preflight_response(origin: Optional[str]) -> CfResponse:
    return CfResponse(status="200", status_description="OK", headers=cf_headers(build_cors_headers(origin)))


def process_origin_response(
    request: CfRequest,
    response: CfResponse,
    policy: RedirectPolicy = _DEFAULT_POLICY,
) -> CfResponse:
    """
    Decide what the viewer receives for this origin response.

    Returns `response` itself (same object) whenever the original response is delivered.
    """
    cors = cors_context(request.header_value(_CORS.flag_header), request.header_value(_CORS.origin_header))
    current = redirect_count(request, policy)
    next_count = current + 1

    log = with_ctx(
        logger,
        LogCtx(method=request.method, uri=request.uri, status=response.status, redirect_count=current, is_cors=cors.is_cors),
    )

    if current >= policy.max_redirects:
        log.info("Redirect limit reached. Returning original response.")
        return response

    if response.status != policy.retry_status:
        return response

    log.info("%s error detected.", policy.retry_status)

    if cors.is_cors:
        host = request.header_value(policy.viewer_host_header)
        if not host:
            log.error("Missing '%s' header for cross-origin request.", policy.viewer_host_header)
            return response

        location = f"{policy.redirect_scheme}://{host}{request.uri}"

        if request.method == HttpMethod.OPTIONS:
            log.info("Answering failed preflight with CORS headers.")
            return build_preflight_response(cors.origin)

        if request.method == HttpMethod.POST:
            log.info("Redirecting cross-origin POST request to %s.", location)
            return build_redirect_response(
                location, next_count, cross_origin=True, origin=cors.origin, policy=policy
            )

    elif request.method == HttpMethod.POST:
        log.info("Redirecting same-origin POST request.")
        return build_redirect_response(
            request.uri, next_count, cross_origin=False, origin=cors.origin, policy=policy
        )

    log.info("Unsupported method for retry. Returning original response.")
    return response


def handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    configure_function_logging()

    record = cf_record(event)
    raw_response = record["response"]

    request = CfRequest.model_validate(record["request"])
    response = CfResponse.model_validate(raw_response)

    result = process_origin_response(request, response)
    if result is response:
        return raw_response
    return result.to_event()

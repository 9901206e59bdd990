"""
backend.shared.http.cors

Purpose:
    CORS context parsing and CORS response header construction, shared by the origin
    handler (flat header dicts) and the origin-response edge hook (CloudFront header lists).

Notes:
    - The CORS context is recomputed on every invocation; nothing is cached.
    - Headers are emitted whenever the flag is set, even if the Origin header is missing,
      so that "CORS headers iff cross-origin" always holds. A missing origin is logged.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from backend.shared.contracts.cors_policy import CorsPolicy

logger = logging.getLogger(__name__)

_DEFAULT_POLICY = CorsPolicy()


@dataclass(frozen=True)
class CorsContext:
    is_cors: bool
    origin: Optional[str] = None


def get_header(headers: Mapping[str, str] | None, name: str) -> Optional[str]:
    """
    Case-insensitive single-value header lookup over a flat mapping.
    """
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def cors_context(flag: Optional[str], origin: Optional[str]) -> CorsContext:
    is_cors = (flag or "").lower() == "true"
    return CorsContext(is_cors=is_cors, origin=origin or None)


def cors_context_from_headers(
    headers: Mapping[str, str] | None,
    policy: CorsPolicy = _DEFAULT_POLICY,
) -> CorsContext:
    return cors_context(
        get_header(headers, policy.flag_header),
        get_header(headers, policy.origin_header),
    )


def build_cors_headers(origin: Optional[str], policy: CorsPolicy = _DEFAULT_POLICY) -> dict[str, str]:
    if not origin:
        logger.warning("No valid origin found. CORS headers might fail.")

    return {
        "Access-Control-Allow-Credentials": policy.allow_credentials,
        "Access-Control-Allow-Origin": origin or "",
        "Access-Control-Allow-Methods": policy.allow_methods,
        "Access-Control-Allow-Headers": policy.allow_headers,
    }


def cors_headers_for(ctx: CorsContext, policy: CorsPolicy = _DEFAULT_POLICY) -> dict[str, str]:
    return build_cors_headers(ctx.origin, policy) if ctx.is_cors else {}

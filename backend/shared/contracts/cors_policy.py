"""
backend.shared.contracts.cors_policy

Purpose:
    Central policy for cross-origin handling: the relay's CORS flag header, the request
    header carrying the caller's origin, and the values of the CORS response headers.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CorsPolicy:
    # Attached by the relay tier as an origin custom header ("true" / "false").
    flag_header: str = "X-Is-Cors"
    origin_header: str = "Origin"

    allow_credentials: str = "true"
    allow_methods: str = "POST, OPTIONS"
    allow_headers: str = "Content-Type"

"""
backend.edge.contracts.redirect_policy

Purpose:
    Constants of the edge retry protocol. Lambda@Edge functions cannot read environment
    variables, so this dataclass is their configuration.

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RedirectPolicy:
    cookie_name: str = "RedirectCount"
    max_redirects: int = 3
    cookie_max_age_s: int = 60

    # Origin status that triggers a client-side retry.
    retry_status: str = "502"

    viewer_host_header: str = "x-viewer-host"
    redirect_scheme: str = "https"

    def cookie_attributes(self, *, cross_origin: bool) -> tuple[str, ...]:
        base = ("HttpOnly", f"Max-Age={self.cookie_max_age_s}")
        if cross_origin:
            return ("SameSite=None", "Secure", *base)
        return base

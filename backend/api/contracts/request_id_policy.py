"""
backend.api.contracts.request_id_policy

Purpose:
    Central policy for request/correlation IDs (header names, accepted format, response
    behavior). CloudFront's own request id is accepted as a fallback so relay and service
    logs line up.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    edge_request_id_header: str = "X-Amz-Cf-Id"
    response_header: str = "X-Request-Id"

    # Incoming ids outside this shape are replaced with a fresh uuid4.
    id_pattern: str = r"[A-Za-z0-9._=-]{1,128}"

    def candidate_headers(self) -> tuple[str, ...]:
        return (self.request_id_header, self.correlation_id_header, self.edge_request_id_header)

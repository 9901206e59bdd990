"""
backend.shared.models.enums

Purpose:
    Enumerations shared across the origin handler, the edge hooks and the local relay API.

Used By:
    - backend.origin.handler
    - backend.edge.origin_response

Design Notes:
    - Keep enum string values stable: they are compared against raw HTTP method strings
      coming from API Gateway and CloudFront events.

Author:
    Kanir Pandya

Created:
    2026-02-13
"""

from __future__ import annotations

from enum import Enum


class HttpMethod(str, Enum):
    """
    HTTP methods the retry protocol distinguishes.

    Notes:
        - POST: the only method that is redirected on a transient failure.
        - OPTIONS: the CORS preflight method; answered locally, never redirected.
    """

    POST = "POST"
    OPTIONS = "OPTIONS"

"""
backend.api.contracts.relay_headers

Purpose:
    Header names the relay tier attaches to origin requests (origin custom headers).

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RelayHeaders:
    api_key: str = "X-API-Key"
    host: str = "Host"

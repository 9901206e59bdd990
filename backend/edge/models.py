"""
backend.edge.models

Purpose:
    Pydantic models for the CloudFront (Lambda@Edge) event shape.

Notes:
    - Headers are keyed by lowercase name; each entry is a list of {"key", "value"} pairs.
    - Response status is a string ("502"), as CloudFront sends it.
    - Models are frozen; use with_header() / model_copy() to derive new messages.
    - Unknown event fields (origin, clientIp, ...) are preserved on round-trip.

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CfHeader(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Optional[str] = None
    value: str


CfHeaders = Dict[str, List[CfHeader]]


def cf_headers(pairs: Mapping[str, str] | Iterable[Tuple[str, str]]) -> CfHeaders:
    """
    Build CloudFront-shaped headers from (Name, value) pairs; repeated names accumulate.
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    out: CfHeaders = {}
    for name, value in items:
        out.setdefault(name.lower(), []).append(CfHeader(key=name, value=value))
    return out


class _CfMessage(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    headers: CfHeaders = Field(default_factory=dict)

    def header_values(self, name: str) -> list[str]:
        return [h.value for h in self.headers.get(name.lower(), [])]

    def header_value(self, name: str) -> Optional[str]:
        values = self.header_values(name)
        return values[0] if values else None

    def header_items(self) -> list[tuple[str, str]]:
        return [(h.key or name, h.value) for name, entries in self.headers.items() for h in entries]

    def to_event(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CfRequest(_CfMessage):
    method: str
    uri: str
    querystring: str = ""

    def with_header(self, name: str, value: str) -> "CfRequest":
        headers = dict(self.headers)
        headers[name.lower()] = [CfHeader(key=name, value=value)]
        return self.model_copy(update={"headers": headers})


class CfResponse(_CfMessage):
    status: str
    status_description: Optional[str] = Field(default=None, alias="statusDescription")

    @property
    def status_code(self) -> int:
        return int(self.status)


def cf_record(event: Mapping[str, Any]) -> Mapping[str, Any]:
    return event["Records"][0]["cf"]

"""
backend.origin.models

Purpose:
    Request/response contracts for the origin handler, shaped after the API Gateway
    REST proxy integration (event in, proxy result out).

Notes:
    - Header names keep whatever case the caller sent; lookups go through
      backend.shared.http.cors.get_header (case-insensitive).
    - Base64 bodies are decoded once, at the event boundary.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProxyRequest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    http_method: str = Field(default="", alias="httpMethod")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Optional[str] = None

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "ProxyRequest":
        """
        Build from an API Gateway proxy event.

        Raises:
            ValueError (incl. pydantic ValidationError, binascii.Error, UnicodeDecodeError)
            when the event cannot be interpreted.
        """
        body = event.get("body")
        if body is not None and event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True).decode("utf-8")

        headers = {k: v for k, v in (event.get("headers") or {}).items() if v is not None}

        return cls.model_validate(
            {
                "httpMethod": event.get("httpMethod") or "",
                "headers": headers,
                "body": body,
            }
        )


class ProxyResponse(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_payload(cls, status_code: int, payload: Mapping[str, Any], headers: Mapping[str, str]) -> "ProxyResponse":
        return cls(status_code=status_code, headers=dict(headers), body=json.dumps(dict(payload)))

    def payload(self) -> Any:
        return json.loads(self.body) if self.body else None

    def to_event(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

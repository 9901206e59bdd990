# backend/api/settings.py
"""
backend.api.settings

Purpose:
    Centralized configuration for the local Say Hi service (origin route + relay simulator).
    Values come from SAY_HI_* environment variables; defaults match the deployed system.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from backend.origin.failure import DEFAULT_FAILURE_RATE
from backend.shared.env import env_bool, env_float, env_str


class Settings(BaseModel):
    service_name: str = Field(default="say-hi-api")
    service_version: str = Field(default="0.1.0")

    failure_rate: float = Field(default=DEFAULT_FAILURE_RATE, ge=0.0, le=1.0)

    # Opaque shared key the relay attaches; None disables the gate.
    api_key: Optional[str] = Field(default=None)

    # Relay simulator: runs both edge hooks around the origin route.
    edge_relay_enabled: bool = Field(default=True)
    relay_is_cors: bool = Field(default=False)
    # When set, Host is rewritten to this value before the origin sees the request.
    relay_origin_host: Optional[str] = Field(default=None)

    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    return Settings(
        service_name=env_str("SAY_HI_SERVICE_NAME", default="say-hi-api"),
        failure_rate=env_float("SAY_HI_FAILURE_RATE", default=DEFAULT_FAILURE_RATE),
        api_key=env_str("SAY_HI_API_KEY"),
        edge_relay_enabled=env_bool("SAY_HI_EDGE_RELAY_ENABLED", default=True),
        relay_is_cors=env_bool("SAY_HI_RELAY_IS_CORS", default=False),
        relay_origin_host=env_str("SAY_HI_RELAY_ORIGIN_HOST"),
        log_level=env_str("SAY_HI_LOG_LEVEL", default="INFO"),
    )

"""
backend.api.dependencies

Purpose:
    FastAPI dependencies for the greeting route: settings, the failure source and the
    shared-key gate. Tests swap the failure source via app.dependency_overrides.

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

import hmac

from fastapi import Depends, Request

from backend.api.contracts.relay_headers import RelayHeaders
from backend.api.errors import ApiError
from backend.api.settings import Settings
from backend.origin.failure import FailureSource

_relay_headers = RelayHeaders()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_failure_source(request: Request) -> FailureSource:
    return request.app.state.failure_source


def require_api_key(request: Request, settings: Settings = Depends(get_app_settings)) -> None:
    expected = settings.api_key
    if not expected:
        return

    supplied = request.headers.get(_relay_headers.api_key) or ""
    if not hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8")):
        raise ApiError.forbidden()

"""
tests.api.test_health

Purpose:
    Smoke tests for health endpoints.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations


def test_health_root_ok(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}
    assert r.headers.get("x-request-id")


def test_root_reports_service(client) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "say-hi-api"}


def test_request_id_is_echoed_when_well_formed(client) -> None:
    r = client.get("/health", headers={"X-Request-Id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"


def test_cloudfront_id_is_used_as_fallback(client) -> None:
    r = client.get("/health", headers={"X-Amz-Cf-Id": "4TyzHTaYWb1GX1qTfsHhEqV6HUDd_BzoBZnwfnvQc_1oF26ClkoUSEQ=="})
    assert r.headers["x-request-id"] == "4TyzHTaYWb1GX1qTfsHhEqV6HUDd_BzoBZnwfnvQc_1oF26ClkoUSEQ=="


def test_malformed_request_id_is_replaced(client) -> None:
    r = client.get("/health", headers={"X-Request-Id": "bad id with spaces"})
    assert r.headers["x-request-id"] != "bad id with spaces"
    assert len(r.headers["x-request-id"]) == 36

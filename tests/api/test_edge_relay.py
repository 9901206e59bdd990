"""
tests.api.test_edge_relay

Purpose:
    End-to-end tests of the retry protocol through the relay simulator: the TestClient
    follows 307s and keeps the RedirectCount cookie like a browser would.

Covers:
    - Same-origin recovery after transient failures
    - Retry ceiling: 3 redirects, then the original 502
    - Cross-origin recovery (https, SameSite=None; Secure cookie, CORS headers)
    - Failed cross-origin preflight answered with 200
    - Relay-owned headers (X-Is-Cors, X-API-Key, Host rewrite)
"""

from __future__ import annotations

ORIGIN = "https://app.example"


def test_same_origin_recovers_after_two_failures(client_factory, scripted_failures) -> None:
    failures = scripted_failures(True, True, False)
    client = client_factory(failures=failures)

    r = client.post("/api", json={"name": "Ada"})

    assert r.status_code == 200, r.text
    assert r.json() == {"message": "Hi Ada!"}
    assert [h.status_code for h in r.history] == [307, 307]
    assert failures.calls == 3

    first = r.history[0]
    assert first.headers["location"] == "/api"
    assert first.headers["cache-control"] == "no-cache"
    assert first.headers["set-cookie"] == "RedirectCount=1; HttpOnly; Max-Age=60"
    assert "access-control-allow-origin" not in first.headers
    assert r.history[1].headers["set-cookie"].startswith("RedirectCount=2;")


def test_retry_ceiling_surfaces_original_502(client_factory, scripted_failures) -> None:
    failures = scripted_failures(*([True] * 10))
    client = client_factory(failures=failures)

    r = client.post("/api", json={"name": "Ada"})

    assert r.status_code == 502
    assert r.json() == {"message": "Bad Gateway: Random failure."}
    assert len(r.history) == 3
    assert failures.calls == 4
    assert client.cookies.get("RedirectCount") == "3"


def test_non_failure_responses_pass_through(client_factory) -> None:
    client = client_factory()
    r = client.post("/api", json={"name": ""})
    assert r.status_code == 400
    assert not r.history


def test_cross_origin_recovers_with_secure_cookie(client_factory, scripted_failures) -> None:
    failures = scripted_failures(True, False)
    client = client_factory(failures=failures, base_url="https://testserver", relay_is_cors=True)

    r = client.post("/api", json={"name": "Ada"}, headers={"Origin": ORIGIN})

    assert r.status_code == 200, r.text
    assert r.json() == {"message": "Hi Ada!"}
    assert r.headers["access-control-allow-origin"] == ORIGIN

    (redirect,) = r.history
    assert redirect.status_code == 307
    assert redirect.headers["location"] == "https://testserver/api"
    assert redirect.headers["set-cookie"] == "RedirectCount=1; SameSite=None; Secure; HttpOnly; Max-Age=60"
    assert redirect.headers["access-control-allow-origin"] == ORIGIN
    assert redirect.headers["access-control-allow-credentials"] == "true"


def test_cross_origin_redirect_uses_viewer_host_after_host_rewrite(client_factory, scripted_failures) -> None:
    client = client_factory(
        failures=scripted_failures(True, False),
        base_url="https://testserver",
        relay_is_cors=True,
        relay_origin_host="abc123.execute-api.us-east-1.amazonaws.com",
    )

    r = client.post("/api", json={"name": "Ada"}, headers={"Origin": ORIGIN})

    assert r.status_code == 200
    assert r.history[0].headers["location"] == "https://testserver/api"


def test_failed_cross_origin_preflight_answered_locally(client_factory, scripted_failures) -> None:
    client = client_factory(failures=scripted_failures(True), base_url="https://testserver", relay_is_cors=True)

    r = client.options("/api", headers={"Origin": ORIGIN})

    assert r.status_code == 200
    assert not r.history
    assert r.content == b""
    assert r.headers["access-control-allow-origin"] == ORIGIN
    assert r.headers["access-control-allow-methods"] == "POST, OPTIONS"
    assert "location" not in r.headers


def test_viewer_cannot_claim_cross_origin(client_factory) -> None:
    client = client_factory(relay_is_cors=False)
    r = client.post("/api", json={"name": "Ada"}, headers={"X-Is-Cors": "true", "Origin": ORIGIN})
    assert r.status_code == 200
    assert "access-control-allow-origin" not in r.headers


def test_relay_attaches_api_key(client_factory) -> None:
    client = client_factory(api_key="s3cret")
    r = client.post("/api", json={"name": "Ada"})
    assert r.status_code == 200
    assert r.json() == {"message": "Hi Ada!"}


def test_health_is_not_relayed(client_factory) -> None:
    client = client_factory(api_key="s3cret")
    r = client.get("/health")
    assert r.status_code == 200

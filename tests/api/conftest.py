"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from backend.api.dependencies import get_failure_source
from backend.api.main import create_app
from backend.api.settings import Settings
from backend.origin.failure import FailureSource, never_fail


class ScriptedFailures:
    """
    Failure source that replays a fixed list of draws, then stops failing.
    Records how many times the origin asked.
    """

    def __init__(self, *draws: bool) -> None:
        self._draws = list(draws)
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self._draws.pop(0) if self._draws else False


@pytest.fixture()
def scripted_failures() -> Callable[..., ScriptedFailures]:
    return ScriptedFailures


@pytest.fixture()
def client_factory():
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        Settings are built directly (not from env) so tests stay deterministic.
        The failure source is swapped through dependency_overrides.
    """

    def _make(
        *,
        failures: FailureSource = never_fail,
        base_url: str = "http://testserver",
        **overrides,
    ) -> TestClient:
        app = create_app(Settings(**overrides))
        app.dependency_overrides[get_failure_source] = lambda: failures
        return TestClient(app, base_url=base_url, raise_server_exceptions=True)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """
    Backward-compatible alias fixture for simple tests.
    """
    return client_factory()

"""
tests.origin.test_lambda_function

Purpose:
    API Gateway proxy adapter + failure injector tests.
"""

from __future__ import annotations

import base64
import json
import random

import pytest

from backend.origin import lambda_function
from backend.origin.failure import DEFAULT_FAILURE_RATE, RandomFailureInjector, never_fail


@pytest.fixture()
def no_failures(monkeypatch):
    monkeypatch.setattr(lambda_function, "_failure_source", never_fail)


def test_proxy_event_roundtrip(no_failures) -> None:
    event = {
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json", "X-Is-Cors": "false"},
        "body": json.dumps({"name": "Ada"}),
        "isBase64Encoded": False,
    }

    result = lambda_function.handler(event, None)

    assert result["statusCode"] == 200
    assert result["headers"] == {"Content-Type": "application/json"}
    assert json.loads(result["body"]) == {"message": "Hi Ada!"}


def test_base64_body_is_decoded(no_failures) -> None:
    event = {
        "httpMethod": "POST",
        "headers": None,
        "body": base64.b64encode(b'{"name": "Grace"}').decode("ascii"),
        "isBase64Encoded": True,
    }

    result = lambda_function.handler(event, None)

    assert json.loads(result["body"]) == {"message": "Hi Grace!"}


def test_undecodable_body_is_400(no_failures) -> None:
    event = {"httpMethod": "POST", "body": "%%%not-base64%%%", "isBase64Encoded": True}

    result = lambda_function.handler(event, None)

    assert result["statusCode"] == 400
    assert json.loads(result["body"]) == {"error": "Invalid request body"}


def test_null_header_values_are_dropped(no_failures) -> None:
    event = {"httpMethod": "OPTIONS", "headers": {"X-Is-Cors": "true", "Origin": None}}

    result = lambda_function.handler(event, None)

    assert result["statusCode"] == 200
    assert result["headers"]["Access-Control-Allow-Origin"] == ""


def test_missing_method_is_405(no_failures) -> None:
    result = lambda_function.handler({}, None)
    assert result["statusCode"] == 405


@pytest.mark.parametrize("rate,expected", [(0.0, False), (1.0, True)])
def test_injector_edges(rate: float, expected: bool) -> None:
    injector = RandomFailureInjector(rate=rate)
    assert all(injector() is expected for _ in range(50))


def test_injector_draws_independently_per_call() -> None:
    injector = RandomFailureInjector(rate=0.25, rng=random.Random(7))
    reference = random.Random(7)

    draws = [injector() for _ in range(20)]

    assert draws == [reference.random() < 0.25 for _ in range(20)]


@pytest.mark.parametrize("rate", [-0.1, 1.5])
def test_injector_rejects_invalid_rate(rate: float) -> None:
    with pytest.raises(ValueError):
        RandomFailureInjector(rate=rate)


@pytest.mark.parametrize("raw", ["lots", "1.5", "-0.2", "nan"])
def test_bad_failure_rate_env_falls_back_to_default(monkeypatch, raw: str) -> None:
    monkeypatch.setenv(lambda_function.ENV_FAILURE_RATE, raw)

    injector = lambda_function.failure_source_from_env()

    assert injector.rate == DEFAULT_FAILURE_RATE


def test_failure_rate_env_is_used(monkeypatch) -> None:
    monkeypatch.setenv(lambda_function.ENV_FAILURE_RATE, "0.6")
    assert lambda_function.failure_source_from_env().rate == 0.6

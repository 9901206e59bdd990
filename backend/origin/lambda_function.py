"""
backend.origin.lambda_function

Purpose:
    AWS Lambda entrypoint for the origin handler behind API Gateway (REST proxy integration).

Usage:
    Handler string: backend.origin.lambda_function.handler

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Mapping

from backend.origin.failure import DEFAULT_FAILURE_RATE, RandomFailureInjector
from backend.origin.handler import RESPONSE_HEADERS, handle_greeting
from backend.origin.models import ProxyRequest, ProxyResponse
from backend.shared.env import env_float
from backend.shared.logging.log_context import configure_function_logging, get_logger

ENV_FAILURE_RATE = "SAY_HI_FAILURE_RATE"

logger = get_logger(__name__)


def failure_source_from_env() -> RandomFailureInjector:
    """
    Build the container's injector from SAY_HI_FAILURE_RATE.

    A bad value must not keep the function from starting: it is logged and the
    default rate is used instead.
    """
    try:
        return RandomFailureInjector(rate=env_float(ENV_FAILURE_RATE, default=DEFAULT_FAILURE_RATE))
    except ValueError as e:
        logger.warning("Ignoring %s (%s); using default rate %s", ENV_FAILURE_RATE, e, DEFAULT_FAILURE_RATE)
        return RandomFailureInjector(rate=DEFAULT_FAILURE_RATE)


# One injector per container; every call still makes its own draw.
_failure_source = failure_source_from_env()


def handler(event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
    configure_function_logging()

    try:
        request = ProxyRequest.from_event(event)
    except ValueError as e:
        logger.error("Undecodable proxy event: %s", e)
        return ProxyResponse.from_payload(
            int(HTTPStatus.BAD_REQUEST), {"error": "Invalid request body"}, RESPONSE_HEADERS
        ).to_event()

    return handle_greeting(request, should_fail=_failure_source).to_event()

# backend/shared/logging/log_context.py
# Purpose: Logger factory + context adapter for the Lambda/edge functions.
# Notes: The API owns its own handler/format (backend.api.logging). Functions only set levels.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping


# Stable logger name prefix so function logs can be filtered in CloudWatch.
LOGGER_NAMESPACE = "backend"

ENV_LOG_LEVEL = "SAY_HI_LOG_LEVEL"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a namespaced logger. Does NOT configure handlers.
    """
    if not name:
        return logging.getLogger(LOGGER_NAMESPACE)

    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)

    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def configure_function_logging() -> None:
    """
    Set the namespace level for Lambda runs.

    The Lambda runtime installs its own root handler; locally (no handlers yet) a plain
    stderr handler is added so hook logs are still visible.
    """
    level_name = (os.getenv(ENV_LOG_LEVEL) or "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        root.addHandler(handler)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Prefix log messages with stable key=value context (method=..., uri=..., redirect_count=...).
    """

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        super().__init__(logger, dict(extra or {}))

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra") or {}
        merged = {**self.extra, **extra}

        if merged:
            ctx = " ".join(f"{k}={merged[k]}" for k in sorted(merged.keys()) if merged[k] is not None)
            if ctx:
                msg = f"{ctx} | {msg}"

        kwargs["extra"] = {}
        return msg, kwargs


@dataclass(frozen=True)
class LogCtx:
    """
    Common fields for one hook/handler invocation.
    """
    method: str | None = None
    uri: str | None = None
    status: str | None = None
    redirect_count: int | None = None
    is_cors: bool | None = None

    def as_extra(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "uri": self.uri,
            "status": self.status,
            "redirect_count": self.redirect_count,
            "is_cors": self.is_cors,
        }


def with_ctx(logger: logging.Logger, ctx: LogCtx | Mapping[str, Any] | None = None) -> ContextLoggerAdapter:
    if ctx is None:
        return ContextLoggerAdapter(logger, {})
    if isinstance(ctx, LogCtx):
        return ContextLoggerAdapter(logger, ctx.as_extra())
    return ContextLoggerAdapter(logger, dict(ctx))

"""
backend.api.logging.logging_config

Purpose:
    Central logging configuration for the local Say Hi service.
    Ensures request_id is present in logs (including uvicorn.access and uvicorn.error).

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

import logging

from backend.api.logging.request_id_filter import RequestIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str | int = "INFO") -> None:
    resolved = _resolve_level(level)
    handler = _make_handler(resolved)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(resolved)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    _configure_logger("uvicorn", handler, resolved, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, resolved, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, resolved, clear_handlers=True)

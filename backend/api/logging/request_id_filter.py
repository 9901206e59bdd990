"""
backend.api.logging.request_id_filter

Purpose:
    Logging filter that injects request_id from contextvars into log records.

Author:
    Kanir Pandya
Created:
    2026-02-15
"""

from __future__ import annotations

import logging

from backend.api.logging.request_context import current_request_id


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = current_request_id()
        return True

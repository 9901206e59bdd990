"""
backend.shared.env

Purpose:
    Environment parsing helpers shared by the API settings and the origin Lambda.

Author:
    Kanir Pandya

Created:
    2026-02-19
"""

from __future__ import annotations

import os


def as_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    v = value.strip().lower()
    if v in ("1", "true", "yes", "y", "on"):
        return True
    if v in ("0", "false", "no", "n", "off"):
        return False
    return None


def as_float(raw: str | None, *, default: float | None = None) -> float | None:
    """
    Parse an environment variable-ish value into a float.

    Accepts:
      - None / "" -> default
      - "0.25" -> 0.25
    Raises:
      ValueError for non-numeric strings.
    """
    if raw is None:
        return default
    s = str(raw).strip()
    if not s:
        return default
    return float(s)


def as_str(raw: str | None) -> str | None:
    if raw is None:
        return None
    s = raw.strip()
    return s or None


def env_bool(name: str, *, default: bool) -> bool:
    parsed = as_bool(os.getenv(name))
    return default if parsed is None else parsed


def env_float(name: str, *, default: float) -> float:
    parsed = as_float(os.getenv(name), default=default)
    return default if parsed is None else parsed


def env_str(name: str, *, default: str | None = None) -> str | None:
    parsed = as_str(os.getenv(name))
    return default if parsed is None else parsed

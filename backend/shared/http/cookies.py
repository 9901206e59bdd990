"""
backend.shared.http.cookies

Purpose:
    Minimal cookie helpers for the client-held redirect counter.

Notes:
    - Parsing is lenient: fragments without "=" are skipped, later duplicates win.
    - The counter is a non-negative int; anything else reads as 0.

Author:
    Kanir Pandya

Created:
    2026-02-16
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence


def parse_cookies(header_values: Iterable[str]) -> dict[str, str]:
    cookies: dict[str, str] = {}
    for header_value in header_values:
        for fragment in (header_value or "").split(";"):
            name, sep, value = fragment.strip().partition("=")
            if not sep or not name:
                continue
            cookies[name.strip()] = value.strip()
    return cookies


def read_counter(cookies: Mapping[str, str], name: str) -> int:
    raw = cookies.get(name)
    if raw is None or not (raw.isascii() and raw.isdigit()):
        return 0
    return int(raw)


def format_cookie(name: str, value: object, attributes: Sequence[str] = ()) -> str:
    parts = [f"{name}={value}", *attributes]
    return "; ".join(parts)

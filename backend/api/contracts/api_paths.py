# backend/api/contracts/api_paths.py
"""
backend.api.contracts.api_paths

Purpose:
    Central definition of API route paths.
    `greeting` mirrors the API Gateway resource the relay forwards to.

Author:
    Kanir Pandya

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    health: str = "/health"
    greeting: str = "/api"

"""
backend.origin.schemas

Purpose:
    Request body schema for the greeting endpoint.

Notes:
    - Unknown fields are ignored; only `name` matters.
    - `name` must be a real JSON string (no int -> str coercion) and non-blank after trimming.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GreetingRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = Field(..., description="Name to greet.", examples=["Ada"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Invalid name provided")
        return v

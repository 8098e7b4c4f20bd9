# -*- coding: utf-8 -*-
"""
Pydantic data models for the API.
"""
from pydantic import BaseModel, Field


class FormatRequest(BaseModel):
    """Release notes formatting request schema."""

    body: str | None = Field(
        default=None,
        description="Raw markdown release body (e.g. a GitHub release description)",
    )


class FormatResponse(BaseModel):
    """Release notes formatting response schema."""

    notes: str | None = None
    has_content: bool = False
    line_count: int = 0
    steps_applied: list[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    version: str

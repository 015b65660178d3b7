"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes_registered: int = 0
    shape_tags: list[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    scene: dict[str, Any] | None = None
    node_count: int = 0
    processing_time_ms: float = 0.0


class PathResponse(BaseModel):
    path: dict[str, Any]
    bounds: list[float] = Field(default_factory=list)

"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class PathRequest(BaseModel):
    d: str = Field(..., description="SVG path data (the d attribute)")

"""Health check."""

from __future__ import annotations

from fastapi import APIRouter

from svgscene import __version__
from svgscene.engine.registry import get_registry
from svgscene.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    registry = get_registry()
    return HealthResponse(
        status="ok",
        version=__version__,
        shapes_registered=registry.count,
        shape_tags=registry.tags(),
    )

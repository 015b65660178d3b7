"""POST /api/parse and /api/path — document and path-data parsing."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET

from fastapi import APIRouter, HTTPException

from svgscene.config import settings
from svgscene.engine import parse_svg
from svgscene.engine.scene import iter_nodes
from svgscene.models.requests import ParseRequest, PathRequest
from svgscene.models.responses import ParseResponse, PathResponse
from svgscene.svg.path_parser import parse_path_data
from svgscene.svg.serializer import path_to_dict, scene_to_dict

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest) -> ParseResponse:
    if len(req.svg.encode("utf-8")) > settings.max_svg_bytes:
        raise HTTPException(status_code=413, detail="SVG document too large")

    start = time.perf_counter()
    try:
        scene = parse_svg(req.svg)
    except ET.ParseError as e:
        logger.info("Rejected malformed SVG: %s", e)
        raise HTTPException(status_code=422, detail=f"Malformed SVG: {e}") from e
    elapsed = (time.perf_counter() - start) * 1000

    if scene is None:
        return ParseResponse(scene=None, node_count=0, processing_time_ms=round(elapsed, 1))

    return ParseResponse(
        scene=scene_to_dict(scene),
        node_count=sum(1 for _ in iter_nodes(scene)),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/path", response_model=PathResponse)
async def path(req: PathRequest) -> PathResponse:
    geometry = parse_path_data(req.d)
    return PathResponse(path=path_to_dict(geometry), bounds=list(geometry.bounds()))

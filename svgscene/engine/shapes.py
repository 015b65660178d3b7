"""Per-shape geometry builders (path, rect, circle, ellipse, line, polyline, polygon, use)."""

from __future__ import annotations

import logging

from svgscene.engine.cascade import resolve_style
from svgscene.engine.registry import GeometryRequest, shape_builder
from svgscene.geometry.affine import Affine2D
from svgscene.geometry.path import PathGeometry
from svgscene.svg.numbers import NumberScanner
from svgscene.svg.path_parser import parse_path_data
from svgscene.svg.units import resolve_length

logger = logging.getLogger(__name__)


@shape_builder("path", description="Path data interpreted from the d attribute")
def build_path(req: GeometryRequest) -> PathGeometry:
    geometry = parse_path_data(req.path.get("d"))
    fill_rule = resolve_style(req.path, "fill-rule", req.state.css_text)
    if fill_rule.strip().lower() == "evenodd":
        geometry.fill_rule = "evenodd"
    return geometry


@shape_builder("rect", description="Rectangle with optional rounded corners")
def build_rect(req: GeometryRequest) -> PathGeometry:
    x = req.length("x")
    y = req.length("y", horizontal=False)
    w = req.length("width")
    h = req.length("height", horizontal=False)

    geometry = PathGeometry()
    has_rx = req.path.has("rx")
    has_ry = req.path.has("ry")

    if has_rx or has_ry:
        rx = req.length("rx")
        ry = req.length("ry", horizontal=False)
        # A single radius applies to both axes.
        if not has_rx:
            rx = ry
        elif not has_ry:
            ry = rx
        geometry.add_rounded_rectangle(x, y, w, h, rx, ry)
    else:
        geometry.add_rectangle(x, y, w, h)

    return geometry


@shape_builder("circle", description="Circle as a bounding-box ellipse")
def build_circle(req: GeometryRequest) -> PathGeometry:
    cx = req.length("cx")
    cy = req.length("cy", horizontal=False)
    r = req.length("r")

    geometry = PathGeometry()
    geometry.add_ellipse(cx - r, cy - r, r * 2.0, r * 2.0)
    return geometry


@shape_builder("ellipse", description="Ellipse as a bounding-box ellipse")
def build_ellipse(req: GeometryRequest) -> PathGeometry:
    cx = req.length("cx")
    cy = req.length("cy", horizontal=False)
    rx = req.length("rx")
    ry = req.length("ry", horizontal=False)

    geometry = PathGeometry()
    geometry.add_ellipse(cx - rx, cy - ry, rx * 2.0, ry * 2.0)
    return geometry


@shape_builder("line", description="Single straight segment")
def build_line(req: GeometryRequest) -> PathGeometry:
    geometry = PathGeometry()
    geometry.move_to(req.length("x1"), req.length("y1", horizontal=False))
    geometry.line_to(req.length("x2"), req.length("y2", horizontal=False))
    return geometry


def parse_polygon(
    points: str | None,
    is_polyline: bool,
    view_box_width: float = 0.0,
    view_box_height: float = 0.0,
) -> PathGeometry:
    """Build a polyline/polygon from an ``x,y x,y …`` point list.

    Polygons always close; polylines close only when they end on their
    first point.
    """
    scanner = NumberScanner(points or "")
    geometry = PathGeometry()

    def next_point() -> tuple[float, float] | None:
        x_token, ok = scanner.next_number(allow_units=True)
        if not ok:
            return None
        y_token, ok = scanner.next_number(allow_units=True)
        if not ok:
            return None
        return (
            resolve_length(x_token, view_box_width),
            resolve_length(y_token, view_box_height),
        )

    first = next_point()
    if first is None:
        return geometry

    geometry.move_to(*first)
    last = None
    while (p := next_point()) is not None:
        geometry.line_to(*p)
        last = p

    if not is_polyline or (last is not None and last == first):
        geometry.close_subpath()

    return geometry


@shape_builder("polyline", description="Open point list, closed when it ends at its start")
def build_polyline(req: GeometryRequest) -> PathGeometry:
    return parse_polygon(
        req.path.get("points"), True, req.state.view_box_width, req.state.view_box_height
    )


@shape_builder("polygon", description="Closed point list")
def build_polygon(req: GeometryRequest) -> PathGeometry:
    return parse_polygon(
        req.path.get("points"), False, req.state.view_box_width, req.state.view_box_height
    )


@shape_builder("use", description="Geometry of the referenced element, offset by x/y")
def build_use(req: GeometryRequest) -> PathGeometry:
    target_id = req.path.href_id()
    target = req.builder.index.find(target_id)
    if target is None:
        logger.debug("<use> reference %r not found", target_id)
        return PathGeometry()

    max_depth = req.builder.config.max_use_depth
    if target_id in req.use_chain or len(req.use_chain) >= max_depth:
        logger.warning("Ignoring recursive <use> reference to %r", target_id)
        return PathGeometry()

    geometry = req.builder.build_geometry(target, req.state, req.use_chain + (target_id,))
    if geometry is None:
        return PathGeometry()

    dx = req.length("x")
    dy = req.length("y", horizontal=False)
    if dx or dy:
        geometry = geometry.transformed(Affine2D.translation(dx, dy))
    return geometry

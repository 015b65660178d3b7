"""Scene tree → plain JSON-able dicts."""

from __future__ import annotations

from typing import Any

from svgscene.engine.scene import (
    CompositeNode,
    FillSpec,
    GradientFill,
    GroupNode,
    Node,
    Rect,
    ShapeNode,
    SolidFill,
    StrokeSpec,
    TextNode,
    TextRun,
)
from svgscene.geometry.affine import Affine2D
from svgscene.geometry.path import PathGeometry


def _rect(r: Rect) -> list[float]:
    return [r.x, r.y, r.width, r.height]


def _transform(t: Affine2D) -> list[float]:
    return list(t.as_tuple())


def path_to_dict(path: PathGeometry) -> dict[str, Any]:
    return {
        "d": path.to_path_data(),
        "fill_rule": path.fill_rule,
        "subpaths": len(path.subpaths),
        "closed": [sp.closed for sp in path.subpaths],
    }


def fill_to_dict(fill: FillSpec) -> dict[str, Any]:
    if isinstance(fill, SolidFill):
        return {"type": "solid", "colour": fill.colour.to_hex()}
    if isinstance(fill, GradientFill):
        g = fill.gradient
        return {
            "type": "radial" if g.is_radial else "linear",
            "point1": list(g.point1),
            "point2": list(g.point2),
            "stops": [{"offset": s.offset, "colour": s.colour.to_hex()} for s in g.stops],
            "transform": _transform(g.transform),
        }
    return {"type": "none"}


def stroke_to_dict(stroke: StrokeSpec | None) -> dict[str, Any] | None:
    if stroke is None:
        return None
    return {
        "fill": fill_to_dict(stroke.fill),
        "width": stroke.width,
        "join": stroke.join.value,
        "cap": stroke.cap.value,
        "dash_lengths": list(stroke.dash_lengths),
    }


def _text_run(run: TextRun) -> dict[str, Any]:
    return {
        "type": "run",
        "text": run.text,
        "colour": run.colour.to_hex(),
        "bounds": _rect(run.bounds),
        "transform": _transform(run.transform),
    }


def scene_to_dict(node: Node) -> dict[str, Any]:
    """Recursively convert a scene node (and its children)."""
    out: dict[str, Any] = {"id": node.id, "visible": node.visible}

    if isinstance(node, ShapeNode):
        out["type"] = "shape"
        out["path"] = path_to_dict(node.path)
        out["fill"] = fill_to_dict(node.fill)
        out["stroke"] = stroke_to_dict(node.stroke)
        if node.clip_path_id:
            out["clip_path_id"] = node.clip_path_id
    elif isinstance(node, TextNode):
        out["type"] = "text"
        out["font"] = {
            "family": node.font.family,
            "size": node.font.size,
            "bold": node.font.bold,
            "italic": node.font.italic,
        }
        out["children"] = [
            _text_run(c) if isinstance(c, TextRun) else scene_to_dict(c) for c in node.children
        ]
    elif isinstance(node, GroupNode):
        out["type"] = "composite" if isinstance(node, CompositeNode) else "group"
        if isinstance(node, CompositeNode):
            out["content_area"] = _rect(node.content_area)
        out["children"] = [scene_to_dict(c) for c in node.children]

    return out

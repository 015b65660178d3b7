"""Normalized scene model — what the walk produces for the rendering layer.

Per-node results → ShapeNode / TextNode fields
Structure → GroupNode / CompositeNode children (a strict tree)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

from svgscene.geometry.affine import Affine2D
from svgscene.geometry.path import PathGeometry, Point
from svgscene.svg.colour import BLACK, Colour


class LineJoin(str, enum.Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class LineCap(str, enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


# --- Paint ---


@dataclass(frozen=True)
class ColorStop:
    offset: float
    colour: Colour


@dataclass
class GradientSpec:
    is_radial: bool
    point1: Point
    point2: Point
    stops: list[ColorStop] = field(default_factory=list)
    # Radial gradients carry their transform; linear ones have it baked into the points
    transform: Affine2D = field(default_factory=Affine2D)


@dataclass(frozen=True)
class NoFill:
    pass


@dataclass(frozen=True)
class SolidFill:
    colour: Colour = BLACK


@dataclass
class GradientFill:
    gradient: GradientSpec


FillSpec = Union[NoFill, SolidFill, GradientFill]


@dataclass
class StrokeSpec:
    fill: FillSpec
    width: float = 1.0
    join: LineJoin = LineJoin.MITER
    cap: LineCap = LineCap.BUTT
    dash_lengths: list[float] = field(default_factory=list)


@dataclass(frozen=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


# --- Nodes ---


@dataclass
class Node:
    id: str = ""
    visible: bool = True
    # True when the accumulated transform is already baked into the geometry
    transform_applied: bool = True


@dataclass
class GroupNode(Node):
    children: list[Node] = field(default_factory=list)


@dataclass
class CompositeNode(GroupNode):
    """Root or nested <svg>: a group with its own content area."""

    content_area: Rect = field(default_factory=Rect)


@dataclass
class ShapeNode(Node):
    path: PathGeometry = field(default_factory=PathGeometry)
    fill: FillSpec = field(default_factory=NoFill)
    stroke: StrokeSpec | None = None
    clip_path_id: str | None = None


@dataclass(frozen=True)
class FontSpec:
    family: str = ""
    size: float = 16.0
    bold: bool = False
    italic: bool = False


@dataclass
class TextRun:
    text: str
    font: FontSpec
    colour: Colour
    bounds: Rect
    transform: Affine2D = field(default_factory=Affine2D)


@dataclass
class TextNode(Node):
    font: FontSpec = field(default_factory=FontSpec)
    children: list[Union[TextRun, "TextNode"]] = field(default_factory=list)
    transform_applied: bool = False


def iter_nodes(node: Node):
    """Depth-first walk over a node and its descendants."""
    yield node
    if isinstance(node, (GroupNode, TextNode)):
        for child in node.children:
            if isinstance(child, Node):
                yield from iter_nodes(child)

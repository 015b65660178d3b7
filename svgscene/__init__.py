"""svgscene: SVG documents → normalized, renderer-agnostic scene trees."""

from svgscene.engine import ParseConfig, build_scene, parse_svg
from svgscene.engine.scene import (
    ColorStop,
    CompositeNode,
    FontSpec,
    GradientFill,
    GradientSpec,
    GroupNode,
    LineCap,
    LineJoin,
    NoFill,
    Rect,
    ShapeNode,
    SolidFill,
    StrokeSpec,
    TextNode,
    TextRun,
)
from svgscene.geometry.affine import Affine2D
from svgscene.geometry.path import PathGeometry
from svgscene.svg.path_parser import parse_path_data as parse_path

__version__ = "0.1.0"

__all__ = [
    "parse_svg",
    "build_scene",
    "parse_path",
    "ParseConfig",
    "Affine2D",
    "PathGeometry",
    "ColorStop",
    "CompositeNode",
    "FontSpec",
    "GradientFill",
    "GradientSpec",
    "GroupNode",
    "LineCap",
    "LineJoin",
    "NoFill",
    "Rect",
    "ShapeNode",
    "SolidFill",
    "StrokeSpec",
    "TextNode",
    "TextRun",
]

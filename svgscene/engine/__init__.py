"""svgscene tree-walk engine."""

from svgscene.engine.builder import SceneBuilder, build_scene, parse_svg
from svgscene.engine.config import ParseConfig
from svgscene.engine.registry import get_registry, shape_builder

__all__ = [
    "SceneBuilder",
    "build_scene",
    "parse_svg",
    "ParseConfig",
    "get_registry",
    "shape_builder",
]

"""Shape registry — every path-producing tag maps to a builder registered via decorator.

Usage:
    @shape_builder("circle", description="Circle as a bounding-box ellipse")
    def build_circle(req: GeometryRequest) -> PathGeometry:
        ...

Supporting a new shape tag = one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from svgscene.engine.context import ParserState
from svgscene.engine.document import ElementPath
from svgscene.svg.units import resolve_length

if TYPE_CHECKING:
    from svgscene.engine.builder import SceneBuilder
    from svgscene.geometry.path import PathGeometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeometryRequest:
    """Everything a shape builder may consult."""

    builder: "SceneBuilder"
    path: ElementPath
    state: ParserState
    # ids of <use> elements being expanded, outermost first
    use_chain: tuple[str, ...] = field(default_factory=tuple)

    def length(self, name: str, horizontal: bool = True, default: str = "") -> float:
        """Attribute ``name`` resolved against the view box width or height."""
        reference = self.state.view_box_width if horizontal else self.state.view_box_height
        return resolve_length(self.path.get(name, default) or default, reference)


@dataclass
class ShapeSpec:
    tag: str
    fn: Callable[[GeometryRequest], "PathGeometry"]
    description: str = ""


class ShapeRegistry:
    """Registry of shape builders keyed by (namespace-stripped) tag."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.tag in self._shapes:
            raise ValueError(f"Duplicate shape builder for tag: {spec.tag}")
        self._shapes[spec.tag] = spec
        logger.debug("Registered shape builder <%s>", spec.tag)

    def get(self, tag: str) -> ShapeSpec | None:
        return self._shapes.get(tag)

    def tags(self) -> list[str]:
        return sorted(self._shapes)

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape_builder(tag: str, *, description: str = ""):
    """Decorator to register a shape builder function."""

    def decorator(fn: Callable[[GeometryRequest], "PathGeometry"]):
        _registry.register(ShapeSpec(tag=tag, fn=fn, description=description))
        return fn

    return decorator

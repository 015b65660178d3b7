"""Gradient fill resolution.

Stops come from the ``xlink:href`` template chain first, then the gradient's
own <stop> children. Endpoints resolve in user space or against the target
path's bounding box, and the gradient transform is composed with the active
one. Linear gradients bake that transform into their endpoints by projecting
the transformed perpendicular, which keeps the perceived gradient direction
under non-uniform scaling.
"""

from __future__ import annotations

import logging

from svgscene.engine.cascade import resolve_style
from svgscene.engine.context import ParserState
from svgscene.engine.document import DocumentIndex, ElementPath
from svgscene.engine.scene import (
    ColorStop,
    FillSpec,
    GradientFill,
    GradientSpec,
    SolidFill,
)
from svgscene.geometry.affine import Affine2D
from svgscene.geometry.path import PathGeometry, Point
from svgscene.svg.colour import BLACK, parse_colour
from svgscene.svg.numbers import leading_float
from svgscene.svg.transform import parse_transform
from svgscene.svg.units import resolve_length

logger = logging.getLogger(__name__)

GRADIENT_TAGS = ("linearGradient", "radialGradient")


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def reproject_linear(p1: Point, p2: Point, transform: Affine2D) -> tuple[Point, Point]:
    """Map linear-gradient endpoints through ``transform``.

    The first point is transformed normally. The second is corrected so the
    axis stays perpendicular to the transformed isolines: the perpendicular
    of the axis goes through the linear part of the transform, and the
    transformed axis loses its component along it.
    """
    perp = transform.with_absolute_translation(0.0, 0.0).apply(p2[1] - p1[1], p1[0] - p2[0])
    n1 = transform.apply(*p1)
    n2 = transform.apply(*p2)

    perp_len2 = perp[0] * perp[0] + perp[1] * perp[1]
    if perp_len2 == 0.0:
        return n1, n2

    scale = (perp[0] * (n2[0] - n1[0]) + perp[1] * (n2[1] - n1[1])) / perp_len2
    return n1, (n2[0] - perp[0] * scale, n2[1] - perp[1] * scale)


class GradientResolver:
    """Resolves a gradient element into a FillSpec for one target path."""

    def __init__(self, index: DocumentIndex, state: ParserState) -> None:
        self.index = index
        self.state = state

    def collect_stops(
        self, gradient: ElementPath, _seen: frozenset[str] = frozenset()
    ) -> list[ColorStop]:
        """Template stops (via href) followed by this element's own stops."""
        stops: list[ColorStop] = []

        template_id = gradient.href_id()
        if template_id and template_id not in _seen:
            template = self.index.find(template_id)
            if template is not None:
                stops.extend(self.collect_stops(template, _seen | {template_id}))
            else:
                logger.debug("Gradient template %r not found", template_id)

        css = self.state.css_text
        for stop in gradient.children():
            if stop.tag != "stop":
                continue
            colour = parse_colour(resolve_style(stop, "stop-color", css), BLACK)
            opacity = leading_float(resolve_style(stop, "stop-opacity", css, "1"))
            colour = colour.with_multiplied_alpha(_clamp01(opacity))

            offset_text = stop.get("offset") or ""
            offset = leading_float(offset_text)
            if "%" in offset_text:
                offset *= 0.01

            stops.append(ColorStop(_clamp01(offset), colour))

        return stops

    def resolve(self, gradient: ElementPath, geometry: PathGeometry, opacity: float) -> FillSpec:
        stops = self.collect_stops(gradient, frozenset({gradient.get("id") or ""}))

        if stops:
            if stops[0].offset > 0.0:
                stops.insert(0, ColorStop(0.0, stops[0].colour))
            if stops[-1].offset < 1.0:
                stops.append(ColorStop(1.0, stops[-1].colour))
        else:
            stops = [ColorStop(0.0, BLACK), ColorStop(1.0, BLACK)]

        if opacity < 1.0:
            stops = [ColorStop(s.offset, s.colour.with_multiplied_alpha(opacity)) for s in stops]

        is_radial = gradient.tag == "radialGradient"
        user_space = (gradient.get("gradientUnits") or "").strip().lower() == "userspaceonuse"

        width = self.state.view_box_width
        height = self.state.view_box_height
        dx = dy = 0.0
        if not user_space:
            xmin, ymin, xmax, ymax = geometry.bounds()
            dx, dy = xmin, ymin
            width, height = xmax - xmin, ymax - ymin

        def point(x_name: str, x_default: str, y_name: str, y_default: str) -> Point:
            x_text = gradient.get(x_name) or x_default
            y_text = gradient.get(y_name) or y_default
            if user_space:
                return (dx + resolve_length(x_text, width), dy + resolve_length(y_text, height))
            return (
                dx + width * resolve_length(x_text, 1.0),
                dy + height * resolve_length(y_text, 1.0),
            )

        gradient_transform = parse_transform(gradient.get("gradientTransform")).followed_by(
            self.state.transform
        )

        if is_radial:
            # The fx/fy focal point is accepted but not modelled.
            center = point("cx", "50%", "cy", "50%")
            r_text = gradient.get("r") or "50%"
            radius = resolve_length(r_text, width) if user_space else width * resolve_length(r_text, 1.0)
            return GradientFill(
                GradientSpec(
                    is_radial=True,
                    point1=center,
                    point2=(center[0] + radius, center[1]),
                    stops=stops,
                    transform=gradient_transform,
                )
            )

        p1 = point("x1", "0%", "y1", "0%")
        p2 = point("x2", "100%", "y2", "0%")
        if p1 == p2:
            return SolidFill(stops[-1].colour)

        n1, n2 = reproject_linear(p1, p2, gradient_transform)
        return GradientFill(GradientSpec(is_radial=False, point1=n1, point2=n2, stops=stops))

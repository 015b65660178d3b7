"""Fill, stroke and clip resolution for shapes."""

from __future__ import annotations

from svgscene.engine.cascade import resolve_style
from svgscene.engine.context import ParserState
from svgscene.engine.document import DocumentIndex, ElementPath, parse_url
from svgscene.engine.gradient import GRADIENT_TAGS, GradientResolver
from svgscene.engine.scene import FillSpec, LineCap, LineJoin, NoFill, SolidFill, StrokeSpec
from svgscene.geometry.path import PathGeometry
from svgscene.svg.colour import BLACK, TRANSPARENT_BLACK, Colour, parse_colour
from svgscene.svg.numbers import leading_float, scan_numbers
from svgscene.svg.units import resolve_length

# SVG treats zero-length dashes as dots; renderers need a positive length.
_MIN_DASH = 0.001


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def resolve_colour(
    path: ElementPath, attribute: str, css_text: str, default: Colour = BLACK
) -> Colour:
    text = resolve_style(path, attribute, css_text)
    if text.strip() == "currentColor":
        return parse_colour(resolve_style(path, "color", css_text), BLACK)
    return parse_colour(text, default)


def resolve_paint(
    index: DocumentIndex,
    path: ElementPath,
    state: ParserState,
    geometry: PathGeometry,
    attribute: str,
    paint_opacity: str,
    overall_opacity: str,
    default: Colour,
) -> FillSpec:
    """Resolve ``fill`` or ``stroke`` on ``path`` into a FillSpec."""
    opacity = 1.0
    if overall_opacity:
        opacity = _clamp01(leading_float(overall_opacity))
    if paint_opacity:
        opacity *= _clamp01(leading_float(paint_opacity))

    paint = resolve_style(path, attribute, state.css_text)

    # A url that does not name a gradient falls through to the default colour.
    url_id = parse_url(paint)
    if url_id:
        target = index.find(url_id)
        if target is not None and target.tag in GRADIENT_TAGS:
            return GradientResolver(index, state).resolve(target, geometry, opacity)

    if paint.strip().lower() == "none":
        return NoFill()

    colour = resolve_colour(path, attribute, state.css_text, default).with_multiplied_alpha(opacity)
    if colour.is_transparent:
        return NoFill()
    return SolidFill(colour)


def resolve_fill(
    index: DocumentIndex, path: ElementPath, state: ParserState, geometry: PathGeometry
) -> FillSpec:
    css = state.css_text
    # Open outlines are not filled unless asked to be.
    default = BLACK if geometry.contains_closed_subpath() else TRANSPARENT_BLACK
    return resolve_paint(
        index,
        path,
        state,
        geometry,
        "fill",
        resolve_style(path, "fill-opacity", css),
        resolve_style(path, "opacity", css),
        default,
    )


def line_join(text: str) -> LineJoin:
    text = text.strip().lower()
    if text == "round":
        return LineJoin.ROUND
    if text == "bevel":
        return LineJoin.BEVEL
    return LineJoin.MITER


def line_cap(text: str) -> LineCap:
    text = text.strip().lower()
    if text == "round":
        return LineCap.ROUND
    if text == "square":
        return LineCap.SQUARE
    return LineCap.BUTT


def parse_dash_array(text: str, reference_size: float = 0.0) -> list[float]:
    """Dash lengths of ``stroke-dasharray``; empty when dashing is off."""
    text = (text or "").strip()
    if not text or text.lower() in ("none", "null"):
        return []

    dashes = [resolve_length(token, reference_size) for token in scan_numbers(text)]

    for i, length in enumerate(dashes):
        if length <= 0:
            if len(dashes) == 1:
                return []
            dashes[i] = _MIN_DASH
            paired = i ^ 1
            if paired < len(dashes) and dashes[paired] > _MIN_DASH:
                dashes[paired] -= _MIN_DASH

    return dashes


def resolve_stroke(
    index: DocumentIndex, path: ElementPath, state: ParserState, geometry: PathGeometry
) -> StrokeSpec | None:
    css = state.css_text
    stroke = resolve_style(path, "stroke", css)
    if not stroke or stroke.strip().lower() == "none":
        return None

    paint = resolve_paint(
        index,
        path,
        state,
        geometry,
        "stroke",
        resolve_style(path, "stroke-opacity", css),
        resolve_style(path, "opacity", css),
        TRANSPARENT_BLACK,
    )

    scale = state.transform.scale_factor
    width = scale * resolve_length(resolve_style(path, "stroke-width", css, "1"), state.view_box_width)
    dashes = parse_dash_array(resolve_style(path, "stroke-dasharray", css), state.view_box_width)

    return StrokeSpec(
        fill=paint,
        width=width,
        join=line_join(resolve_style(path, "stroke-linejoin", css)),
        cap=line_cap(resolve_style(path, "stroke-linecap", css)),
        dash_lengths=[d * scale for d in dashes],
    )


def resolve_clip_path(index: DocumentIndex, path: ElementPath, state: ParserState) -> str | None:
    """Id of the <clipPath> referenced by ``clip-path``; clipping itself is not applied."""
    url_id = parse_url(resolve_style(path, "clip-path", state.css_text))
    if not url_id:
        return None
    target = index.find(url_id)
    if target is None or target.tag != "clipPath":
        return None
    return url_id

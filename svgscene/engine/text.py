"""Font description and text metrics for <text>/<tspan> runs.

Glyph shaping is not done here; run widths and ascent come from Pillow's
FreeType fonts. A named family that cannot be loaded falls back to Pillow's
bundled default face at the requested size.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from PIL import ImageFont

from svgscene.engine.cascade import resolve_style
from svgscene.engine.document import ElementPath
from svgscene.engine.scene import FontSpec
from svgscene.svg.units import resolve_length

logger = logging.getLogger(__name__)


def font_for(path: ElementPath, css_text: str, default_size: float) -> FontSpec:
    size = resolve_length(resolve_style(path, "font-size", css_text), 1.0)
    if size <= 0:
        size = default_size
    return FontSpec(
        family=resolve_style(path, "font-family", css_text).strip().strip("'\""),
        size=size,
        bold="bold" in resolve_style(path, "font-weight", css_text).lower(),
        italic="italic" in resolve_style(path, "font-style", css_text).lower(),
    )


@lru_cache(maxsize=64)
def _load_font(family: str, size: float) -> ImageFont.FreeTypeFont:
    if family:
        try:
            return ImageFont.truetype(family, size)
        except OSError:
            logger.debug("Font %r not available, using default face", family)
    return ImageFont.load_default(size)


def text_width(font: FontSpec, text: str) -> float:
    return float(_load_font(font.family, font.size).getlength(text))


def font_metrics(font: FontSpec) -> tuple[float, float]:
    """(ascent, height) of the font in user units."""
    ascent, descent = _load_font(font.family, font.size).getmetrics()
    return float(ascent), float(ascent + descent)

"""viewBox → viewport fitting driven by ``preserveAspectRatio``."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from svgscene.engine.scene import Rect
from svgscene.geometry.affine import Affine2D


class Align(enum.Enum):
    MIN = "min"
    MID = "mid"
    MAX = "max"


@dataclass(frozen=True)
class Placement:
    stretch: bool = False
    # slice = scale to cover the viewport, meet = scale to fit inside it
    slice: bool = False
    x_align: Align = Align.MID
    y_align: Align = Align.MID


def parse_placement(text: str | None) -> Placement | None:
    """Parse ``preserveAspectRatio``. Empty or missing → None (no fitting)."""
    text = (text or "").strip()
    if not text:
        return None

    lowered = text.lower()
    if "none" in lowered:
        return Placement(stretch=True)

    if "xmin" in lowered:
        x_align = Align.MIN
    elif "xmax" in lowered:
        x_align = Align.MAX
    else:
        x_align = Align.MID

    if "ymin" in lowered:
        y_align = Align.MIN
    elif "ymax" in lowered:
        y_align = Align.MAX
    else:
        y_align = Align.MID

    return Placement(slice="slice" in lowered, x_align=x_align, y_align=y_align)


def _offset(align: Align, free_space: float) -> float:
    if align is Align.MIN:
        return 0.0
    if align is Align.MAX:
        return free_space
    return free_space / 2.0


def fit_transform(placement: Placement, source: Rect, dest: Rect) -> Affine2D:
    """Transform mapping ``source`` (the viewBox) onto ``dest`` (the viewport)."""
    if source.width <= 0 or source.height <= 0:
        return Affine2D()

    scale_x = dest.width / source.width
    scale_y = dest.height / source.height
    new_x, new_y = dest.x, dest.y

    if not placement.stretch:
        scale_x = max(scale_x, scale_y) if placement.slice else min(scale_x, scale_y)
        scale_y = scale_x
        new_x += _offset(placement.x_align, dest.width - source.width * scale_x)
        new_y += _offset(placement.y_align, dest.height - source.height * scale_y)

    return (
        Affine2D.translation(-source.x, -source.y)
        .scaled(scale_x, scale_y)
        .translated(new_x, new_y)
    )

"""Transform-list compiler: ``"translate(10) rotate(45 5 5)"`` → Affine2D."""

from __future__ import annotations

import logging
import math
import re

from svgscene.geometry.affine import Affine2D
from svgscene.svg.numbers import leading_float

logger = logging.getLogger(__name__)

_TRANSFORM_RE = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)?")
_ARG_SPLIT_RE = re.compile(r"[\s,]+")


def _transform_for(name: str, args: list[str]) -> Affine2D:
    nums = [leading_float(a) for a in args] + [0.0] * 6
    kind = name.lower()

    if kind in ("rotate", "skewx", "skewy") and not math.isfinite(nums[0]):
        logger.debug("Ignoring %s() with an out-of-range angle", name)
        return Affine2D()
    if kind == "matrix":
        return Affine2D(nums[0], nums[1], nums[2], nums[3], nums[4], nums[5])
    if kind == "translate":
        return Affine2D.translation(nums[0], nums[1])
    if kind == "scale":
        return Affine2D.scaling(nums[0], nums[1] if len(args) > 1 else nums[0])
    if kind == "rotate":
        return Affine2D.rotation(math.radians(nums[0]), nums[1], nums[2])
    if kind == "skewx":
        return Affine2D.shear(math.tan(math.radians(nums[0])), 0.0)
    if kind == "skewy":
        return Affine2D.shear(0.0, math.tan(math.radians(nums[0])))

    logger.debug("Ignoring unknown transform function %r", name)
    return Affine2D()


def parse_transform(text: str | None) -> Affine2D:
    """Compose a transform list.

    Each function is prepended, so the first listed transform is the last
    one applied to a point, i.e. the list reads outermost-first.
    """
    result = Affine2D()
    if not text:
        return result

    for m in _TRANSFORM_RE.finditer(text):
        args = [a for a in _ARG_SPLIT_RE.split(m.group(2) or "") if a]
        result = _transform_for(m.group(1), args).followed_by(result)

    return result

"""Length literal → user-space units."""

from __future__ import annotations

from svgscene.svg.numbers import leading_float

DPI = 96.0

_UNIT_SCALES = {
    "in": DPI,
    "mm": DPI / 25.4,
    "cm": DPI / 2.54,
    "pc": 15.0,
}


def resolve_length(literal: str, reference_size: float = 0.0) -> float:
    """Resolve ``literal`` to user units.

    Percentages scale ``reference_size``; ``in``/``mm``/``cm``/``pc`` are
    absolute; any other suffix (px, pt, em…) is read as plain user units.
    Malformed input resolves to 0.
    """
    text = (literal or "").strip()
    value = leading_float(text)

    if len(text) > 2:
        scale = _UNIT_SCALES.get(text[-2:])
        if scale is not None:
            return value * scale

    if len(text) > 1 and text[-1] == "%":
        return value * 0.01 * reference_size

    return value

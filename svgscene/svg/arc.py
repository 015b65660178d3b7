"""Elliptical arc: endpoint parametrization → center parametrization.

Follows the SVG implementation notes (F.6.5/F.6.6). Angles are radians from
the ellipse's local +x axis, positive toward +y.
"""

from __future__ import annotations

import math
from typing import NamedTuple

TWO_PI = 2.0 * math.pi


class ArcParameters(NamedTuple):
    center_x: float
    center_y: float
    rx: float
    ry: float
    start_angle: float
    delta_angle: float


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def solve_arc(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    rx: float,
    ry: float,
) -> ArcParameters:
    """Convert an arc from (x1, y1) to (x2, y2) into center form.

    ``rotation`` is the ellipse x-axis rotation in radians. Radii too small to
    span the chord are scaled up uniformly; the returned ``rx``/``ry`` are the
    radii actually used. ``delta_angle`` is positive when ``sweep`` is set and
    its magnitude lies in [0, 2π).
    """
    rx = abs(rx)
    ry = abs(ry)

    mid_x = (x1 - x2) * 0.5
    mid_y = (y1 - y2) * 0.5

    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    xp = cos_r * mid_x + sin_r * mid_y
    yp = cos_r * mid_y - sin_r * mid_x
    xp2 = xp * xp
    yp2 = yp * yp

    rx2 = rx * rx
    ry2 = ry * ry

    s = xp2 / rx2 + yp2 / ry2
    if s <= 1.0:
        denom = rx2 * yp2 + ry2 * xp2
        c = math.sqrt(max(0.0, (rx2 * ry2 - rx2 * yp2 - ry2 * xp2) / denom)) if denom > 0 else 0.0
        if large_arc == sweep:
            c = -c
    else:
        scale = math.sqrt(s)
        rx *= scale
        ry *= scale
        c = 0.0

    cpx = (rx * yp / ry) * c
    cpy = (-ry * xp / rx) * c

    center_x = (x1 + x2) * 0.5 + cos_r * cpx - sin_r * cpy
    center_y = (y1 + y2) * 0.5 + sin_r * cpx + cos_r * cpy

    ux = (xp - cpx) / rx
    uy = (yp - cpy) / ry
    vx = (-xp - cpx) / rx
    vy = (-yp - cpy) / ry

    u_len = math.hypot(ux, uy)
    v_len = math.hypot(vx, vy)
    if u_len == 0.0 or v_len == 0.0:
        return ArcParameters(center_x, center_y, rx, ry, 0.0, 0.0)

    start_angle = math.acos(_clamp_unit(ux / u_len))
    if uy < 0:
        start_angle = -start_angle

    delta_angle = math.acos(_clamp_unit((ux * vx + uy * vy) / (u_len * v_len)))
    if ux * vy - uy * vx < 0:
        delta_angle = -delta_angle

    if sweep:
        if delta_angle < 0:
            delta_angle += TWO_PI
    elif delta_angle > 0:
        delta_angle -= TWO_PI

    delta_angle = math.fmod(delta_angle, TWO_PI)

    return ArcParameters(center_x, center_y, rx, ry, start_angle, delta_angle)

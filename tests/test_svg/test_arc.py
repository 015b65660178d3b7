"""Tests for the arc solver."""

import math

import pytest

from svgscene.svg.arc import solve_arc


def test_quarter_arc_with_sweep():
    p = solve_arc(0, 0, 10, 10, 0.0, False, True, 10, 10)
    assert 0 < p.delta_angle < 2 * math.pi
    assert p.delta_angle == pytest.approx(math.pi / 2)
    # Center sits on a radius-10 circle through both endpoints
    assert math.hypot(p.center_x, p.center_y) == pytest.approx(10)
    assert math.hypot(10 - p.center_x, 10 - p.center_y) == pytest.approx(10)


def test_sweep_flag_sets_direction():
    p = solve_arc(0, 0, 10, 10, 0.0, False, False, 10, 10)
    assert -2 * math.pi < p.delta_angle < 0


def test_large_arc():
    p = solve_arc(0, 0, 10, 10, 0.0, True, True, 10, 10)
    assert p.delta_angle == pytest.approx(3 * math.pi / 2)


def test_radii_scaled_up_to_span_chord():
    p = solve_arc(0, 0, 20, 0, 0.0, False, True, 1, 1)
    assert p.rx == pytest.approx(10)
    assert p.ry == pytest.approx(10)
    assert (p.center_x, p.center_y) == pytest.approx((10, 0))
    assert abs(p.delta_angle) == pytest.approx(math.pi)


def test_endpoints_on_ellipse():
    p = solve_arc(5, 0, 0, 3, math.radians(0), False, True, 5, 3)
    sx = p.center_x + p.rx * math.cos(p.start_angle)
    sy = p.center_y + p.ry * math.sin(p.start_angle)
    ex = p.center_x + p.rx * math.cos(p.start_angle + p.delta_angle)
    ey = p.center_y + p.ry * math.sin(p.start_angle + p.delta_angle)
    assert (sx, sy) == pytest.approx((5, 0), abs=1e-9)
    assert (ex, ey) == pytest.approx((0, 3), abs=1e-9)

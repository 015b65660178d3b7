"""Tests for viewBox fitting."""

import pytest

from svgscene.engine.scene import Rect
from svgscene.engine.viewport import Align, Placement, fit_transform, parse_placement


def test_parse_placement():
    assert parse_placement("") is None
    assert parse_placement(None) is None
    assert parse_placement("none") == Placement(stretch=True)
    p = parse_placement("xMinYMax slice")
    assert p.slice
    assert (p.x_align, p.y_align) == (Align.MIN, Align.MAX)
    assert parse_placement("xMidYMid") == Placement()


def test_meet_alignment():
    src = Rect(0, 0, 10, 10)
    dest = Rect(0, 0, 200, 100)
    t = fit_transform(Placement(x_align=Align.MIN), src, dest)
    assert t.apply(10, 10) == pytest.approx((100, 100))
    t = fit_transform(Placement(x_align=Align.MAX), src, dest)
    assert t.apply(0, 0) == pytest.approx((100, 0))


def test_slice_covers():
    t = fit_transform(Placement(slice=True), Rect(0, 0, 10, 10), Rect(0, 0, 200, 100))
    assert t.apply(0, 0) == pytest.approx((0, -50))
    assert t.apply(10, 10) == pytest.approx((200, 150))


def test_source_origin_is_removed():
    t = fit_transform(Placement(stretch=True), Rect(5, 5, 10, 10), Rect(0, 0, 10, 10))
    assert t.apply(5, 5) == pytest.approx((0, 0))


def test_degenerate_source_is_identity():
    assert fit_transform(Placement(), Rect(0, 0, 0, 10), Rect(0, 0, 10, 10)).is_identity

"""Tests for the transform-list compiler."""

import pytest

from svgscene.geometry.affine import Affine2D
from svgscene.svg.transform import parse_transform


def test_empty_is_identity():
    assert parse_transform("").is_identity
    assert parse_transform(None).is_identity


def test_translate_and_scale():
    assert parse_transform("translate(10, 20)").apply(1, 1) == (11, 21)
    assert parse_transform("translate(10)").apply(0, 0) == (10, 0)
    assert parse_transform("scale(2)").apply(3, 4) == (6, 8)
    assert parse_transform("scale(2 3)").apply(1, 1) == (2, 3)


def test_list_applies_last_function_first():
    t = parse_transform("translate(10,0) scale(2)")
    assert t.apply(1, 1) == (12, 2)


def test_rotate_about_pivot():
    t = parse_transform("rotate(90 5 5)")
    assert t.apply(10, 5) == pytest.approx((5, 10))


def test_matrix():
    t = parse_transform("matrix(1 0 0 1 7 8)")
    assert t == Affine2D(1, 0, 0, 1, 7, 8)


def test_skew_and_case_insensitive():
    t = parse_transform("SKEWX(45)")
    assert t.apply(0, 10) == pytest.approx((10, 10))
    t = parse_transform("skewY(45)")
    assert t.apply(10, 0) == pytest.approx((10, 10))


def test_unknown_function_is_identity():
    assert parse_transform("wobble(3) translate(1 2)").apply(0, 0) == (1, 2)


def test_out_of_range_angle_is_identity():
    assert parse_transform("rotate(1e999) translate(1 2)").apply(0, 0) == (1, 2)
    assert parse_transform("skewX(1e999)").is_identity


def test_scale_factor():
    assert parse_transform("scale(2 8)").scale_factor == pytest.approx(4)
    assert parse_transform("rotate(30)").scale_factor == pytest.approx(1)

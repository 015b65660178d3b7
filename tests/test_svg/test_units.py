"""Tests for length resolution."""

import pytest

from svgscene.svg.units import resolve_length


def test_plain_and_px():
    assert resolve_length("12") == 12.0
    assert resolve_length("12px") == 12.0
    assert resolve_length(" 7.5 ") == 7.5


def test_percent():
    assert resolve_length("50%", 200) == 100.0
    assert resolve_length("50%") == 0.0


def test_absolute_units():
    assert resolve_length("1in", 0) == 96.0
    assert resolve_length("2cm", 0) == pytest.approx(75.59, abs=0.01)
    assert resolve_length("25.4mm", 0) == pytest.approx(96.0)
    assert resolve_length("2pc", 0) == 30.0


def test_malformed():
    assert resolve_length("") == 0.0
    assert resolve_length("abc") == 0.0
    assert resolve_length("%", 100) == 0.0

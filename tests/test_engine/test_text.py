"""Tests for <text>/<tspan> handling."""

import pytest

from svgscene import parse_svg
from svgscene.engine.config import ParseConfig
from svgscene.engine.scene import TextNode, TextRun
from svgscene.engine.text import font_for, font_metrics, text_width
from svgscene.svg.colour import Colour
from tests.conftest import TEXT_SVG, element_path, find_by_id


def test_text_runs_and_tspans():
    scene = parse_svg(TEXT_SVG)
    label = find_by_id(scene, "label")
    assert isinstance(label, TextNode)
    assert not label.transform_applied
    assert label.font.size == 20

    run, span = label.children
    assert isinstance(run, TextRun)
    assert run.text == "Hello"
    assert run.colour == Colour(255, 0, 0, 128)

    assert isinstance(span, TextNode)
    assert span.id == "span"
    assert span.font.bold and span.font.italic
    assert span.children[0].text == "world"


def test_middle_anchor_centres_run():
    scene = parse_svg(TEXT_SVG)
    run = find_by_id(scene, "label").children[0]
    ascent, height = font_metrics(run.font)
    assert run.bounds.width > 0
    assert run.bounds.x == pytest.approx(100 - run.bounds.width / 2)
    assert run.bounds.y == pytest.approx(50 - ascent)
    assert run.bounds.height == pytest.approx(height)


def test_end_anchor_and_offsets():
    scene = parse_svg(
        '<svg xmlns="http://www.w3.org/2000/svg"><text id="t" x="10 99" dx="5" y="20" '
        'text-anchor="end">abc</text></svg>'
    )
    run = find_by_id(scene, "t").children[0]
    assert run.bounds.x == pytest.approx(15 - run.bounds.width)


def test_whitespace_runs_skipped():
    scene = parse_svg('<svg xmlns="http://www.w3.org/2000/svg"><text id="t">  \n </text></svg>')
    assert find_by_id(scene, "t").children == []


def test_font_defaults_and_family():
    path = element_path("<text font-family=\"'Helvetica'\" font-size=\"0\"/>")
    font = font_for(path, "", ParseConfig().default_font_size)
    assert font.family == "Helvetica"
    assert font.size == 16
    assert not font.bold


def test_missing_font_falls_back_to_default_face():
    path = element_path('<text font-family="NoSuchFontFamily" font-size="12"/>')
    font = font_for(path, "", 16)
    assert text_width(font, "abc") > 0

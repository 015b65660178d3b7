"""Tests for scene serialization."""

import json

from svgscene import parse_svg
from svgscene.svg.path_parser import parse_path_data
from svgscene.svg.serializer import path_to_dict, scene_to_dict
from tests.conftest import CIRCLE_SVG, GRADIENT_SVG, TEXT_SVG


def test_path_to_dict():
    data = path_to_dict(parse_path_data("M0 0 L10 0 L10 10 Z M20 20 L30 30"))
    assert data["d"] == "M0,0 L10,0 L10,10 Z M20,20 L30,30"
    assert data["subpaths"] == 2
    assert data["closed"] == [True, False]
    assert data["fill_rule"] == "nonzero"


def test_scene_to_dict_shapes():
    data = scene_to_dict(parse_svg(CIRCLE_SVG))
    assert data["type"] == "composite"
    assert data["content_area"] == [0, 0, 24, 24]
    (shape,) = data["children"]
    assert shape["type"] == "shape"
    assert shape["fill"] == {"type": "none"}
    assert shape["stroke"]["fill"] == {"type": "solid", "colour": "#000000"}
    assert shape["stroke"]["cap"] == "round"


def test_scene_to_dict_gradients_and_text_are_json():
    for svg in (GRADIENT_SVG, TEXT_SVG):
        data = scene_to_dict(parse_svg(svg))
        assert json.loads(json.dumps(data)) == data

    data = scene_to_dict(parse_svg(GRADIENT_SVG))
    kinds = [c["fill"]["type"] for c in data["children"]]
    assert kinds == ["linear", "radial", "linear"]


def test_text_dict():
    data = scene_to_dict(parse_svg(TEXT_SVG))
    (text,) = data["children"]
    assert text["type"] == "text"
    assert text["font"]["size"] == 20
    assert text["children"][0]["text"] == "Hello"
    assert text["children"][1]["type"] == "text"

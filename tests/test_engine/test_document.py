"""Tests for the element-path view and id index."""

from svgscene.engine.document import DocumentIndex, parse_url
from tests.conftest import USE_SVG, element_path


def test_parse_url():
    assert parse_url("url(#grad)") == "grad"
    assert parse_url(" url( #grad ) ") == "grad"
    assert parse_url("red") == ""
    assert parse_url("") == ""


def test_index_finds_nested_ids():
    root = element_path(USE_SVG)
    index = DocumentIndex(root)
    box = index.find("box")
    assert box is not None
    assert box.tag == "rect"
    assert box.parent.tag == "defs"
    assert index.find("missing") is None
    assert index.find("") is None


def test_first_duplicate_id_wins():
    root = element_path('<svg><g id="x" fill="red"/><rect id="x"/></svg>')
    assert DocumentIndex(root).find("x").tag == "g"


def test_namespaced_attributes():
    root = element_path(USE_SVG)
    use = DocumentIndex(root).find("moved")
    assert use.tag == "use"
    assert use.href_id() == "box"
    assert use.get("xlink:href") == "#box"
    assert DocumentIndex(root).find("dangling").href_id() == "missing"


def test_contents_interleaves_text():
    path = element_path("<text>a<tspan>b</tspan>c</text>")
    items = list(path.contents())
    assert items[0] == "a"
    assert items[1].tag == "tspan"
    assert items[2] == "c"

"""Scene builder — walks the SVG element tree and emits the normalized scene.

Each element is handled with the ParserState of its subtree. <style> and
<defs><style> blocks add their CSS to the document-wide StyleSheet, so every
element walked after them sees it, wherever the block sits in the tree.
"""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET

import svgscene.engine.shapes  # noqa: F401  (registers the shape builders)
from svgscene.engine.cascade import resolve_inherited, resolve_style
from svgscene.engine.config import ParseConfig
from svgscene.engine.context import ParserState
from svgscene.engine.document import DocumentIndex, ElementPath
from svgscene.engine.fills import resolve_clip_path, resolve_colour, resolve_fill, resolve_stroke
from svgscene.engine.registry import GeometryRequest, ShapeRegistry, get_registry
from svgscene.engine.scene import (
    CompositeNode,
    GroupNode,
    Node,
    Rect,
    ShapeNode,
    TextNode,
    TextRun,
    iter_nodes,
)
from svgscene.engine.text import font_for, font_metrics, text_width
from svgscene.engine.viewport import fit_transform, parse_placement
from svgscene.geometry.path import PathGeometry
from svgscene.svg.colour import BLACK
from svgscene.svg.numbers import NumberScanner, leading_float, scan_numbers
from svgscene.svg.units import resolve_length

logger = logging.getLogger(__name__)


def _coordinate_list(text: str, reference_size: float) -> list[float]:
    return [resolve_length(token, reference_size) for token in scan_numbers(text)]


class SceneBuilder:
    """Builds the scene for one document."""

    def __init__(
        self,
        root: ElementPath,
        config: ParseConfig | None = None,
        registry: ShapeRegistry | None = None,
    ) -> None:
        self.root = root
        self.config = config or ParseConfig()
        self.registry = registry or get_registry()
        self.index = DocumentIndex(root)

    def build(self) -> CompositeNode | None:
        if self.root.tag != "svg":
            logger.debug("Root element <%s> is not <svg>", self.root.tag)
            return None

        start = time.perf_counter()
        scene = self._composite(self.root, ParserState.initial(self.config))
        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Scene built: %d nodes in %.1fms",
            sum(1 for _ in iter_nodes(scene)),
            elapsed,
        )
        return scene

    # --- Dispatch ---

    def build_node(self, path: ElementPath, state: ParserState) -> Node | None:
        tag = path.tag
        if tag == "switch":
            # Only the first <g> child is rendered, with its own attributes.
            group = path.first_child("g")
            return self.build_node(group, state) if group is not None else None

        if tag in ("g", "a"):
            node: Node | None = self._group(path, state)
        elif tag == "svg":
            node = self._composite(path, state)
        elif tag == "text":
            node = self._text(path, state)
        elif self.registry.get(tag) is not None:
            node = self._shape(path, state)
        else:
            logger.debug("Skipping unsupported element <%s>", tag)
            return None

        if node is not None:
            node.id = path.get("id") or ""
            if (path.get("display") or "").strip() == "none":
                node.visible = False
        return node

    def build_children(self, path: ElementPath, state: ParserState) -> list[Node]:
        nodes: list[Node] = []
        for child in path.children():
            if child.tag == "style":
                state.styles.add(child.all_text())
                continue
            if child.tag == "defs":
                style = child.first_child("style")
                if style is not None:
                    state.styles.add(style.all_text())
                continue

            node = self.build_node(child, state)
            if node is not None:
                nodes.append(node)
        return nodes

    def build_geometry(
        self, path: ElementPath, state: ParserState, use_chain: tuple[str, ...] = ()
    ) -> PathGeometry | None:
        """Untransformed geometry of a shape element, or None for non-shapes."""
        spec = self.registry.get(path.tag)
        if spec is None:
            return None
        return spec.fn(GeometryRequest(self, path, state, use_chain))

    # --- Containers ---

    def _composite(self, path: ElementPath, state: ParserState) -> CompositeNode:
        state = state.with_element_transform(path)
        fallback = self.config.fallback_viewport_size

        width_text = path.get("width")
        height_text = path.get("height")
        width = resolve_length(width_text, state.view_box_width) if width_text else state.width
        height = resolve_length(height_text, state.view_box_height) if height_text else state.height
        if width <= 0:
            width = fallback
        if height <= 0:
            height = fallback

        view_box_width = state.view_box_width
        view_box_height = state.view_box_height
        origin = (0.0, 0.0)
        transform = state.transform

        view_box = path.get("viewBox", None)
        if view_box is not None:
            scanner = NumberScanner(view_box)
            xy, ok_xy = scanner.next_pair(allow_units=True)
            wh, ok_wh = scanner.next_pair(allow_units=True)
            if ok_xy and ok_wh and wh[0] > 0 and wh[1] > 0:
                origin = xy
                view_box_width, view_box_height = wh
                placement = parse_placement(path.get("preserveAspectRatio"))
                if placement is not None:
                    transform = fit_transform(
                        placement,
                        Rect(xy[0], xy[1], wh[0], wh[1]),
                        Rect(0.0, 0.0, width, height),
                    ).followed_by(transform)
        else:
            if view_box_width == 0:
                view_box_width = width
            if view_box_height == 0:
                view_box_height = height

        child_state = ParserState(
            transform=transform,
            width=width,
            height=height,
            view_box_width=view_box_width,
            view_box_height=view_box_height,
            styles=state.styles,
        )
        return CompositeNode(
            children=self.build_children(path, child_state),
            content_area=Rect(origin[0], origin[1], view_box_width, view_box_height),
        )

    def _group(self, path: ElementPath, state: ParserState) -> GroupNode:
        state = state.with_element_transform(path)
        return GroupNode(children=self.build_children(path, state))

    # --- Shapes ---

    def _shape(self, path: ElementPath, state: ParserState) -> ShapeNode | None:
        state = state.with_element_transform(path)
        geometry = self.build_geometry(path, state)
        if geometry is None:
            return None

        return ShapeNode(
            path=geometry.transformed(state.transform),
            fill=resolve_fill(self.index, path, state, geometry),
            stroke=resolve_stroke(self.index, path, state, geometry),
            clip_path_id=resolve_clip_path(self.index, path, state),
        )

    # --- Text ---

    def _text(self, path: ElementPath, state: ParserState) -> TextNode:
        state = state.with_element_transform(path)
        css = state.css_text

        xs = _coordinate_list(resolve_inherited(path, "x"), state.view_box_width)
        ys = _coordinate_list(resolve_inherited(path, "y"), state.view_box_height)
        dxs = _coordinate_list(resolve_inherited(path, "dx"), state.view_box_width)
        dys = _coordinate_list(resolve_inherited(path, "dy"), state.view_box_height)
        x = (xs[0] if xs else 0.0) + (dxs[0] if dxs else 0.0)
        y = (ys[0] if ys else 0.0) + (dys[0] if dys else 0.0)

        font = font_for(path, css, self.config.default_font_size)
        anchor = resolve_style(path, "text-anchor", css).strip()
        ascent, line_height = font_metrics(font)

        opacity = max(0.0, min(1.0, leading_float(resolve_style(path, "fill-opacity", css, "1"))))
        colour = resolve_colour(path, "fill", css, BLACK).with_multiplied_alpha(opacity)

        node = TextNode(font=font)
        for item in path.contents():
            if isinstance(item, str):
                text = item.strip()
                if not text:
                    continue
                width = text_width(font, text)
                left = x
                if anchor == "middle":
                    left -= width / 2.0
                elif anchor == "end":
                    left -= width
                node.children.append(
                    TextRun(
                        text=text,
                        font=font,
                        colour=colour,
                        bounds=Rect(left, y - ascent, width, line_height),
                        transform=state.transform,
                    )
                )
            elif item.tag == "tspan":
                span = self._text(item, state)
                span.id = item.get("id") or ""
                node.children.append(span)

        return node


def build_scene(element: ET.Element, config: ParseConfig | None = None) -> CompositeNode | None:
    """Build the scene for an already-parsed document element."""
    return SceneBuilder(ElementPath(element), config).build()


def parse_svg(text: str | bytes, config: ParseConfig | None = None) -> CompositeNode | None:
    """Parse SVG markup into a scene. Malformed XML raises ``ET.ParseError``."""
    return build_scene(ET.fromstring(text), config)

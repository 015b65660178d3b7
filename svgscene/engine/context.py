"""ParserState — the immutable per-subtree snapshot threaded through the walk.

A subtree that introduces a transform or a nested viewport gets a replaced
copy; siblings before it and its parent keep theirs. <style> text is the one
document-wide value: every state of a parse shares the same StyleSheet.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from svgscene.engine.config import ParseConfig
from svgscene.engine.document import ElementPath
from svgscene.geometry.affine import Affine2D
from svgscene.svg.transform import parse_transform


class StyleSheet:
    """CSS text of the <style> blocks met so far, most recently parsed first."""

    def __init__(self) -> None:
        self.text = ""

    def add(self, css: str) -> None:
        self.text = f"{css}\n{self.text}"


@dataclass(frozen=True)
class ParserState:
    transform: Affine2D = field(default_factory=Affine2D)
    # Current viewport size
    width: float = 512.0
    height: float = 512.0
    # Size percentages resolve against (the nearest viewBox)
    view_box_width: float = 0.0
    view_box_height: float = 0.0
    styles: StyleSheet = field(default_factory=StyleSheet, compare=False)

    @classmethod
    def initial(cls, config: ParseConfig) -> ParserState:
        return cls(width=config.default_width, height=config.default_height)

    @property
    def css_text(self) -> str:
        return self.styles.text

    def with_element_transform(self, path: ElementPath) -> ParserState:
        """Prepend the element's own ``transform`` attribute, if any."""
        text = path.get("transform", None)
        if text is None:
            return self
        return replace(self, transform=parse_transform(text).followed_by(self.transform))

    def with_transform(self, transform: Affine2D) -> ParserState:
        return replace(self, transform=transform.followed_by(self.transform))

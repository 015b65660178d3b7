"""Parse configuration — defaults the document does not specify."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParseConfig:
    """Controls fallbacks used while building the scene."""

    # Initial viewport before the root <svg> sizes itself
    default_width: float = 512.0
    default_height: float = 512.0

    # Replaces a non-positive <svg> width/height
    fallback_viewport_size: float = 100.0

    # Text
    default_font_size: float = 16.0

    # <use> chains deeper than this are cut off
    max_use_depth: int = 32

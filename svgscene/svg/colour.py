"""Colour literals: ``#rgb``, ``#rrggbb``, ``rgb()``/``rgba()`` and CSS names."""

from __future__ import annotations

from typing import NamedTuple

from PIL import ImageColor

from svgscene.svg.numbers import leading_float, leading_int


class Colour(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def with_multiplied_alpha(self, multiplier: float) -> Colour:
        alpha = int(round(self.a * max(0.0, min(1.0, multiplier))))
        return self._replace(a=max(0, min(255, alpha)))

    @property
    def is_transparent(self) -> bool:
        return self.a == 0

    def to_hex(self) -> str:
        if self.a == 255:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


BLACK = Colour(0, 0, 0)
TRANSPARENT_BLACK = Colour(0, 0, 0, 0)


def _channel(value: float) -> int:
    return int(round(max(0.0, min(255.0, value))))


def _parse_hex(text: str) -> Colour:
    digits: list[int] = []
    for ch in text[1:7]:
        try:
            digits.append(int(ch, 16))
        except ValueError:
            break

    if len(digits) <= 3:
        digits += [0] * (3 - len(digits))
        return Colour(digits[0] * 0x11, digits[1] * 0x11, digits[2] * 0x11)

    digits += [0] * (6 - len(digits))
    return Colour(
        (digits[0] << 4) + digits[1],
        (digits[2] << 4) + digits[3],
        (digits[4] << 4) + digits[5],
    )


def _parse_rgb(text: str) -> Colour | None:
    open_bracket = text.find("(")
    close_bracket = text.find(")", open_bracket + 1)
    if open_bracket < 3 or close_bracket <= open_bracket:
        return None

    tokens = [t.strip() for t in text[open_bracket + 1 : close_bracket].split(",")]
    tokens = [t for t in tokens if t] + ["0", "0", "0"]

    if "%" in tokens[0]:
        r, g, b = (_channel(2.55 * leading_float(t)) for t in tokens[:3])
    else:
        r, g, b = (_channel(leading_int(t)) for t in tokens[:3])

    alpha = 255
    if text.startswith("rgba") and len(tokens) > 6:
        alpha = _channel(255 * max(0.0, min(1.0, leading_float(tokens[3]))))

    return Colour(r, g, b, alpha)


def parse_colour(text: str | None, default: Colour = BLACK) -> Colour:
    """Parse a colour literal, falling back to ``default`` for anything unknown."""
    text = (text or "").strip()
    if not text:
        return default

    if text.startswith("#"):
        return _parse_hex(text)

    if text.startswith("rgb"):
        colour = _parse_rgb(text)
        if colour is not None:
            return colour

    name = text.lower()
    if name == "transparent":
        return TRANSPARENT_BLACK
    if name in ImageColor.colormap:
        r, g, b = ImageColor.getrgb(name)[:3]
        return Colour(r, g, b)

    return default

"""2D affine transform.

Maps (x, y) to (a·x + c·y + e, b·x + d·y + f), the same layout as the SVG
``matrix(a b c d e f)`` function.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Affine2D:
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    # --- Constructors ---

    @classmethod
    def translation(cls, tx: float, ty: float = 0.0) -> Affine2D:
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> Affine2D:
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, radians: float, pivot_x: float = 0.0, pivot_y: float = 0.0) -> Affine2D:
        """Rotation about (pivot_x, pivot_y). Positive angles turn +x toward +y."""
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return cls(
            a=cos_a,
            b=sin_a,
            c=-sin_a,
            d=cos_a,
            e=pivot_x - cos_a * pivot_x + sin_a * pivot_y,
            f=pivot_y - sin_a * pivot_x - cos_a * pivot_y,
        )

    @classmethod
    def shear(cls, shear_x: float, shear_y: float) -> Affine2D:
        return cls(b=shear_y, c=shear_x)

    # --- Composition ---

    def followed_by(self, other: Affine2D) -> Affine2D:
        """The transform that applies ``self`` first, then ``other``."""
        return Affine2D(
            a=other.a * self.a + other.c * self.b,
            b=other.b * self.a + other.d * self.b,
            c=other.a * self.c + other.c * self.d,
            d=other.b * self.c + other.d * self.d,
            e=other.a * self.e + other.c * self.f + other.e,
            f=other.b * self.e + other.d * self.f + other.f,
        )

    def translated(self, tx: float, ty: float) -> Affine2D:
        return self.followed_by(Affine2D.translation(tx, ty))

    def scaled(self, sx: float, sy: float) -> Affine2D:
        return self.followed_by(Affine2D.scaling(sx, sy))

    def with_absolute_translation(self, tx: float, ty: float) -> Affine2D:
        return Affine2D(self.a, self.b, self.c, self.d, tx, ty)

    # --- Application ---

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    # --- Properties ---

    @property
    def is_identity(self) -> bool:
        return self == Affine2D()

    @property
    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    @property
    def scale_factor(self) -> float:
        """Average linear scale, used to scale stroke widths."""
        return math.sqrt(abs(self.determinant))

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

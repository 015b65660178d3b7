"""PathGeometry — ordered subpaths of tagged segments.

Every subpath begins with a MoveTo and may end with a Close. Arcs are kept as
native center-parametrized ArcTo segments until the path is transformed, at
which point they are flattened to cubics (an affine image of an elliptical arc
is an elliptical arc, but re-deriving its parameters is not worth it here).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier

from svgscene.geometry.affine import Affine2D
from svgscene.utils.geometry import KAPPA, merge_bboxes

Point = tuple[float, float]


def _point(z: complex) -> Point:
    return (float(z.real), float(z.imag))


@dataclass(frozen=True)
class MoveTo:
    end: Point

    def transformed(self, t: Affine2D) -> MoveTo:
        return MoveTo(t.apply(*self.end))


@dataclass(frozen=True)
class LineTo:
    end: Point

    def transformed(self, t: Affine2D) -> LineTo:
        return LineTo(t.apply(*self.end))


@dataclass(frozen=True)
class QuadraticTo:
    control: Point
    end: Point

    def transformed(self, t: Affine2D) -> QuadraticTo:
        return QuadraticTo(t.apply(*self.control), t.apply(*self.end))


@dataclass(frozen=True)
class CubicTo:
    control1: Point
    control2: Point
    end: Point

    def transformed(self, t: Affine2D) -> CubicTo:
        return CubicTo(t.apply(*self.control1), t.apply(*self.control2), t.apply(*self.end))


@dataclass(frozen=True)
class ArcTo:
    """Elliptical arc in center parametrization. Angles in radians."""

    start: Point
    center: Point
    rx: float
    ry: float
    rotation: float
    start_angle: float
    delta_angle: float
    end: Point

    @property
    def is_degenerate(self) -> bool:
        return abs(self.delta_angle) < 1e-12 or self.start == self.end

    def to_svgpathtools(self) -> Arc:
        return Arc(
            complex(*self.start),
            complex(self.rx, self.ry),
            math.degrees(self.rotation),
            abs(self.delta_angle) > math.pi,
            self.delta_angle > 0,
            complex(*self.end),
        )

    def to_cubics(self) -> list[CubicTo]:
        """One cubic per started quarter turn; the last ends exactly on ``end``."""
        if self.is_degenerate:
            return []
        spans = max(1, math.ceil(abs(self.delta_angle) / (math.pi / 2) - 1e-9))
        return [
            CubicTo(_point(c.control1), _point(c.control2), _point(c.end))
            for c in self.to_svgpathtools().as_cubic_curves(spans)
        ]


@dataclass(frozen=True)
class Close:
    end: Point

    def transformed(self, t: Affine2D) -> Close:
        return Close(t.apply(*self.end))


Segment = Union[MoveTo, LineTo, QuadraticTo, CubicTo, ArcTo, Close]


@dataclass
class Subpath:
    segments: list[Segment] = field(default_factory=list)

    @property
    def start(self) -> Point:
        return self.segments[0].end if self.segments else (0.0, 0.0)

    @property
    def end(self) -> Point:
        return self.segments[-1].end if self.segments else (0.0, 0.0)

    @property
    def closed(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[-1], Close)

    @property
    def points(self) -> list[Point]:
        """On-curve points in order, excluding the closing point."""
        return [seg.end for seg in self.segments if not isinstance(seg, Close)]

    @property
    def drawing_segment_count(self) -> int:
        return sum(1 for seg in self.segments if not isinstance(seg, (MoveTo, Close)))


@dataclass
class PathGeometry:
    subpaths: list[Subpath] = field(default_factory=list)
    fill_rule: str = "nonzero"

    # --- Building ---

    def move_to(self, x: float, y: float) -> None:
        self.subpaths.append(Subpath([MoveTo((x, y))]))

    def _active(self) -> Subpath:
        """The subpath drawing operations append to, opening one if needed."""
        if not self.subpaths:
            self.move_to(0.0, 0.0)
        elif self.subpaths[-1].closed:
            self.move_to(*self.subpaths[-1].start)
        return self.subpaths[-1]

    def line_to(self, x: float, y: float) -> None:
        self._active().segments.append(LineTo((x, y)))

    def quadratic_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._active().segments.append(QuadraticTo((cx, cy), (x, y)))

    def cubic_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self._active().segments.append(CubicTo((c1x, c1y), (c2x, c2y), (x, y)))

    def arc_to(
        self,
        center: Point,
        rx: float,
        ry: float,
        rotation: float,
        start_angle: float,
        delta_angle: float,
        end: Point,
    ) -> None:
        sp = self._active()
        sp.segments.append(ArcTo(sp.end, center, rx, ry, rotation, start_angle, delta_angle, end))

    def close_subpath(self) -> None:
        if self.subpaths and not self.subpaths[-1].closed:
            sp = self.subpaths[-1]
            sp.segments.append(Close(sp.start))

    def add_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        self.move_to(x, y)
        self.line_to(x + w, y)
        self.line_to(x + w, y + h)
        self.line_to(x, y + h)
        self.close_subpath()

    def add_rounded_rectangle(
        self, x: float, y: float, w: float, h: float, rx: float, ry: float
    ) -> None:
        rx = min(rx, w * 0.5)
        ry = min(ry, h * 0.5)
        hx = rx * (1.0 - KAPPA)
        hy = ry * (1.0 - KAPPA)
        x2, y2 = x + w, y + h

        self.move_to(x + rx, y)
        self.line_to(x2 - rx, y)
        self.cubic_to(x2 - hx, y, x2, y + hy, x2, y + ry)
        self.line_to(x2, y2 - ry)
        self.cubic_to(x2, y2 - hy, x2 - hx, y2, x2 - rx, y2)
        self.line_to(x + rx, y2)
        self.cubic_to(x + hx, y2, x, y2 - hy, x, y2 - ry)
        self.line_to(x, y + ry)
        self.cubic_to(x, y + hy, x + hx, y, x + rx, y)
        self.close_subpath()

    def add_ellipse(self, x: float, y: float, w: float, h: float) -> None:
        """Ellipse inscribed in the (x, y, w, h) box, as four cubics."""
        rx, ry = w * 0.5, h * 0.5
        cx, cy = x + rx, y + ry
        kx, ky = rx * KAPPA, ry * KAPPA

        self.move_to(cx, y)
        self.cubic_to(cx + kx, y, x + w, cy - ky, x + w, cy)
        self.cubic_to(x + w, cy + ky, cx + kx, y + h, cx, y + h)
        self.cubic_to(cx - kx, y + h, x, cy + ky, x, cy)
        self.cubic_to(x, cy - ky, cx - kx, y, cx, y)
        self.close_subpath()

    # --- Queries ---

    @property
    def is_empty(self) -> bool:
        return not self.subpaths

    def contains_closed_subpath(self) -> bool:
        return any(sp.closed for sp in self.subpaths)

    def transformed(self, t: Affine2D) -> PathGeometry:
        if t.is_identity:
            return PathGeometry([Subpath(list(sp.segments)) for sp in self.subpaths], self.fill_rule)

        result = PathGeometry(fill_rule=self.fill_rule)
        for sp in self.subpaths:
            segments: list[Segment] = []
            for seg in sp.segments:
                if isinstance(seg, ArcTo):
                    segments.extend(c.transformed(t) for c in seg.to_cubics())
                else:
                    segments.append(seg.transformed(t))
            result.subpaths.append(Subpath(segments))
        return result

    def bounds(self) -> tuple[float, float, float, float]:
        """Tight (xmin, ymin, xmax, ymax) over all segments, curves included."""
        boxes: list[tuple[float, float, float, float]] = []
        for sp in self.subpaths:
            x0, y0 = sp.start
            boxes.append((x0, y0, x0, y0))
            for seg in self.to_svgpathtools_segments(sp):
                xmin, xmax, ymin, ymax = seg.bbox()
                boxes.append((float(xmin), float(ymin), float(xmax), float(ymax)))
        return merge_bboxes(boxes)

    @staticmethod
    def to_svgpathtools_segments(sp: Subpath) -> list:
        """svgpathtools segments for one subpath; arcs stay exact ``Arc`` segments."""
        out: list = []
        current = complex(*sp.start)
        for seg in sp.segments:
            end = complex(*seg.end)
            if isinstance(seg, (LineTo, Close)):
                out.append(Line(current, end))
            elif isinstance(seg, QuadraticTo):
                out.append(QuadraticBezier(current, complex(*seg.control), end))
            elif isinstance(seg, CubicTo):
                out.append(
                    CubicBezier(current, complex(*seg.control1), complex(*seg.control2), end)
                )
            elif isinstance(seg, ArcTo) and not seg.is_degenerate:
                out.append(seg.to_svgpathtools())
            current = end
        return out

    def to_path_data(self, precision: int = 4) -> str:
        """Serialize back to absolute SVG path data (arcs flattened to cubics)."""

        def num(v: float) -> str:
            s = f"{v:.{precision}f}".rstrip("0").rstrip(".")
            return "0" if s in ("", "-0") else s

        def fmt(p: Point) -> str:
            return f"{num(p[0])},{num(p[1])}"

        parts: list[str] = []
        for sp in self.subpaths:
            for seg in sp.segments:
                if isinstance(seg, MoveTo):
                    parts.append(f"M{fmt(seg.end)}")
                elif isinstance(seg, LineTo):
                    parts.append(f"L{fmt(seg.end)}")
                elif isinstance(seg, QuadraticTo):
                    parts.append(f"Q{fmt(seg.control)} {fmt(seg.end)}")
                elif isinstance(seg, CubicTo):
                    parts.append(f"C{fmt(seg.control1)} {fmt(seg.control2)} {fmt(seg.end)}")
                elif isinstance(seg, ArcTo):
                    for c in seg.to_cubics():
                        parts.append(f"C{fmt(c.control1)} {fmt(c.control2)} {fmt(c.end)}")
                elif isinstance(seg, Close):
                    parts.append("Z")
        return " ".join(parts)

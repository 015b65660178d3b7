"""Path-data interpreter: the ``d`` attribute grammar → PathGeometry.

Parsing is permissive. A malformed operand skips one character and scanning
carries on; an unrecognized command letter stops interpretation and keeps
whatever geometry was already built.
"""

from __future__ import annotations

import logging
import math

from svgscene.geometry.path import PathGeometry, Point
from svgscene.svg.arc import solve_arc
from svgscene.svg.numbers import NumberScanner, leading_int

logger = logging.getLogger(__name__)

COMMAND_LETTERS = "MmLlHhVvCcSsQqTtAaZz"

_CUBIC_COMMANDS = "CcSs"
_QUADRATIC_COMMANDS = "QqTt"


def _add(p: Point, q: Point) -> Point:
    return (p[0] + q[0], p[1] + q[1])


def _reflect(anchor: Point, point: Point) -> Point:
    """Reflect ``point`` through ``anchor``."""
    return (2.0 * anchor[0] - point[0], 2.0 * anchor[1] - point[1])


class PathInterpreter:
    """Stateful walk over one path-data string."""

    def __init__(self, text: str) -> None:
        self.scanner = NumberScanner(text)
        self.path = PathGeometry()
        self.command = ""
        self.previous_command = ""
        self.relative = False
        self.current: Point = (0.0, 0.0)
        self.last_control: Point = (0.0, 0.0)
        self.subpath_start: Point = (0.0, 0.0)

    def run(self) -> PathGeometry:
        s = self.scanner
        s.skip_whitespace()

        while not s.at_end:
            ch = s.peek()
            if ch in COMMAND_LETTERS:
                s.advance()
                self.command = ch
                self.relative = ch.islower()
            elif ch.isalpha() or not self.command:
                logger.debug("Path data stopped at %r (offset %d)", ch, s.pos)
                break

            handler = getattr(self, f"_cmd_{self.command.upper()}")
            if not handler():
                s.advance()

            self.previous_command = self.command

        # Generators often end a closed outline back at its start without a Z.
        active = self.path.subpaths[-1] if self.path.subpaths else None
        if (
            active is not None
            and not active.closed
            and active.drawing_segment_count > 0
            and self.current == self.subpath_start
        ):
            self.path.close_subpath()

        return self.path

    # --- Operand helpers ---

    def _point(self) -> Point | None:
        p, ok = self.scanner.next_pair()
        if not ok:
            return None
        return _add(p, self.current) if self.relative else p

    def _number(self) -> float | None:
        value, ok = self.scanner.next_float()
        return value if ok else None

    # --- Commands ---

    def _cmd_M(self) -> bool:
        p = self._point()
        if p is None:
            return False
        if self.command in "Mm":
            self.subpath_start = p
            self.path.move_to(*p)
            # Further pairs after a moveto are implicit linetos.
            self.command = "l" if self.relative else "L"
        else:
            self.path.line_to(*p)
        self.current = self.last_control = p
        return True

    _cmd_L = _cmd_M

    def _cmd_H(self) -> bool:
        x = self._number()
        if x is None:
            return False
        if self.relative:
            x += self.current[0]
        self.current = self.last_control = (x, self.current[1])
        self.path.line_to(*self.current)
        return True

    def _cmd_V(self) -> bool:
        y = self._number()
        if y is None:
            return False
        if self.relative:
            y += self.current[1]
        self.current = self.last_control = (self.current[0], y)
        self.path.line_to(*self.current)
        return True

    def _cmd_C(self) -> bool:
        c1 = self._point()
        c2 = self._point() if c1 is not None else None
        end = self._point() if c2 is not None else None
        if end is None:
            return False
        self.path.cubic_to(*c1, *c2, *end)
        self.last_control = c2
        self.current = end
        return True

    def _cmd_S(self) -> bool:
        c2 = self._point()
        end = self._point() if c2 is not None else None
        if end is None:
            return False
        if self.previous_command and self.previous_command in _CUBIC_COMMANDS:
            c1 = _reflect(self.current, self.last_control)
        else:
            c1 = self.current
        self.path.cubic_to(*c1, *c2, *end)
        self.last_control = c2
        self.current = end
        return True

    def _cmd_Q(self) -> bool:
        control = self._point()
        end = self._point() if control is not None else None
        if end is None:
            return False
        self.path.quadratic_to(*control, *end)
        self.last_control = control
        self.current = end
        return True

    def _cmd_T(self) -> bool:
        end = self._point()
        if end is None:
            return False
        if self.previous_command and self.previous_command in _QUADRATIC_COMMANDS:
            control = _reflect(self.current, self.last_control)
        else:
            control = self.current
        self.path.quadratic_to(*control, *end)
        self.last_control = control
        self.current = end
        return True

    def _cmd_A(self) -> bool:
        s = self.scanner
        radii, ok = s.next_pair()
        if not ok:
            return False

        rotation = self._number()
        large_token, large_ok = s.next_number() if rotation is not None else ("", False)
        sweep_token, sweep_ok = s.next_number() if large_ok else ("", False)
        end = self._point() if sweep_ok else None
        if end is None:
            return False

        large_arc = leading_int(large_token) != 0
        sweep = leading_int(sweep_token) != 0
        rx, ry = abs(radii[0]), abs(radii[1])

        if end != self.current:
            if rx == 0.0 or ry == 0.0:
                self.path.line_to(*end)
            else:
                angle = math.radians(rotation)
                params = None
                # Overflowed operands ("1e999") degrade the arc to a straight line.
                if all(math.isfinite(v) for v in (*self.current, *end, angle, rx, ry)):
                    params = solve_arc(*self.current, *end, angle, large_arc, sweep, rx, ry)
                if params is None or not all(math.isfinite(v) for v in params):
                    self.path.line_to(*end)
                else:
                    self.path.arc_to(
                        (params.center_x, params.center_y),
                        params.rx,
                        params.ry,
                        angle,
                        params.start_angle,
                        params.delta_angle,
                        end,
                    )

        self.current = self.last_control = end
        return True

    def _cmd_Z(self) -> bool:
        self.path.close_subpath()
        self.current = self.last_control = self.subpath_start
        self.scanner.skip_whitespace()
        # A bare coordinate pair after Z starts a new subpath.
        self.command = "m" if self.relative else "M"
        return True


def parse_path_data(text: str | None) -> PathGeometry:
    """Interpret a path-data string. Never raises."""
    return PathInterpreter(text or "").run()

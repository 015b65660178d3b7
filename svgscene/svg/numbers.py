"""Number/coordinate scanner over comma/whitespace-delimited numeric streams.

Used for path data, polygon point lists, viewBox, coordinate lists and dash
arrays. Scanning never raises: a failed read reports ``ok=False`` and leaves
the cursor where it was.
"""

from __future__ import annotations

import math
import re

_SEPARATORS = frozenset(" \t\r\n\f,")
_WHITESPACE = frozenset(" \t\r\n\f")

# Leading numeric prefix, the way a lenient string→float conversion reads it.
_LEADING_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def leading_float(text: str) -> float:
    """Parse the leading number of ``text``; anything unparseable reads as 0."""
    m = _LEADING_NUMBER_RE.match(text)
    if not m:
        return 0.0
    return float(m.group(1))


def leading_int(text: str) -> int:
    """Integer part of the leading number (``"0.5"`` → 0, ``"12px"`` → 12).

    A literal too large for a float (``"1e999"``) reads as 0.
    """
    value = leading_float(text)
    return int(value) if math.isfinite(value) else 0


class NumberScanner:
    """Cursor over a numeric stream."""

    def __init__(self, text: str) -> None:
        self.text = text or ""
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return "" if self.at_end else self.text[self.pos]

    def advance(self, count: int = 1) -> None:
        self.pos = min(len(self.text), self.pos + count)

    def skip_whitespace(self) -> None:
        while not self.at_end and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def next_number(self, allow_units: bool = False) -> tuple[str, bool]:
        """Read the next numeric literal (with unit suffix when allowed)."""
        text = self.text
        n = len(text)
        origin = self.pos

        s = origin
        while s < n and text[s] in _SEPARATORS:
            s += 1
        start = s

        if s < n and text[s] in "+-":
            s += 1

        digits = 0
        while s < n and text[s].isdigit():
            s += 1
            digits += 1

        if s < n and text[s] == ".":
            s += 1
            while s < n and text[s].isdigit():
                s += 1
                digits += 1

        if digits == 0:
            self.pos = origin
            return "", False

        if s + 1 < n and text[s] in "eE" and (text[s + 1].isdigit() or text[s + 1] in "+-"):
            s += 2
            while s < n and text[s].isdigit():
                s += 1

        if allow_units:
            while s < n and text[s].isalpha():
                s += 1
            if s < n and text[s] == "%":
                s += 1

        token = text[start:s]

        while s < n and text[s] in _SEPARATORS:
            s += 1

        self.pos = s
        return token, True

    def next_float(self, allow_units: bool = False) -> tuple[float, bool]:
        token, ok = self.next_number(allow_units)
        return (leading_float(token) if ok else 0.0), ok

    def next_pair(self, allow_units: bool = False) -> tuple[tuple[float, float], bool]:
        """Read an x,y pair. A half-read pair still moves the cursor past x."""
        x, ok = self.next_float(allow_units)
        if not ok:
            return (0.0, 0.0), False
        y, ok = self.next_float(allow_units)
        if not ok:
            return (x, 0.0), False
        return (x, y), True


def scan_numbers(text: str, allow_units: bool = True) -> list[str]:
    """All numeric tokens of a list, stopping at the first non-number."""
    scanner = NumberScanner(text)
    tokens: list[str] = []
    while True:
        token, ok = scanner.next_number(allow_units)
        if not ok:
            break
        tokens.append(token)
    return tokens

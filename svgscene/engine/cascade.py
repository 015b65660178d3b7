"""Attribute/style cascade.

Presentation properties resolve in order: direct attribute, inline ``style``,
``.class { … }`` blocks from the collected CSS text, then the parent element,
then the caller's default. Geometric properties (x, y, dx, dy) only look at
direct attributes up the ancestor chain.
"""

from __future__ import annotations

import re
from functools import lru_cache

from svgscene.engine.document import ElementPath


@lru_cache(maxsize=256)
def _property_re(name: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![A-Za-z-]){re.escape(name)}(?![A-Za-z-])")


@lru_cache(maxsize=256)
def _class_re(class_name: str) -> re.Pattern[str]:
    return re.compile(rf"\.{re.escape(class_name)}\s*([{{,])", re.IGNORECASE)


def style_list_value(style_list: str, name: str, default: str = "") -> str:
    """Value of ``name`` in a ``key: value; key: value`` declaration list."""
    m = _property_re(name).search(style_list)
    if not m:
        return default
    colon = style_list.find(":", m.end())
    if colon < 0:
        return default
    end = style_list.find(";", colon)
    if end < 0:
        end = len(style_list)
    return style_list[colon + 1 : end].strip()


def class_block_value(css_text: str, class_name: str, name: str) -> str:
    """Look ``name`` up in each ``.class_name { … }`` block of ``css_text``.

    ``.name`` must be followed by optional whitespace then ``{``, or by a
    ``,`` (selector list, in which case the next ``{`` opens the block).
    """
    if not css_text or not class_name:
        return ""

    pos = 0
    pattern = _class_re(class_name)
    while True:
        m = pattern.search(css_text, pos)
        if not m:
            return ""
        open_brace = m.start(1) if m.group(1) == "{" else css_text.find("{", m.end())
        if open_brace < 0:
            return ""
        close_brace = css_text.find("}", open_brace)
        if close_brace < 0:
            return ""
        value = style_list_value(css_text[open_brace + 1 : close_brace], name)
        if value:
            return value
        pos = close_brace + 1


def _own_style(path: ElementPath, name: str, css_text: str) -> str:
    value = path.get(name, None)
    if value is not None:
        return value

    style = path.get("style")
    if style:
        value = style_list_value(style, name)
        if value:
            return value

    for class_name in (path.get("class") or "").split():
        value = class_block_value(css_text, class_name, name)
        if value:
            return value

    return ""


def resolve_style(
    path: ElementPath | None, name: str, css_text: str = "", default: str = ""
) -> str:
    """Effective value of a presentation property.

    ``inherit`` (and an empty direct attribute) defer to the parent.
    """
    while path is not None:
        value = _own_style(path, name, css_text).strip()
        if value and value != "inherit":
            return value
        path = path.parent
    return default


def resolve_inherited(path: ElementPath | None, name: str) -> str:
    """Nearest direct attribute ``name`` on the element or its ancestors."""
    while path is not None:
        value = path.get(name, None)
        if value is not None:
            return value
        path = path.parent
    return ""

"""Read-only view over the source element tree.

ElementPath pairs an element with the path of ancestors that led to it, so
the style cascade can walk upward without the tree storing parent links.
DocumentIndex resolves ``#id`` references against the whole document.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_NAMESPACE_PREFIXES = {
    "xlink": "http://www.w3.org/1999/xlink",
    "xml": "http://www.w3.org/XML/1998/namespace",
}


def strip_namespace(name: str) -> str:
    return name.split("}")[-1] if "}" in name else name


def _attribute_key(name: str) -> str:
    """``xlink:href`` → ``{http://www.w3.org/1999/xlink}href``."""
    prefix, sep, local = name.partition(":")
    if sep and prefix in _NAMESPACE_PREFIXES:
        return f"{{{_NAMESPACE_PREFIXES[prefix]}}}{local}"
    return name


@dataclass(frozen=True, eq=False)
class ElementPath:
    element: ET.Element
    parent: ElementPath | None = None

    @property
    def tag(self) -> str:
        tag = self.element.tag
        # Comments and processing instructions carry a callable tag.
        return strip_namespace(tag) if isinstance(tag, str) else ""

    def has(self, name: str) -> bool:
        return self.get(name, None) is not None

    def get(self, name: str, default: str | None = "") -> str | None:
        attrib = self.element.attrib
        key = _attribute_key(name)
        if key in attrib:
            return attrib[key]
        if name in attrib:
            return attrib[name]
        return default

    def child(self, element: ET.Element) -> ElementPath:
        return ElementPath(element, self)

    def children(self) -> Iterator[ElementPath]:
        for e in self.element:
            if isinstance(e.tag, str):
                yield ElementPath(e, self)

    def first_child(self, tag: str) -> ElementPath | None:
        for child in self.children():
            if child.tag == tag:
                return child
        return None

    def contents(self) -> Iterator[str | ElementPath]:
        """Text runs and child elements in document order."""
        if self.element.text:
            yield self.element.text
        for e in self.element:
            if isinstance(e.tag, str):
                yield ElementPath(e, self)
            if e.tail:
                yield e.tail

    def all_text(self) -> str:
        return "".join(self.element.itertext())

    def href_id(self) -> str:
        """Target id of a local ``xlink:href="#id"`` (or SVG 2 ``href``) link."""
        link = self.get("xlink:href") or self.get("href") or ""
        link = link.strip()
        return link[1:] if link.startswith("#") else ""


def parse_url(text: str) -> str:
    """``url(#grad)`` → ``grad``; anything that is not a url() reference → ``""``."""
    text = (text or "").strip()
    if text[:3].lower() != "url":
        return ""
    _, _, target = text.partition("#")
    if ")" in target:
        target = target.rpartition(")")[0]
    return target.strip()


class DocumentIndex:
    """Lazy, memoized id → ElementPath map rooted at the document element.

    Built by a pre-order depth-first walk of the root's descendants on the
    first lookup; the first element in document order wins for duplicate ids.
    """

    def __init__(self, root: ElementPath) -> None:
        self.root = root
        self._by_id: dict[str, ElementPath] | None = None

    def _build(self) -> dict[str, ElementPath]:
        by_id: dict[str, ElementPath] = {}
        stack = list(reversed(list(self.root.children())))
        while stack:
            path = stack.pop()
            element_id = path.get("id", None)
            if element_id is not None:
                by_id.setdefault(element_id, path)
            stack.extend(reversed(list(path.children())))
        logger.debug("Indexed %d element ids", len(by_id))
        return by_id

    def find(self, element_id: str) -> ElementPath | None:
        if not element_id:
            return None
        if self._by_id is None:
            self._by_id = self._build()
        return self._by_id.get(element_id)


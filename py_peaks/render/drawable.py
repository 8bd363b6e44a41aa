"""
Drawable document tree.

Renderers build a small tree of ``DrawableElement`` nodes (svg, defs,
polygon, path, linearGradient, stop). The tree is plain data; ``to_svg``
serializes it with ElementTree.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: Any) -> str:
    """Format a number the way it should appear in markup (no trailing .0)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class DrawableElement:
    """One node of a drawable document."""

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["DrawableElement"] = field(default_factory=list)

    def set(self, name: str, value: Any) -> "DrawableElement":
        self.attributes[name] = format_number(value)
        return self

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(name, default)

    def append(self, child: "DrawableElement") -> "DrawableElement":
        self.children.append(child)
        return child

    def insert(self, index: int, child: "DrawableElement") -> "DrawableElement":
        self.children.insert(index, child)
        return child

    def find(self, tag: str) -> Optional["DrawableElement"]:
        """First direct child with the given tag."""
        for child in self.children:
            if child.tag == tag:
                return child
        return None

    def iter(self, tag: Optional[str] = None) -> Iterator["DrawableElement"]:
        """Depth-first walk over this element and its descendants."""
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)

    def to_element(self) -> ET.Element:
        element = ET.Element(self.tag, self.attributes)
        for child in self.children:
            element.append(child.to_element())
        return element


def to_svg(document: DrawableElement) -> str:
    """Serialize a drawable tree rooted at an ``svg`` element."""
    root = document.to_element()
    if document.tag == "svg":
        root.set("xmlns", SVG_NS)
    return ET.tostring(root, encoding="unicode")

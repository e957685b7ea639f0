"""Data model for a node of the parsed drawing tree.

A DrawingElement is a read-only view of one SVG element: its kind (the
local tag name), namespace, attributes keyed by local name, and child
elements.  Attribute coercion goes through typed accessors so that every
primitive applies the same "missing means zero" rule.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from svg2geojson.core.exceptions import ElementDataError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from lxml.etree import _Element


@dataclass(frozen=True, slots=True)
class DrawingElement:
    """A single element of the drawing tree.

    Attributes:
        kind: Local tag name (e.g. ``"g"``, ``"path"``, ``"MetaInfo"``).
        namespace: Namespace URI of the tag, ``""`` if none.
        attributes: Attribute values keyed by local attribute name.
        children: Child elements in document order.
    """

    kind: str
    namespace: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[DrawingElement, ...] = ()

    @property
    def element_id(self) -> str | None:
        return self.text("id")

    @property
    def transform(self) -> str | None:
        return self.text("transform")

    def text(self, name: str) -> str | None:
        """Return the attribute value, or ``None`` if absent or blank."""
        value = self.attributes.get(name)
        if value is None or not value.strip():
            return None
        return value

    def number(self, name: str, default: float = 0.0) -> float:
        """Return the attribute as a float, ``default`` if absent or blank.

        Plain numbers and numbers with a ``px`` suffix are accepted.

        Raises:
            ElementDataError: If the value is not a finite number.
        """
        raw = self.text(name)
        if raw is None:
            return default
        value = raw.strip()
        if value.endswith("px"):
            value = value[:-2]
        try:
            number = float(value)
        except ValueError as exc:
            msg = f"Attribute {name}={raw!r} on <{self.kind}> is not a number"
            raise ElementDataError(msg) from exc
        if not math.isfinite(number):
            msg = f"Attribute {name}={raw!r} on <{self.kind}> is not finite"
            raise ElementDataError(msg)
        return number

    @classmethod
    def from_lxml(cls, elem: _Element) -> DrawingElement:
        """Build a DrawingElement tree from an lxml element.

        Comments, processing instructions, and entities are dropped.
        """
        from lxml import etree  # type: ignore[attr-defined]

        qname = etree.QName(elem)
        attributes = {etree.QName(key).localname: value for key, value in elem.attrib.items()}
        children = tuple(
            cls.from_lxml(child) for child in elem if isinstance(child.tag, str)
        )
        return cls(
            kind=qname.localname,
            namespace=qname.namespace or "",
            attributes=attributes,
            children=children,
        )

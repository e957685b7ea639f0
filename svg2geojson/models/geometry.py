"""Data model for converted geometries and the layers that collect them.

Geometries are immutable.  Primitive conversion produces them in the
element's local drawing space; ``transformed()`` maps every coordinate
through the running transform into longitude/latitude space.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, ClassVar

from svg2geojson.geometry.winding import normalize_rings

if TYPE_CHECKING:
    from svg2geojson.geometry.affine import AffineTransform, Point
    from svg2geojson.models.geojson import GeometryDict


@dataclass(frozen=True, slots=True)
class PointGeometry:
    coordinates: Point
    label: str = ""

    geom_type: ClassVar[str] = "Point"

    def transformed(self, transform: AffineTransform) -> PointGeometry:
        return replace(self, coordinates=transform.apply(self.coordinates))

    def to_dict(self) -> GeometryDict:
        return {"type": self.geom_type, "coordinates": list(self.coordinates)}


@dataclass(frozen=True, slots=True)
class LineStringGeometry:
    coordinates: list[Point]
    label: str = ""

    geom_type: ClassVar[str] = "LineString"

    def transformed(self, transform: AffineTransform) -> LineStringGeometry:
        return replace(self, coordinates=transform.apply_many(self.coordinates))

    def to_dict(self) -> GeometryDict:
        return {"type": self.geom_type, "coordinates": [list(c) for c in self.coordinates]}


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """A polygon; ``rings[0]`` is the exterior, the rest are holes.

    Attributes:
        rings: Closed coordinate rings.
        normalize_winding: Whether ring orientation must be enforced
            after transformation.  Rect rings are built in the correct
            order and opt out.
        label: Debug label.
    """

    rings: list[list[Point]]
    normalize_winding: bool = True
    label: str = ""

    geom_type: ClassVar[str] = "Polygon"

    def transformed(self, transform: AffineTransform) -> PolygonGeometry:
        return replace(self, rings=[transform.apply_many(ring) for ring in self.rings])

    def with_normalized_winding(self) -> PolygonGeometry:
        if not self.normalize_winding:
            return self
        return replace(self, rings=normalize_rings(self.rings))

    def to_dict(self) -> GeometryDict:
        return {
            "type": self.geom_type,
            "coordinates": [[list(c) for c in ring] for ring in self.rings],
        }


Geometry = PointGeometry | LineStringGeometry | PolygonGeometry


@dataclass(slots=True)
class Layer:
    """A named bucket of geometries, filled during the tree walk.

    Attributes:
        name: Layer name, ``""`` for content outside any named layer.
        geometries: Converted geometries in document order.
    """

    name: str
    geometries: list[Geometry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.geometries)

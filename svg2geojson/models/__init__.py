"""Data models and schemas.

Defines the data structures used throughout the converter:
- DrawingElement: Read-only node of the parsed SVG tree
- PointGeometry / LineStringGeometry / PolygonGeometry: Converted geometry
- Layer: Named bucket of geometries
- FeatureCollectionDict / NamedLayerDict: Output object graph
"""

from svg2geojson.models.element import DrawingElement
from svg2geojson.models.geojson import (
    FeatureCollectionDict,
    FeatureDict,
    GeometryDict,
    NamedLayerDict,
)
from svg2geojson.models.geometry import (
    Geometry,
    Layer,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
)

__all__ = [
    "DrawingElement",
    "FeatureCollectionDict",
    "FeatureDict",
    "Geometry",
    "GeometryDict",
    "Layer",
    "LineStringGeometry",
    "NamedLayerDict",
    "PointGeometry",
    "PolygonGeometry",
]

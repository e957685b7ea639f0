"""Assemble converted layers into GeoJSON FeatureCollections."""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg2geojson import __version__
from svg2geojson.core.constants import DEBUG_PROPERTY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svg2geojson.models.geojson import FeatureCollectionDict, FeatureDict, NamedLayerDict
    from svg2geojson.models.geometry import Geometry, Layer

CREATOR = f"svg2geojson v{__version__}"


def build_feature(geometry: Geometry, *, debug: bool = False) -> FeatureDict:
    return {
        "type": "Feature",
        "properties": {DEBUG_PROPERTY: geometry.label} if debug else None,
        "geometry": geometry.to_dict(),
    }


def build_feature_collection(
    geometries: Iterable[Geometry], *, debug: bool = False
) -> FeatureCollectionDict:
    return {
        "type": "FeatureCollection",
        "creator": CREATOR,
        "features": [build_feature(g, debug=debug) for g in geometries],
    }


def build_named_layers(layers: Iterable[Layer], *, debug: bool = False) -> list[NamedLayerDict]:
    """Return one ``{"name", "geo"}`` entry per layer, in layer order."""
    return [
        {"name": layer.name, "geo": build_feature_collection(layer.geometries, debug=debug)}
        for layer in layers
    ]

"""Typed shapes of the GeoJSON object graph returned by the converter.

The converter returns plain dicts and lists so that any JSON encoder
can serialise the result.  These ``TypedDict`` definitions make the
structure explicit for type checkers.
"""

from __future__ import annotations

from typing import Any, TypedDict


class GeometryDict(TypedDict):
    type: str
    coordinates: list[Any]


class FeatureDict(TypedDict):
    """One converted drawing primitive."""

    type: str
    properties: dict[str, str] | None
    geometry: GeometryDict


class FeatureCollectionDict(TypedDict):
    """All features of one layer, tagged with the converter version."""

    type: str
    creator: str
    features: list[FeatureDict]


class NamedLayerDict(TypedDict):
    """Layer-mode output entry: layer name plus its collection."""

    name: str
    geo: FeatureCollectionDict

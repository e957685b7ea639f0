"""Shapely validity diagnostics for converted polygons.

Diagnostics never alter the output: an invalid polygon is reported and
still emitted, since self-intersections are usually a property of the
source drawing rather than of the conversion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svg2geojson.geometry.affine import Point


def explain_invalid_polygon(rings: Sequence[Sequence[Point]]) -> str | None:
    """Return why the polygon is invalid, or ``None`` if shapely accepts it.

    The first ring is the exterior, the rest are holes.
    """
    from shapely.errors import GEOSException
    from shapely.geometry import Polygon
    from shapely.validation import explain_validity

    if not rings:
        return "Polygon has no rings"

    try:
        poly = Polygon(rings[0], rings[1:])
    except (ValueError, GEOSException) as exc:
        return f"Cannot build polygon: {exc}"

    if poly.is_valid:
        return None
    return explain_validity(poly)

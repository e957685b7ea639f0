"""Per-kind conversion of drawing primitives into local-space geometry.

Every converter takes the element and the flattening tolerance and
returns a geometry in the element's own coordinate space, or ``None``
when the element draws nothing.  The tree walker applies the running
transform and winding normalization afterwards.

Malformed element data raises ``ElementDataError``.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from svg2geojson.core.exceptions import ElementDataError
from svg2geojson.geometry.flatten import circle_path_data, flatten_path_data
from svg2geojson.models.geometry import (
    Geometry,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
)

if TYPE_CHECKING:
    from svg2geojson.geometry.affine import Point
    from svg2geojson.models.element import DrawingElement

PrimitiveConverter = Callable[["DrawingElement", float], Geometry | None]

_POINTS_SEPARATOR_RE = re.compile(r"[\s,]+")


# ---------------------------------------------------------------------------
# Converters
# ---------------------------------------------------------------------------


def convert_path(element: DrawingElement, tolerance: float) -> Geometry | None:
    path_data = element.text("d")
    if path_data is None:
        return None
    return path_data_to_geometry(path_data, tolerance)


def convert_rect(element: DrawingElement, tolerance: float) -> Geometry | None:
    x, y = element.number("x"), element.number("y")
    width, height = element.number("width"), element.number("height")
    ring = [
        (x, y),
        (x, y + height),
        (x + width, y + height),
        (x + width, y),
        (x, y),
    ]
    return PolygonGeometry(rings=[ring], normalize_winding=False)


def convert_line(element: DrawingElement, tolerance: float) -> Geometry | None:
    start = (element.number("x1"), element.number("y1"))
    end = (element.number("x2"), element.number("y2"))
    return LineStringGeometry(coordinates=[start, end])


def convert_circle(element: DrawingElement, tolerance: float) -> Geometry | None:
    r = element.number("r")
    if r == 0:
        return None
    if r < 0:
        msg = f"Circle radius must not be negative, got {r}"
        raise ElementDataError(msg)
    return path_data_to_geometry(
        circle_path_data(element.number("cx"), element.number("cy"), r), tolerance
    )


def convert_polygon(element: DrawingElement, tolerance: float) -> Geometry | None:
    points = parse_points(element)
    if not points:
        return None
    return PolygonGeometry(rings=[[*points, points[0]]])


def convert_polyline(element: DrawingElement, tolerance: float) -> Geometry | None:
    # Polylines repeat their first point at the end.
    points = parse_points(element)
    if not points:
        return None
    return LineStringGeometry(coordinates=[*points, points[0]])


PRIMITIVE_CONVERTERS: dict[str, PrimitiveConverter] = {
    "path": convert_path,
    "rect": convert_rect,
    "line": convert_line,
    "circle": convert_circle,
    "polygon": convert_polygon,
    "polyline": convert_polyline,
}


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def path_data_to_geometry(path_data: str, tolerance: float) -> Geometry | None:
    """Convert path data to a Polygon, LineString or Point.

    Several subpaths, or a single closed one, make a Polygon with one
    ring per subpath.  A single open subpath makes a LineString, or a
    Point when it has only one coordinate.
    """
    polylines = flatten_path_data(path_data, tolerance)
    if not polylines:
        return None

    if len(polylines) > 1 or polylines[0].closed:
        return PolygonGeometry(rings=[_closed_ring(p.points) for p in polylines])

    points = polylines[0].points
    if len(points) == 1:
        return PointGeometry(coordinates=points[0])
    return LineStringGeometry(coordinates=points)


def parse_points(element: DrawingElement) -> list[Point]:
    """Parse a ``points`` attribute into coordinate pairs.

    An unpaired trailing number is ignored.

    Raises:
        ElementDataError: If a token is not a finite number.
    """
    raw = element.text("points")
    if raw is None:
        return []
    tokens = [t for t in _POINTS_SEPARATOR_RE.split(raw.strip()) if t]
    try:
        numbers = [float(t) for t in tokens]
    except ValueError as exc:
        msg = f"Malformed points list on <{element.kind}>: {raw!r}"
        raise ElementDataError(msg) from exc
    if not all(math.isfinite(n) for n in numbers):
        msg = f"Non-finite coordinate in points list on <{element.kind}>: {raw!r}"
        raise ElementDataError(msg)
    return [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]


def _closed_ring(points: list[Point]) -> list[Point]:
    if points[0] == points[-1]:
        return points
    return [*points, points[0]]

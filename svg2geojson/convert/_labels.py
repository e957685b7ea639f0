"""Debug labels identifying the source element of each feature.

Only used when debug output is requested; the tree walker calls
``debug_label`` after a geometry has been converted successfully.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from svg2geojson.convert._primitives import parse_points

if TYPE_CHECKING:
    from svg2geojson.models.element import DrawingElement

# Path command plus its first coordinate pair, e.g. "M10.5,20".
_PATH_START_RE = re.compile(r"^.+?\d.*?[\s,-].*?\d.*?(?=[\s,a-z-]|$)", re.IGNORECASE)


def debug_label(element: DrawingElement) -> str:
    """Return ``#<id>`` if the element has one, else a short description."""
    element_id = element.element_id
    if element_id is not None:
        return f"#{element_id}"

    kind = element.kind
    if kind == "path":
        path_data = (element.text("d") or "").strip()
        match = _PATH_START_RE.match(path_data)
        return f"path @ {match.group(0) if match else _excerpt(path_data)}"
    if kind == "rect":
        return f"rect @ {_pair(element, 'x', 'y')}"
    if kind == "line":
        return f"line @ {_pair(element, 'x1', 'y1')}"
    if kind == "circle":
        return f"circle @ {_pair(element, 'cx', 'cy')}"
    if kind in ("polygon", "polyline"):
        points = parse_points(element)
        first_two = [*points, *points[:1]][:2]
        return f"{kind} @ " + ",".join(_fmt(v) for point in first_two for v in point)
    return kind


def _pair(element: DrawingElement, x_name: str, y_name: str) -> str:
    return f"{_fmt(element.number(x_name))},{_fmt(element.number(y_name))}"


def _fmt(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def _excerpt(text: str, limit: int = 20) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."

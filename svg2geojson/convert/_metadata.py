"""Control point extraction from the Prognoz ``MetaInfo`` block.

The georeference lives in a ``MetaInfo`` child of ``<svg>`` (Prognoz
namespace) holding a ``Geo`` element with exactly three ``GeoItem``
entries, each carrying drawing-space ``X``/``Y`` and geographic
``Longitude``/``Latitude`` attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg2geojson.core.constants import (
    CONTROL_POINT_COUNT,
    GEO_ITEM_TAG,
    GEO_TAG,
    META_INFO_TAG,
    METADATA_HELP_URL,
    PROGNOZ_NAMESPACE,
)
from svg2geojson.core.exceptions import CalibrationError, ElementDataError
from svg2geojson.geometry.calibration import ControlPoint

if TYPE_CHECKING:
    from svg2geojson.models.element import DrawingElement

_GEO_ITEM_ATTRIBUTES = ("X", "Y", "Longitude", "Latitude")


def find_geo_items(root: DrawingElement) -> list[DrawingElement]:
    """Return the ``GeoItem`` elements of the root's georeference block."""
    meta = next(
        (
            child
            for child in root.children
            if child.namespace == PROGNOZ_NAMESPACE and child.kind == META_INFO_TAG
        ),
        None,
    )
    if meta is None:
        return []
    geo = next((child for child in meta.children if child.kind == GEO_TAG), None)
    if geo is None:
        return []
    return [child for child in geo.children if child.kind == GEO_ITEM_TAG]


def read_control_points(root: DrawingElement) -> list[ControlPoint]:
    """Read the three control points from the root ``<svg>`` element.

    Raises:
        CalibrationError: If the ``MetaInfo/Geo`` block is missing, does
            not hold exactly three ``GeoItem`` entries, or an entry lacks
            a numeric ``X``, ``Y``, ``Longitude`` or ``Latitude``.
    """
    items = find_geo_items(root)
    if len(items) != CONTROL_POINT_COUNT:
        msg = (
            f"Found {len(items)} GeoItem control point(s), expected {CONTROL_POINT_COUNT}. "
            "The SVG must include Prognoz MetaInfo as a child of <svg>, containing "
            f"{CONTROL_POINT_COUNT} GeoItems. See: {METADATA_HELP_URL}"
        )
        raise CalibrationError(msg)

    return [_control_point(item, index) for index, item in enumerate(items)]


def _control_point(item: DrawingElement, index: int) -> ControlPoint:
    missing = [name for name in _GEO_ITEM_ATTRIBUTES if item.text(name) is None]
    if missing:
        msg = f"GeoItem {index} is missing attribute(s): {', '.join(missing)}"
        raise CalibrationError(msg)
    try:
        x, y, lon, lat = (item.number(name) for name in _GEO_ITEM_ATTRIBUTES)
    except ElementDataError as exc:
        msg = f"GeoItem {index} has a non-numeric attribute: {exc}"
        raise CalibrationError(msg) from exc
    return ControlPoint(source=(x, y), target=(lon, lat))

"""Geometry primitives: affine transforms, calibration, flattening, winding."""

from svg2geojson.geometry.affine import AffineTransform, compose, parse_transform_attribute
from svg2geojson.geometry.calibration import ControlPoint, calibrate_triangle
from svg2geojson.geometry.flatten import Polyline, circle_path_data, flatten_path_data
from svg2geojson.geometry.winding import (
    normalize_rings,
    ring_has_required_winding,
    ring_winding_sum,
)

__all__ = [
    "AffineTransform",
    "ControlPoint",
    "Polyline",
    "calibrate_triangle",
    "circle_path_data",
    "compose",
    "flatten_path_data",
    "normalize_rings",
    "parse_transform_attribute",
    "ring_has_required_winding",
    "ring_winding_sum",
]

"""Georeferenced SVG to GeoJSON converter.

Reads an SVG drawing carrying three Prognoz ``GeoItem`` control points,
derives the affine map from drawing units to longitude/latitude, and
converts every path, rect, line, circle, polygon and polyline into
GeoJSON features, optionally split into one collection per layer.
"""

__version__ = "0.1.0"

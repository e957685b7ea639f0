"""Tests for converted geometry models and polygon diagnostics.

Covers:
- GeoJSON geometry dicts use plain lists
- Transforming geometries leaves the originals untouched
- Winding normalization opt-out for rect rings
- Shapely validity explanations
"""

from __future__ import annotations

from svg2geojson.geometry.affine import AffineTransform
from svg2geojson.geometry.validation import explain_invalid_polygon
from svg2geojson.models.geometry import (
    Layer,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
)

SCALE = AffineTransform(0.5, 0, 0, 0.5, 1, 1)
SQUARE_CCW = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]


class TestToDict:
    def test_point(self) -> None:
        assert PointGeometry((1.5, 2.0)).to_dict() == {"type": "Point", "coordinates": [1.5, 2.0]}

    def test_line_string(self) -> None:
        assert LineStringGeometry([(0.0, 0.0), (1.0, 1.0)]).to_dict() == {
            "type": "LineString",
            "coordinates": [[0.0, 0.0], [1.0, 1.0]],
        }

    def test_polygon(self) -> None:
        geom = PolygonGeometry(rings=[SQUARE_CCW])
        assert geom.to_dict()["type"] == "Polygon"
        assert geom.to_dict()["coordinates"] == [[list(p) for p in SQUARE_CCW]]


class TestTransformed:
    def test_point(self) -> None:
        assert PointGeometry((2.0, 4.0)).transformed(SCALE).coordinates == (2.0, 3.0)

    def test_keeps_label_and_original(self) -> None:
        original = LineStringGeometry([(0.0, 0.0), (2.0, 2.0)], label="#road")
        moved = original.transformed(SCALE)
        assert moved.coordinates == [(1.0, 1.0), (2.0, 2.0)]
        assert moved.label == "#road"
        assert original.coordinates == [(0.0, 0.0), (2.0, 2.0)]

    def test_polygon_rings(self) -> None:
        moved = PolygonGeometry(rings=[SQUARE_CCW]).transformed(SCALE)
        assert moved.rings[0][2] == (1.5, 1.5)


class TestWindingOptOut:
    def test_normalized_by_default(self) -> None:
        geom = PolygonGeometry(rings=[SQUARE_CCW]).with_normalized_winding()
        assert geom.rings[0] == list(reversed(SQUARE_CCW))

    def test_rect_rings_left_alone(self) -> None:
        geom = PolygonGeometry(rings=[SQUARE_CCW], normalize_winding=False)
        assert geom.with_normalized_winding() is geom


class TestLayer:
    def test_len_counts_geometries(self) -> None:
        layer = Layer("Roads")
        layer.geometries.append(PointGeometry((0.0, 0.0)))
        assert len(layer) == 1
        assert Layer("").geometries == []


class TestExplainInvalidPolygon:
    def test_valid_square(self) -> None:
        assert explain_invalid_polygon([SQUARE_CCW]) is None

    def test_valid_with_hole(self) -> None:
        outer = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0), (0.0, 0.0)]
        hole = [(2.0, 2.0), (4.0, 2.0), (4.0, 4.0), (2.0, 4.0), (2.0, 2.0)]
        assert explain_invalid_polygon([outer, hole]) is None

    def test_bowtie_self_intersects(self) -> None:
        bowtie = [(0.0, 0.0), (10.0, 10.0), (10.0, 0.0), (0.0, 10.0), (0.0, 0.0)]
        reason = explain_invalid_polygon([bowtie])
        assert reason is not None
        assert "Self-intersection" in reason

    def test_too_few_points(self) -> None:
        reason = explain_invalid_polygon([[(0.0, 0.0), (1.0, 1.0)]])
        assert reason is not None
        assert reason.startswith("Cannot build polygon")

    def test_no_rings(self) -> None:
        assert explain_invalid_polygon([]) == "Polygon has no rings"

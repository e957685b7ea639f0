"""Derive the drawing-to-geographic transform from three control points.

The transform is the unique affine map that carries the source triangle
onto the target triangle: its linear part maps the source edge vectors
``s1 - s0`` and ``s2 - s0`` onto the target edge vectors ``t1 - t0`` and
``t2 - t0``, and its translation carries ``s0`` onto ``t0``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from svg2geojson.core.constants import CONTROL_POINT_COUNT
from svg2geojson.core.exceptions import CalibrationError
from svg2geojson.geometry.affine import AffineTransform

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svg2geojson.geometry.affine import Point

# Relative threshold below which the source triangle counts as collinear.
DEGENERATE_EPSILON = 1e-12


@dataclass(frozen=True, slots=True)
class ControlPoint:
    """One correspondence between a drawing point and a geographic point.

    Attributes:
        source: ``(x, y)`` in drawing units.
        target: ``(longitude, latitude)`` in degrees.
    """

    source: Point
    target: Point


def calibrate_triangle(points: Sequence[ControlPoint]) -> AffineTransform:
    """Return the affine transform mapping each source point onto its target.

    Args:
        points: Exactly three control points.

    Raises:
        ValueError: If ``points`` does not hold exactly three entries.
        CalibrationError: If the three source points are collinear.
    """
    if len(points) != CONTROL_POINT_COUNT:
        msg = f"Calibration needs exactly {CONTROL_POINT_COUNT} control points, got {len(points)}"
        raise ValueError(msg)

    (sx0, sy0), (sx1, sy1), (sx2, sy2) = (p.source for p in points)
    (tx0, ty0), (tx1, ty1), (tx2, ty2) = (p.target for p in points)

    # Source and target edge vectors from the first vertex.
    ux1, uy1 = sx1 - sx0, sy1 - sy0
    ux2, uy2 = sx2 - sx0, sy2 - sy0
    vx1, vy1 = tx1 - tx0, ty1 - ty0
    vx2, vy2 = tx2 - tx0, ty2 - ty0

    det = ux1 * uy2 - ux2 * uy1
    if abs(det) <= DEGENERATE_EPSILON * (abs(ux1 * uy2) + abs(ux2 * uy1)):
        msg = (
            "Control points are collinear in drawing space "
            f"({sx0}, {sy0}), ({sx1}, {sy1}), ({sx2}, {sy2}); "
            "they must form a triangle"
        )
        raise CalibrationError(msg)

    # Linear part L = [v1 v2] @ inverse([u1 u2]).
    a = (vx1 * uy2 - vx2 * uy1) / det
    b = (vy1 * uy2 - vy2 * uy1) / det
    c = (vx2 * ux1 - vx1 * ux2) / det
    d = (vy2 * ux1 - vy1 * ux2) / det

    return AffineTransform(
        a=a,
        b=b,
        c=c,
        d=d,
        e=tx0 - (a * sx0 + c * sy0),
        f=ty0 - (b * sx0 + d * sy0),
    )

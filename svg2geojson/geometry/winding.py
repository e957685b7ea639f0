"""Polygon ring orientation.

Exterior rings (index 0) must wind clockwise and holes (index > 0)
counter-clockwise in longitude/latitude space.  Orientation is taken
from the shoelace accumulation ``sum((x_i - x_prev) * (y_i + y_prev))``
over all edges including the wrap-around edge; with y pointing up
(north) a positive sum means clockwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svg2geojson.geometry.affine import Point


def ring_winding_sum(ring: Sequence[Point]) -> float:
    total = 0.0
    for i, (x, y) in enumerate(ring):
        px, py = ring[i - 1]
        total += (x - px) * (y + py)
    return total


def ring_has_required_winding(ring: Sequence[Point], index: int) -> bool:
    """Whether ``ring`` has the orientation required at ring position ``index``.

    Degenerate rings with zero area have no orientation and always pass.
    """
    total = ring_winding_sum(ring)
    if total == 0:
        return True
    return total > 0 if index == 0 else total < 0


def normalize_rings(rings: Sequence[Sequence[Point]]) -> list[list[Point]]:
    """Return ``rings`` with every wrongly wound ring reversed."""
    return [
        list(ring) if ring_has_required_winding(ring, i) else list(reversed(ring))
        for i, ring in enumerate(rings)
    ]

"""Flatten SVG path data into polylines.

Path data is tokenised by ``svg.path``; every resulting segment is then
approximated by straight segments whose deviation from the true curve
stays within a tolerance:

- **Line / Close**: exact, contributes its end point only.
- **CubicBezier**: de Casteljau subdivision at t=0.5 until both control
  points lie within ``tolerance`` of the chord.  The curve lies inside
  the hull of its control points, so this bounds the true deviation.
- **QuadraticBezier**: degree-elevated to a cubic, then as above.
- **Arc**: parametric subdivision until the curve at the quarter points
  of each interval lies within ``tolerance`` of the chord.

Each ``M``/``m`` starts a new polyline and ``Z``/``z`` closes the
current one.  Closed polylines always end on their start point.
"""

from __future__ import annotations

import cmath
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from svg.path import Arc, Close, CubicBezier, Line, Move, QuadraticBezier, parse_path

from svg2geojson.core.constants import CIRCLE_KAPPA, DEFAULT_TOLERANCE, MAX_SUBDIVISION_DEPTH
from svg2geojson.core.exceptions import ElementDataError

if TYPE_CHECKING:
    from svg2geojson.geometry.affine import Point

logger = logging.getLogger("svg2geojson.geometry")

# Relative distance under which two path points are treated as the same point.
_SNAP_EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class Polyline:
    """An ordered point sequence approximating one subpath."""

    points: list[Point]
    closed: bool = False


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def flatten_path_data(path_data: str, tolerance: float = DEFAULT_TOLERANCE) -> list[Polyline]:
    """Flatten SVG path data into one polyline per drawn subpath.

    Args:
        path_data: The ``d`` attribute of a ``<path>``.
        tolerance: Maximum deviation in drawing units; must be > 0.

    Returns:
        Polylines in path order.  A path consisting of a lone moveto
        yields a single one-point polyline; empty path data yields an
        empty list.

    Raises:
        ValueError: If ``tolerance`` is not positive.
        ElementDataError: If the path data cannot be parsed or holds a
            non-finite coordinate.
    """
    if not tolerance > 0:
        msg = f"Flattening tolerance must be > 0, got {tolerance!r}"
        raise ValueError(msg)

    path_data = path_data.strip()
    if not path_data:
        return []

    try:
        path = parse_path(path_data)
    except (AssertionError, ValueError, IndexError, OverflowError, ZeroDivisionError) as exc:
        msg = f"Cannot parse path data {_excerpt(path_data)!r}: {exc}"
        raise ElementDataError(msg) from exc

    polylines: list[Polyline] = []
    lone_move: complex | None = None
    current: list[complex] | None = None

    for segment in path:
        _check_finite(segment, path_data)
        if isinstance(segment, Move):
            if current is not None and len(current) > 1:
                polylines.append(_to_polyline(current, closed=False))
            elif current is not None and lone_move is None:
                lone_move = current[0]
            current = [segment.end]
            continue

        if current is None:
            current = [segment.start]

        if isinstance(segment, Close):
            if _same_point(current[-1], segment.end):
                current[-1] = segment.end
            else:
                current.append(segment.end)
            polylines.append(_to_polyline(current, closed=True))
            current = None
            continue

        for point in _flatten_segment(segment, tolerance):
            if point != current[-1]:
                current.append(point)

    if current is not None:
        if len(current) > 1:
            polylines.append(_to_polyline(current, closed=False))
        elif lone_move is None:
            lone_move = current[0]

    if not polylines and lone_move is not None:
        return [_to_polyline([lone_move], closed=False)]

    logger.debug("Flattened %s into %d polyline(s)", _excerpt(path_data), len(polylines))
    return polylines


def circle_path_data(cx: float, cy: float, r: float) -> str:
    """Return path data drawing a circle as four cubic Béziers."""
    s = CIRCLE_KAPPA * r
    m = r - s
    parts: list[object] = [
        "M", cx, cy + r,
        "c", s, 0, r, -m, r, -r,
        "s", -m, -r, -r, -r,
        "s", -r, m, -r, r,
        "s", m, r, r, r,
        "z",
    ]  # fmt: skip
    return " ".join(p if isinstance(p, str) else repr(float(p)) for p in parts)


# ---------------------------------------------------------------------------
# Segment flattening
# ---------------------------------------------------------------------------


def _flatten_segment(segment: object, tolerance: float) -> list[complex]:
    """Return the points after the segment's start that approximate it."""
    if isinstance(segment, Line):
        return [segment.end]

    out: list[complex] = []
    if isinstance(segment, CubicBezier):
        _flatten_cubic(
            segment.start, segment.control1, segment.control2, segment.end, tolerance, 0, out
        )
    elif isinstance(segment, QuadraticBezier):
        p0, q, p3 = segment.start, segment.control, segment.end
        _flatten_cubic(p0, p0 + (q - p0) * 2 / 3, p3 + (q - p3) * 2 / 3, p3, tolerance, 0, out)
    elif isinstance(segment, Arc):
        if segment.start == segment.end:
            return []
        if segment.radius.real == 0 or segment.radius.imag == 0:
            return [segment.end]
        _flatten_parametric(segment, 0.0, 1.0, segment.start, segment.end, tolerance, 0, out)
    else:
        msg = f"Unsupported path segment {type(segment).__name__}"
        raise ElementDataError(msg)
    return out


def _flatten_cubic(
    p0: complex,
    p1: complex,
    p2: complex,
    p3: complex,
    tolerance: float,
    depth: int,
    out: list[complex],
) -> None:
    if depth >= MAX_SUBDIVISION_DEPTH or max(
        _distance_to_chord(p1, p0, p3), _distance_to_chord(p2, p0, p3)
    ) <= tolerance:
        out.append(p3)
        return

    p01 = (p0 + p1) / 2
    p12 = (p1 + p2) / 2
    p23 = (p2 + p3) / 2
    p012 = (p01 + p12) / 2
    p123 = (p12 + p23) / 2
    mid = (p012 + p123) / 2
    _flatten_cubic(p0, p01, p012, mid, tolerance, depth + 1, out)
    _flatten_cubic(mid, p123, p23, p3, tolerance, depth + 1, out)


def _flatten_parametric(
    segment: Arc,
    t0: float,
    t1: float,
    start: complex,
    end: complex,
    tolerance: float,
    depth: int,
    out: list[complex],
) -> None:
    span = t1 - t0
    probes = [segment.point(t0 + span * k / 4) for k in (1, 2, 3)]
    if depth >= MAX_SUBDIVISION_DEPTH or all(
        _distance_to_chord(p, start, end) <= tolerance for p in probes
    ):
        out.append(end)
        return

    mid = probes[1]
    t_mid = t0 + span / 2
    _flatten_parametric(segment, t0, t_mid, start, mid, tolerance, depth + 1, out)
    _flatten_parametric(segment, t_mid, t1, mid, end, tolerance, depth + 1, out)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _distance_to_chord(p: complex, a: complex, b: complex) -> float:
    """Distance from ``p`` to the segment ``a``–``b``."""
    ab = b - a
    length_sq = ab.real * ab.real + ab.imag * ab.imag
    if length_sq == 0:
        return abs(p - a)
    t = ((p - a) * ab.conjugate()).real / length_sq
    t = min(1.0, max(0.0, t))
    return abs(p - (a + ab * t))


def _same_point(p: complex, q: complex) -> bool:
    return abs(p - q) <= _SNAP_EPSILON * max(1.0, abs(p), abs(q))


def _to_polyline(points: list[complex], *, closed: bool) -> Polyline:
    return Polyline(points=[(p.real, p.imag) for p in points], closed=closed)


def _excerpt(path_data: str, limit: int = 40) -> str:
    return path_data if len(path_data) <= limit else f"{path_data[:limit]}..."


def _check_finite(segment: object, path_data: str) -> None:
    for name in ("start", "end", "control", "control1", "control2", "radius"):
        value = getattr(segment, name, None)
        if value is not None and not cmath.isfinite(value):
            msg = f"Non-finite coordinate in path data {_excerpt(path_data)!r}"
            raise ElementDataError(msg)

"""Immutable 2D affine transforms.

Coefficients follow the SVG ``matrix(a, b, c, d, e, f)`` convention::

    x' = a*x + c*y + e
    y' = b*x + d*y + f

Composition reads like matrix multiplication: ``outer @ inner`` applies
``inner`` first, then ``outer``.  The tree walker accumulates group
transforms as ``parent @ child`` so that a child's local transform acts
in the child's frame before the parent's transform is applied.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from svg2geojson.core.exceptions import ElementDataError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("svg2geojson.geometry")

Point = tuple[float, float]

_MATRIX_RE = re.compile(r"matrix\((.+?)\)")
_ARGUMENT_SEPARATOR_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True, slots=True)
class AffineTransform:
    """A 2D affine map stored as its six SVG matrix coefficients."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> AffineTransform:
        return cls()

    def apply(self, point: Point) -> Point:
        """Map a single ``(x, y)`` point."""
        x, y = point
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def apply_many(self, points: Iterable[Point]) -> list[Point]:
        return [self.apply(p) for p in points]

    def __matmul__(self, inner: AffineTransform) -> AffineTransform:
        if not isinstance(inner, AffineTransform):
            return NotImplemented
        return compose(self, inner)


def compose(outer: AffineTransform, inner: AffineTransform) -> AffineTransform:
    """Return the transform equivalent to applying ``inner`` then ``outer``."""
    return AffineTransform(
        a=outer.a * inner.a + outer.c * inner.b,
        b=outer.b * inner.a + outer.d * inner.b,
        c=outer.a * inner.c + outer.c * inner.d,
        d=outer.b * inner.c + outer.d * inner.d,
        e=outer.a * inner.e + outer.c * inner.f + outer.e,
        f=outer.b * inner.e + outer.d * inner.f + outer.f,
    )


def parse_transform_attribute(value: str | None) -> AffineTransform | None:
    """Parse an SVG ``transform`` attribute holding a ``matrix(...)``.

    Only the first ``matrix(a,b,c,d,e,f)`` is honoured.  Any other
    transform syntax is ignored with a warning and ``None`` is returned,
    as is an absent or blank attribute.

    Raises:
        ElementDataError: If ``matrix(...)`` does not hold exactly six
            finite numbers.
    """
    if value is None or not value.strip():
        return None

    match = _MATRIX_RE.search(value)
    if match is None:
        logger.warning("Ignoring unsupported transform %r (only matrix(...) is handled)", value)
        return None

    tokens = [t for t in _ARGUMENT_SEPARATOR_RE.split(match.group(1).strip()) if t]
    if len(tokens) != 6:
        msg = f"matrix() transform needs 6 arguments, got {len(tokens)} in {value!r}"
        raise ElementDataError(msg)
    try:
        numbers = [float(t) for t in tokens]
    except ValueError as exc:
        msg = f"matrix() transform has a non-numeric argument in {value!r}"
        raise ElementDataError(msg) from exc
    if not all(math.isfinite(n) for n in numbers):
        msg = f"matrix() transform has a non-finite argument in {value!r}"
        raise ElementDataError(msg)

    return AffineTransform(*numbers)

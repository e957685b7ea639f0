"""Shared conversion constants — single source of truth.

Centralises namespaces, element-kind sets, and numeric constants used
by the loader, the geometry helpers, and the tree walker.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# XML namespaces
# ---------------------------------------------------------------------------

PROGNOZ_NAMESPACE = "http://www.prognoz.ru"
"""Namespace of the ``MetaInfo`` block that carries the control points."""

# ---------------------------------------------------------------------------
# Georeference metadata
# ---------------------------------------------------------------------------

META_INFO_TAG = "MetaInfo"
GEO_TAG = "Geo"
GEO_ITEM_TAG = "GeoItem"

CONTROL_POINT_COUNT = 3

METADATA_HELP_URL = (
    "http://help.prognoz.com/8.0/en/mergedProjects/Specifications/"
    "svgmapspecification/structure/svgmap_structure.htm"
)

# ---------------------------------------------------------------------------
# Element kinds
# ---------------------------------------------------------------------------

GROUP_KIND = "g"

IGNORED_KINDS: frozenset[str] = frozenset(
    {"style", "metadata", "defs", "use", META_INFO_TAG}
)
"""Elements that are expected in the input but contribute no geometry."""

UNSUPPORTED_KINDS: frozenset[str] = frozenset({"ellipse"})
"""Elements that are recognised but cannot be converted."""

# ---------------------------------------------------------------------------
# Curve flattening
# ---------------------------------------------------------------------------

DEFAULT_TOLERANCE = 1.0
"""Maximum deviation, in drawing units, of a flattened curve from the true curve."""

MAX_SUBDIVISION_DEPTH = 16

CIRCLE_KAPPA = 0.5519150245
"""Control-point distance factor for a circle drawn as four cubic Béziers."""

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

DEBUG_PROPERTY = "svgID"

UNNAMED_LAYER = ""

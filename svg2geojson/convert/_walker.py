"""Depth-first traversal of the drawing tree.

The walker carries a running transform (calibration composed with every
ancestor's local transform) down the tree by value, converts each leaf
primitive, maps it into longitude/latitude space, and appends it to the
active layer.

Layer selection happens only at the top level: in layer mode every
first-level ``<g>`` opens (or reuses) a layer named after its id, and
all its descendants feed that layer however deeply they are nested.
Everything else feeds the unnamed layer.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING

from svg2geojson.convert._primitives import PRIMITIVE_CONVERTERS
from svg2geojson.core.constants import (
    GROUP_KIND,
    IGNORED_KINDS,
    UNNAMED_LAYER,
    UNSUPPORTED_KINDS,
)
from svg2geojson.core.exceptions import ElementDataError, UnsupportedGeometryError
from svg2geojson.geometry.affine import parse_transform_attribute
from svg2geojson.geometry.validation import explain_invalid_polygon
from svg2geojson.models.geometry import Layer, PolygonGeometry

if TYPE_CHECKING:
    from svg2geojson.core.config import ConversionConfig
    from svg2geojson.geometry.affine import AffineTransform
    from svg2geojson.models.element import DrawingElement
    from svg2geojson.models.geometry import Geometry

logger = logging.getLogger("svg2geojson.convert")

Labeler = Callable[["DrawingElement"], str]

_LAYER_ID_SUFFIX_RE = re.compile(r"_1_$")


def layer_name(group: DrawingElement, index: int) -> str:
    """Derive a layer name from a top-level group.

    Illustrator-style ids such as ``Main_Roads_1_`` become ``Main Roads``;
    groups without an id are named by position (``Layer 3``).
    """
    group_id = group.element_id
    if group_id is None:
        return f"Layer {index}"
    return _LAYER_ID_SUFFIX_RE.sub("", group_id).replace("_", " ")


class TreeWalker:
    """Converts a drawing tree into layers of target-space geometries.

    Args:
        config: Conversion options (layer mode, tolerance, ellipse policy,
            polygon diagnostics).
        labeler: Optional hook producing each geometry's debug label.
    """

    def __init__(self, config: ConversionConfig, *, labeler: Labeler | None = None) -> None:
        self._config = config
        self._labeler = labeler

    def walk(self, root: DrawingElement, base_transform: AffineTransform) -> list[Layer]:
        """Walk the children of ``root`` and return the non-empty layers.

        Raises:
            UnsupportedGeometryError: If an ellipse is encountered and
                ``skip_unsupported`` is off.
        """
        layers: dict[str, Layer] = {}
        for index, child in enumerate(root.children):
            if self._config.layers and child.kind == GROUP_KIND:
                name = layer_name(child, index)
            else:
                name = UNNAMED_LAYER
            layer = layers.setdefault(name, Layer(name))
            self._visit(child, base_transform, layer)

        return [layer for layer in layers.values() if layer.geometries]

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _visit(self, element: DrawingElement, transform: AffineTransform, layer: Layer) -> None:
        try:
            local = parse_transform_attribute(element.transform)
        except ElementDataError as exc:
            _log_skipped(element, exc)
            return
        if local is not None:
            transform = transform @ local

        kind = element.kind
        if kind == GROUP_KIND:
            for child in element.children:
                self._visit(child, transform, layer)
            return
        if kind in IGNORED_KINDS:
            return
        if kind in UNSUPPORTED_KINDS:
            self._reject_unsupported(element)
            return

        converter = PRIMITIVE_CONVERTERS.get(kind)
        if converter is None:
            logger.warning("Ignoring unhandled element %s", _describe(element))
            return

        try:
            geometry = converter(element, self._config.tolerance)
        except ElementDataError as exc:
            _log_skipped(element, exc)
            return
        if geometry is None:
            logger.debug("No geometry for %s", _describe(element))
            return

        layer.geometries.append(self._finish(geometry, element, transform))

    def _finish(
        self, geometry: Geometry, element: DrawingElement, transform: AffineTransform
    ) -> Geometry:
        geometry = geometry.transformed(transform)
        if isinstance(geometry, PolygonGeometry):
            geometry = geometry.with_normalized_winding()
            if self._config.validate_polygons:
                reason = explain_invalid_polygon(geometry.rings)
                if reason is not None:
                    logger.warning("Invalid polygon from %s: %s", _describe(element), reason)
        if self._labeler is not None:
            geometry = replace(geometry, label=self._labeler(element))
        return geometry

    def _reject_unsupported(self, element: DrawingElement) -> None:
        msg = f"Unsupported element {_describe(element)}: {element.kind} geometry is not handled"
        if not self._config.skip_unsupported:
            raise UnsupportedGeometryError(msg)
        logger.warning("Skipping %s", msg)


def _describe(element: DrawingElement) -> str:
    element_id = element.element_id
    return f"<{element.kind} id={element_id!r}>" if element_id else f"<{element.kind}>"


def _log_skipped(element: DrawingElement, exc: ElementDataError) -> None:
    logger.warning("Skipping %s: %s", _describe(element), exc)

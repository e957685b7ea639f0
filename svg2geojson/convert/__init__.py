"""SVG to GeoJSON conversion — composable pipeline.

Converts a georeferenced SVG drawing into a GeoJSON FeatureCollection,
or into one FeatureCollection per top-level group in layer mode.

The pipeline is split into focused stages:
- **_loader**: lxml parsing of SVG text into a ``DrawingElement`` tree
- **_metadata**: control points from the ``MetaInfo/Geo`` block
- **_primitives**: per-kind conversion of path/rect/line/circle/polygon/polyline
- **_walker**: depth-first traversal with transform accumulation and layers
- **_labels**: debug labels for ``svgID`` feature properties
- **_assembly**: layers to FeatureCollection dicts

Error handling:
- Fatal: ``SvgParseError``, ``CalibrationError`` (raised before any
  geometry work), ``UnsupportedGeometryError`` (ellipses, unless
  ``skip_unsupported`` is set)
- Recoverable: malformed elements and unknown element kinds are logged
  and skipped; the rest of the drawing is still converted
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from svg2geojson.convert._assembly import (
    CREATOR,
    build_feature,
    build_feature_collection,
    build_named_layers,
)
from svg2geojson.convert._labels import debug_label
from svg2geojson.convert._loader import load_svg_file, load_svg_string
from svg2geojson.convert._metadata import find_geo_items, read_control_points
from svg2geojson.convert._primitives import (
    PRIMITIVE_CONVERTERS,
    parse_points,
    path_data_to_geometry,
)
from svg2geojson.convert._walker import TreeWalker, layer_name
from svg2geojson.core.config import ConversionConfig, validate_config
from svg2geojson.geometry.calibration import calibrate_triangle

if TYPE_CHECKING:
    from pathlib import Path

    from svg2geojson.models.element import DrawingElement
    from svg2geojson.models.geojson import FeatureCollectionDict, NamedLayerDict

logger = logging.getLogger("svg2geojson.convert")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "CREATOR",
    "PRIMITIVE_CONVERTERS",
    "TreeWalker",
    "build_feature",
    "build_feature_collection",
    "build_named_layers",
    "convert_document",
    "convert_svg_file",
    "convert_svg_string",
    "debug_label",
    "find_geo_items",
    "layer_name",
    "load_svg_file",
    "load_svg_string",
    "parse_points",
    "path_data_to_geometry",
    "read_control_points",
]


def convert_document(
    root: DrawingElement, config: ConversionConfig | None = None
) -> FeatureCollectionDict | list[NamedLayerDict]:
    """Convert a parsed SVG tree to GeoJSON.

    Args:
        root: The ``<svg>`` element of the drawing.
        config: Conversion options; defaults to ``ConversionConfig()``.

    Returns:
        A FeatureCollection dict, or in layer mode a list of
        ``{"name", "geo"}`` dicts in layer order.  Layers without any
        geometry are omitted; with no geometry at all the result is an
        empty FeatureCollection (or an empty list in layer mode).

    Raises:
        CalibrationError: If the control points are missing, malformed,
            or collinear.
        UnsupportedGeometryError: If an ellipse is encountered and
            ``config.skip_unsupported`` is off.
        ConfigValidationError: If ``config`` is out of range.
    """
    config = config or ConversionConfig()
    validate_config(config)

    calibration = calibrate_triangle(read_control_points(root))
    logger.debug("Calibration transform: %s", calibration)

    walker = TreeWalker(config, labeler=debug_label if config.debug else None)
    layers = walker.walk(root, calibration)

    logger.info(
        "Converted %d feature(s) into %d layer(s)",
        sum(len(layer) for layer in layers),
        len(layers),
    )

    if config.layers:
        return build_named_layers(layers, debug=config.debug)
    geometries = layers[0].geometries if layers else []
    return build_feature_collection(geometries, debug=config.debug)


def convert_svg_string(
    svg_xml: str | bytes, config: ConversionConfig | None = None
) -> FeatureCollectionDict | list[NamedLayerDict]:
    """Parse SVG text and convert it.  See ``convert_document``.

    Raises:
        SvgParseError: If the text is not a well-formed SVG document.
    """
    return convert_document(load_svg_string(svg_xml), config)


def convert_svg_file(
    svg_path: Path | str, config: ConversionConfig | None = None
) -> FeatureCollectionDict | list[NamedLayerDict]:
    """Read an SVG file and convert it.  See ``convert_document``.

    Raises:
        SvgParseError: If the file cannot be read or is not a valid SVG.
    """
    logger.info("Converting SVG file: %s", svg_path)
    return convert_document(load_svg_file(svg_path), config)

"""Command-line entry point — svg2geojson.

Wiring layer between the shell and ``svg2geojson.convert``: parses
arguments, configures logging, converts each input file, and writes the
GeoJSON next to it (or into ``--output-dir``).

Exit status: 0 on success, 1 if any file failed to convert or the
configuration is invalid, 2 on usage errors.
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from svg2geojson import __version__
from svg2geojson.convert import convert_svg_file
from svg2geojson.core.config import ConversionConfig, validate_config
from svg2geojson.core.exceptions import ConversionError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from svg2geojson.models.geojson import FeatureCollectionDict, NamedLayerDict

logger = logging.getLogger("svg2geojson.cli")

GEOJSON_SUFFIX = ".geojson"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg2geojson",
        description="Convert georeferenced SVG drawings to GeoJSON.",
    )
    parser.add_argument("svg", nargs="+", type=Path, help="SVG file(s) to convert")
    parser.add_argument(
        "--layers",
        action="store_true",
        help="write one GeoJSON file per top-level group",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="add an svgID property identifying each feature's source element",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="curve flattening tolerance in drawing units (default: 1)",
    )
    parser.add_argument(
        "--skip-unsupported",
        action="store_true",
        help="skip ellipses with a warning instead of failing",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="directory for the .geojson files (default: next to each input)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log per-element detail")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _config_from_args(args)
    except ConversionError as exc:
        logger.error("%s", exc)
        return 1

    status = 0
    for svg_path in args.svg:
        try:
            result = convert_svg_file(svg_path, config)
        except ConversionError as exc:
            logger.error("Failed to convert %s: %s", svg_path, exc)
            status = 1
            continue

        output_dir = args.output_dir or svg_path.parent
        for out_path, collection in output_files(svg_path, result, output_dir):
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(json.dumps(collection), encoding="utf-8")
            logger.info("Wrote %s", out_path)

    return status


def output_files(
    svg_path: Path,
    result: FeatureCollectionDict | list[NamedLayerDict],
    output_dir: Path,
) -> Iterator[tuple[Path, FeatureCollectionDict]]:
    """Yield ``(path, collection)`` pairs to write for one converted file.

    A single collection goes to ``<stem>.geojson``; in layer mode each
    layer goes to ``<stem>-<layer name>.geojson``, except the unnamed
    layer which keeps ``<stem>.geojson``.
    """
    stem = svg_path.stem
    if isinstance(result, dict):
        yield output_dir / f"{stem}{GEOJSON_SUFFIX}", result
        return
    for layer in result:
        name = layer["name"].replace("/", "-")
        filename = f"{stem}-{name}{GEOJSON_SUFFIX}" if name else f"{stem}{GEOJSON_SUFFIX}"
        yield output_dir / filename, layer["geo"]


def _config_from_args(args: argparse.Namespace) -> ConversionConfig:
    base = ConversionConfig.from_env()
    config = replace(
        base,
        layers=args.layers or base.layers,
        debug=args.debug or base.debug,
        skip_unsupported=args.skip_unsupported or base.skip_unsupported,
        tolerance=base.tolerance if args.tolerance is None else args.tolerance,
    )
    validate_config(config)
    return config

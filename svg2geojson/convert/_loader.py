"""lxml-based SVG loading.

Parses SVG text into a ``DrawingElement`` tree.  The parser never
resolves entities or touches the network.
"""

from __future__ import annotations

import logging
from pathlib import Path

from svg2geojson.core.exceptions import SvgParseError
from svg2geojson.models.element import DrawingElement

logger = logging.getLogger("svg2geojson.convert")

_SVG_ROOT_TAG = "svg"


def load_svg_string(svg_xml: str | bytes) -> DrawingElement:
    """Parse SVG text into a drawing tree.

    ``str`` input is encoded as UTF-8 before parsing.

    Raises:
        SvgParseError: If the text is empty, not well-formed XML, or its
            root element is not ``<svg>``.
    """
    from lxml import etree  # type: ignore[attr-defined]

    content = svg_xml.encode("utf-8") if isinstance(svg_xml, str) else svg_xml
    if not content.strip():
        msg = "SVG document is empty"
        raise SvgParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise SvgParseError(msg) from exc

    localname = etree.QName(root).localname
    if localname != _SVG_ROOT_TAG:
        msg = f"Not an SVG document, root element is <{localname}>"
        raise SvgParseError(msg)

    return DrawingElement.from_lxml(root)


def load_svg_file(svg_path: Path | str) -> DrawingElement:
    """Read and parse an SVG file.

    Raises:
        SvgParseError: If the file cannot be read or is not a valid SVG.
    """
    svg_path = Path(svg_path)
    try:
        content = svg_path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read SVG file {svg_path}: {exc}"
        raise SvgParseError(msg) from exc

    logger.debug("Loaded %d bytes from %s", len(content), svg_path)
    try:
        return load_svg_string(content)
    except SvgParseError as exc:
        raise SvgParseError(f"{svg_path.name}: {exc.message}") from exc

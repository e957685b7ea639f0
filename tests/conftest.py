"""Shared pytest fixtures for the svg2geojson test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

from svg2geojson.core.constants import PROGNOZ_NAMESPACE
from svg2geojson.models.element import DrawingElement

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample SVG file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def square_rect_svg(data_dir: Path) -> Path:
    """A 100x100 rect calibrated onto the 1x1 degree square at (0, 0)."""
    return data_dir / "01_square_rect.svg"


@pytest.fixture()
def ccw_polygon_svg(data_dir: Path) -> Path:
    """A polygon whose ring order needs reversing for clockwise winding."""
    return data_dir / "02_ccw_polygon.svg"


@pytest.fixture()
def missing_metainfo_svg(data_dir: Path) -> Path:
    """An SVG without the MetaInfo/Geo control point block."""
    return data_dir / "03_missing_metainfo.svg"


@pytest.fixture()
def named_layers_svg(data_dir: Path) -> Path:
    """Two top-level groups, Roads and Rivers_1_."""
    return data_dir / "04_named_layers.svg"


@pytest.fixture()
def nested_transforms_svg(data_dir: Path) -> Path:
    """A translate group containing a rotate group containing a line."""
    return data_dir / "05_nested_transforms.svg"


@pytest.fixture()
def mixed_primitives_svg(data_dir: Path) -> Path:
    """One of each primitive plus an unknown and a malformed element."""
    return data_dir / "06_mixed_primitives.svg"


@pytest.fixture()
def ellipse_svg(data_dir: Path) -> Path:
    """A rect followed by an ellipse."""
    return data_dir / "07_ellipse.svg"


@pytest.fixture()
def collinear_svg(data_dir: Path) -> Path:
    """Control points lying on one line."""
    return data_dir / "08_collinear_control_points.svg"


@pytest.fixture()
def not_xml_svg(data_dir: Path) -> Path:
    """A file that is not valid XML."""
    return data_dir / "11_malformed_not_xml.svg"


# ---------------------------------------------------------------------------
# In-memory drawing trees
# ---------------------------------------------------------------------------

# Drawing (x, y) maps to (x / 100, y / 100) degrees.
SCALE_CONTROL_POINTS = (
    (0.0, 0.0, 0.0, 0.0),
    (100.0, 0.0, 1.0, 0.0),
    (0.0, 100.0, 0.0, 1.0),
)


def element(kind: str, *children: DrawingElement, **attributes: str) -> DrawingElement:
    """Build an SVG-namespace DrawingElement."""
    return DrawingElement(
        kind=kind, namespace=SVG_NAMESPACE, attributes=attributes, children=children
    )


def meta_info(*points: tuple[float, float, float, float]) -> DrawingElement:
    """Build a MetaInfo block from ``(x, y, lon, lat)`` tuples."""
    items = tuple(
        DrawingElement(
            kind="GeoItem",
            namespace=PROGNOZ_NAMESPACE,
            attributes={"X": str(x), "Y": str(y), "Longitude": str(lon), "Latitude": str(lat)},
        )
        for x, y, lon, lat in points
    )
    geo = DrawingElement(kind="Geo", namespace=PROGNOZ_NAMESPACE, children=items)
    return DrawingElement(kind="MetaInfo", namespace=PROGNOZ_NAMESPACE, children=(geo,))


@pytest.fixture()
def make_svg() -> Callable[..., DrawingElement]:
    """Factory for an ``<svg>`` root with the 1/100 scale control points."""

    def _make(*children: DrawingElement) -> DrawingElement:
        return element("svg", meta_info(*SCALE_CONTROL_POINTS), *children)

    return _make


@pytest.fixture()
def make_element() -> Callable[..., DrawingElement]:
    """Factory for SVG elements: ``make_element("rect", width="10")``."""
    return element


@pytest.fixture()
def make_meta_info() -> Callable[..., DrawingElement]:
    """Factory for a MetaInfo block from ``(x, y, lon, lat)`` tuples."""
    return meta_info

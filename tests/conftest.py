"""Shared pytest fixtures for the KML → GeoJSON test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest

from kml_geojson.convert import KmlDocument, parse_kml_bytes
from kml_geojson.core.constants import KML_NAMESPACE

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def links_kml(data_dir: Path) -> Path:
    """Path to a KML with one styled LineString in a folder named "Links"."""
    return data_dir / "01_links_linestring.kml"


@pytest.fixture()
def nested_folders_kml(data_dir: Path) -> Path:
    """Path to a KML with named and unnamed nested Folders."""
    return data_dir / "02_nested_folders.kml"


@pytest.fixture()
def styles_kml(data_dir: Path) -> Path:
    """Path to a KML exercising Style / StyleMap resolution rules."""
    return data_dir / "03_styles_and_stylemaps.kml"


@pytest.fixture()
def polygon_with_hole_kml(data_dir: Path) -> Path:
    """Path to a polygon-with-hole KML (innerBoundaryIs)."""
    return data_dir / "04_polygon_with_hole.kml"


@pytest.fixture()
def mixed_placemarks_kml(data_dir: Path) -> Path:
    """Path to a KML with images, ExtendedData and unusable geometries."""
    return data_dir / "05_mixed_placemarks.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def no_namespace_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML document without the KML namespace."""
    return edge_cases_dir / "15_no_namespace.kml"


# ---------------------------------------------------------------------------
# Inline KML helpers
# ---------------------------------------------------------------------------


def wrap_kml(body: str) -> bytes:
    """Wrap KML elements in a namespaced ``<kml><Document>`` envelope."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<kml xmlns="{KML_NAMESPACE}"><Document>{body}</Document></kml>'
    ).encode()


@pytest.fixture()
def make_kml_doc() -> Callable[[str], KmlDocument]:
    """Factory parsing inline KML elements into a ``KmlDocument``."""

    def _make(body: str) -> KmlDocument:
        return parse_kml_bytes(wrap_kml(body), source="<inline>")

    return _make

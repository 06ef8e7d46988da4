"""Shared pipeline constants.

Centralises the KML namespace, default file locations and styling
defaults used by the converter, the orchestrator and the CLI.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# KML input
# ---------------------------------------------------------------------------

KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"
"""KML 2.2 namespace URI."""

# ---------------------------------------------------------------------------
# Default file locations
# ---------------------------------------------------------------------------

DEFAULT_KML_INPUT_PATH: str = "kml/source.kml"
"""Default location of the source KML document."""

DEFAULT_GEOJSON_OUTPUT_PATH: str = "geojson/source.geojson"
"""Default location of the generated GeoJSON document."""

# ---------------------------------------------------------------------------
# Conversion defaults
# ---------------------------------------------------------------------------

ROOT_FOLDER_NAME: str = "Root"
"""Folder label used when the traversal root has no ``<name>``."""

DEFAULT_LINE_WIDTH: int = 2
"""Line width used when a style declares none (or zero)."""

DEFAULT_GEOJSON_INDENT: int = 4
"""Pretty-print indentation of the written GeoJSON document."""

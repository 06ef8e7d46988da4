"""KML → GeoJSON conversion core.

Translates a parsed KML tree into an ordered list of ``Feature`` records.
The work is split into focused stages:

- **_document**: hardened lxml loading, namespace handling, ``NodeKind``
- **_colors**: ``aabbggrr`` → ``#rrggbb``
- **_coordinates**: coordinate text → ``(lon, lat)`` tuples
- **_styles**: ``StyleRegistry`` from ``<Style>`` / ``<StyleMap>``
- **_geometry**: Point / LineString / Polygon extraction
- **_placemark**: Placemark → Feature
- **_folders**: recursive folder walk with inherited folder names

Supported KML structures:
- Nested Folder hierarchies, unnamed folders inheriting their parent's name
- Point, LineString and Polygon (outer ring only) placemarks
- Shared styles referenced directly or through a StyleMap ``normal`` pair
- ExtendedData/Data and SchemaData/SimpleData metadata
"""

from __future__ import annotations

from kml_geojson.convert._colors import kml_color_to_rgb
from kml_geojson.convert._coordinates import parse_coordinates_text, parse_point_text
from kml_geojson.convert._document import (
    KmlDocument,
    NodeKind,
    load_kml_document,
    parse_kml_bytes,
)
from kml_geojson.convert._folders import effective_folder_name, walk_folder
from kml_geojson.convert._geometry import translate_geometry
from kml_geojson.convert._placemark import (
    extract_extended_data,
    extract_images,
    translate_placemark,
)
from kml_geojson.convert._styles import StyleRegistry, strip_fragment
from kml_geojson.core.exceptions import KmlInputMissingError, KmlParseError

__all__ = [
    "KmlDocument",
    "KmlInputMissingError",
    "KmlParseError",
    "NodeKind",
    "StyleRegistry",
    "effective_folder_name",
    "extract_extended_data",
    "extract_images",
    "kml_color_to_rgb",
    "load_kml_document",
    "parse_coordinates_text",
    "parse_kml_bytes",
    "parse_point_text",
    "strip_fragment",
    "translate_geometry",
    "translate_placemark",
    "walk_folder",
]

"""Placemark → Feature translation.

Responsibilities:
- Read name, raw description and ExtendedData metadata
- Collect ``<img src="...">`` URLs from the description text
- Resolve the placemark's ``styleUrl`` against the style registry
- Attach the geometry, dropping placemarks that have none
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from kml_geojson.convert._geometry import translate_geometry
from kml_geojson.models.feature import Feature

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.convert._document import KmlDocument
    from kml_geojson.convert._styles import StyleRegistry

logger = logging.getLogger("kml_geojson.convert")

# Best-effort scan of free-text descriptions, not an HTML parser: the tag
# name is case-insensitive, the attribute must be spelled src="...".
_IMG_SRC_RE = re.compile(r'<(?i:img)[^>]+src="([^">]+)"')


def extract_images(description: str) -> list[str]:
    """Return the ``src`` of every ``<img>`` tag in ``description``, in order."""
    return _IMG_SRC_RE.findall(description)


def extract_extended_data(doc: KmlDocument, placemark: _Element) -> dict[str, str]:
    """Extract ExtendedData metadata from a Placemark element.

    Handles both KML metadata patterns:
    - ``ExtendedData/Data/value``: untyped key-value pairs.
    - ``ExtendedData/SchemaData/SimpleData``: typed fields.

    A later entry with the same key overwrites an earlier one.
    """
    metadata: dict[str, str] = {}
    for data_elem in doc.findall(placemark, "ExtendedData", "Data"):
        metadata[data_elem.get("name", "")] = doc.text(data_elem, "value")

    for simple_data in doc.findall(placemark, "ExtendedData", "SchemaData", "SimpleData"):
        metadata[simple_data.get("name", "")] = simple_data.text or ""

    return metadata


def translate_placemark(
    doc: KmlDocument,
    placemark: _Element,
    folder_name: str,
    registry: StyleRegistry,
) -> Feature | None:
    """Translate one placemark into a ``Feature``.

    Returns:
        The feature, or ``None`` when the placemark has no usable geometry.
    """
    name = doc.text(placemark, "name").strip()
    description = doc.inner_markup(placemark, "description")
    metadata = extract_extended_data(doc, placemark)
    images = extract_images(description)

    style_url = doc.text(placemark, "styleUrl")
    style = registry.resolve(style_url)
    if style is None and style_url.strip():
        logger.debug(
            "Unresolved style reference | placemark=%s | styleUrl=%s",
            name,
            style_url.strip(),
        )

    geometry = translate_geometry(doc, placemark)
    if geometry is None:
        logger.debug(
            "Dropping placemark without usable geometry | placemark=%s | folder=%s",
            name,
            folder_name,
        )
        return None

    return Feature(
        name=name,
        description=description,
        folder=folder_name,
        geometry=geometry,
        images=images,
        meta=metadata,
        style=style,
    )

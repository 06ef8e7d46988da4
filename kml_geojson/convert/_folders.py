"""Recursive folder traversal.

Walks a folder's direct children in document order. Placemarks are
translated with the folder's effective name; sub-folders are walked in
place, inheriting that name when they have none of their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kml_geojson.convert._document import NodeKind
from kml_geojson.convert._placemark import translate_placemark

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.convert._document import KmlDocument
    from kml_geojson.convert._styles import StyleRegistry
    from kml_geojson.models.feature import Feature


def effective_folder_name(doc: KmlDocument, folder: _Element, inherited_name: str) -> str:
    """A folder's own ``<name>`` if non-blank, else the inherited one."""
    return doc.text(folder, "name").strip() or inherited_name


def walk_folder(
    doc: KmlDocument,
    folder: _Element,
    registry: StyleRegistry,
    inherited_name: str,
) -> list[Feature]:
    """Collect the features of ``folder`` and its sub-folders, depth-first.

    Returns a new list per call; callers concatenate.
    """
    folder_name = effective_folder_name(doc, folder, inherited_name)
    features: list[Feature] = []
    for child in folder:
        kind = doc.kind(child)
        if kind is NodeKind.PLACEMARK:
            feature = translate_placemark(doc, child, folder_name, registry)
            if feature is not None:
                features.append(feature)
        elif kind is NodeKind.FOLDER:
            features.extend(walk_folder(doc, child, registry, folder_name))
    return features

"""Geometry extraction for a single placemark.

Only the placemark's direct ``<Point>``, ``<LineString>`` and ``<Polygon>``
children are considered, in that priority order. The first kind present
decides: if it holds no usable coordinates the placemark has no geometry,
and lower-priority kinds are not consulted. ``<MultiGeometry>`` and other
kinds are not supported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kml_geojson.convert._coordinates import parse_coordinates_text, parse_point_text
from kml_geojson.convert._document import NodeKind
from kml_geojson.models.feature import (
    Geometry,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
)

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.convert._document import KmlDocument

GEOMETRY_PRIORITY = (NodeKind.POINT, NodeKind.LINE_STRING, NodeKind.POLYGON)


def translate_geometry(doc: KmlDocument, placemark: _Element) -> Geometry | None:
    """Translate a placemark's geometry, or return ``None`` if it has none."""
    for kind in GEOMETRY_PRIORITY:
        geometry_elem = doc.find(placemark, kind.value)
        if geometry_elem is None:
            continue
        if kind is NodeKind.POINT:
            return _translate_point(doc, geometry_elem)
        if kind is NodeKind.LINE_STRING:
            return _translate_line_string(doc, geometry_elem)
        return _translate_polygon(doc, geometry_elem)
    return None


def _translate_point(doc: KmlDocument, point_elem: _Element) -> PointGeometry | None:
    position = parse_point_text(doc.text(point_elem, "coordinates"))
    if position is None:
        return None
    lng, lat = position
    return PointGeometry(lng=lng, lat=lat)


def _translate_line_string(doc: KmlDocument, line_elem: _Element) -> LineStringGeometry | None:
    points = parse_coordinates_text(doc.text(line_elem, "coordinates"))
    if not points:
        return None
    return LineStringGeometry(points=tuple(points))


def _translate_polygon(doc: KmlDocument, polygon_elem: _Element) -> PolygonGeometry | None:
    # innerBoundaryIs rings (holes) are never read.
    outer = parse_coordinates_text(
        doc.text(polygon_elem, "outerBoundaryIs", "LinearRing", "coordinates")
    )
    if not outer:
        return None
    return PolygonGeometry(outer_ring=tuple(outer))

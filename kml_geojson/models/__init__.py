"""Data models and schemas.

Defines the data structures used throughout the pipeline:
- Feature: A translated placemark with its geometry, style and metadata
- StyleDef: A resolved line style
- PointGeometry / LineStringGeometry / PolygonGeometry: Geometry variants
- FeatureCollectionDocument: The GeoJSON document written for the renderer
"""

from kml_geojson.models.feature import (
    Feature,
    Geometry,
    LineStringGeometry,
    PointGeometry,
    PolygonGeometry,
    StyleDef,
)
from kml_geojson.models.geojson import FeatureCollectionDocument

__all__ = [
    "Feature",
    "FeatureCollectionDocument",
    "Geometry",
    "LineStringGeometry",
    "PointGeometry",
    "PolygonGeometry",
    "StyleDef",
]

"""Conversion orchestration.

Manages the end-to-end run for one KML document:
1. Load KML → build style registry
2. Walk folders → collect features
3. Write the GeoJSON FeatureCollection
"""

from kml_geojson.orchestrators.conversion import (
    ConversionResult,
    build_feature_collection,
    convert_if_stale,
    convert_kml_to_geojson,
)

__all__ = [
    "ConversionResult",
    "build_feature_collection",
    "convert_if_stale",
    "convert_kml_to_geojson",
]

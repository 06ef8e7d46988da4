"""KML to GeoJSON conversion pipeline.

Reads a KML document with nested folders, styles and style maps, and
writes a flat, style-resolved GeoJSON FeatureCollection for a map
renderer.
"""

__version__ = "0.1.0"

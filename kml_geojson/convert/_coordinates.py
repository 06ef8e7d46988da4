"""KML coordinate text parsing.

Responsibilities:
- Parse ``lon,lat[,alt] lon,lat[,alt] ...`` strings into ``(lon, lat)`` tuples
- Parse the single-position text of a ``<Point>``

Malformed tuples are dropped rather than coerced to zero, so a typo in
one vertex never moves a geometry to ``(0, 0)``.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger("kml_geojson.convert")


def _to_position(lon_text: str, lat_text: str) -> tuple[float, float] | None:
    try:
        lon = float(lon_text)
        lat = float(lat_text)
    except ValueError:
        return None
    if not (math.isfinite(lon) and math.isfinite(lat)):
        return None
    return (lon, lat)


def parse_coordinates_text(text: str) -> list[tuple[float, float]]:
    """Parse KML coordinate text to ``(lon, lat)`` tuples.

    Tokens are separated by any run of whitespace. Altitude is ignored.
    A token with fewer than two components, or a non-numeric longitude or
    latitude, is skipped and parsing continues.
    """
    coords: list[tuple[float, float]] = []
    for token in text.split():
        parts = token.split(",")
        position = _to_position(parts[0], parts[1]) if len(parts) >= 2 else None
        if position is None:
            logger.debug("Dropping malformed coordinate tuple %r", token)
            continue
        coords.append(position)
    return coords


def parse_point_text(text: str) -> tuple[float, float] | None:
    """Parse the coordinate text of a ``<Point>``.

    The text is split on commas; the first two components must be numeric.
    Extra components (altitude) are ignored.

    Returns:
        ``(lon, lat)``, or ``None`` if the text holds no usable position.
    """
    parts = text.strip().split(",")
    if len(parts) < 2:
        return None
    return _to_position(parts[0], parts[1])

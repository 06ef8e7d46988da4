"""Data model for a converted KML placemark.

A Feature represents a single placemark translated from the KML tree:
its text fields, ExtendedData, resolved line style and one geometry.
Features are the output of the folder walk and the input to the
GeoJSON document model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from kml_geojson.core.constants import DEFAULT_LINE_WIDTH


@dataclass(frozen=True, slots=True)
class StyleDef:
    """Line style resolved from a KML ``<Style>`` declaration.

    Attributes:
        color: RGB hex colour (``"#rrggbb"``), or ``None`` if undeclared.
        width: Line width in pixels.
    """

    color: str | None = None
    width: int | float = DEFAULT_LINE_WIDTH

    def to_dict(self) -> dict[str, object]:
        return {"color": self.color, "width": self.width}


# ---------------------------------------------------------------------------
# Geometry variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PointGeometry:
    """A single ``(lng, lat)`` position."""

    geometry_type: ClassVar[str] = "Point"

    lng: float
    lat: float

    def to_dict(self) -> dict[str, object]:
        return {"type": self.geometry_type, "coordinates": [self.lng, self.lat]}


@dataclass(frozen=True, slots=True)
class LineStringGeometry:
    """An ordered path of ``(lng, lat)`` positions."""

    geometry_type: ClassVar[str] = "LineString"

    points: tuple[tuple[float, float], ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.geometry_type,
            "coordinates": [[lng, lat] for lng, lat in self.points],
        }


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """A polygon with a single outer ring. Holes are never represented."""

    geometry_type: ClassVar[str] = "Polygon"

    outer_ring: tuple[tuple[float, float], ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.geometry_type,
            "coordinates": [[[lng, lat] for lng, lat in self.outer_ring]],
        }


Geometry = PointGeometry | LineStringGeometry | PolygonGeometry


# ---------------------------------------------------------------------------
# Feature
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Feature:
    """A single placemark translated into a GeoJSON-ready record.

    Attributes:
        name: Placemark name.
        description: Raw description text, markup retained verbatim.
        folder: Effective name of the enclosing folder.
        geometry: The placemark's point, line string or polygon.
        images: ``src`` URLs of ``<img>`` tags found in the description.
        meta: Key-value pairs from ``ExtendedData``.
        style: Resolved line style, or ``None`` when unresolved.
    """

    name: str
    description: str
    folder: str
    geometry: Geometry
    images: list[str] = field(default_factory=list)
    meta: dict[str, str] = field(default_factory=dict)
    style: StyleDef | None = None

    @property
    def is_pin(self) -> bool:
        """Whether a renderer treats this feature as a pin rather than a path."""
        return isinstance(self.geometry, PointGeometry)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON ``Feature`` object."""
        return {
            "type": "Feature",
            "properties": {
                "name": self.name,
                "description": self.description,
                "folder": self.folder,
                "images": list(self.images),
                "meta": dict(self.meta),
                "style": self.style.to_dict() if self.style is not None else None,
            },
            "geometry": self.geometry.to_dict(),
        }

"""Pydantic model of the GeoJSON document handed to the map renderer.

The renderer consumes exactly this shape::

    {"type": "FeatureCollection", "features": [Feature, ...]}

where each Feature carries ``name``, ``description``, ``folder``,
``images``, ``meta`` and ``style`` properties plus one Point, LineString
or single-ring Polygon geometry.

Field order is fixed by the model definitions, so the same features
always serialise to the same bytes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from kml_geojson.models.feature import Feature

Position = list[float]


class StyleModel(BaseModel):
    """Line style as emitted to the renderer."""

    color: str | None = None
    width: int | float = 2


class PointModel(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: Position


class LineStringModel(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[Position]


class PolygonModel(BaseModel):
    """Polygon geometry; ``coordinates`` always holds exactly one ring."""

    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[Position]]


GeometryModel = Annotated[
    PointModel | LineStringModel | PolygonModel,
    Field(discriminator="type"),
]


class FeatureProperties(BaseModel):
    name: str = ""
    description: str = ""
    folder: str = ""
    images: list[str] = Field(default_factory=list)
    meta: dict[str, str] = Field(default_factory=dict)
    style: StyleModel | None = None


class FeatureModel(BaseModel):
    type: Literal["Feature"] = "Feature"
    properties: FeatureProperties
    geometry: GeometryModel


class FeatureCollectionDocument(BaseModel):
    """Top-level GeoJSON FeatureCollection written by the pipeline.

    Attributes:
        type: Always ``"FeatureCollection"``.
        features: Features in document traversal order.
    """

    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[FeatureModel] = Field(default_factory=list)

    @classmethod
    def from_features(cls, features: list[Feature]) -> FeatureCollectionDocument:
        """Build the document from translated features, preserving order."""
        return cls(features=[FeatureModel.model_validate(f.to_dict()) for f in features])

    def to_json(self, *, indent: int | None = 4) -> str:
        """Serialise to a JSON string."""
        return self.model_dump_json(indent=indent)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain dict."""
        return self.model_dump()  # type: ignore[return-value]

    @property
    def feature_count(self) -> int:
        return len(self.features)

"""Rendered map features and the outcomes of clicking on them."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyviewport.models.geo import GeoPoint


class Cursor(StrEnum):
    """Pointer affordance over the map (CSS cursor values)."""

    DEFAULT = ""
    POINTER = "pointer"


class PointGeometry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["Point"] = "Point"
    coordinates: tuple[float, float]

    @field_validator("coordinates", mode="before")
    @classmethod
    def _first_two(cls, value: Any) -> Any:
        # Renderers may append an altitude.
        if isinstance(value, (list, tuple)) and len(value) > 2:
            return tuple(value[:2])
        return value


class FeatureLayer(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str


class RenderedFeature(BaseModel):
    """A point marker returned by the renderer's hit test (GeoJSON feature).

    ``layer`` is set when the renderer reports which style layer the hit
    came from.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    geometry: PointGeometry
    properties: dict[str, Any] = Field(default_factory=dict)
    layer: FeatureLayer | None = None

    @property
    def layer_id(self) -> str | None:
        return self.layer.id if self.layer is not None else None

    @property
    def point(self) -> GeoPoint:
        lng, lat = self.geometry.coordinates
        return GeoPoint(lat=lat, lng=lng)

    @property
    def identifier(self) -> str | None:
        address = self.properties.get("address")
        if address is None:
            return None
        return str(address).strip() or None


class SingleSelection(BaseModel):
    """Exactly one marker was hit: select it by its stable identifier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["single"] = "single"
    identifier: str | None
    point: GeoPoint
    properties: dict[str, Any] = Field(default_factory=dict)


class ClusterBounds(BaseModel):
    """Several markers were hit at once: fit the viewport around all of them."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["cluster"] = "cluster"
    points: tuple[GeoPoint, ...] = Field(..., min_length=2)


ClickOutcome = SingleSelection | ClusterBounds

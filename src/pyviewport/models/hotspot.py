"""Hotspot and validator records returned by the coverage API."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyviewport.models._base import ApiModel
from pyviewport.models.geo import GeoPoint


def _coerce_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class Hotspot(ApiModel):
    """A coverage hotspot.

    Parameters
    ----------
    address : str
        Stable identifier used to fetch the full record.
    name : str or None
        Human-readable (animal) name.
    lat, lng : float or None
        Asserted location. ``None`` for hotspots without an asserted location.
    location : str or None
        Asserted location as an H3 cell.
    owner : str or None
        Owner wallet address.
    witnesses : tuple of Hotspot
        Secondary points shown with the hotspot when it is the primary
        selection. Empty unless loaded explicitly.
    """

    address: str = Field(..., min_length=1)
    name: str | None = None
    lat: float | None = None
    lng: float | None = Field(default=None, validation_alias=AliasChoices("lng", "lon", "longitude"))
    location: str | None = None
    owner: str | None = None
    witnesses: tuple[Hotspot, ...] = ()

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _coerce_coordinates(cls, value: Any) -> float | None:
        return _coerce_float(value)

    @property
    def point(self) -> GeoPoint | None:
        """The hotspot's coordinates, or ``None`` when it has no location."""
        if self.lat is None or self.lng is None:
            return None
        return GeoPoint(lat=self.lat, lng=self.lng)

    def witness_points(self) -> list[GeoPoint]:
        """Coordinates of all witnesses that have a location."""
        return [point for point in (w.point for w in self.witnesses) if point is not None]


class Validator(ApiModel):
    """A consensus validator. Rendered read-only; never drives the viewport."""

    address: str = Field(..., min_length=1)
    name: str | None = None
    owner: str | None = None
    stake: int | None = None
    status: dict[str, Any] = Field(default_factory=dict)
    lat: float | None = None
    lng: float | None = Field(default=None, validation_alias=AliasChoices("lng", "lon", "longitude"))

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _coerce_coordinates(cls, value: Any) -> float | None:
        return _coerce_float(value)

    @property
    def is_online(self) -> bool:
        return self.status.get("online") == "online"

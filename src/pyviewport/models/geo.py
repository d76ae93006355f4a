"""Primitive geographic shapes: points and bounding boxes."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, field_validator

LngLat = tuple[float, float]
"""A ``(longitude, latitude)`` pair, longitude first."""


class GeoPoint(BaseModel):
    """A WGS84 coordinate. Value object, no identity beyond coordinates."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lat: float
    lng: float

    @field_validator("lat")
    @classmethod
    def _lat_range(cls, value: float) -> float:
        if not -90 <= value <= 90:
            raise ValueError("lat must be in [-90, 90]")
        return value

    @field_validator("lng")
    @classmethod
    def _lng_range(cls, value: float) -> float:
        if not -180 <= value <= 180:
            raise ValueError("lng must be in [-180, 180]")
        return value

    def as_lng_lat(self) -> LngLat:
        return (self.lng, self.lat)


class BoundingBox(BaseModel):
    """Axis-aligned box given by its northeast and southwest corners.

    Corners are ``(lng, lat)`` pairs, the order map renderers expect for a
    camera fit. The antimeridian is not handled: ``northeast`` is the
    maximum longitude/latitude of the input and ``southwest`` the minimum.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    northeast: LngLat
    southwest: LngLat

    @classmethod
    def from_lng_lat(cls, corners: Sequence[Sequence[float]]) -> BoundingBox:
        """Build a box from ``[[ne_lng, ne_lat], [sw_lng, sw_lat]]``."""
        if len(corners) != 2:
            raise ValueError(f"expected two corners, got {len(corners)}")
        (ne_lng, ne_lat), (sw_lng, sw_lat) = corners
        return cls(northeast=(float(ne_lng), float(ne_lat)), southwest=(float(sw_lng), float(sw_lat)))

    def as_lng_lat(self) -> list[list[float]]:
        """Return ``[[ne_lng, ne_lat], [sw_lng, sw_lat]]`` for the rendering surface."""
        return [list(self.northeast), list(self.southwest)]

    @property
    def north(self) -> float:
        return self.northeast[1]

    @property
    def east(self) -> float:
        return self.northeast[0]

    @property
    def south(self) -> float:
        return self.southwest[1]

    @property
    def west(self) -> float:
        return self.southwest[0]

    @property
    def is_degenerate(self) -> bool:
        """True for a zero-area box (a single distinct point)."""
        return self.northeast == self.southwest

    def contains(self, point: GeoPoint) -> bool:
        return self.south <= point.lat <= self.north and self.west <= point.lng <= self.east

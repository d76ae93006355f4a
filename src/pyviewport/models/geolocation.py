"""Device geolocation fixes, shaped like the browser Geolocation API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pyviewport.models.geo import GeoPoint


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    latitude: float
    longitude: float
    accuracy: float | None = None


class GeolocationFix(BaseModel):
    """A position report ``{coords: {latitude, longitude}, timestamp}``.

    ``coords`` is ``None`` until the provider produced a first fix.
    ``timestamp`` (epoch milliseconds) only serves to tell a new fix from a
    repeated one.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    coords: Coordinates | None = None
    timestamp: float | None = Field(default=None)

    @property
    def point(self) -> GeoPoint | None:
        if self.coords is None:
            return None
        return GeoPoint(lat=self.coords.latitude, lng=self.coords.longitude)

"""Normalized selection events.

All selection sources (geolocation, primary selection, transaction
resolution, click clusters) convert their inputs into these events. Only the
state machine is allowed to turn them into bounds.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pyviewport.models.geo import GeoPoint


class SelectionReason(StrEnum):
    """Why the viewport currently shows what it shows."""

    DEFAULT = "default"
    DEVICE_LOCATION = "device_location"
    PRIMARY_SELECTION = "primary_selection"
    TRANSACTION = "transaction"
    CLICK_CLUSTER = "click_cluster"


class SelectionEvent(BaseModel):
    """A candidate point-set produced by one selection source."""

    model_config = ConfigDict(frozen=True)

    reason: SelectionReason
    points: tuple[GeoPoint, ...] = ()
    key: str | None = Field(
        default=None,
        description="Source-specific identity (hotspot address, transaction hash), if any.",
    )

    @field_validator("reason")
    @classmethod
    def _not_default(cls, value: SelectionReason) -> SelectionReason:
        if value == SelectionReason.DEFAULT:
            raise ValueError("DEFAULT is reserved for the startup region")
        return value

    @property
    def is_empty(self) -> bool:
        return not self.points


def build_event(
    reason: SelectionReason,
    focal: GeoPoint | None,
    secondary: Iterable[GeoPoint] = (),
    *,
    key: str | None = None,
) -> SelectionEvent:
    """Join a focal point and its secondary points into one event."""
    points = list(secondary)
    if focal is not None:
        points.append(focal)
    return SelectionEvent(reason=reason, points=tuple(points), key=key)

"""Deterministic acceptance policy for selection updates.

This module intentionally contains *no* I/O. Selection sources ask it two
questions: is this geolocation report a new fix, and may this finished
asynchronous resolution still apply its result.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyviewport.models.geo import GeoPoint


def is_new_fix(
    *,
    cached_timestamp: float | None,
    incoming_timestamp: float | None,
    cached_point: GeoPoint | None,
    incoming_point: GeoPoint | None,
) -> bool:
    """Decide whether a geolocation report carries a new fix.

    Policy:
    - no coordinates: never a fix
    - both timestamps present: new only if the timestamp changed
    - otherwise: new only if the coordinates changed
    """
    if incoming_point is None:
        return False
    if incoming_timestamp is not None and cached_timestamp is not None:
        return incoming_timestamp != cached_timestamp
    return incoming_point != cached_point


@dataclass(frozen=True, slots=True)
class ResolutionTicket:
    """Handle given to an asynchronous resolution when it starts."""

    key: str | None
    generation: int


class ResolutionTracker:
    """Latest-only bookkeeping for asynchronous resolutions.

    Every :meth:`begin` supersedes all earlier tickets. A superseded
    resolution still runs to completion; its result is simply not applied.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._key: str | None = None

    @property
    def current_key(self) -> str | None:
        return self._key

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self, key: str | None) -> ResolutionTicket:
        self._generation += 1
        self._key = key
        return ResolutionTicket(key=key, generation=self._generation)

    def is_current(self, ticket: ResolutionTicket) -> bool:
        return ticket.generation == self._generation and ticket.key == self._key

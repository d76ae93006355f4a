"""Minimal enclosing bounding box over a point-set."""

from __future__ import annotations

from collections.abc import Iterable

from pyviewport.exceptions import InvalidArgumentError
from pyviewport.models.geo import BoundingBox, GeoPoint


def compute_bounds(points: Iterable[GeoPoint]) -> BoundingBox:
    """Reduce a non-empty point-set to its enclosing box.

    Single pass over *points* (any iterable, including generators). The
    result is independent of input order. A single point yields a
    zero-area box; making it visible is the job of fit padding.

    Raises :class:`InvalidArgumentError` when *points* is empty.
    """
    iterator = iter(points)
    first = next(iterator, None)
    if first is None:
        raise InvalidArgumentError("compute_bounds requires at least one point")

    min_lat = max_lat = first.lat
    min_lng = max_lng = first.lng
    for point in iterator:
        if point.lat < min_lat:
            min_lat = point.lat
        elif point.lat > max_lat:
            max_lat = point.lat
        if point.lng < min_lng:
            min_lng = point.lng
        elif point.lng > max_lng:
            max_lng = point.lng

    return BoundingBox(northeast=(max_lng, max_lat), southwest=(min_lng, min_lat))

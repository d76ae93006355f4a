"""H3 hex-spatial-index decoding."""

from __future__ import annotations

import h3

from pyviewport.exceptions import HexDecodeError
from pyviewport.models.geo import GeoPoint


def decode_hex_location(cell: str | None) -> GeoPoint:
    """Decode an H3 cell to the coordinates of its center.

    Raises :class:`HexDecodeError` for missing or malformed cells.
    """
    if not isinstance(cell, str) or not cell.strip():
        raise HexDecodeError(f"Missing H3 cell: {cell!r}", value=cell)
    value = cell.strip().lower()
    try:
        valid = h3.is_valid_cell(value)
    except (ValueError, TypeError):
        valid = False
    if not valid:
        raise HexDecodeError(f"Invalid H3 cell: {cell!r}", value=cell)
    try:
        lat, lng = h3.cell_to_latlng(value)
    except (ValueError, h3.H3BaseException) as exc:
        raise HexDecodeError(f"Could not decode H3 cell: {cell!r}", value=cell) from exc
    return GeoPoint(lat=lat, lng=lng)

"""Hotspot record endpoints."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from pyviewport._api._common import address_path, unwrap_data
from pyviewport._transport import Transport
from pyviewport.exceptions import ViewportApiError
from pyviewport.models.hotspot import Hotspot

HOTSPOT_ENDPOINT = "/hotspots/{address}"
WITNESSES_ENDPOINT = "/hotspots/{address}/witnesses"


async def fetch_hotspot(transport: Transport, address: str) -> Hotspot:
    """Fetch and parse a single hotspot by address."""
    endpoint = address_path(HOTSPOT_ENDPOINT, address)
    data = unwrap_data(await transport.get_json(endpoint), endpoint=endpoint)
    try:
        return Hotspot.model_validate(data)
    except ValidationError as exc:
        raise ViewportApiError(f"Unexpected hotspot payload from {endpoint}", endpoint=endpoint) from exc


async def fetch_hotspot_witnesses(transport: Transport, address: str) -> list[Hotspot]:
    """Fetch the hotspots that recently witnessed *address*.

    Entries that fail to parse are skipped.
    """
    endpoint = address_path(WITNESSES_ENDPOINT, address)
    data = unwrap_data(await transport.get_json(endpoint), endpoint=endpoint)
    if not isinstance(data, list):
        raise ViewportApiError(f"Expected a list from {endpoint}", endpoint=endpoint)

    witnesses: list[Hotspot] = []
    adapter = TypeAdapter(Hotspot)
    for entry in data:
        try:
            witnesses.append(adapter.validate_python(entry))
        except ValidationError:
            continue
    return witnesses

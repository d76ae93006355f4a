"""Validator list endpoint."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from pyviewport._api._common import unwrap_data
from pyviewport._transport import Transport
from pyviewport.exceptions import ViewportApiError
from pyviewport.models.hotspot import Validator

VALIDATORS_ENDPOINT = "/validators"


async def fetch_validators(transport: Transport) -> list[Validator]:
    """Fetch and parse the validator list."""
    endpoint = VALIDATORS_ENDPOINT
    data = unwrap_data(await transport.get_json(endpoint), endpoint=endpoint)
    try:
        return TypeAdapter(list[Validator]).validate_python(data)
    except ValidationError as exc:
        raise ViewportApiError(f"Unexpected validator payload from {endpoint}", endpoint=endpoint) from exc

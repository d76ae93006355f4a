"""Shared helpers for coverage API endpoint modules.

It is internal to pyviewport and may change at any time.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pyviewport.exceptions import InvalidArgumentError, ViewportApiError


def unwrap_data(body: Any, *, endpoint: str) -> Any:
    """Return the ``data`` member of a ``{"data": ...}`` response envelope."""
    if not isinstance(body, dict) or "data" not in body:
        raise ViewportApiError(f"Missing 'data' field from {endpoint}", endpoint=endpoint)
    return body["data"]


def address_path(template: str, address: str) -> str:
    """Fill an endpoint template with a URL-safe record address."""
    address = address.strip()
    if not address:
        raise InvalidArgumentError(f"Blank address for {template}")
    return template.format(address=quote(address, safe=""))

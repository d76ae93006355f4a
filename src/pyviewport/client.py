"""High-level async client for the coverage API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from pyviewport._api import hotspots as _hotspots_api
from pyviewport._api import validators as _validators_api
from pyviewport._cache import TimedCache
from pyviewport._transport import JsonTransport, Transport
from pyviewport.config import ViewportConfig
from pyviewport.exceptions import ViewportError
from pyviewport.models.hotspot import Hotspot, Validator

_logger = logging.getLogger(__name__)


class CoverageClient:
    """Async client for hotspot records and the validator list.

    Usage::

        async with CoverageClient(config) as client:
            hotspot = await client.get_hotspot(address)

    The client does not retry. A failed request raises a
    :class:`~pyviewport.exceptions.ViewportError` subclass and the caller
    decides what "no data this turn" means.
    """

    def __init__(
        self,
        config: ViewportConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or ViewportConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = None
        self._validators: TimedCache[list[Validator]] = TimedCache(self._config.validators_ttl)

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CoverageClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = JsonTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    @property
    def config(self) -> ViewportConfig:
        return self._config

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise ViewportError("Client not initialized. Use 'async with CoverageClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Hotspots
    # ------------------------------------------------------------------

    async def get_hotspot(self, address: str) -> Hotspot:
        """Fetch a hotspot record by address."""
        return await _hotspots_api.fetch_hotspot(self._require_transport(), address)

    async def get_hotspot_with_witnesses(self, address: str) -> Hotspot:
        """Fetch a hotspot and its recent witnesses concurrently."""
        transport = self._require_transport()
        hotspot, witnesses = await asyncio.gather(
            _hotspots_api.fetch_hotspot(transport, address),
            _hotspots_api.fetch_hotspot_witnesses(transport, address),
        )
        _logger.debug("Hotspot %s loaded with %d witnesses", address, len(witnesses))
        return hotspot.model_copy(update={"witnesses": tuple(witnesses)})

    # ------------------------------------------------------------------
    # Validators
    # ------------------------------------------------------------------

    async def get_validators(self, *, force_refresh: bool = False) -> list[Validator]:
        """Return the validator list, served from cache while fresh."""
        transport = self._require_transport()
        return await self._validators.get_or_fetch(
            lambda: _validators_api.fetch_validators(transport),
            force_refresh=force_refresh,
        )

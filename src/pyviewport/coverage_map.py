"""Coverage map controller.

Wires the selection sources to one :class:`ViewportStateMachine` and exposes
the callbacks a rendering surface needs (pointer events, style load, layout
changes).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from pyviewport._hex import decode_hex_location
from pyviewport.click import hover_cursor
from pyviewport.client import CoverageClient
from pyviewport.config import ViewportConfig
from pyviewport.exceptions import ViewportConfigError
from pyviewport.models.feature import ClickOutcome, Cursor, RenderedFeature, SingleSelection
from pyviewport.models.fit import FitContext, FitOptions
from pyviewport.models.geo import GeoPoint
from pyviewport.models.geolocation import GeolocationFix
from pyviewport.models.hotspot import Hotspot, Validator
from pyviewport.models.transaction import Transaction
from pyviewport.sources.clicks import ClickSelectionSource
from pyviewport.sources.geolocation import GeolocationSource
from pyviewport.sources.primary import HotspotFetcher, PrimarySelectionSource
from pyviewport.sources.transaction import DerivedSelection, HexDecoder, TransactionSelectionSource
from pyviewport.state.machine import ViewportListener, ViewportState, ViewportStateMachine

_logger = logging.getLogger(__name__)


class SelectionDetail(BaseModel):
    """The hotspot and witness points the detail layer should draw."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hotspot: Hotspot
    witnesses: tuple[GeoPoint, ...] = ()


async def _no_fetcher(address: str) -> Hotspot:
    raise ViewportConfigError(f"No hotspot fetcher configured (address={address})")


class CoverageMap:
    """Viewport controller for the hotspot coverage map.

    Parameters
    ----------
    config : ViewportConfig or None
        Defaults and padding profiles.
    client : CoverageClient or None
        Entered client used to load hotspots and validators.
    fetch_hotspot : callable or None
        ``async (address) -> Hotspot`` overriding the client for record
        loads (receipt targets and clicked hotspots).
    is_wide_viewport : bool
        Device class at startup; picks the default region once.
    decode : callable
        H3 cell decoder for receipt witnesses.
    """

    def __init__(
        self,
        config: ViewportConfig | None = None,
        *,
        client: CoverageClient | None = None,
        fetch_hotspot: HotspotFetcher | None = None,
        is_wide_viewport: bool = False,
        decode: HexDecoder = decode_hex_location,
    ) -> None:
        self._config = config or (client.config if client is not None else ViewportConfig())
        self._client = client
        self._machine = ViewportStateMachine(
            self._config,
            context=FitContext(is_wide_viewport=is_wide_viewport),
        )
        self._background: set[asyncio.Task[Any]] = set()

        target_fetcher = fetch_hotspot or (client.get_hotspot if client is not None else None)
        selection_fetcher = fetch_hotspot or (client.get_hotspot_with_witnesses if client is not None else None)

        submit = self._machine.submit
        self.geolocation = GeolocationSource(submit)
        self.primary = PrimarySelectionSource(submit, selection_fetcher)
        self.transactions = TransactionSelectionSource(
            submit,
            target_fetcher or _no_fetcher,
            decode=decode,
            receipt_kind=self._config.receipt_kind,
        )
        self.clicks = ClickSelectionSource(submit, on_single=self._on_single_click)

    # ------------------------------------------------------------------
    # Rendering surface view
    # ------------------------------------------------------------------

    @property
    def state(self) -> ViewportState:
        return self._machine.state

    @property
    def fit_options(self) -> FitOptions:
        return self._machine.fit_options

    @property
    def zoom_range(self) -> tuple[int, int]:
        return (self._config.min_zoom, self._config.max_zoom)

    @property
    def detail(self) -> SelectionDetail | None:
        """Primary selection if any, otherwise the resolved receipt."""
        selected = self.primary.selected
        if selected is not None:
            return SelectionDetail(hotspot=selected, witnesses=tuple(selected.witness_points()))
        derived: DerivedSelection | None = self.transactions.selection
        if derived is not None:
            return SelectionDetail(hotspot=derived.target, witnesses=derived.witnesses)
        return None

    def subscribe(self, listener: ViewportListener) -> Callable[[], None]:
        return self._machine.subscribe(listener)

    # ------------------------------------------------------------------
    # Selection inputs
    # ------------------------------------------------------------------

    def on_geolocation(self, fix: GeolocationFix | Mapping[str, Any]) -> ViewportState | None:
        return self.geolocation.update(fix)

    def select_hotspot(self, hotspot: Hotspot | None) -> ViewportState | None:
        return self.primary.select(hotspot)

    async def select_hotspot_address(self, address: str) -> Hotspot | None:
        return await self.primary.select_address(address)

    def select_transaction(self, txn: Transaction | None) -> asyncio.Task[DerivedSelection | None] | None:
        return self.transactions.select(txn)

    # ------------------------------------------------------------------
    # Pointer callbacks
    # ------------------------------------------------------------------

    def on_click(self, hits: Iterable[RenderedFeature | Mapping[str, Any]]) -> ClickOutcome | None:
        """Handle a click on the hotspot layer.

        A single hit is loaded by address in the background when a loader is
        configured and an event loop is running; otherwise the marker's own
        properties are selected right away.
        """
        return self.clicks.handle(hits)

    def on_hover(self, hits: Iterable[RenderedFeature | Mapping[str, Any]]) -> Cursor:
        return hover_cursor(hits)

    def _on_single_click(self, outcome: SingleSelection) -> None:
        if outcome.identifier is None:
            _logger.debug("Clicked feature has no address; ignoring")
            return
        if self.primary.can_fetch:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                _logger.debug("No running event loop; selecting clicked marker %s as rendered", outcome.identifier)
            else:
                task = loop.create_task(self.primary.select_address(outcome.identifier))
                self._background.add(task)
                task.add_done_callback(self._background.discard)
                return
        # No loader or no loop: select what the marker itself carries.
        self.primary.select(
            Hotspot.model_validate(
                {**outcome.properties, "address": outcome.identifier, "lat": outcome.point.lat, "lng": outcome.point.lng}
            )
        )

    # ------------------------------------------------------------------
    # Layout / surface signals
    # ------------------------------------------------------------------

    def on_style_loaded(self) -> FitOptions:
        return self._machine.update_context(map_ready=True)

    def set_overlay_visible(self, visible: bool) -> FitOptions:
        return self._machine.update_context(overlay_visible=visible)

    def set_wide_viewport(self, wide: bool) -> FitOptions:
        return self._machine.update_context(is_wide_viewport=wide)

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    async def get_validators(self, *, force_refresh: bool = False) -> list[Validator]:
        """Validator list for the validators layer. Never moves the viewport."""
        if self._client is None:
            raise ViewportConfigError("get_validators requires a CoverageClient")
        return await self._client.get_validators(force_refresh=force_refresh)

    async def wait_idle(self) -> None:
        """Wait for pending hotspot loads and receipt resolutions."""
        while self._background:
            await asyncio.gather(*list(self._background))
        await self.transactions.wait_idle()

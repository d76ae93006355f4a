"""Primary (manually selected) hotspot source."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from pyviewport.exceptions import ViewportConfigError, ViewportError
from pyviewport.models.hotspot import Hotspot
from pyviewport.sources import Submit
from pyviewport.state.events import SelectionReason, build_event
from pyviewport.state.machine import ViewportState
from pyviewport.state.policy import ResolutionTracker

_logger = logging.getLogger(__name__)

HotspotFetcher = Callable[[str], Awaitable[Hotspot]]


class PrimarySelectionSource:
    """Fit the viewport around the selected hotspot and its witnesses.

    :meth:`select` applies an already-loaded hotspot. :meth:`select_address`
    loads it first; when another selection happens while the load is in
    flight, the loaded record is dropped.
    """

    def __init__(self, submit: Submit, fetch_hotspot: HotspotFetcher | None = None) -> None:
        self._submit = submit
        self._fetch_hotspot = fetch_hotspot
        self._tracker = ResolutionTracker()
        self._selected: Hotspot | None = None

    @property
    def selected(self) -> Hotspot | None:
        return self._selected

    @property
    def can_fetch(self) -> bool:
        return self._fetch_hotspot is not None

    def select(self, hotspot: Hotspot | None) -> ViewportState | None:
        """Set or clear the selection. Clearing keeps the current bounds."""
        self._tracker.begin(hotspot.address if hotspot is not None else None)
        return self._apply(hotspot)

    async def select_address(self, address: str) -> Hotspot | None:
        """Load a hotspot by address, then select it.

        Returns ``None`` when the load failed or was superseded; the current
        selection and bounds stay as they are in both cases.
        """
        if self._fetch_hotspot is None:
            raise ViewportConfigError("select_address requires a fetch_hotspot function")

        ticket = self._tracker.begin(address)
        try:
            hotspot = await self._fetch_hotspot(address)
        except ViewportError:
            _logger.debug("Hotspot fetch failed for address=%s", address, exc_info=True)
            return None

        if not self._tracker.is_current(ticket):
            _logger.debug("Discarding stale hotspot fetch for address=%s", address)
            return None

        self._apply(hotspot)
        return hotspot

    def _apply(self, hotspot: Hotspot | None) -> ViewportState | None:
        self._selected = hotspot
        if hotspot is None:
            return None
        return self._submit(
            build_event(
                SelectionReason.PRIMARY_SELECTION,
                hotspot.point,
                hotspot.witness_points(),
                key=hotspot.address,
            )
        )

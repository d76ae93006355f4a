"""Transaction-derived selection source.

When the externally selected transaction is a proof-of-coverage receipt,
the challenged hotspot is fetched and the witness H3 cells are decoded. The
fetch suspends; if the selected transaction changes meanwhile, the finished
resolution is discarded instead of applied.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable

from pydantic import BaseModel, ConfigDict

from pyviewport._hex import decode_hex_location
from pyviewport.exceptions import HexDecodeError, ViewportError
from pyviewport.models.geo import GeoPoint
from pyviewport.models.hotspot import Hotspot
from pyviewport.models.transaction import POC_RECEIPTS_KIND, ReceiptWitness, Transaction
from pyviewport.sources import Submit
from pyviewport.sources.primary import HotspotFetcher
from pyviewport.state.events import SelectionReason, build_event
from pyviewport.state.policy import ResolutionTicket, ResolutionTracker

_logger = logging.getLogger(__name__)

HexDecoder = Callable[[str | None], GeoPoint]


class DerivedSelection(BaseModel):
    """Resolved geography of a receipt transaction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    transaction_hash: str
    target: Hotspot
    witnesses: tuple[GeoPoint, ...] = ()
    dropped_witnesses: int = 0

    @property
    def points(self) -> tuple[GeoPoint, ...]:
        target = self.target.point
        return self.witnesses + ((target,) if target is not None else ())


def decode_witnesses(
    witnesses: Iterable[ReceiptWitness],
    decode: HexDecoder = decode_hex_location,
) -> tuple[list[GeoPoint], int]:
    """Decode witness cells, dropping the ones that fail.

    Returns the decoded points and the number of dropped witnesses.
    """
    points: list[GeoPoint] = []
    dropped = 0
    for witness in witnesses:
        try:
            points.append(decode(witness.location))
        except HexDecodeError:
            dropped += 1
            _logger.debug("Dropping witness gateway=%s with bad location=%r", witness.gateway, witness.location)
    return points, dropped


class TransactionSelectionSource:
    """Fit the viewport around the selected receipt's target and witnesses."""

    def __init__(
        self,
        submit: Submit,
        fetch_hotspot: HotspotFetcher,
        *,
        decode: HexDecoder = decode_hex_location,
        receipt_kind: str = POC_RECEIPTS_KIND,
    ) -> None:
        self._submit = submit
        self._fetch_hotspot = fetch_hotspot
        self._decode = decode
        self._receipt_kind = receipt_kind
        self._tracker = ResolutionTracker()
        self._selection: DerivedSelection | None = None
        self._task: asyncio.Task[DerivedSelection | None] | None = None
        self._pending: set[asyncio.Task[DerivedSelection | None]] = set()

    @property
    def selection(self) -> DerivedSelection | None:
        return self._selection

    def select(self, txn: Transaction | None) -> asyncio.Task[DerivedSelection | None] | None:
        """Start resolving *txn*, superseding any resolution in flight.

        Returns the resolution task, or ``None`` when nothing needs resolving
        (no transaction, or not a receipt). Re-selecting the current
        transaction is a no-op.

        Receipts need a running event loop; without one ``RuntimeError`` is
        raised and the previous selection stays current.
        """
        key = txn.hash if txn is not None else None
        if self._tracker.generation and key == self._tracker.current_key:
            return self._task

        hop = txn.first_hop if txn is not None else None
        if txn is None or not txn.is_kind(self._receipt_kind) or hop is None:
            self._tracker.begin(key)
            self._task = None
            self._selection = None
            return None

        loop = asyncio.get_running_loop()
        ticket = self._tracker.begin(key)
        task = loop.create_task(self._resolve(ticket, txn))
        self._task = task
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def resolve(self, txn: Transaction | None) -> DerivedSelection | None:
        """Select *txn* and wait for its resolution to finish."""
        task = self.select(txn)
        if task is None:
            return self._selection
        return await task

    async def wait_idle(self) -> None:
        """Wait for every started resolution, stale ones included."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    async def _resolve(self, ticket: ResolutionTicket, txn: Transaction) -> DerivedSelection | None:
        hop = txn.first_hop
        assert hop is not None  # noqa: S101

        try:
            target = await self._fetch_hotspot(hop.challengee)
        except ViewportError:
            _logger.debug("Receipt target fetch failed for txn=%s", txn.hash, exc_info=True)
            if self._tracker.is_current(ticket):
                self._selection = None
            return None

        witnesses, dropped = decode_witnesses(hop.witnesses, self._decode)

        if not self._tracker.is_current(ticket):
            _logger.debug("Discarding stale resolution for txn=%s", txn.hash)
            return None

        selection = DerivedSelection(
            transaction_hash=txn.hash,
            target=target,
            witnesses=tuple(witnesses),
            dropped_witnesses=dropped,
        )
        self._selection = selection
        self._submit(build_event(SelectionReason.TRANSACTION, target.point, witnesses, key=txn.hash))
        return selection

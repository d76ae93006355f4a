"""Ad-hoc click selection source."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pyviewport.click import resolve_click
from pyviewport.models.feature import ClickOutcome, ClusterBounds, RenderedFeature, SingleSelection
from pyviewport.models.geo import GeoPoint
from pyviewport.sources import Submit
from pyviewport.state.events import SelectionEvent, SelectionReason


class ClickSelectionSource:
    """Route marker clicks: single hits select, multiple hits fit the cluster."""

    def __init__(
        self,
        submit: Submit,
        on_single: Callable[[SingleSelection], Any] | None = None,
    ) -> None:
        self._submit = submit
        self._on_single = on_single
        self._last_cluster: tuple[GeoPoint, ...] | None = None

    @property
    def last_cluster(self) -> tuple[GeoPoint, ...] | None:
        """Points of the most recent cluster click (overwritten by the next one)."""
        return self._last_cluster

    def handle(self, hits: Iterable[RenderedFeature | Mapping[str, Any]]) -> ClickOutcome | None:
        outcome = resolve_click(hits)
        if isinstance(outcome, ClusterBounds):
            self._last_cluster = outcome.points
            self._submit(SelectionEvent(reason=SelectionReason.CLICK_CLUSTER, points=outcome.points))
        elif isinstance(outcome, SingleSelection) and self._on_single is not None:
            self._on_single(outcome)
        return outcome

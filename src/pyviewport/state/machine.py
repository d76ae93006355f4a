"""Viewport state machine.

This is the only component allowed to change the viewport. Selection
sources hand it :class:`SelectionEvent`s through :meth:`submit`; layout
changes go through :meth:`update_context`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from pyviewport.bounds import compute_bounds
from pyviewport.config import ViewportConfig
from pyviewport.models.fit import FitContext, FitOptions
from pyviewport.models.geo import BoundingBox
from pyviewport.padding import resolve_padding
from pyviewport.state.events import SelectionEvent, SelectionReason

_logger = logging.getLogger(__name__)


class ViewportState(BaseModel):
    """What the rendering surface should display and how to fit it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bounds: BoundingBox
    fit_options: FitOptions
    reason: SelectionReason = SelectionReason.DEFAULT
    key: str | None = None
    revision: int = 0


ViewportListener = Callable[[ViewportState], None]


class ViewportStateMachine:
    """Single owner of the current :class:`ViewportState`.

    Events are applied in arrival order and each one replaces the bounds
    unconditionally, whichever source sent it (last writer wins). There is
    no priority between sources.

    The startup region is picked once from the device class in *context*;
    later device-class changes only affect padding.
    """

    def __init__(
        self,
        config: ViewportConfig | None = None,
        *,
        context: FitContext | None = None,
    ) -> None:
        self._config = config or ViewportConfig()
        self._context = context or FitContext()
        self._listeners: list[ViewportListener] = []
        self._state = ViewportState(
            bounds=self._config.default_bounds(self._context.is_wide_viewport),
            fit_options=resolve_padding(self._context, self._config.padding),
        )

    @property
    def state(self) -> ViewportState:
        return self._state

    @property
    def bounds(self) -> BoundingBox:
        return self._state.bounds

    @property
    def fit_options(self) -> FitOptions:
        return self._state.fit_options

    @property
    def context(self) -> FitContext:
        return self._context

    def subscribe(self, listener: ViewportListener) -> Callable[[], None]:
        """Call *listener* with the new state after every transition.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def submit(self, event: SelectionEvent) -> ViewportState | None:
        """Apply a candidate point-set.

        Empty point-sets leave the state untouched and return ``None``.
        """
        if event.is_empty:
            _logger.debug("Ignoring empty %s selection", event.reason)
            return None

        bounds = compute_bounds(event.points)
        self._replace(
            ViewportState(
                bounds=bounds,
                fit_options=self._state.fit_options,
                reason=event.reason,
                key=event.key,
                revision=self._state.revision + 1,
            )
        )
        _logger.debug(
            "Viewport -> %s (reason=%s key=%s points=%d)",
            bounds.as_lng_lat(),
            event.reason,
            event.key,
            len(event.points),
        )
        return self._state

    def update_context(
        self,
        *,
        is_wide_viewport: bool | None = None,
        overlay_visible: bool | None = None,
        map_ready: bool | None = None,
    ) -> FitOptions:
        """Change layout flags and recompute fit options. Bounds are kept."""
        updates = {
            name: value
            for name, value in (
                ("is_wide_viewport", is_wide_viewport),
                ("overlay_visible", overlay_visible),
                ("map_ready", map_ready),
            )
            if value is not None
        }
        self._context = self._context.model_copy(update=updates)
        fit_options = resolve_padding(self._context, self._config.padding)
        if fit_options != self._state.fit_options:
            self._replace(
                self._state.model_copy(
                    update={"fit_options": fit_options, "revision": self._state.revision + 1},
                )
            )
        return fit_options

    def _replace(self, state: ViewportState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                _logger.debug("Viewport listener failed", exc_info=True)

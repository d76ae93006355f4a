"""Device location source."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pyviewport.models.geolocation import GeolocationFix
from pyviewport.sources import Submit
from pyviewport.state.events import SelectionEvent, SelectionReason
from pyviewport.state.machine import ViewportState
from pyviewport.state.policy import is_new_fix

_logger = logging.getLogger(__name__)


class GeolocationSource:
    """Recenter on every new device fix."""

    def __init__(self, submit: Submit) -> None:
        self._submit = submit
        self._last_fix: GeolocationFix | None = None

    @property
    def last_fix(self) -> GeolocationFix | None:
        return self._last_fix

    def update(self, fix: GeolocationFix | Mapping[str, Any]) -> ViewportState | None:
        """Feed a position report; returns the new state if bounds changed."""
        if not isinstance(fix, GeolocationFix):
            fix = GeolocationFix.model_validate(fix)

        previous = self._last_fix
        if not is_new_fix(
            cached_timestamp=previous.timestamp if previous is not None else None,
            incoming_timestamp=fix.timestamp,
            cached_point=previous.point if previous is not None else None,
            incoming_point=fix.point,
        ):
            _logger.debug("No new geolocation fix (timestamp=%s)", fix.timestamp)
            return None

        self._last_fix = fix
        point = fix.point
        assert point is not None  # noqa: S101
        return self._submit(SelectionEvent(reason=SelectionReason.DEVICE_LOCATION, points=(point,)))

"""Selection sources.

This package contains adapters that watch one upstream input each (device
location, primary selection, selected transaction, map clicks) and emit
:class:`~pyviewport.state.events.SelectionEvent`s for the state machine.
"""

from collections.abc import Callable

from pyviewport.state.events import SelectionEvent
from pyviewport.state.machine import ViewportState

Submit = Callable[[SelectionEvent], ViewportState | None]

__all__ = ["Submit"]

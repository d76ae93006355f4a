"""pyviewport - Async viewport-bounds engine for hotspot coverage maps."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyviewport")
except PackageNotFoundError:
    __version__ = "0+local"
from pyviewport.bounds import compute_bounds
from pyviewport.click import hover_cursor, resolve_click
from pyviewport.client import CoverageClient
from pyviewport.config import PaddingProfiles, ViewportConfig, is_wide_viewport_device
from pyviewport.coverage_map import CoverageMap, SelectionDetail
from pyviewport.exceptions import (
    HexDecodeError,
    InvalidArgumentError,
    RecordNotFoundError,
    ViewportApiError,
    ViewportConfigError,
    ViewportError,
    ViewportTransportError,
)
from pyviewport.models import (
    BoundingBox,
    ClickOutcome,
    ClusterBounds,
    Cursor,
    FitContext,
    FitOptions,
    GeolocationFix,
    GeoPoint,
    Hotspot,
    Padding,
    RenderedFeature,
    SingleSelection,
    Transaction,
    Validator,
)
from pyviewport.padding import resolve_padding
from pyviewport.state.events import SelectionEvent, SelectionReason
from pyviewport.state.machine import ViewportState, ViewportStateMachine

__all__ = [
    "__version__",
    "BoundingBox",
    "ClickOutcome",
    "ClusterBounds",
    "CoverageClient",
    "CoverageMap",
    "Cursor",
    "FitContext",
    "FitOptions",
    "GeoPoint",
    "GeolocationFix",
    "HexDecodeError",
    "Hotspot",
    "InvalidArgumentError",
    "Padding",
    "PaddingProfiles",
    "RecordNotFoundError",
    "RenderedFeature",
    "SelectionDetail",
    "SelectionEvent",
    "SelectionReason",
    "SingleSelection",
    "Transaction",
    "Validator",
    "ViewportApiError",
    "ViewportConfig",
    "ViewportConfigError",
    "ViewportError",
    "ViewportState",
    "ViewportStateMachine",
    "ViewportTransportError",
    "compute_bounds",
    "hover_cursor",
    "is_wide_viewport_device",
    "resolve_click",
    "resolve_padding",
]

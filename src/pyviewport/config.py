"""Viewport configuration for pyviewport."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyviewport.exceptions import ViewportConfigError
from pyviewport.models.fit import Padding
from pyviewport.models.geo import BoundingBox

#: Continental US, the default region on narrow (mobile-class) viewports.
US_BOUNDS = BoundingBox.from_lng_lat([[-61.08, 44.84], [-125, 33]])
#: Continental US plus Europe, the default region on wide viewports.
US_EU_BOUNDS = BoundingBox.from_lng_lat([[32.1, 58.63], [-125, 33]])

#: Minimum device width (px) classified as a wide, desktop-class viewport.
WIDE_VIEWPORT_MIN_WIDTH = 1224


def is_wide_viewport_device(device_width: float, *, min_width: float = WIDE_VIEWPORT_MIN_WIDTH) -> bool:
    """Device-class probe: ``True`` for desktop/laptop-class widths."""
    return device_width >= min_width


@dataclasses.dataclass(frozen=True)
class PaddingProfiles:
    """Fit padding per layout.

    Parameters
    ----------
    desktop : Padding
        Wide viewport. The left edge reserves room for the side panel.
    mobile_overlay : Padding
        Narrow viewport with the info panel open; the bottom edge reserves
        room for the bottom sheet.
    uniform : float
        Narrow viewport without overlay.
    """

    desktop: Padding = dataclasses.field(default_factory=lambda: Padding(top=200, left=600, right=200, bottom=200))
    mobile_overlay: Padding = dataclasses.field(default_factory=lambda: Padding(top=10, left=10, right=10, bottom=450))
    uniform: float = 10


@dataclasses.dataclass(frozen=True)
class ViewportConfig:
    """Viewport and upstream client configuration.

    Parameters
    ----------
    wide_default_bounds : BoundingBox
        Region shown on wide viewports before any selection source fires.
    narrow_default_bounds : BoundingBox
        Region shown on narrow viewports before any selection source fires.
    padding : PaddingProfiles
        Fit padding per layout.
    wide_viewport_min_width : int
        Device width threshold for :func:`is_wide_viewport_device`.
    min_zoom, max_zoom : int
        Zoom range the rendering surface should clamp to.
    base_url : str
        Coverage API base URL.
    request_timeout : float
        Total timeout in seconds for a single API request.
    validators_ttl : float
        Seconds a fetched validator list stays fresh.
    receipt_kind : str
        Transaction ``type`` whose geography drives the viewport.
    user_agent : str
        User-Agent header sent with API requests.
    """

    wide_default_bounds: BoundingBox = US_EU_BOUNDS
    narrow_default_bounds: BoundingBox = US_BOUNDS
    padding: PaddingProfiles = dataclasses.field(default_factory=PaddingProfiles)
    wide_viewport_min_width: int = WIDE_VIEWPORT_MIN_WIDTH
    min_zoom: int = 2
    max_zoom: int = 14
    base_url: str = "https://api.helium.io/v1"
    request_timeout: float = 10.0
    validators_ttl: float = 300.0
    receipt_kind: str = "poc_receipts_v1"
    user_agent: str = "pyviewport"

    def __post_init__(self) -> None:
        if self.min_zoom > self.max_zoom:
            raise ViewportConfigError(f"min_zoom ({self.min_zoom}) must not exceed max_zoom ({self.max_zoom})")
        if self.request_timeout <= 0:
            raise ViewportConfigError("request_timeout must be positive")
        if self.validators_ttl < 0:
            raise ViewportConfigError("validators_ttl must not be negative")

    def default_bounds(self, is_wide_viewport: bool) -> BoundingBox:
        """Startup region for the given device class."""
        return self.wide_default_bounds if is_wide_viewport else self.narrow_default_bounds

    @classmethod
    def from_env(cls, **overrides: Any) -> ViewportConfig:
        """Create configuration from environment variables.

        Reads the optional ``PYVIEWPORT_*`` variables. Explicit keyword
        arguments override environment values.

        Raises
        ------
        ViewportConfigError
            When a numeric variable cannot be parsed.
        """
        env = os.environ

        _ENV_CONFIG_MAP: dict[str, tuple[str, type]] = {
            "PYVIEWPORT_BASE_URL": ("base_url", str),
            "PYVIEWPORT_USER_AGENT": ("user_agent", str),
            "PYVIEWPORT_REQUEST_TIMEOUT": ("request_timeout", float),
            "PYVIEWPORT_VALIDATORS_TTL": ("validators_ttl", float),
            "PYVIEWPORT_MIN_ZOOM": ("min_zoom", int),
            "PYVIEWPORT_MAX_ZOOM": ("max_zoom", int),
            "PYVIEWPORT_WIDE_MIN_WIDTH": ("wide_viewport_min_width", int),
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, (field_name, caster) in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = caster(val.strip())
            except ValueError as exc:
                raise ViewportConfigError(f"{env_key} has an invalid value: {val!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

"""Fit padding and animation policy."""

from __future__ import annotations

from pyviewport.config import PaddingProfiles
from pyviewport.models.fit import FitContext, FitOptions

DEFAULT_PADDING = PaddingProfiles()


def resolve_padding(ctx: FitContext, profiles: PaddingProfiles = DEFAULT_PADDING) -> FitOptions:
    """Pick fit options for the current layout.

    Rules, first match wins:
    - wide viewport: desktop padding (side panel on the left)
    - narrow viewport with overlay: bottom-heavy padding (bottom sheet)
    - otherwise: small uniform padding

    ``animate`` mirrors ``ctx.map_ready``; the camera must not animate before
    the surface has an initial camera state.
    """
    animate = ctx.map_ready
    if ctx.is_wide_viewport:
        return FitOptions(padding=profiles.desktop, animate=animate)
    if ctx.overlay_visible:
        return FitOptions(padding=profiles.mobile_overlay, animate=animate)
    return FitOptions(padding=profiles.uniform, animate=animate)

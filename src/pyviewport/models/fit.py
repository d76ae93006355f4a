"""Fit context and fit options handed to the rendering surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Padding(BaseModel):
    """Per-edge screen padding in pixels applied when fitting bounds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    top: float = Field(default=0, ge=0)
    left: float = Field(default=0, ge=0)
    right: float = Field(default=0, ge=0)
    bottom: float = Field(default=0, ge=0)


class FitContext(BaseModel):
    """Device and surface flags that drive padding and animation.

    Parameters
    ----------
    is_wide_viewport : bool
        Desktop-class viewport (leaves room for a side panel).
    overlay_visible : bool
        An info panel / bottom sheet is currently shown.
    map_ready : bool
        The rendering surface has completed its initial load.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_wide_viewport: bool = False
    overlay_visible: bool = False
    map_ready: bool = False


class FitOptions(BaseModel):
    """Padding and animation instructions accompanying a bounds change.

    ``padding`` is either a per-edge :class:`Padding` or a single uniform
    number of pixels.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    padding: Padding | float
    animate: bool = False

    def padding_for_surface(self) -> dict[str, float] | float:
        """Padding in the plain shape map renderers accept."""
        if isinstance(self.padding, Padding):
            return self.padding.model_dump()
        return self.padding

"""Resolve pointer hits on rendered hotspot markers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pyviewport.models.feature import ClickOutcome, ClusterBounds, Cursor, RenderedFeature, SingleSelection

#: Renderer layer whose features are hit-tested for clicks and hover.
HOTSPOT_LAYER = "hotspots-circle"


def _as_features(hits: Iterable[RenderedFeature | Mapping[str, Any]], layer: str) -> list[RenderedFeature]:
    features = (h if isinstance(h, RenderedFeature) else RenderedFeature.model_validate(h) for h in hits)
    # Hits without layer info are trusted to come from a layer-filtered query.
    return [f for f in features if f.layer_id in (None, layer)]


def resolve_click(
    hits: Iterable[RenderedFeature | Mapping[str, Any]],
    *,
    layer: str = HOTSPOT_LAYER,
) -> ClickOutcome | None:
    """Turn the features under the pointer into a click outcome.

    Hits reported on any other style layer than *layer* are ignored.

    - one feature: :class:`SingleSelection` carrying its ``address``
    - several: :class:`ClusterBounds` over every hit coordinate (duplicates kept)
    - none: ``None``
    """
    features = _as_features(hits, layer)
    if not features:
        return None
    if len(features) == 1:
        (feature,) = features
        return SingleSelection(
            identifier=feature.identifier,
            point=feature.point,
            properties=dict(feature.properties),
        )
    return ClusterBounds(points=tuple(f.point for f in features))


def hover_cursor(hits: Iterable[RenderedFeature | Mapping[str, Any]], *, layer: str = HOTSPOT_LAYER) -> Cursor:
    """Pointer cursor over a marker, default cursor over empty map."""
    if _as_features(hits, layer):
        return Cursor.POINTER
    return Cursor.DEFAULT

"""Typed models for geometry, fit options, and upstream records."""

from pyviewport.models.feature import (
    ClickOutcome,
    ClusterBounds,
    Cursor,
    PointGeometry,
    RenderedFeature,
    SingleSelection,
)
from pyviewport.models.fit import FitContext, FitOptions, Padding
from pyviewport.models.geo import BoundingBox, GeoPoint, LngLat
from pyviewport.models.geolocation import Coordinates, GeolocationFix
from pyviewport.models.hotspot import Hotspot, Validator
from pyviewport.models.transaction import (
    POC_RECEIPTS_KIND,
    ReceiptPathElement,
    ReceiptWitness,
    Transaction,
)

__all__ = [
    "BoundingBox",
    "ClickOutcome",
    "ClusterBounds",
    "Coordinates",
    "Cursor",
    "FitContext",
    "FitOptions",
    "GeoPoint",
    "GeolocationFix",
    "Hotspot",
    "LngLat",
    "POC_RECEIPTS_KIND",
    "Padding",
    "PointGeometry",
    "ReceiptPathElement",
    "ReceiptWitness",
    "RenderedFeature",
    "SingleSelection",
    "Transaction",
    "Validator",
]

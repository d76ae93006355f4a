"""Tests for Pydantic model parsing of geometry and upstream records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyviewport.models.geo import BoundingBox, GeoPoint
from pyviewport.models.geolocation import GeolocationFix
from pyviewport.models.hotspot import Hotspot, Validator
from pyviewport.models.transaction import Transaction

# ------------------------------------------------------------------
# Geometry
# ------------------------------------------------------------------


class TestGeoPoint:
    def test_out_of_range_latitude_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeoPoint(lat=91, lng=0)

    def test_out_of_range_longitude_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeoPoint(lat=0, lng=-181)

    def test_points_are_values(self) -> None:
        assert GeoPoint(lat=1, lng=2) == GeoPoint(lat=1.0, lng=2.0)
        assert len({GeoPoint(lat=1, lng=2), GeoPoint(lat=1, lng=2)}) == 1

    def test_lng_lat_order(self) -> None:
        assert GeoPoint(lat=1, lng=2).as_lng_lat() == (2, 1)


class TestBoundingBox:
    def test_round_trips_lng_lat_corners(self) -> None:
        box = BoundingBox.from_lng_lat([[32.1, 58.63], [-125, 33]])

        assert box.as_lng_lat() == [[32.1, 58.63], [-125.0, 33.0]]
        assert (box.north, box.east, box.south, box.west) == (58.63, 32.1, 33.0, -125.0)

    def test_wrong_corner_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            BoundingBox.from_lng_lat([[1, 2]])

    def test_contains(self) -> None:
        box = BoundingBox.from_lng_lat([[10, 10], [0, 0]])

        assert box.contains(GeoPoint(lat=5, lng=5))
        assert not box.contains(GeoPoint(lat=11, lng=5))


# ------------------------------------------------------------------
# Upstream records
# ------------------------------------------------------------------


class TestHotspot:
    def test_parses_api_record(self) -> None:
        payload = {
            "address": "112abc",
            "name": "brave-red-fox",
            "lat": 37.77,
            "lng": -122.41,
            "location": "8c283082a1a0bff",
            "owner": "13owner",
            "status": {"online": "online"},
        }

        hotspot = Hotspot.model_validate(payload)

        assert hotspot.point == GeoPoint(lat=37.77, lng=-122.41)
        assert hotspot.raw == payload
        assert hotspot.witnesses == ()

    def test_missing_location_has_no_point(self) -> None:
        hotspot = Hotspot.model_validate({"address": "112abc", "lat": None, "lng": None, "location": None})

        assert hotspot.point is None

    def test_string_coordinates_are_coerced(self) -> None:
        hotspot = Hotspot.model_validate({"address": "a", "lat": "1.5", "lng": "2.5"})

        assert hotspot.point == GeoPoint(lat=1.5, lng=2.5)

    def test_longitude_alias(self) -> None:
        assert Hotspot.model_validate({"address": "a", "lat": 1, "lon": 2}).lng == 2

    def test_witness_points_skip_unlocated(self) -> None:
        hotspot = Hotspot.model_validate(
            {
                "address": "a",
                "lat": 0,
                "lng": 0,
                "witnesses": [{"address": "w1", "lat": 1, "lng": 1}, {"address": "w2"}],
            }
        )

        assert hotspot.witness_points() == [GeoPoint(lat=1, lng=1)]

    def test_address_required(self) -> None:
        with pytest.raises(ValidationError):
            Hotspot.model_validate({"name": "nameless"})


class TestValidator:
    def test_online_status(self) -> None:
        validator = Validator.model_validate({"address": "v1", "status": {"online": "online"}, "stake": 10000})

        assert validator.is_online


class TestTransaction:
    def test_parses_receipt(self) -> None:
        txn = Transaction.model_validate(
            {
                "hash": "abc",
                "type": "poc_receipts_v1",
                "path": [
                    {
                        "challengee": "112target",
                        "challengee_location": "8c283082a1a0bff",
                        "witnesses": [{"gateway": "112w", "location": "8c283082a1a0bff", "is_valid": True}],
                    }
                ],
            }
        )

        assert txn.is_kind("poc_receipts_v1")
        assert txn.first_hop is not None
        assert txn.first_hop.challengee == "112target"
        assert txn.first_hop.witnesses[0].gateway == "112w"

    def test_non_receipt_has_no_hop(self) -> None:
        txn = Transaction.model_validate({"hash": "abc", "type": "payment_v2"})

        assert txn.first_hop is None


class TestGeolocationFix:
    def test_browser_shape(self) -> None:
        fix = GeolocationFix.model_validate(
            {"coords": {"latitude": 52.37, "longitude": 4.9, "accuracy": 20}, "timestamp": 1700000000000}
        )

        assert fix.point == GeoPoint(lat=52.37, lng=4.9)

    def test_empty_fix(self) -> None:
        assert GeolocationFix().point is None

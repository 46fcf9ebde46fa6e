"""Tests for coordinate and viewport data models.

All models are frozen dataclasses; tests verify construction, validation
at the deserialisation boundary, immutability and dict round-trips.
"""

from __future__ import annotations

import unittest

import pytest

from geomath.core.exceptions import (
    ContractError,
    CoordinateValidationError,
    ViewportValidationError,
)
from geomath.models.geo import GeoPoint, PixelPoint
from geomath.models.viewport import Viewport

# ---------------------------------------------------------------------------
# GeoPoint
# ---------------------------------------------------------------------------


class TestGeoPoint(unittest.TestCase):
    """GeoPoint construction, validity and payloads."""

    def test_fields(self) -> None:
        p = GeoPoint(lat=28.1234, lon=-15.4321)
        assert p.lat == 28.1234
        assert p.lon == -15.4321

    def test_frozen(self) -> None:
        p = GeoPoint(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.lat = 3.0  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert GeoPoint(1.0, 2.0) == GeoPoint(1.0, 2.0)
        assert hash(GeoPoint(1.0, 2.0)) == hash(GeoPoint(1.0, 2.0))

    def test_out_of_range_constructs_but_is_invalid(self) -> None:
        """Geometry may produce out-of-range points without raising."""
        p = GeoPoint(91.0, 0.0)
        assert not p.is_valid

    def test_bounds_are_inclusive(self) -> None:
        assert GeoPoint(90.0, 180.0).is_valid
        assert GeoPoint(-90.0, -180.0).is_valid

    def test_to_dict(self) -> None:
        assert GeoPoint(1.5, -2.5).to_dict() == {"lat": 1.5, "lon": -2.5}

    def test_from_dict(self) -> None:
        assert GeoPoint.from_dict({"lat": 39.9, "lon": 116}) == GeoPoint(39.9, 116.0)


@pytest.mark.parametrize(
    ("lat", "lon"),
    [
        (-90.0001, 0.0),
        (90.0001, 0.0),
        (0.0, -180.0001),
        (0.0, 180.0001),
    ],
)
def test_geo_point_from_dict_rejects_out_of_range(lat: float, lon: float) -> None:
    with pytest.raises(CoordinateValidationError, match="outside WGS 84"):
        GeoPoint.from_dict({"lat": lat, "lon": lon})


@pytest.mark.parametrize(
    "payload",
    [
        {"lat": 1.0},
        {"lon": 1.0},
        {"lat": "1.0", "lon": 2.0},
        {"lat": True, "lon": 2.0},
        {"lat": None, "lon": 2.0},
    ],
)
def test_geo_point_from_dict_rejects_malformed_payload(payload: dict[str, object]) -> None:
    with pytest.raises(ContractError):
        GeoPoint.from_dict(payload)


# ---------------------------------------------------------------------------
# PixelPoint
# ---------------------------------------------------------------------------


class TestPixelPoint(unittest.TestCase):
    """PixelPoint payloads."""

    def test_round_trip(self) -> None:
        p = PixelPoint(12.0, 340.5)
        assert PixelPoint.from_dict(p.to_dict()) == p

    def test_negative_coordinates_allowed(self) -> None:
        """Off-screen positions are legitimate projection results."""
        assert PixelPoint.from_dict({"x": -5, "y": 1e6}) == PixelPoint(-5.0, 1e6)

    def test_missing_field(self) -> None:
        with pytest.raises(ContractError, match="'y'"):
            PixelPoint.from_dict({"x": 1.0})


# ---------------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------------


class TestViewport(unittest.TestCase):
    """Viewport validation, derived bounds and copies."""

    def setUp(self) -> None:
        self.viewport = Viewport(GeoPoint(31.2397, 121.4998), 0.05, 0.08, 390.0, 320.0)

    def test_bounds(self) -> None:
        min_lon, min_lat, max_lon, max_lat = self.viewport.bounds
        assert min_lon == pytest.approx(121.4598)
        assert max_lon == pytest.approx(121.5398)
        assert min_lat == pytest.approx(31.2147)
        assert max_lat == pytest.approx(31.2647)

    def test_with_center_keeps_span_and_size(self) -> None:
        moved = self.viewport.with_center(GeoPoint(0.0, 0.0))
        assert moved.center == GeoPoint(0.0, 0.0)
        assert (moved.lat_span, moved.lon_span) == (0.05, 0.08)
        assert (moved.width, moved.height) == (390.0, 320.0)

    def test_with_span(self) -> None:
        assert self.viewport.with_span(1.0, 2.0).lon_span == 2.0

    def test_with_size(self) -> None:
        assert self.viewport.with_size(800.0, 600.0).height == 600.0

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            self.viewport.lat_span = 1.0  # type: ignore[misc]

    def test_dict_round_trip(self) -> None:
        assert Viewport.from_dict(self.viewport.to_dict()) == self.viewport

    def test_from_dict_rejects_non_mapping_center(self) -> None:
        payload = self.viewport.to_dict()
        payload["center"] = [31.2, 121.4]
        with pytest.raises(ContractError, match="center must be a mapping"):
            Viewport.from_dict(payload)

    def test_from_dict_rejects_invalid_center(self) -> None:
        payload = self.viewport.to_dict()
        payload["center"] = {"lat": 95.0, "lon": 0.0}
        with pytest.raises(CoordinateValidationError):
            Viewport.from_dict(payload)


@pytest.mark.parametrize(
    ("lat_span", "lon_span", "width", "height", "field"),
    [
        (0.0, 0.05, 390.0, 320.0, "lat_span"),
        (0.05, -0.1, 390.0, 320.0, "lon_span"),
        (0.05, 0.05, 0.0, 320.0, "width"),
        (0.05, 0.05, 390.0, -1.0, "height"),
        (float("nan"), 0.05, 390.0, 320.0, "lat_span"),
    ],
)
def test_viewport_rejects_non_positive_dimensions(
    lat_span: float, lon_span: float, width: float, height: float, field: str
) -> None:
    with pytest.raises(ViewportValidationError, match=field):
        Viewport(GeoPoint(0.0, 0.0), lat_span, lon_span, width, height)

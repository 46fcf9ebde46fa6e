"""Coordinate and ring validation.

Geometry operations accept any input and fall back to defined values;
these checks are for callers that need to reject or flag bad input:

- ``validate_coordinates`` enforces WGS 84 bounds (raises).
- ``is_valid_ring`` reports self-intersecting or zero-area rings using
  shapely (never raises).
"""

from __future__ import annotations

from collections.abc import Sequence

from geomath.core.constants import (
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    MIN_POLYGON_POINTS,
)
from geomath.core.exceptions import CoordinateValidationError
from geomath.models.geo import GeoPoint


def validate_coordinates(points: Sequence[GeoPoint]) -> None:
    """Validate that all points are within WGS 84 bounds.

    Raises:
        CoordinateValidationError: Naming the first out-of-range point.
    """
    for index, point in enumerate(points):
        if not (MIN_LATITUDE <= point.lat <= MAX_LATITUDE):
            msg = (
                f"Latitude {point.lat} out of WGS 84 range "
                f"[{MIN_LATITUDE}, {MAX_LATITUDE}] at point {index}"
            )
            raise CoordinateValidationError(msg)
        if not (MIN_LONGITUDE <= point.lon <= MAX_LONGITUDE):
            msg = (
                f"Longitude {point.lon} out of WGS 84 range "
                f"[{MIN_LONGITUDE}, {MAX_LONGITUDE}] at point {index}"
            )
            raise CoordinateValidationError(msg)


def is_valid_ring(points: Sequence[GeoPoint]) -> bool:
    """Whether the points form a simple ring with non-zero planar area."""
    if len(points) < MIN_POLYGON_POINTS:
        return False

    from shapely.geometry import Polygon

    poly = Polygon([(p.lon, p.lat) for p in points])
    return bool(poly.is_valid) and poly.area > 0

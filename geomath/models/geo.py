"""Coordinate value types.

A GeoPoint is a geographic position in degrees; a PixelPoint is a
position on a rendered map, origin top-left with y growing southwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from geomath.core.constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from geomath.core.exceptions import ContractError, CoordinateValidationError


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A geographic coordinate in degrees.

    Construction never validates: geometry operations may legitimately
    produce points outside WGS 84 bounds (circles near a pole, copies
    moved across the antimeridian).  Use ``is_valid`` or ``from_dict``
    where bounds must hold.

    Attributes:
        lat: Latitude in degrees, north positive.
        lon: Longitude in degrees, east positive.
    """

    lat: float
    lon: float

    @property
    def is_valid(self) -> bool:
        """Whether the point lies within WGS 84 bounds."""
        return (
            MIN_LATITUDE <= self.lat <= MAX_LATITUDE
            and MIN_LONGITUDE <= self.lon <= MAX_LONGITUDE
        )

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> GeoPoint:
        """Deserialise and validate a ``{"lat": .., "lon": ..}`` payload.

        Raises:
            ContractError: If a key is missing or a value is not numeric.
            CoordinateValidationError: If the point is outside WGS 84 bounds.
        """
        point = cls(lat=require_number(data, "lat"), lon=require_number(data, "lon"))
        if not point.is_valid:
            msg = (
                f"Coordinate ({point.lat}, {point.lon}) outside WGS 84 range "
                f"lat [{MIN_LATITUDE}, {MAX_LATITUDE}], lon [{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
            )
            raise CoordinateValidationError(msg)
        return point


@dataclass(frozen=True, slots=True)
class PixelPoint:
    """A screen position in pixels."""

    x: float
    y: float

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> PixelPoint:
        """Deserialise an ``{"x": .., "y": ..}`` payload.

        Raises:
            ContractError: If a key is missing or a value is not numeric.
        """
        return cls(x=require_number(data, "x"), y=require_number(data, "y"))


def require_number(data: Mapping[str, object], key: str) -> float:
    """Read a numeric field from a payload, rejecting missing or non-numeric values."""
    if key not in data:
        msg = f"Missing required field '{key}'"
        raise ContractError(msg)
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"{key} must be a number, got {type(value).__name__}"
        raise ContractError(msg)
    return float(value)

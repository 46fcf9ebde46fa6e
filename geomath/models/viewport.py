"""Data model for the visible region of a map.

A Viewport pairs a geographic window (centre plus angular span) with the
pixel size it is rendered at.  It drives the linear pixel <-> coordinate
projection: an equirectangular approximation, not a true map projection.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from geomath.core.exceptions import ContractError, ViewportValidationError
from geomath.models.geo import GeoPoint, require_number


@dataclass(frozen=True, slots=True)
class Viewport:
    """Visible rectangular region of a map.

    Attributes:
        center: Geographic centre of the region.
        lat_span: Latitude extent in degrees (top edge to bottom edge).
        lon_span: Longitude extent in degrees (left edge to right edge).
        width: Rendered width in pixels.
        height: Rendered height in pixels.

    Raises:
        ViewportValidationError: If either span or either pixel dimension
            is not strictly positive.
    """

    center: GeoPoint
    lat_span: float
    lon_span: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("lat_span", "lon_span"):
            value = getattr(self, name)
            if not value > 0:
                msg = f"Viewport {name} must be > 0 degrees, got {value}"
                raise ViewportValidationError(msg)
        for name in ("width", "height"):
            value = getattr(self, name)
            if not value > 0:
                msg = f"Viewport {name} must be > 0 pixels, got {value}"
                raise ViewportValidationError(msg)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """``(min_lon, min_lat, max_lon, max_lat)`` of the visible region."""
        half_lat = self.lat_span / 2
        half_lon = self.lon_span / 2
        return (
            self.center.lon - half_lon,
            self.center.lat - half_lat,
            self.center.lon + half_lon,
            self.center.lat + half_lat,
        )

    def with_center(self, center: GeoPoint) -> Viewport:
        return Viewport(center, self.lat_span, self.lon_span, self.width, self.height)

    def with_span(self, lat_span: float, lon_span: float) -> Viewport:
        return Viewport(self.center, lat_span, lon_span, self.width, self.height)

    def with_size(self, width: float, height: float) -> Viewport:
        return Viewport(self.center, self.lat_span, self.lon_span, width, height)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible dict."""
        return {
            "center": self.center.to_dict(),
            "lat_span": self.lat_span,
            "lon_span": self.lon_span,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Viewport:
        """Deserialise and validate a viewport payload.

        Raises:
            ContractError: If ``center`` is not a mapping or a field is
                missing or non-numeric.
            CoordinateValidationError: If the centre is outside WGS 84 bounds.
            ViewportValidationError: If a span or pixel size is not positive.
        """
        center_raw = data.get("center")
        if not isinstance(center_raw, Mapping):
            msg = f"center must be a mapping, got {type(center_raw).__name__}"
            raise ContractError(msg)

        return cls(
            center=GeoPoint.from_dict(center_raw),
            lat_span=require_number(data, "lat_span"),
            lon_span=require_number(data, "lon_span"),
            width=require_number(data, "width"),
            height=require_number(data, "height"),
        )

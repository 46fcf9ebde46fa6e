"""Application state for the two-map drawing screen.

Holds everything the drawing screen renders: the source map where points
are tapped, the target map showing the relocated copy, the tapped polygon,
its relocated copy and its area.  Instances are immutable; the pure
functions in ``geomath.session`` produce updated copies.
"""

from __future__ import annotations

from dataclasses import dataclass

from geomath.core.constants import MIN_POLYGON_POINTS
from geomath.models.geo import GeoPoint
from geomath.models.viewport import Viewport


@dataclass(frozen=True, slots=True)
class DrawingState:
    """Snapshot of the drawing screen.

    Attributes:
        source: Viewport of the map the user draws on.
        target: Viewport of the map showing the relocated copy.
        points: Tapped polygon vertices in tap order.
        relocated: Shape-preserving copy centred on the target map
            (empty until three points exist).
        is_drawing: Whether taps on the source map add points.
        area_m2: Area of ``points`` in square metres (0 below three points).
    """

    source: Viewport
    target: Viewport
    points: tuple[GeoPoint, ...] = ()
    relocated: tuple[GeoPoint, ...] = ()
    is_drawing: bool = False
    area_m2: float = 0.0

    @property
    def has_polygon(self) -> bool:
        """Whether enough points exist to form a closed ring."""
        return len(self.points) >= MIN_POLYGON_POINTS

    @property
    def perimeter_m(self) -> float:
        """Great-circle perimeter of the drawn polygon in metres."""
        from geomath.geometry.measure import polygon_perimeter_m

        return polygon_perimeter_m(self.points)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a JSON-compatible snapshot."""
        return {
            "source": self.source.to_dict(),
            "target": self.target.to_dict(),
            "points": [p.to_dict() for p in self.points],
            "relocated": [p.to_dict() for p in self.relocated],
            "is_drawing": self.is_drawing,
            "area_m2": self.area_m2,
            "perimeter_m": self.perimeter_m,
        }

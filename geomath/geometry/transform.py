"""Centroid and shape-preserving relocation.

Both operate on latitude/longitude as planar coordinates, which is
accurate at city scale and breaks down near the poles or across the
antimeridian.
"""

from __future__ import annotations

from collections.abc import Sequence

from geomath.core.constants import MIN_POLYGON_POINTS
from geomath.models.geo import GeoPoint


def centroid(points: Sequence[GeoPoint]) -> GeoPoint:
    """Arithmetic mean of the vertices; ``GeoPoint(0, 0)`` for no points."""
    if not points:
        return GeoPoint(lat=0.0, lon=0.0)
    n = len(points)
    return GeoPoint(
        lat=sum(p.lat for p in points) / n,
        lon=sum(p.lon for p in points) / n,
    )


def relocate_preserving_shape(
    points: Sequence[GeoPoint],
    new_center: GeoPoint,
    scale: float = 1.0,
) -> list[GeoPoint]:
    """Translate (and uniformly scale) a polygon so its centroid is ``new_center``.

    The first vertex is the reference point.  Every vertex keeps its
    offset from the reference point, multiplied by ``scale``; the new
    reference point is placed so the scaled offset to the centroid lands
    on ``new_center``.  No rotation is applied, so interior angles and
    edge-length ratios are unchanged.

    Args:
        points: Polygon vertices in degrees.
        new_center: Desired centroid of the output.
        scale: Uniform scale factor applied to offsets (1.0 keeps size).

    Returns:
        The relocated vertices, or ``[]`` for fewer than three points.
    """
    if len(points) < MIN_POLYGON_POINTS:
        return []

    reference = points[0]
    center = centroid(points)

    new_reference_lat = new_center.lat - scale * (center.lat - reference.lat)
    new_reference_lon = new_center.lon - scale * (center.lon - reference.lon)

    return [
        GeoPoint(
            lat=new_reference_lat + scale * (p.lat - reference.lat),
            lon=new_reference_lon + scale * (p.lon - reference.lon),
        )
        for p in points
    ]

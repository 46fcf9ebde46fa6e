"""Circle point-sets from a centre and radius.

Offsets are converted to degrees with a fixed metres-per-degree constant
and a ``cos(latitude)`` correction for meridian convergence.  The result
is an ellipse in degree space that approximates a geodesic circle at
moderate latitudes; towards the poles the longitude offset diverges.
"""

from __future__ import annotations

import logging
import math

from geomath.core.constants import (
    CIRCLE_ACCURACY_MAX_LATITUDE,
    EQUAL_AREA_CIRCLE_POINTS,
    METERS_PER_DEGREE_LAT,
)
from geomath.models.geo import GeoPoint

logger = logging.getLogger("geomath.geometry.circle")


def circle_points(center: GeoPoint, radius_m: float, num_points: int) -> list[GeoPoint]:
    """Generate ``num_points`` vertices evenly spaced around a circle.

    Args:
        center: Circle centre in degrees.
        radius_m: Radius in metres.
        num_points: Number of vertices; ``0`` or fewer yields ``[]``.

    Returns:
        Vertices starting due east of the centre, counter-clockwise.
    """
    if num_points <= 0:
        return []

    if abs(center.lat) > CIRCLE_ACCURACY_MAX_LATITUDE:
        logger.warning(
            "Circle centre near pole | lat=%.4f | radius=%.1f m | "
            "longitude offset is unreliable above %.0f degrees",
            center.lat,
            radius_m,
            CIRCLE_ACCURACY_MAX_LATITUDE,
        )

    lat_offset = radius_m / METERS_PER_DEGREE_LAT
    lon_offset = radius_m / (METERS_PER_DEGREE_LAT * math.cos(math.radians(center.lat)))

    points = []
    for i in range(num_points):
        angle = 2 * math.pi * i / num_points
        points.append(
            GeoPoint(
                lat=center.lat + lat_offset * math.sin(angle),
                lon=center.lon + lon_offset * math.cos(angle),
            )
        )
    return points


def equal_area_circle(
    center: GeoPoint,
    area_m2: float,
    num_points: int = EQUAL_AREA_CIRCLE_POINTS,
) -> list[GeoPoint]:
    """Circle centred on ``center`` enclosing ``area_m2`` square metres."""
    radius_m = math.sqrt(max(area_m2, 0.0) / math.pi)
    return circle_points(center, radius_m, num_points)

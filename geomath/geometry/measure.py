"""Polygon area and perimeter on a spherical Earth.

The default area is the longitude-integral formula: for each edge, the
longitude difference times the summed endpoint sines of latitude,
scaled by ``R^2 / 2``.  It is exact in the small-polygon limit used for
city-scale drawings and degrades for polygons covering a large fraction
of the globe; ``compute_area_m2`` exposes the spherical-excess and WGS 84
ellipsoidal alternatives for those.

Distances use the atan2 form of the spherical law of cosines, which stays
numerically stable for both coincident and antipodal points.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from geomath.core.constants import (
    AREA_METHOD_ELLIPSOIDAL,
    AREA_METHOD_EXCESS,
    AREA_METHOD_INTEGRAL,
    EARTH_RADIUS_M,
    MIN_POLYGON_POINTS,
)
from geomath.core.exceptions import AreaMethodError

if TYPE_CHECKING:
    from geomath.models.geo import GeoPoint


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def normalize_lon_delta(delta: float) -> float:
    """Wrap a longitude difference in radians into ``(-pi, pi]``.

    Keeps edges that cross the antimeridian from contributing a
    near-full-circle longitude sweep.
    """
    if delta > math.pi:
        return delta - 2 * math.pi
    if delta <= -math.pi:
        return delta + 2 * math.pi
    return delta


def central_angle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Central angle in radians between two points given in radians."""
    d_lon = lon2 - lon1
    sin_lat1, cos_lat1 = math.sin(lat1), math.cos(lat1)
    sin_lat2, cos_lat2 = math.sin(lat2), math.cos(lat2)
    cos_d_lon = math.cos(d_lon)

    a = cos_lat2 * math.sin(d_lon)
    b = cos_lat1 * sin_lat2 - sin_lat1 * cos_lat2 * cos_d_lon
    c = sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * cos_d_lon
    return math.atan2(math.sqrt(a * a + b * b), c)


def great_circle_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in metres between two points in degrees."""
    return EARTH_RADIUS_M * central_angle(
        math.radians(a.lat),
        math.radians(a.lon),
        math.radians(b.lat),
        math.radians(b.lon),
    )


# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------


def polygon_area_m2(points: Sequence[GeoPoint]) -> float:
    """Area of a closed polygon in square metres (longitude integral).

    Args:
        points: Ring vertices in degrees; the closing edge is implicit.

    Returns:
        Absolute area, independent of winding order and starting vertex.
        ``0.0`` for fewer than three points.
    """
    n = len(points)
    if n < MIN_POLYGON_POINTS:
        return 0.0

    lats = [math.radians(p.lat) for p in points]
    lons = [math.radians(p.lon) for p in points]

    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        d_lon = normalize_lon_delta(lons[j] - lons[i])
        total += d_lon * (math.sin(lats[i]) + math.sin(lats[j]))

    return abs(total) * EARTH_RADIUS_M * EARTH_RADIUS_M / 2.0


def compute_area_m2(points: Sequence[GeoPoint], method: str = AREA_METHOD_INTEGRAL) -> float:
    """Area of a closed polygon using the named method.

    Args:
        points: Ring vertices in degrees.
        method: ``"integral"`` (longitude integral, default),
            ``"excess"`` (L'Huilier spherical excess) or
            ``"ellipsoidal"`` (WGS 84 geodesic via pyproj).

    Raises:
        AreaMethodError: If ``method`` is not one of the above.
    """
    if method == AREA_METHOD_INTEGRAL:
        return polygon_area_m2(points)

    from geomath.geometry.spherical import ellipsoidal_area_m2, spherical_excess_area_m2

    if method == AREA_METHOD_EXCESS:
        return spherical_excess_area_m2(points)
    if method == AREA_METHOD_ELLIPSOIDAL:
        return ellipsoidal_area_m2(points)

    msg = (
        f"Unknown area method '{method}', expected one of "
        f"{AREA_METHOD_INTEGRAL}, {AREA_METHOD_EXCESS}, {AREA_METHOD_ELLIPSOIDAL}"
    )
    raise AreaMethodError(msg)


# ---------------------------------------------------------------------------
# Perimeter
# ---------------------------------------------------------------------------


def polygon_perimeter_m(points: Sequence[GeoPoint]) -> float:
    """Perimeter of a closed polygon in metres, including the closing edge.

    Returns ``0.0`` for fewer than two points.  Two points count the
    segment twice (out and back), matching a degenerate closed ring.
    """
    n = len(points)
    if n < 2:
        return 0.0
    return sum(great_circle_distance_m(points[i], points[(i + 1) % n]) for i in range(n))

"""Spherical-excess and ellipsoidal polygon area.

Alternatives to the longitude-integral area in ``measure`` for polygons
too large for the small-polygon approximation:

- ``spherical_excess_area_m2`` fans the ring into triangles from the first
  vertex and sums each triangle's spherical excess (L'Huilier's theorem),
  signed by orientation so concave rings are handled.
- ``ellipsoidal_area_m2`` delegates to ``pyproj.Geod`` on the WGS 84
  ellipsoid.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

from geomath.core.constants import EARTH_RADIUS_M, MIN_POLYGON_POINTS
from geomath.geometry.measure import central_angle

if TYPE_CHECKING:
    from geomath.models.geo import GeoPoint

Vector = tuple[float, float, float]


# ---------------------------------------------------------------------------
# Vector helpers
# ---------------------------------------------------------------------------


def to_cartesian(point: GeoPoint) -> Vector:
    """Unit vector for a point given in degrees."""
    lat = math.radians(point.lat)
    lon = math.radians(point.lon)
    return (math.cos(lat) * math.cos(lon), math.cos(lat) * math.sin(lon), math.sin(lat))


def dot(u: Vector, v: Vector) -> float:
    return u[0] * v[0] + u[1] * v[1] + u[2] * v[2]


def cross(u: Vector, v: Vector) -> Vector:
    return (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


def normalize_vector(v: Vector) -> Vector:
    """Scale ``v`` to unit length; the zero vector is returned unchanged."""
    magnitude = math.sqrt(dot(v, v))
    if magnitude == 0:
        return (0.0, 0.0, 0.0)
    return (v[0] / magnitude, v[1] / magnitude, v[2] / magnitude)


# ---------------------------------------------------------------------------
# Spherical excess (L'Huilier)
# ---------------------------------------------------------------------------


def triangle_excess(a: GeoPoint, b: GeoPoint, c: GeoPoint) -> float:
    """Spherical excess in steradians of the triangle ``abc``.

    Uses L'Huilier's theorem on the three central angles.  Degenerate
    (collinear or coincident) triangles return ``0.0``.
    """
    ra = (math.radians(a.lat), math.radians(a.lon))
    rb = (math.radians(b.lat), math.radians(b.lon))
    rc = (math.radians(c.lat), math.radians(c.lon))

    side_a = central_angle(*rb, *rc)
    side_b = central_angle(*rc, *ra)
    side_c = central_angle(*ra, *rb)
    s = (side_a + side_b + side_c) / 2

    product = (
        math.tan(s / 2)
        * math.tan((s - side_a) / 2)
        * math.tan((s - side_b) / 2)
        * math.tan((s - side_c) / 2)
    )
    # Rounding can push a flat triangle's product slightly negative
    return 4 * math.atan(math.sqrt(max(product, 0.0)))


def spherical_excess_area_m2(points: Sequence[GeoPoint]) -> float:
    """Area of a closed polygon in square metres by summed spherical excess.

    Returns ``0.0`` for fewer than three points.
    """
    if len(points) < MIN_POLYGON_POINTS:
        return 0.0

    anchor = points[0]
    anchor_vec = to_cartesian(anchor)
    total = 0.0
    for b, c in zip(points[1:-1], points[2:]):
        orientation = dot(anchor_vec, cross(to_cartesian(b), to_cartesian(c)))
        if orientation == 0:
            continue
        total += math.copysign(triangle_excess(anchor, b, c), orientation)

    return abs(total) * EARTH_RADIUS_M * EARTH_RADIUS_M


# ---------------------------------------------------------------------------
# WGS 84 ellipsoid
# ---------------------------------------------------------------------------


def ellipsoidal_area_m2(points: Sequence[GeoPoint]) -> float:
    """Geodesic area on the WGS 84 ellipsoid in square metres.

    Uses ``pyproj.Geod``; winding-order agnostic.  Returns ``0.0`` for
    fewer than three points.
    """
    if len(points) < MIN_POLYGON_POINTS:
        return 0.0

    from pyproj import Geod

    geod = Geod(ellps="WGS84")
    area_m2, _perimeter = geod.polygon_area_perimeter(
        [p.lon for p in points],
        [p.lat for p in points],
    )
    return abs(area_m2)

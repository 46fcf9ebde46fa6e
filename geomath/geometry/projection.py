"""Pixel <-> coordinate projection for a visible map region.

Linear interpolation between a viewport's edges (equirectangular
approximation): longitude maps to x across ``[0, width]`` and latitude
maps to y across ``[0, height]`` with north at the top.  Spans that cross
the antimeridian are not special-cased; a viewport straddling +/-180
degrees projects points on the far side off-screen.
"""

from __future__ import annotations

from collections.abc import Sequence

from geomath.core.constants import DEFAULT_ZOOM_FACTOR, MAX_SPAN_DEG, MIN_SPAN_DEG
from geomath.geometry.transform import centroid
from geomath.models.geo import GeoPoint, PixelPoint
from geomath.models.viewport import Viewport


def point_for_coordinate(coord: GeoPoint, viewport: Viewport) -> PixelPoint:
    """Screen position of ``coord`` within ``viewport``."""
    west = viewport.center.lon - viewport.lon_span / 2
    south = viewport.center.lat - viewport.lat_span / 2

    x = (coord.lon - west) / viewport.lon_span
    y = 1 - (coord.lat - south) / viewport.lat_span
    return PixelPoint(x=x * viewport.width, y=y * viewport.height)


def coordinate_for_point(pixel: PixelPoint, viewport: Viewport) -> GeoPoint:
    """Geographic position of ``pixel`` within ``viewport``.

    Exact inverse of ``point_for_coordinate``.
    """
    x = pixel.x / viewport.width
    y = pixel.y / viewport.height

    lon = viewport.center.lon - viewport.lon_span / 2 + x * viewport.lon_span
    lat = viewport.center.lat + viewport.lat_span / 2 - y * viewport.lat_span
    return GeoPoint(lat=lat, lon=lon)


def project_polygon(points: Sequence[GeoPoint], viewport: Viewport) -> list[PixelPoint]:
    return [point_for_coordinate(p, viewport) for p in points]


def project_centered(
    points: Sequence[GeoPoint],
    lat_span: float,
    lon_span: float,
    width: float,
    height: float,
) -> list[PixelPoint]:
    """Project a polygon onto a map of the given span, centred on its centroid.

    Used for the fixed overlay on the target map: whatever the camera's
    position, the relocated polygon is drawn in the middle of the view at
    the map's current scale.

    Raises:
        ViewportValidationError: If a span or pixel size is not positive.
    """
    if not points:
        return []
    viewport = Viewport(centroid(points), lat_span, lon_span, width, height)
    return project_polygon(points, viewport)


# ---------------------------------------------------------------------------
# Zoom
# ---------------------------------------------------------------------------


def zoom_in(
    viewport: Viewport,
    factor: float = DEFAULT_ZOOM_FACTOR,
    min_span: float = MIN_SPAN_DEG,
) -> Viewport:
    """Divide both spans by ``factor``, never going below ``min_span``."""
    return viewport.with_span(
        max(viewport.lat_span / factor, min_span),
        max(viewport.lon_span / factor, min_span),
    )


def zoom_out(
    viewport: Viewport,
    factor: float = DEFAULT_ZOOM_FACTOR,
    max_span: float = MAX_SPAN_DEG,
) -> Viewport:
    """Multiply both spans by ``factor``, never going above ``max_span``."""
    return viewport.with_span(
        min(viewport.lat_span * factor, max_span),
        min(viewport.lon_span * factor, max_span),
    )

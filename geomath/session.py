"""Drawing-session state transitions.

Pure functions over ``DrawingState``: each takes the current state and an
event (tap, camera change, zoom, resize) and returns a new state.  The
input state is never mutated, so a UI layer can keep a single reference
and swap it after every event.

Behaviour of the two-map screen:
- Taps on the source map add vertices while drawing mode is on.
- From three vertices on, the area is recomputed and a shape-preserving
  copy is centred on the target map.
- Zooming the target map (a span change beyond the configured tolerance)
  re-centres the copy on the new camera centre; panning alone leaves the
  copy where it is.
- Syncing copies the source span to the target map.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from geomath.core.config import GeoMathConfig
from geomath.core.constants import DEFAULT_SOURCE_CENTER, DEFAULT_TARGET_CENTER
from geomath.geometry import projection
from geomath.geometry.measure import compute_area_m2
from geomath.geometry.transform import relocate_preserving_shape
from geomath.geometry.validation import is_valid_ring
from geomath.models.drawing import DrawingState
from geomath.models.geo import GeoPoint, PixelPoint
from geomath.models.viewport import Viewport

logger = logging.getLogger("geomath.session")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def initial_state(config: GeoMathConfig | None = None) -> DrawingState:
    """Fresh session: source map on Beijing, target map on Shanghai, no drawing."""
    config = config or GeoMathConfig()
    span = config.default_span_deg
    width = config.viewport_width_px
    height = config.viewport_height_px
    return DrawingState(
        source=Viewport(GeoPoint(*DEFAULT_SOURCE_CENTER), span, span, width, height),
        target=Viewport(GeoPoint(*DEFAULT_TARGET_CENTER), span, span, width, height),
    )


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


def toggle_drawing(state: DrawingState) -> DrawingState:
    logger.debug("Drawing mode toggled | is_drawing=%s", not state.is_drawing)
    return replace(state, is_drawing=not state.is_drawing)


def clear_drawing(state: DrawingState) -> DrawingState:
    """Drop the drawn polygon, its copy and its area."""
    logger.info("Drawing cleared | discarded_points=%d", len(state.points))
    return replace(state, points=(), relocated=(), area_m2=0.0)


def add_tap(
    state: DrawingState,
    pixel: PixelPoint,
    config: GeoMathConfig | None = None,
) -> DrawingState:
    """Add the tapped source-map position as a polygon vertex.

    Ignored unless drawing mode is on.  Once the polygon has three or more
    vertices, recomputes its area with the configured method and relocates
    a copy onto the target map's centre.
    """
    if not state.is_drawing:
        return state

    config = config or GeoMathConfig()
    coordinate = projection.coordinate_for_point(pixel, state.source)
    points = (*state.points, coordinate)
    logger.debug(
        "Point added | count=%d | lat=%.6f | lon=%.6f",
        len(points),
        coordinate.lat,
        coordinate.lon,
    )

    new_state = replace(state, points=points)
    if not new_state.has_polygon:
        return new_state

    area_m2 = compute_area_m2(points, config.area_method)
    if not is_valid_ring(points):
        logger.warning(
            "Drawn polygon is self-intersecting or flat | points=%d | area=%.1f m2",
            len(points),
            area_m2,
        )

    logger.info(
        "Polygon updated | points=%d | area=%.1f m2 | method=%s | target=(%.4f, %.4f)",
        len(points),
        area_m2,
        config.area_method,
        state.target.center.lat,
        state.target.center.lon,
    )
    return replace(
        new_state,
        area_m2=area_m2,
        relocated=_relocate(points, state.target.center),
    )


# ---------------------------------------------------------------------------
# Camera changes
# ---------------------------------------------------------------------------


def move_source(
    state: DrawingState,
    center: GeoPoint,
    lat_span: float,
    lon_span: float,
) -> DrawingState:
    """Adopt the source map's new camera region."""
    return replace(state, source=state.source.with_center(center).with_span(lat_span, lon_span))


def move_target(
    state: DrawingState,
    center: GeoPoint,
    lat_span: float,
    lon_span: float,
    config: GeoMathConfig | None = None,
) -> DrawingState:
    """Adopt the target map's new camera region.

    A span change beyond ``config.span_tolerance_deg`` is a zoom: the new
    region is adopted and the copy re-centred on it.  Otherwise only the
    centre moves and the copy stays where it was.
    """
    config = config or GeoMathConfig()
    tolerance = config.span_tolerance_deg
    zoomed = (
        abs(state.target.lat_span - lat_span) > tolerance
        or abs(state.target.lon_span - lon_span) > tolerance
    )
    if not zoomed:
        return replace(state, target=state.target.with_center(center))

    target = state.target.with_center(center).with_span(lat_span, lon_span)
    return replace(state, target=target, relocated=_relocate(state.points, center))


def sync_spans(state: DrawingState) -> DrawingState:
    """Give the target map the source map's span and re-centre the copy."""
    target = state.target.with_span(state.source.lat_span, state.source.lon_span)
    logger.info(
        "Spans synced | lat_span=%.6f | lon_span=%.6f",
        target.lat_span,
        target.lon_span,
    )
    return replace(state, target=target, relocated=_relocate(state.points, target.center))


def zoom_source(
    state: DrawingState,
    inward: bool,
    config: GeoMathConfig | None = None,
) -> DrawingState:
    return replace(state, source=_zoom(state.source, inward, config or GeoMathConfig()))


def zoom_target(
    state: DrawingState,
    inward: bool,
    config: GeoMathConfig | None = None,
) -> DrawingState:
    return replace(state, target=_zoom(state.target, inward, config or GeoMathConfig()))


def resize_source(state: DrawingState, width: float, height: float) -> DrawingState:
    return replace(state, source=state.source.with_size(width, height))


def resize_target(state: DrawingState, width: float, height: float) -> DrawingState:
    return replace(state, target=state.target.with_size(width, height))


# ---------------------------------------------------------------------------
# Overlays
# ---------------------------------------------------------------------------


def source_overlay(state: DrawingState) -> list[PixelPoint]:
    """Screen positions of the drawn vertices on the source map."""
    return projection.project_polygon(state.points, state.source)


def target_overlay(state: DrawingState) -> list[PixelPoint]:
    """Screen positions of the copy, centred on the target map at its scale."""
    target = state.target
    return projection.project_centered(
        state.relocated, target.lat_span, target.lon_span, target.width, target.height
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _relocate(points: tuple[GeoPoint, ...], center: GeoPoint) -> tuple[GeoPoint, ...]:
    return tuple(relocate_preserving_shape(points, center))


def _zoom(viewport: Viewport, inward: bool, config: GeoMathConfig) -> Viewport:
    if inward:
        return projection.zoom_in(viewport, config.zoom_factor, config.min_span_deg)
    return projection.zoom_out(viewport, config.zoom_factor, config.max_span_deg)

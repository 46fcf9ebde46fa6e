"""Shared geometry constants: single source of truth.

Centralises the physical constants, unit thresholds and map limits used
by the geometry modules and the drawing session.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Earth model
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_371_000.0
"""Mean Earth radius in metres (spherical model)."""

METERS_PER_DEGREE_LAT: float = 111_320.0
"""Approximate metres per degree of latitude, used for circle offsets."""

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# ---------------------------------------------------------------------------
# Polygon and circle sizing
# ---------------------------------------------------------------------------

# Minimum vertices for a closed ring (closure is implicit)
MIN_POLYGON_POINTS = 3

EQUAL_AREA_CIRCLE_POINTS = 32

# Above this latitude the circle longitude offset degrades noticeably
CIRCLE_ACCURACY_MAX_LATITUDE = 80.0

# ---------------------------------------------------------------------------
# Display thresholds
# ---------------------------------------------------------------------------

SQ_METRES_PER_SQ_KM = 1_000_000.0
METRES_PER_KM = 1_000.0

# Below this, areas are shown in square metres
AREA_SQ_METRE_THRESHOLD = 10_000.0
# At or above this, square kilometres drop to one decimal
AREA_COARSE_SQ_KM_THRESHOLD = 1_000_000.0
# Below this, lengths are shown in metres
LENGTH_METRE_THRESHOLD = 1_000.0

# ---------------------------------------------------------------------------
# Map viewport limits
# ---------------------------------------------------------------------------

DEFAULT_ZOOM_FACTOR = 2.0
MIN_SPAN_DEG = 0.001
MAX_SPAN_DEG = 180.0
DEFAULT_SPAN_DEG = 0.05
SPAN_CHANGE_TOLERANCE_DEG = 0.0001

DEFAULT_VIEWPORT_WIDTH_PX = 390.0
DEFAULT_VIEWPORT_HEIGHT_PX = 320.0

# Initial map centres as (lat, lon): Beijing for drawing, Shanghai for the copy
DEFAULT_SOURCE_CENTER: tuple[float, float] = (39.9042, 116.4074)
DEFAULT_TARGET_CENTER: tuple[float, float] = (31.2397, 121.4998)

# ---------------------------------------------------------------------------
# Area methods
# ---------------------------------------------------------------------------

AREA_METHOD_INTEGRAL = "integral"
AREA_METHOD_EXCESS = "excess"
AREA_METHOD_ELLIPSOIDAL = "ellipsoidal"

AREA_METHODS: frozenset[str] = frozenset(
    {AREA_METHOD_INTEGRAL, AREA_METHOD_EXCESS, AREA_METHOD_ELLIPSOIDAL}
)

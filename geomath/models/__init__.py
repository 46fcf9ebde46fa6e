"""Data models.

Defines the value types used throughout the library:
- GeoPoint: Geographic coordinate in degrees
- PixelPoint: Screen position in pixels
- Viewport: Visible map region (centre, span, pixel size)
- DrawingState: Immutable state of the two-map drawing screen
"""

from geomath.models.drawing import DrawingState
from geomath.models.geo import GeoPoint, PixelPoint
from geomath.models.viewport import Viewport

__all__ = [
    "DrawingState",
    "GeoPoint",
    "PixelPoint",
    "Viewport",
]

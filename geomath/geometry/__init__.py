"""Stateless geodesic geometry functions.

- projection: pixel <-> coordinate mapping, centred overlays, zoom
- measure: longitude-integral area, great-circle distance, perimeter
- spherical: L'Huilier spherical-excess and WGS 84 ellipsoidal area
- transform: centroid and shape-preserving relocation
- circle: circle and equal-area circle point-sets
- formatting: area and length display strings
- validation: coordinate bounds and ring validity
"""

from geomath.geometry.circle import circle_points, equal_area_circle
from geomath.geometry.formatting import format_area, format_length
from geomath.geometry.measure import (
    central_angle,
    compute_area_m2,
    great_circle_distance_m,
    normalize_lon_delta,
    polygon_area_m2,
    polygon_perimeter_m,
)
from geomath.geometry.projection import (
    coordinate_for_point,
    point_for_coordinate,
    project_centered,
    project_polygon,
    zoom_in,
    zoom_out,
)
from geomath.geometry.spherical import ellipsoidal_area_m2, spherical_excess_area_m2
from geomath.geometry.transform import centroid, relocate_preserving_shape
from geomath.geometry.validation import is_valid_ring, validate_coordinates

__all__ = [
    "central_angle",
    "centroid",
    "circle_points",
    "compute_area_m2",
    "coordinate_for_point",
    "ellipsoidal_area_m2",
    "equal_area_circle",
    "format_area",
    "format_length",
    "great_circle_distance_m",
    "is_valid_ring",
    "normalize_lon_delta",
    "point_for_coordinate",
    "polygon_area_m2",
    "polygon_perimeter_m",
    "project_centered",
    "project_polygon",
    "relocate_preserving_shape",
    "spherical_excess_area_m2",
    "validate_coordinates",
    "zoom_in",
    "zoom_out",
]

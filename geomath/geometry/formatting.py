"""Human-readable area and length strings."""

from __future__ import annotations

from geomath.core.constants import (
    AREA_COARSE_SQ_KM_THRESHOLD,
    AREA_SQ_METRE_THRESHOLD,
    LENGTH_METRE_THRESHOLD,
    METRES_PER_KM,
    SQ_METRES_PER_SQ_KM,
)


def format_area(area_m2: float) -> str:
    """Format an area: m² below 1 ha, then km² (2 decimals, 1 from 1 km² up)."""
    if area_m2 < AREA_SQ_METRE_THRESHOLD:
        return f"{area_m2:.1f} m²"
    if area_m2 < AREA_COARSE_SQ_KM_THRESHOLD:
        return f"{area_m2 / SQ_METRES_PER_SQ_KM:.2f} km²"
    return f"{area_m2 / SQ_METRES_PER_SQ_KM:.1f} km²"


def format_length(length_m: float) -> str:
    """Format a length: metres with 1 decimal below 1 km, else km with 2."""
    if length_m < LENGTH_METRE_THRESHOLD:
        return f"{length_m:.1f} m"
    return f"{length_m / METRES_PER_KM:.2f} km"

"""Shared pytest fixtures for the geomath test suite."""

import pytest

from geomath.core.config import GeoMathConfig
from geomath.models.geo import GeoPoint
from geomath.models.viewport import Viewport

# ---------------------------------------------------------------------------
# Reference polygons (lat, lon)
# ---------------------------------------------------------------------------

# Right triangle with 0.01 degree legs on the equator
EQUATOR_TRIANGLE = [GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.01), GeoPoint(0.01, 0.0)]

# Irregular city-block pentagon in central Beijing
BEIJING_PENTAGON = [
    GeoPoint(39.9000, 116.3900),
    GeoPoint(39.9050, 116.3950),
    GeoPoint(39.9120, 116.4010),
    GeoPoint(39.9080, 116.4100),
    GeoPoint(39.8990, 116.4040),
]


@pytest.fixture()
def equator_triangle() -> list[GeoPoint]:
    """Golden-value triangle, about 6.18e5 m2."""
    return list(EQUATOR_TRIANGLE)


@pytest.fixture()
def beijing_pentagon() -> list[GeoPoint]:
    """Irregular five-vertex polygon at city scale."""
    return list(BEIJING_PENTAGON)


@pytest.fixture()
def beijing_viewport() -> Viewport:
    """390 x 320 px map centred on Beijing with a 0.05 degree span."""
    return Viewport(GeoPoint(39.9042, 116.4074), 0.05, 0.05, 390.0, 320.0)


@pytest.fixture()
def config() -> GeoMathConfig:
    """Default configuration."""
    return GeoMathConfig()

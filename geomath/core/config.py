"""Geometry configuration loaded from environment variables.

All configuration values have defaults matching the drawing application's
behaviour: longitude-integral area, 0.05 degree initial span, and zoom by
a factor of two between 0.001 and 180 degrees of span.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any value is out of
    its valid range, so bad configuration surfaces at startup rather than
    as garbage projections later.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from geomath.core.constants import (
    AREA_METHOD_INTEGRAL,
    AREA_METHODS,
    DEFAULT_SPAN_DEG,
    DEFAULT_VIEWPORT_HEIGHT_PX,
    DEFAULT_VIEWPORT_WIDTH_PX,
    DEFAULT_ZOOM_FACTOR,
    MAX_SPAN_DEG,
    MIN_SPAN_DEG,
    SPAN_CHANGE_TOLERANCE_DEG,
)
from geomath.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_operation = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeoMathConfig:
    """Immutable geometry configuration.

    Attributes:
        area_method: Area algorithm (``integral``, ``excess`` or ``ellipsoidal``).
        zoom_factor: Span divisor / multiplier for one zoom step.
        min_span_deg: Smallest span (degrees) reachable by zooming in.
        max_span_deg: Largest span (degrees) reachable by zooming out.
        span_tolerance_deg: Span change below which a target camera move
            counts as a pan rather than a zoom.
        default_span_deg: Initial span of both maps.
        viewport_width_px: Initial pixel width of both maps.
        viewport_height_px: Initial pixel height of both maps.
    """

    area_method: str = AREA_METHOD_INTEGRAL
    zoom_factor: float = DEFAULT_ZOOM_FACTOR
    min_span_deg: float = MIN_SPAN_DEG
    max_span_deg: float = MAX_SPAN_DEG
    span_tolerance_deg: float = SPAN_CHANGE_TOLERANCE_DEG
    default_span_deg: float = DEFAULT_SPAN_DEG
    viewport_width_px: float = DEFAULT_VIEWPORT_WIDTH_PX
    viewport_height_px: float = DEFAULT_VIEWPORT_HEIGHT_PX

    @classmethod
    def from_env(cls) -> GeoMathConfig:
        """Load and validate configuration from ``GEOMATH_*`` environment variables.

        Raises:
            ConfigValidationError: If a value is out of range or an
                unknown area method is named.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GEOMATH_ZOOM_FACTOR=abc``).
        """
        config = cls(
            area_method=os.getenv("GEOMATH_AREA_METHOD", AREA_METHOD_INTEGRAL).strip().lower(),
            zoom_factor=float(os.getenv("GEOMATH_ZOOM_FACTOR", str(DEFAULT_ZOOM_FACTOR))),
            min_span_deg=float(os.getenv("GEOMATH_MIN_SPAN_DEG", str(MIN_SPAN_DEG))),
            max_span_deg=float(os.getenv("GEOMATH_MAX_SPAN_DEG", str(MAX_SPAN_DEG))),
            span_tolerance_deg=float(
                os.getenv("GEOMATH_SPAN_TOLERANCE_DEG", str(SPAN_CHANGE_TOLERANCE_DEG))
            ),
            default_span_deg=float(os.getenv("GEOMATH_DEFAULT_SPAN_DEG", str(DEFAULT_SPAN_DEG))),
            viewport_width_px=float(
                os.getenv("GEOMATH_VIEWPORT_WIDTH_PX", str(DEFAULT_VIEWPORT_WIDTH_PX))
            ),
            viewport_height_px=float(
                os.getenv("GEOMATH_VIEWPORT_HEIGHT_PX", str(DEFAULT_VIEWPORT_HEIGHT_PX))
            ),
        )
        _validate(config)
        return config


def _validate(config: GeoMathConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.area_method not in AREA_METHODS:
        raise ConfigValidationError(
            "GEOMATH_AREA_METHOD",
            config.area_method,
            f"must be one of {sorted(AREA_METHODS)}",
        )

    if config.zoom_factor <= 1.0:
        raise ConfigValidationError(
            "GEOMATH_ZOOM_FACTOR",
            config.zoom_factor,
            "must be > 1",
        )

    if config.min_span_deg <= 0:
        raise ConfigValidationError(
            "GEOMATH_MIN_SPAN_DEG",
            config.min_span_deg,
            "must be > 0 (degrees)",
        )

    if not config.min_span_deg < config.max_span_deg <= 360.0:
        raise ConfigValidationError(
            "GEOMATH_MAX_SPAN_DEG",
            config.max_span_deg,
            "must be greater than GEOMATH_MIN_SPAN_DEG and <= 360 (degrees)",
        )

    if config.span_tolerance_deg < 0:
        raise ConfigValidationError(
            "GEOMATH_SPAN_TOLERANCE_DEG",
            config.span_tolerance_deg,
            "must be >= 0 (degrees)",
        )

    if not config.min_span_deg <= config.default_span_deg <= config.max_span_deg:
        raise ConfigValidationError(
            "GEOMATH_DEFAULT_SPAN_DEG",
            config.default_span_deg,
            "must lie between GEOMATH_MIN_SPAN_DEG and GEOMATH_MAX_SPAN_DEG",
        )

    if config.viewport_width_px <= 0:
        raise ConfigValidationError(
            "GEOMATH_VIEWPORT_WIDTH_PX",
            config.viewport_width_px,
            "must be > 0 (pixels)",
        )

    if config.viewport_height_px <= 0:
        raise ConfigValidationError(
            "GEOMATH_VIEWPORT_HEIGHT_PX",
            config.viewport_height_px,
            "must be > 0 (pixels)",
        )

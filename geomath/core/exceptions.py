"""Geometry exception taxonomy.

Geometry operations never raise for degenerate input: they fall back to
defined values (zero area, empty polygon, origin centroid).  Exceptions
are reserved for the boundaries of the library: model deserialisation,
viewport construction, configuration loading and area-method selection.

Every domain exception inherits from ``GeoMathError`` and carries
structured context fields for consistent diagnostics.

Taxonomy categories
-------------------
- ``ValidationError``: out-of-range or unusable input values.
- ``ContractError``: malformed payloads handed to ``from_dict()``.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class GeoMathError(Exception):
    """Base exception for all geometry-domain errors.

    Attributes:
        message: Human-readable error description.
        operation: Operation where the error occurred
            (e.g. ``"viewport"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"COORDINATE_INVALID"``).
    """

    #: Default operation for subclasses (override via class attribute or kwarg).
    default_operation: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        operation: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.operation = operation or self.default_operation
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "geometry"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "operation": self.operation,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(GeoMathError):
    """Input value outside its valid domain."""


class ContractError(GeoMathError):
    """Payload shape does not match the model it is decoded into."""

    default_code = "CONTRACT_VIOLATION"


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class CoordinateValidationError(ValidationError):
    """Raised when a coordinate is outside WGS 84 bounds."""

    default_operation = "coordinates"
    default_code = "COORDINATE_INVALID"


class ViewportValidationError(ValidationError):
    """Raised when a viewport has a non-positive span or pixel size."""

    default_operation = "viewport"
    default_code = "VIEWPORT_INVALID"


class AreaMethodError(ValidationError):
    """Raised when an unknown area method is requested."""

    default_operation = "area"
    default_code = "AREA_METHOD_UNKNOWN"

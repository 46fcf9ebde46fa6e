"""Tests for the geometry exception taxonomy.

Validates:
- GeoMathError hierarchy and structured attributes
- Category classification (validation, contract, geometry)
- ``to_error_dict()`` produces stable payload keys
- Boundary operations raise the documented subclasses
"""

from __future__ import annotations

from typing import ClassVar

import pytest

from geomath.core.config import ConfigValidationError
from geomath.core.exceptions import (
    AreaMethodError,
    ContractError,
    CoordinateValidationError,
    GeoMathError,
    ValidationError,
    ViewportValidationError,
)
from geomath.geometry.measure import compute_area_m2
from geomath.geometry.validation import validate_coordinates
from geomath.models.geo import GeoPoint


class TestGeoMathErrorBase:
    """GeoMathError base class behavior."""

    def test_default_attributes(self) -> None:
        err = GeoMathError("boom")
        assert err.message == "boom"
        assert err.operation == ""
        assert err.code == ""

    def test_custom_attributes(self) -> None:
        err = GeoMathError("fail", operation="area", code="AREA_FAILED")
        assert err.operation == "area"
        assert err.code == "AREA_FAILED"

    def test_str_is_message(self) -> None:
        assert str(GeoMathError("human-readable error")) == "human-readable error"

    def test_base_category(self) -> None:
        assert GeoMathError("x").category == "geometry"

    def test_to_error_dict_keys(self) -> None:
        d = GeoMathError("x", operation="o", code="C").to_error_dict()
        assert set(d.keys()) == {"category", "code", "operation", "message"}
        assert d["message"] == "x"
        assert d["operation"] == "o"
        assert d["code"] == "C"


class TestCategoryBases:
    """Category base classes set correct defaults."""

    def test_validation_category(self) -> None:
        assert ValidationError("bad input").category == "validation"

    def test_contract_category(self) -> None:
        err = ContractError("schema drift")
        assert err.category == "contract"
        assert err.code == "CONTRACT_VIOLATION"


class TestAllExceptionsAreGeoMathError:
    """Every custom exception inherits from GeoMathError."""

    EXCEPTION_CLASSES: ClassVar[list[type[GeoMathError]]] = [
        ValidationError,
        ContractError,
        CoordinateValidationError,
        ViewportValidationError,
        AreaMethodError,
        ConfigValidationError,
    ]

    def test_all_subclass_geomath_error(self) -> None:
        for cls in self.EXCEPTION_CLASSES:
            assert issubclass(cls, GeoMathError), f"{cls.__name__} is not a GeoMathError"


class TestConcreteOperationAndCode:
    """Every concrete exception has a default operation and code."""

    def test_coordinate_error(self) -> None:
        err = CoordinateValidationError("lat 91")
        assert err.operation == "coordinates"
        assert err.code == "COORDINATE_INVALID"
        assert err.category == "validation"

    def test_viewport_error(self) -> None:
        err = ViewportValidationError("zero span")
        assert err.operation == "viewport"
        assert err.code == "VIEWPORT_INVALID"

    def test_area_method_error(self) -> None:
        err = AreaMethodError("planar")
        assert err.operation == "area"
        assert err.code == "AREA_METHOD_UNKNOWN"

    def test_config_validation_error(self) -> None:
        err = ConfigValidationError("GEOMATH_ZOOM_FACTOR", 0.5, "must be > 1")
        assert err.operation == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.key == "GEOMATH_ZOOM_FACTOR"
        assert err.value == 0.5
        assert "GEOMATH_ZOOM_FACTOR=0.5" in err.message

    def test_kwargs_override_defaults(self) -> None:
        err = ViewportValidationError("x", operation="zoom", code="ZOOM_INVALID")
        assert err.operation == "zoom"
        assert err.code == "ZOOM_INVALID"


class TestRaisedAtBoundaries:
    """Boundary operations surface structured errors."""

    def test_unknown_area_method(self) -> None:
        points = [GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0), GeoPoint(1.0, 0.0)]
        with pytest.raises(AreaMethodError) as exc_info:
            compute_area_m2(points, "planar")
        assert exc_info.value.to_error_dict()["code"] == "AREA_METHOD_UNKNOWN"

    def test_out_of_range_coordinate(self) -> None:
        with pytest.raises(CoordinateValidationError) as exc_info:
            validate_coordinates([GeoPoint(0.0, 0.0), GeoPoint(0.0, 200.0)])
        assert exc_info.value.to_error_dict()["category"] == "validation"

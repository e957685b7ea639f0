"""Tests for the conversion exception taxonomy.

Validates:
- ConversionError hierarchy and structured attributes
- Category classification (validation, unsupported, conversion)
- ``to_error_dict()`` produces stable payload keys
- Every concrete error carries its stage and code
"""

from __future__ import annotations

import pytest

from svg2geojson.core.config import ConfigValidationError
from svg2geojson.core.exceptions import (
    CalibrationError,
    ConversionError,
    ElementDataError,
    SvgParseError,
    UnsupportedError,
    UnsupportedGeometryError,
    ValidationError,
)


class TestConversionErrorBase:
    """ConversionError base class behavior."""

    def test_default_attributes(self) -> None:
        err = ConversionError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.category == "conversion"

    def test_custom_attributes(self) -> None:
        err = ConversionError("fail", stage="load", code="X_FAILED")
        assert err.stage == "load"
        assert err.code == "X_FAILED"

    def test_str_is_message(self) -> None:
        assert str(ConversionError("human-readable error")) == "human-readable error"

    def test_to_error_dict(self) -> None:
        err = ConversionError("x", stage="s", code="C")
        assert err.to_error_dict() == {
            "category": "conversion",
            "code": "C",
            "stage": "s",
            "message": "x",
        }


class TestCategoryBases:
    def test_validation_category(self) -> None:
        assert ValidationError("bad").category == "validation"

    def test_unsupported_category(self) -> None:
        assert UnsupportedError("nope").category == "unsupported"


class TestConcreteErrors:
    @pytest.mark.parametrize(
        ("exc_type", "category", "stage", "code"),
        [
            (SvgParseError, "validation", "load", "SVG_PARSE_FAILED"),
            (CalibrationError, "validation", "calibrate", "CALIBRATION_FAILED"),
            (ElementDataError, "validation", "convert", "ELEMENT_DATA_INVALID"),
            (UnsupportedGeometryError, "unsupported", "convert", "UNSUPPORTED_GEOMETRY"),
        ],
    )
    def test_defaults(
        self, exc_type: type[ConversionError], category: str, stage: str, code: str
    ) -> None:
        err = exc_type("msg")
        assert isinstance(err, ConversionError)
        assert err.category == category
        assert err.stage == stage
        assert err.code == code

    def test_kwargs_override_defaults(self) -> None:
        err = CalibrationError("msg", stage="custom", code="OTHER")
        assert err.stage == "custom"
        assert err.code == "OTHER"

    def test_config_error_in_hierarchy(self) -> None:
        err = ConfigValidationError("K", "v", "bad")
        assert isinstance(err, ValidationError)
        assert err.to_error_dict()["code"] == "CONFIG_VALIDATION_FAILED"

    def test_element_errors_are_not_fatal_types(self) -> None:
        assert not issubclass(ElementDataError, (CalibrationError, SvgParseError))

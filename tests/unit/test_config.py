"""Tests for conversion configuration.

Covers:
- Default values match the converter's documented behaviour
- Loading from environment variables
- Boolean flag parsing (1/0, true/false, yes/no, on/off)
- Fail-fast tolerance validation
"""

from __future__ import annotations

import math
import os
from unittest.mock import patch

import pytest

from svg2geojson.core.config import ConfigValidationError, ConversionConfig, validate_config
from svg2geojson.core.constants import DEFAULT_TOLERANCE

_ENV_KEYS = (
    "SVG2GEOJSON_LAYERS",
    "SVG2GEOJSON_DEBUG",
    "SVG2GEOJSON_TOLERANCE",
    "SVG2GEOJSON_SKIP_UNSUPPORTED",
    "SVG2GEOJSON_VALIDATE_POLYGONS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConversionConfigDefaults:
    """Verify default configuration values."""

    def test_single_collection_without_debug(self) -> None:
        cfg = ConversionConfig()
        assert cfg.layers is False
        assert cfg.debug is False

    def test_default_tolerance(self) -> None:
        assert ConversionConfig().tolerance == DEFAULT_TOLERANCE == 1.0

    def test_ellipses_fail_by_default(self) -> None:
        assert ConversionConfig().skip_unsupported is False

    def test_polygon_diagnostics_on_by_default(self) -> None:
        assert ConversionConfig().validate_polygons is True

    def test_frozen(self) -> None:
        cfg = ConversionConfig()
        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]


class TestConversionConfigFromEnv:
    """Verify loading from environment variables."""

    def test_loads_from_environment(self) -> None:
        env = {
            "SVG2GEOJSON_LAYERS": "true",
            "SVG2GEOJSON_DEBUG": "1",
            "SVG2GEOJSON_TOLERANCE": "0.25",
            "SVG2GEOJSON_SKIP_UNSUPPORTED": "yes",
            "SVG2GEOJSON_VALIDATE_POLYGONS": "off",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = ConversionConfig.from_env()

        assert cfg.layers is True
        assert cfg.debug is True
        assert cfg.tolerance == 0.25
        assert cfg.skip_unsupported is True
        assert cfg.validate_polygons is False

    def test_defaults_when_env_missing(self) -> None:
        assert ConversionConfig.from_env() == ConversionConfig()

    def test_blank_values_fall_back_to_defaults(self) -> None:
        with patch.dict(os.environ, {"SVG2GEOJSON_VALIDATE_POLYGONS": "  "}, clear=False):
            assert ConversionConfig.from_env().validate_polygons is True

    @pytest.mark.parametrize("raw", ["TRUE", " On ", "Yes"])
    def test_flags_are_case_insensitive(self, raw: str) -> None:
        with patch.dict(os.environ, {"SVG2GEOJSON_DEBUG": raw}, clear=False):
            assert ConversionConfig.from_env().debug is True

    def test_unrecognised_flag_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"SVG2GEOJSON_LAYERS": "maybe"}, clear=False),
            pytest.raises(ConfigValidationError) as exc_info,
        ):
            ConversionConfig.from_env()
        assert exc_info.value.key == "SVG2GEOJSON_LAYERS"
        assert exc_info.value.value == "maybe"

    def test_non_numeric_tolerance_rejected(self) -> None:
        with (
            patch.dict(os.environ, {"SVG2GEOJSON_TOLERANCE": "fine"}, clear=False),
            pytest.raises(ConfigValidationError, match="must be a number"),
        ):
            ConversionConfig.from_env()


class TestValidateConfig:
    """Fail-fast range validation."""

    @pytest.mark.parametrize("tolerance", [0.0, -1.0, math.inf, math.nan])
    def test_tolerance_out_of_range(self, tolerance: float) -> None:
        with pytest.raises(ConfigValidationError, match="SVG2GEOJSON_TOLERANCE"):
            validate_config(ConversionConfig(tolerance=tolerance))

    def test_env_tolerance_validated(self) -> None:
        with (
            patch.dict(os.environ, {"SVG2GEOJSON_TOLERANCE": "-2"}, clear=False),
            pytest.raises(ConfigValidationError),
        ):
            ConversionConfig.from_env()

    def test_small_positive_tolerance_accepted(self) -> None:
        validate_config(ConversionConfig(tolerance=1e-6))

    def test_error_is_validation_category(self) -> None:
        err = ConfigValidationError("SVG2GEOJSON_TOLERANCE", 0, "must be > 0")
        assert err.category == "validation"
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert "SVG2GEOJSON_TOLERANCE=0" in str(err)

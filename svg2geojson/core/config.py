"""Conversion configuration.

All values default to the plain single-collection conversion.
Callers either construct ``ConversionConfig`` directly or load it from
environment variables with ``from_env()``.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value is out of
    its valid range or cannot be interpreted.  This catches bad
    configuration before any document is converted.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from svg2geojson.core.constants import DEFAULT_TOLERANCE
from svg2geojson.core.exceptions import ValidationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")
        self.key = key
        self.value = value


@dataclass(frozen=True, slots=True)
class ConversionConfig:
    """Immutable conversion options.

    Attributes:
        layers: Split output into one FeatureCollection per top-level group.
        debug: Attach each geometry's debug label as an ``svgID`` property.
        tolerance: Curve-flattening tolerance in drawing units.
        skip_unsupported: Skip unsupported primitives (ellipses) with a
            warning instead of aborting the conversion.
        validate_polygons: Log a warning for every emitted polygon that
            shapely reports as invalid.
    """

    layers: bool = False
    debug: bool = False
    tolerance: float = DEFAULT_TOLERANCE
    skip_unsupported: bool = False
    validate_polygons: bool = True

    @classmethod
    def from_env(cls) -> ConversionConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a boolean variable is not a
                recognised flag value, or the tolerance is not a finite
                positive number.
        """
        raw_tolerance = os.getenv("SVG2GEOJSON_TOLERANCE", str(DEFAULT_TOLERANCE))
        try:
            tolerance = float(raw_tolerance)
        except ValueError as exc:
            raise ConfigValidationError(
                "SVG2GEOJSON_TOLERANCE", raw_tolerance, "must be a number"
            ) from exc

        config = cls(
            layers=_env_flag("SVG2GEOJSON_LAYERS", default=False),
            debug=_env_flag("SVG2GEOJSON_DEBUG", default=False),
            tolerance=tolerance,
            skip_unsupported=_env_flag("SVG2GEOJSON_SKIP_UNSUPPORTED", default=False),
            validate_polygons=_env_flag("SVG2GEOJSON_VALIDATE_POLYGONS", default=True),
        )
        validate_config(config)
        return config


def validate_config(config: ConversionConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not math.isfinite(config.tolerance) or config.tolerance <= 0:
        raise ConfigValidationError(
            "SVG2GEOJSON_TOLERANCE",
            config.tolerance,
            "must be a finite number > 0 (drawing units)",
        )


def _env_flag(key: str, *, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValidationError(key, raw, "must be one of 1/0, true/false, yes/no, on/off")

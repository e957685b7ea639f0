"""Conversion exception taxonomy.

Every error raised by the converter inherits from ``ConversionError``
and carries structured context fields (stage, code, category) so that
hosts can report failures consistently, whether they are a CLI mapping
errors to exit codes or a library caller logging them.

Taxonomy categories
-------------------
- ``ValidationError``   — malformed or incomplete input; fix the SVG.
- ``UnsupportedError``  — valid input that uses a feature the converter
  does not implement.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion errors.

    Attributes:
        message: Human-readable error description.
        stage: Conversion stage where the error occurred
            (e.g. ``"load"``, ``"calibrate"``, ``"convert"``).
        code: Machine-readable error code (e.g. ``"CALIBRATION_FAILED"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, UnsupportedError):
            return "unsupported"
        return "conversion"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(ConversionError):
    """Input is malformed, incomplete, or geometrically degenerate."""


class UnsupportedError(ConversionError):
    """Input is well-formed but uses a feature the converter does not handle."""


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class SvgParseError(ValidationError):
    """Raised when an SVG document cannot be loaded."""

    default_stage = "load"
    default_code = "SVG_PARSE_FAILED"


class CalibrationError(ValidationError):
    """Raised when the control points cannot define a calibration.

    Covers a missing ``MetaInfo/Geo`` block, a wrong number of
    ``GeoItem`` entries, non-numeric control point attributes, and
    collinear source points.
    """

    default_stage = "calibrate"
    default_code = "CALIBRATION_FAILED"


class ElementDataError(ValidationError):
    """Raised when a single drawing element carries malformed data.

    Recoverable: the tree walker logs it and skips the element.
    """

    default_stage = "convert"
    default_code = "ELEMENT_DATA_INVALID"


class UnsupportedGeometryError(UnsupportedError):
    """Raised when the drawing contains a primitive that cannot be converted."""

    default_stage = "convert"
    default_code = "UNSUPPORTED_GEOMETRY"

"""Constants and enumerations for cell text rendering."""

from enum import Enum


class FontFamily(str, Enum):
    """Built-in font families.

    TrueType families registered on a surface are referred to by their
    plain string name instead.
    """
    ARIAL = "arial"
    HELVETICA = "helvetica"
    SYMBOL = "symbol"
    ZAPBATS = "zapfdingbats"
    COURIER = "courier"
    TIMES = "times"


class FontStyle(str, Enum):
    """Font style variants."""
    NORMAL = ""
    BOLD = "B"
    ITALIC = "I"
    BOLD_ITALIC = "BI"


class Align(str, Enum):
    """Horizontal alignment of a line inside its cell."""
    LEFT = "L"
    CENTER = "C"
    RIGHT = "R"


class RenderConstants:
    """Central configuration constants for rendering."""

    # Page geometry
    DEFAULT_UNIT = "mm"
    DEFAULT_MARGIN_MM = 10.0

    # Points per page unit
    UNIT_SCALE = {
        "pt": 1.0,
        "mm": 72 / 25.4,
        "cm": 72 / 2.54,
        "in": 72.0,
    }

    # Text defaults
    DEFAULT_FONT_SIZE = 10.0
    DEFAULT_FAMILY = FontFamily.ARIAL
    DEFAULT_STYLE = FontStyle.NORMAL
    DEFAULT_ALIGN = Align.LEFT

    # Codepage used by the built-in single-byte fonts
    DEFAULT_CODEPAGE = "cp1252"
    REPLACEMENT_CHAR = "?"

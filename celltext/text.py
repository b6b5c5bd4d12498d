"""Wrapped, aligned text drawing inside page cells.

``Text`` ties the line breaker to a render surface: it selects the font,
translates text for the single-byte font families, breaks it to the cell
width and draws every line at its aligned position. ``get_lines_quantity``
runs the same pipeline without drawing so callers can reserve space first.
"""

import logging
from typing import Union

from .constants import Align, FontFamily
from .font_config import is_unicode_translated
from .line_breaker import break_lines
from .props import Cell, TextProps
from .surface import FontHandle, RenderSurface, Translator

logger = logging.getLogger(__name__)


def normalize_text(text: str, family: Union[FontFamily, str], translator: Translator) -> str:
    """Translate text to the font's codepage when the family needs it.

    Families with a single-byte encoding (Arial, Helvetica, Symbol,
    ZapfDingbats, Courier) are only measured correctly on translated text.
    Every other family gets the text back unchanged.
    """
    if is_unicode_translated(family):
        return translator(text)
    return text


class Text:
    """Draws text into cells of a render surface."""

    def __init__(self, surface: RenderSurface, font: FontHandle):
        """Initialize with the surface to draw on and its font state.

        Args:
            surface: Render surface providing drawing and measuring.
            font: Font state of the same surface.
        """
        self.surface = surface
        self.font = font

    def add(self, text: str, cell: Cell, props: TextProps) -> None:
        """Draw text wrapped to the cell width.

        The first baseline sits one font height below cell.y; every
        following line moves down by another font height plus the
        vertical padding. The font color is set for the duration of the
        call and restored afterwards.

        Args:
            text: Text to draw; may contain newlines.
            cell: Cell origin and width in page units.
            props: Text style.
        """
        props = props.make_valid()
        self.font.set_font(props.family, props.style, props.size)

        original_color = self.font.get_color()
        self.font.set_color(props.color)
        try:
            unicode_text = self._text_to_unicode(text, props)
            lines = break_lines(unicode_text, cell.width, self.surface.get_string_width,
                                props.extrapolate)
            logger.debug(f"Drawing {len(lines)} line(s) in cell at ({cell.x}, {cell.y})")

            y = cell.y + self._font_height()
            accumulate_offset_y = 0.0
            for index, line in enumerate(lines):
                line_width = self.surface.get_string_width(line)
                text_height = self._font_height()
                self._add_line(props, cell.x, cell.width,
                               y + index * text_height + accumulate_offset_y,
                               line_width, line)
                accumulate_offset_y += props.vertical_padding
        finally:
            self.font.set_color(original_color)

    def get_lines_quantity(self, text: str, props: TextProps, col_width: float) -> int:
        """Number of lines text occupies in a column, without drawing it.

        Sets the font from props, since widths depend on it.
        """
        props = props.make_valid()
        self.font.set_font(props.family, props.style, props.size)
        unicode_text = self._text_to_unicode(text, props)
        lines = break_lines(unicode_text, col_width, self.surface.get_string_width,
                            props.extrapolate)
        logger.debug(f"Text needs {len(lines)} line(s) in a column of width {col_width}")
        return len(lines)

    def _font_height(self) -> float:
        _, _, font_size = self.font.get_font()
        return font_size / self.font.get_scale_factor()

    def _add_line(self, props: TextProps, x_col_offset: float, col_width: float,
                  y_col_offset: float, text_width: float, text: str) -> None:
        left, top, _, _ = self.surface.get_margins()

        if props.align == Align.LEFT:
            self.surface.text(x_col_offset + left, y_col_offset + top, text)
            return

        modifier = 2.0
        if props.align == Align.RIGHT:
            modifier = 1.0

        dx = (col_width - text_width) / modifier
        self.surface.text(dx + x_col_offset + left, y_col_offset + top, text)

    def _text_to_unicode(self, text: str, props: TextProps) -> str:
        return normalize_text(text, props.family, self.surface.unicode_translator(""))

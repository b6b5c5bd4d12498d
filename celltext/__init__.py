"""celltext - Wrapped, aligned text drawing inside PDF page cells."""

from .constants import Align, FontFamily, FontStyle
from .font import FontState
from .line_breaker import break_lines, count_lines
from .pdf_surface import FontLoadError, PDFSurface
from .props import Cell, Color, TextProps
from .text import Text, normalize_text

__all__ = [
    'Align',
    'FontFamily',
    'FontStyle',
    'FontState',
    'break_lines',
    'count_lines',
    'FontLoadError',
    'PDFSurface',
    'Cell',
    'Color',
    'TextProps',
    'Text',
    'normalize_text',
]

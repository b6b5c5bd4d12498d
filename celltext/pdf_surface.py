"""Render surface backed by a ReportLab canvas.

This module adapts ReportLab's bottom-up, point-based canvas to the
top-left, page-unit coordinates used by the cell text renderer. It
supports the built-in PDF fonts (Helvetica, Courier, Times, Symbol,
ZapfDingbats) and TrueType fonts registered at runtime, and provides the
codepage translator used to make text safe for the single-byte fonts.
"""

import io
import logging
import os
from typing import Callable, Dict, Optional, Set, Tuple, Union

from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from .constants import FontFamily, FontStyle, RenderConstants
from .font_config import FontConfig, family_name, get_font_config, style_code
from .props import BLACK, Color

logger = logging.getLogger(__name__)


class FontLoadError(Exception):
    """Exception raised when a font cannot be loaded."""


class PDFSurface:
    """Draw text on PDF pages using top-left page-unit coordinates."""

    def __init__(self, unit: str = RenderConstants.DEFAULT_UNIT,
                 pagesize: Tuple[float, float] = A4,
                 margins: Optional[Tuple[float, float, float]] = None):
        """Initialize the surface with one empty page.

        Args:
            unit: Page unit ("pt", "mm", "cm" or "in").
            pagesize: Page (width, height) in points.
            margins: Optional (left, top, right) margins in page units.
                Defaults to 10 mm on every side.

        Raises:
            ValueError: If the unit is unknown.
        """
        if unit not in RenderConstants.UNIT_SCALE:
            raise ValueError(f"Unknown unit: {unit}")
        self.unit = unit
        self.scale_factor = RenderConstants.UNIT_SCALE[unit]
        self.page_width, self.page_height = pagesize

        default_margin = RenderConstants.DEFAULT_MARGIN_MM * RenderConstants.UNIT_SCALE["mm"] / self.scale_factor
        if margins is None:
            margins = (default_margin, default_margin, default_margin)
        self.left_margin, self.top_margin, self.right_margin = margins
        self.bottom_margin = default_margin

        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=pagesize)
        self._closed = False

        # TrueType families registered on this surface: family -> style code -> PDF name
        self._registered: Dict[str, Dict[str, str]] = {}

        self.font_name = ""
        self.font_size = 0.0
        self.text_color: Color = BLACK
        self.set_font(RenderConstants.DEFAULT_FAMILY, RenderConstants.DEFAULT_STYLE,
                      RenderConstants.DEFAULT_FONT_SIZE)

        # Track unprintable characters for warning
        self.unprintable_chars: Set[str] = set()
        self.has_unprintable = False

    # Fonts

    def register_font(self, family: str, path: str,
                      style: Union[FontStyle, str] = FontStyle.NORMAL) -> None:
        """Register a TrueType font file as a family/style on this surface.

        Args:
            family: Family name used in TextProps.
            path: Path to the .ttf file.
            style: Style this file provides.

        Raises:
            FontLoadError: If the file does not exist or cannot be loaded.
        """
        key = family_name(family)
        code = style_code(style)
        pdf_name = f"{key}-{code}" if code else key

        if not os.path.exists(path):
            raise FontLoadError(f"Font file not found: {path}")

        if pdf_name not in pdfmetrics.getRegisteredFontNames():
            try:
                pdfmetrics.registerFont(TTFont(pdf_name, path))
            except Exception as e:
                raise FontLoadError(f"Could not register font {family} from {path}: {e}")

        self._registered.setdefault(key, {})[code] = pdf_name
        logger.debug(f"Registered font {pdf_name} from {path}")

    def _resolve_font_name(self, family: Union[FontFamily, str],
                           style: Union[FontStyle, str]) -> str:
        key = family_name(family)
        if key in self._registered:
            faces = self._registered[key]
            return faces.get(style_code(style)) or faces.get("") or next(iter(faces.values()))

        config: Optional[FontConfig] = get_font_config(key)
        if config is None:
            raise FontLoadError(f"Unknown font: {family}")
        return config.pdf_name(style)

    def set_font(self, family: Union[FontFamily, str], style: Union[FontStyle, str],
                 size: float) -> None:
        """Select the font used for measuring and drawing.

        Raises:
            FontLoadError: If the family is neither built in nor registered.
        """
        self.font_name = self._resolve_font_name(family, style)
        self.font_size = size
        self._canvas.setFont(self.font_name, self.font_size)

    def set_text_color(self, color: Color) -> None:
        """Set the fill color used for text."""
        self.text_color = color
        self._canvas.setFillColorRGB(*color.as_fractions())

    def get_scale_factor(self) -> float:
        """Points per page unit."""
        return self.scale_factor

    # Measuring and drawing

    def get_string_width(self, text: str) -> float:
        """Width of text in page units under the current font."""
        return pdfmetrics.stringWidth(text, self.font_name, self.font_size) / self.scale_factor

    def text(self, x: float, y: float, text: str) -> None:
        """Draw text with its baseline at (x, y) measured from the top-left corner."""
        k = self.scale_factor
        self._canvas.drawString(x * k, self.page_height - y * k, text)

    def get_margins(self) -> Tuple[float, float, float, float]:
        """Return (left, top, right, bottom) margins in page units."""
        return (self.left_margin, self.top_margin, self.right_margin, self.bottom_margin)

    def set_margins(self, left: float, top: float, right: Optional[float] = None) -> None:
        """Set page margins; the right margin defaults to the left one."""
        self.left_margin = left
        self.top_margin = top
        self.right_margin = left if right is None else right

    # Unicode translation

    def unicode_translator(self, encoding: str = "") -> Callable[[str], str]:
        """Return a translator that makes text safe for a single-byte codepage.

        Args:
            encoding: Python codec name; empty selects Windows-1252.

        Returns:
            Function replacing every character outside the codepage with '?'.
        """
        codepage = encoding or RenderConstants.DEFAULT_CODEPAGE

        def translate(text: str) -> str:
            return self._make_pdf_safe(text, codepage)

        return translate

    def _make_pdf_safe(self, text: str, codepage: str = RenderConstants.DEFAULT_CODEPAGE) -> str:
        """Convert text to be safe for PDF output with a single-byte font.

        The built-in fonts support Windows-1252 encoding which includes
        Latin-1 plus additional characters in the 0x80-0x9F range.

        Characters not in the codepage are replaced with '?' and tracked
        for warning messages.
        """
        result = []
        replaced = set()
        for char in text:
            try:
                char.encode(codepage)
                result.append(char)
            except UnicodeEncodeError:
                replaced.add(char)
                result.append(RenderConstants.REPLACEMENT_CHAR)
        if replaced:
            self.unprintable_chars.update(replaced)
            self.has_unprintable = True
            logger.warning(f"Replaced {len(replaced)} character(s) not in {codepage} with "
                           f"'{RenderConstants.REPLACEMENT_CHAR}'")
        return ''.join(result)

    def get_unprintable_warning(self) -> Optional[str]:
        """Get warning message about unprintable characters.

        Returns:
            Warning message if unprintable chars were found, None otherwise.
        """
        if not self.has_unprintable:
            return None

        char_list = sorted(self.unprintable_chars)

        # Show unicode code point for non-displayable characters
        formatted_chars = []
        for char in char_list[:10]:
            if ord(char) < 32 or ord(char) == 127:
                formatted_chars.append(f"U+{ord(char):04X}")
            else:
                formatted_chars.append(f"'{char}' (U+{ord(char):04X})")

        if len(char_list) > 10:
            formatted_chars.append(f"... and {len(char_list) - 10} more")

        return (f"Warning: {len(self.unprintable_chars)} unique unprintable character(s) "
                f"were replaced with '{RenderConstants.REPLACEMENT_CHAR}' in the PDF output: "
                f"{', '.join(formatted_chars)}")

    # Pages

    @property
    def page_count(self) -> int:
        """Number of pages started so far."""
        return self._canvas.getPageNumber()

    def add_page(self) -> None:
        """End the current page and start a new one with the same font and color."""
        self._canvas.showPage()
        # showPage resets the graphics state
        self._canvas.setFont(self.font_name, self.font_size)
        self._canvas.setFillColorRGB(*self.text_color.as_fractions())

    def output(self) -> bytes:
        """Finish the document and return the PDF bytes."""
        if not self._closed:
            self._canvas.save()
            self._closed = True
        return self._buffer.getvalue()

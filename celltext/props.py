"""Value types describing text style and cell geometry."""

from dataclasses import dataclass, field, replace
from typing import Union

from .constants import Align, FontFamily, FontStyle, RenderConstants


@dataclass(frozen=True)
class Color:
    """RGB color with components in 0-255."""
    red: int = 0
    green: int = 0
    blue: int = 0

    def as_fractions(self) -> tuple[float, float, float]:
        """Components scaled to 0.0-1.0, as ReportLab expects them."""
        return (self.red / 255, self.green / 255, self.blue / 255)


BLACK = Color(0, 0, 0)


@dataclass
class Cell:
    """A content region of a page, in page units.

    Attributes:
        x: Left edge, relative to the left margin
        y: Top edge, relative to the top margin
        width: Column width available to the text
        height: Height reserved for the cell (unused by line placement)
    """
    x: float
    y: float
    width: float
    height: float = 0.0


@dataclass(frozen=True)
class TextProps:
    """Style of a text drawn into a cell.

    Attributes:
        family: Font family (enum member or registered TrueType name)
        style: Font style
        size: Font size in points
        color: Text color
        align: Horizontal alignment inside the cell
        vertical_padding: Extra space added after every line, in page units
        extrapolate: Disable soft wrapping and let lines overflow the cell
    """
    family: Union[FontFamily, str] = RenderConstants.DEFAULT_FAMILY
    style: Union[FontStyle, str] = RenderConstants.DEFAULT_STYLE
    size: float = RenderConstants.DEFAULT_FONT_SIZE
    color: Color = field(default_factory=lambda: BLACK)
    align: Union[Align, str] = RenderConstants.DEFAULT_ALIGN
    vertical_padding: float = 0.0
    extrapolate: bool = False

    def make_valid(self) -> 'TextProps':
        """Return a copy with missing or out-of-range values replaced by defaults."""
        changes = {}
        if not self.family:
            changes["family"] = RenderConstants.DEFAULT_FAMILY
        if self.style is None:
            changes["style"] = RenderConstants.DEFAULT_STYLE
        if not self.align:
            changes["align"] = RenderConstants.DEFAULT_ALIGN
        elif not isinstance(self.align, Align):
            changes["align"] = _parse_align(self.align)
        if self.size <= 0:
            changes["size"] = RenderConstants.DEFAULT_FONT_SIZE
        if self.vertical_padding < 0:
            changes["vertical_padding"] = 0.0
        if self.color is None:
            changes["color"] = BLACK
        return replace(self, **changes) if changes else self


def _parse_align(value: str) -> Align:
    """Accept either the code ("C") or the name ("center") of an alignment."""
    key = str(value).upper()
    if key in Align.__members__:
        return Align[key]
    return Align(key)

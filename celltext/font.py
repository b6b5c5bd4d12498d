"""Font state shared by everything that draws on one surface."""

from typing import Protocol, Tuple, Union

from .constants import FontFamily, FontStyle, RenderConstants
from .props import BLACK, Color


class FontTarget(Protocol):
    """The part of a surface that font state is mirrored onto."""

    def set_font(self, family: Union[FontFamily, str], style: Union[FontStyle, str],
                 size: float) -> None: ...

    def set_text_color(self, color: Color) -> None: ...

    def get_scale_factor(self) -> float: ...


class FontState:
    """Current font family, style, size and color of a rendering session.

    Every change is forwarded to the surface so that its width measurements
    always reflect the active font. One instance belongs to one document;
    it is not safe to share between threads.
    """

    def __init__(self, surface: FontTarget,
                 family: Union[FontFamily, str] = RenderConstants.DEFAULT_FAMILY,
                 style: Union[FontStyle, str] = RenderConstants.DEFAULT_STYLE,
                 size: float = RenderConstants.DEFAULT_FONT_SIZE):
        self._surface = surface
        self._family = family
        self._style = style
        self._size = size
        self._color = BLACK
        self._surface.set_font(family, style, size)

    def set_family(self, family: Union[FontFamily, str]) -> None:
        self.set_font(family, self._style, self._size)

    def set_style(self, style: Union[FontStyle, str]) -> None:
        self.set_font(self._family, style, self._size)

    def set_size(self, size: float) -> None:
        self.set_font(self._family, self._style, size)

    def set_font(self, family: Union[FontFamily, str], style: Union[FontStyle, str],
                 size: float) -> None:
        """Make (family, style, size) the active font on the surface."""
        self._surface.set_font(family, style, size)
        self._family = family
        self._style = style
        self._size = size

    def get_font(self) -> Tuple[Union[FontFamily, str], Union[FontStyle, str], float]:
        return self._family, self._style, self._size

    def set_color(self, color: Color) -> None:
        self._surface.set_text_color(color)
        self._color = color

    def get_color(self) -> Color:
        return self._color

    def get_scale_factor(self) -> float:
        """Points per page unit of the underlying surface."""
        return self._surface.get_scale_factor()

"""Contracts between the text core and its rendering collaborators."""

from typing import Callable, Protocol, Tuple, Union

from .constants import FontFamily, FontStyle
from .props import Color

Translator = Callable[[str], str]


class RenderSurface(Protocol):
    """A page canvas that draws strings at absolute positions.

    Coordinates are page units with the origin at the top-left corner of
    the page; ``y`` is the text baseline.
    """

    def text(self, x: float, y: float, text: str) -> None:
        """Draw ``text`` with its baseline starting at (x, y)."""

    def get_string_width(self, text: str) -> float:
        """Width of ``text`` in page units under the current font."""

    def get_margins(self) -> Tuple[float, float, float, float]:
        """Return (left, top, right, bottom) page margins."""

    def unicode_translator(self, encoding: str = "") -> Translator:
        """Return a function mapping unicode text onto the given codepage."""


class FontHandle(Protocol):
    """Mutable font state shared by everything drawing on one surface."""

    def set_font(self, family: Union[FontFamily, str], style: Union[FontStyle, str],
                 size: float) -> None: ...

    def get_font(self) -> Tuple[Union[FontFamily, str], Union[FontStyle, str], float]: ...

    def set_color(self, color: Color) -> None: ...

    def get_color(self) -> Color: ...

    def get_scale_factor(self) -> float: ...

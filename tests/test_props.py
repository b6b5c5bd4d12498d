"""Tests for text style and cell value types."""

import pytest

from celltext.constants import Align, FontFamily, FontStyle
from celltext.props import BLACK, Cell, Color, TextProps


def test_defaults():
    props = TextProps()
    assert props.family == FontFamily.ARIAL
    assert props.style == FontStyle.NORMAL
    assert props.size == 10.0
    assert props.color == BLACK
    assert props.align == Align.LEFT
    assert props.vertical_padding == 0.0
    assert props.extrapolate is False


def test_valid_props_are_returned_unchanged():
    props = TextProps(family=FontFamily.COURIER, size=12, align=Align.RIGHT)
    assert props.make_valid() is props


def test_make_valid_fills_defaults():
    props = TextProps(family="", style=None, size=-1, align="", vertical_padding=-3, color=None)
    valid = props.make_valid()
    assert valid.family == FontFamily.ARIAL
    assert valid.style == FontStyle.NORMAL
    assert valid.size == 10.0
    assert valid.align == Align.LEFT
    assert valid.vertical_padding == 0.0
    assert valid.color == BLACK


@pytest.mark.parametrize("value, expected", [
    ("C", Align.CENTER),
    ("center", Align.CENTER),
    ("r", Align.RIGHT),
    ("Left", Align.LEFT),
])
def test_align_from_string(value, expected):
    assert TextProps(align=value).make_valid().align == expected


def test_bad_align_is_rejected():
    with pytest.raises(ValueError):
        TextProps(align="justify").make_valid()


def test_props_are_immutable():
    props = TextProps()
    with pytest.raises(AttributeError):
        props.size = 12


def test_color_fractions():
    assert Color(255, 0, 51).as_fractions() == pytest.approx((1.0, 0.0, 0.2))


def test_cell_height_is_optional():
    assert Cell(x=1, y=2, width=3).height == 0.0

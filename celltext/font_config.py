"""Font configuration for the built-in PDF font families.

This module maps the font families understood by the text renderer to the
base-14 PDF font names for each style, and records which families use a
single-byte encoding that requires unicode translation before measuring.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from .constants import FontFamily, FontStyle


@dataclass(frozen=True)
class FontConfig:
    """Configuration for a font family.

    Attributes:
        family: Lower-case family name
        pdf_names: PDF font name per style code ("", "B", "I", "BI")
        unicode_translated: Whether text must go through the codepage
            translator before it is measured or drawn
        is_embedded: Whether the font is embedded in the PDF (vs referenced)
    """
    family: str
    pdf_names: Dict[str, str]
    unicode_translated: bool = False
    is_embedded: bool = False

    def pdf_name(self, style: Union[FontStyle, str]) -> str:
        """PDF font name for a style, falling back to the regular face."""
        code = style_code(style)
        return self.pdf_names.get(code) or self.pdf_names[""]

    @classmethod
    def create_base14(cls, family: str, base: str, bold: str, italic: str,
                      bold_italic: str, unicode_translated: bool = True) -> 'FontConfig':
        """Create a configuration for a built-in (non-embedded) PDF font."""
        return cls(
            family=family,
            pdf_names={"": base, "B": bold, "I": italic, "BI": bold_italic},
            unicode_translated=unicode_translated,
            is_embedded=False,
        )

    @classmethod
    def create_single_face(cls, family: str, base: str,
                           unicode_translated: bool = True) -> 'FontConfig':
        """Create a configuration for a font with no style variants (symbol fonts)."""
        return cls(
            family=family,
            pdf_names={"": base},
            unicode_translated=unicode_translated,
            is_embedded=False,
        )


def family_name(family: Union[FontFamily, str]) -> str:
    """Normalize a family given as enum member or string to its lookup key."""
    if isinstance(family, FontFamily):
        return family.value
    return str(family).lower()


def style_code(style: Union[FontStyle, str, None]) -> str:
    """Normalize a style to one of "", "B", "I", "BI"."""
    if isinstance(style, FontStyle):
        return style.value
    if not style:
        return ""
    code = str(style).upper()
    bold = "B" in code
    italic = "I" in code
    return ("B" if bold else "") + ("I" if italic else "")


_HELVETICA = FontConfig.create_base14(
    family=FontFamily.HELVETICA.value,
    base="Helvetica",
    bold="Helvetica-Bold",
    italic="Helvetica-Oblique",
    bold_italic="Helvetica-BoldOblique",
)

# Pre-defined font configurations
FONT_CONFIGS: Dict[str, FontConfig] = {
    # Arial is not a base-14 font; PDF viewers substitute Helvetica metrics
    FontFamily.ARIAL.value: FontConfig(
        family=FontFamily.ARIAL.value,
        pdf_names=dict(_HELVETICA.pdf_names),
        unicode_translated=True,
    ),
    FontFamily.HELVETICA.value: _HELVETICA,
    FontFamily.COURIER.value: FontConfig.create_base14(
        family=FontFamily.COURIER.value,
        base="Courier",
        bold="Courier-Bold",
        italic="Courier-Oblique",
        bold_italic="Courier-BoldOblique",
    ),
    FontFamily.SYMBOL.value: FontConfig.create_single_face(
        family=FontFamily.SYMBOL.value,
        base="Symbol",
    ),
    FontFamily.ZAPBATS.value: FontConfig.create_single_face(
        family=FontFamily.ZAPBATS.value,
        base="ZapfDingbats",
    ),
    FontFamily.TIMES.value: FontConfig.create_base14(
        family=FontFamily.TIMES.value,
        base="Times-Roman",
        bold="Times-Bold",
        italic="Times-Italic",
        bold_italic="Times-BoldItalic",
        unicode_translated=False,
    ),
}


def get_font_config(family: Union[FontFamily, str]) -> Optional[FontConfig]:
    """Get font configuration by family.

    Args:
        family: Font family, as enum member or name

    Returns:
        FontConfig if found, None otherwise
    """
    return FONT_CONFIGS.get(family_name(family))


def is_unicode_translated(family: Union[FontFamily, str]) -> bool:
    """Whether text in this family must be translated to the codepage first."""
    config = get_font_config(family)
    return bool(config and config.unicode_translated)

"""
Font names used by the application and the default family mapping.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import get_config_value
from ..util.strings import contains


logger = logging.getLogger(__name__)

DEFAULT_FONT_PREFIX = "HelveticaNeue"


@dataclass(frozen=True)
class Font:
    """A font name at a point size."""
    name: str
    size: float

    def __post_init__(self):
        if not self.name:
            raise ValueError("Font name is required")
        if self.size <= 0:
            raise ValueError("Font size must be positive")

    @classmethod
    def bold_open_sans(cls, size: float) -> "Font":
        return cls("OpenSans-Bold", size)

    @classmethod
    def semibold_open_sans(cls, size: float) -> "Font":
        return cls("OpenSans-Semibold", size)

    @classmethod
    def light_open_sans(cls, size: float) -> "Font":
        return cls("OpenSans-Light", size)

    @classmethod
    def light_helvetica_neue(cls, size: float) -> "Font":
        return cls("HelveticaNeue-Light", size)


@dataclass(frozen=True)
class FontFamily:
    """Common fonts used in the app, all sharing one family prefix."""
    prefix: str = DEFAULT_FONT_PREFIX

    @classmethod
    def from_env(cls) -> "FontFamily":
        return cls(get_config_value("font_prefix", DEFAULT_FONT_PREFIX))

    @property
    def regular(self) -> str:
        return self.prefix

    @property
    def bold(self) -> str:
        return f"{self.prefix}-Bold"

    @property
    def light(self) -> str:
        return f"{self.prefix}-Light"

    @property
    def semibold(self) -> str:
        return f"{self.prefix}-Semibold"

    @property
    def medium(self) -> str:
        return f"{self.prefix}-Medium"

    @property
    def italic(self) -> str:
        return f"{self.prefix}-Italic"

    @property
    def thin(self) -> str:
        return f"{self.prefix}-Thin"


# Order matters: "Semibold" must be checked before "Bold"
_VARIANT_ORDER: Tuple[str, ...] = (
    "Light", "Semibold", "Bold", "Italic", "Medium", "Regular", "Thin",
)


def apply_default_font_family(font: Font, family: Optional[FontFamily] = None) -> Font:
    """
    Map ``font`` onto the same variant of the app font family.

    The variant is picked from the font name, case-insensitively; the point
    size is kept. Fonts with no recognised variant are returned unchanged.
    """
    family = family or FontFamily()
    for variant in _VARIANT_ORDER:
        if contains(font.name, variant, case_sensitive=False):
            name = getattr(family, variant.lower())
            logger.debug(f"Mapped font {font.name} to {name}")
            return Font(name, font.size)
    return font

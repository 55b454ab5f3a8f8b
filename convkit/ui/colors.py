"""
Color value objects and the application palette.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..errors import ColorValueError


_HEX_PATTERN = re.compile(r'^[0-9a-fA-F]{6}$')


def _check_range(component: str, value: float, low: float, high: float) -> float:
    if not low <= value <= high:
        raise ColorValueError(component, value, low, high)
    return value


@dataclass(frozen=True)
class Color:
    """RGBA color with every channel in the range 0-1."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self):
        for name in ('red', 'green', 'blue', 'alpha'):
            _check_range(name, getattr(self, name), 0.0, 1.0)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> "Color":
        """Create a color from 0-255 RGB components and a 0-1 alpha."""
        _check_range('r', r, 0, 255)
        _check_range('g', g, 0, 255)
        _check_range('b', b, 0, 255)
        return cls(r / 255, g / 255, b / 255, a)

    @classmethod
    def from_gray(cls, gray: float, a: float = 1.0) -> "Color":
        """Create a gray color from a 0-255 level and a 0-1 alpha."""
        return cls.from_rgb(gray, gray, gray, a)

    @classmethod
    def from_white(cls, white: float, alpha: float = 1.0) -> "Color":
        """Create a gray color from a 0-1 white level."""
        return cls(white, white, white, alpha)

    @classmethod
    def from_hex(cls, hex_string: str) -> Optional["Color"]:
        """
        Parse a 6 digit hex string, e.g. "FF0000" -> red.

        Returns None for anything else, including a leading '#' or an
        alpha channel.
        """
        if not isinstance(hex_string, str) or not _HEX_PATTERN.match(hex_string):
            return None
        return cls.from_rgb(
            int(hex_string[0:2], 16),
            int(hex_string[2:4], 16),
            int(hex_string[4:6], 16),
        )

    def to_rgba255(self) -> Tuple[int, int, int, float]:
        return (round(self.red * 255), round(self.green * 255),
                round(self.blue * 255), self.alpha)

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba255()
        return f"{r:02X}{g:02X}{b:02X}"

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.red, self.green, self.blue, alpha)


class Palette:
    """Named colors from the application design."""

    @staticmethod
    def white() -> Color:
        return Color(1.0, 1.0, 1.0)

    @staticmethod
    def field_background() -> Color:
        """Field background color (#959595 at 10%)."""
        return Color.from_rgb(149, 149, 149, 0.1)

    @staticmethod
    def field_border() -> Color:
        return Color.from_white(1.0, 0.3)

    @staticmethod
    def wild_sand() -> Color:
        """Light gray 1."""
        return Color(0.97, 0.96, 0.96)

    @staticmethod
    def sea_shell() -> Color:
        """Light gray 2."""
        return Color(0.95, 0.94, 0.94)

    @staticmethod
    def white_lilac() -> Color:
        """Light gray 3."""
        return Color(0.92, 0.91, 0.91)

    @staticmethod
    def quill_gray() -> Color:
        """Light gray 4."""
        return Color(0.84, 0.84, 0.84)

    @staticmethod
    def christy_green(alpha: float = 1.0) -> Color:
        return Color(0.45, 0.65, 0.05, alpha)

    @staticmethod
    def green() -> Color:
        """Dark olive green (#4D5E2C)."""
        return Color.from_rgb(77, 94, 44)


@dataclass(frozen=True)
class LinearGradient:
    """Two-color linear gradient running from ``start`` to ``end``."""
    start: Color
    end: Color

    def color_at(self, position: float) -> Color:
        """Interpolate the gradient at ``position`` in the range 0-1."""
        t = _check_range('position', position, 0.0, 1.0)
        return Color(
            self.start.red + (self.end.red - self.start.red) * t,
            self.start.green + (self.end.green - self.start.green) * t,
            self.start.blue + (self.end.blue - self.start.blue) * t,
            self.start.alpha + (self.end.alpha - self.start.alpha) * t,
        )


def default_gradient() -> LinearGradient:
    """Background gradient used behind content views."""
    return LinearGradient(Palette.white_lilac(), Palette.quill_gray())


@dataclass(frozen=True)
class Border:
    """Border style for a view."""
    width: float = 0.5
    color: Color = field(default_factory=Palette.white)

    def __post_init__(self):
        if self.width < 0:
            raise ValueError("Border width must not be negative")


@dataclass(frozen=True)
class CornerStyle:
    """Rounded corner style for a view."""
    radius: float = 2.0
    masks_to_bounds: bool = True

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError("Corner radius must not be negative")

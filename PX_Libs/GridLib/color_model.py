"""
Color model for Pixel Pad.

A pixel color is either EMPTY (fully transparent, "no paint") or an opaque
RGB triple. Every transparent pixel collapses to the single EMPTY value, so
two transparent pixels always count as the same color when a fill looks for
region boundaries.

Classes:
    Color: Immutable pixel color (opaque RGB or EMPTY)

Functions:
    colors_equal: Structural equality used for fill boundary detection
    from_channels: Project raw RGBA channels onto a Color
    from_rgba_tuple: Same as from_channels for an (r, g, b, a) tuple
    from_hex: Parse a '#rrggbb' color picker value (always opaque)
    to_hex: Format an opaque color as '#rrggbb'
    to_rgba: Render a Color as an (r, g, b, a) tuple

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

import re
from dataclasses import dataclass
from typing import Tuple

from PX_Libs.constants import CHANNEL_MAX, CHANNEL_MIN, TRANSPARENT_RGBA

RgbaColor = Tuple[int, int, int, int]

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def _validate_channel(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Channel '{name}' must be an int, got {type(value)}")
    if not (CHANNEL_MIN <= value <= CHANNEL_MAX):
        raise ValueError(
            f"Channel '{name}' must be {CHANNEL_MIN}-{CHANNEL_MAX}, got {value}"
        )


@dataclass(frozen=True)
class Color:
    """A pixel color.

    Use ``Color.opaque(r, g, b)`` for painted colors and the module-level
    ``EMPTY`` for unpainted cells. The empty color always carries zeroed
    channels so dataclass equality matches ``colors_equal``.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        empty: True for the transparent "no paint" color
    """
    r: int = 0
    g: int = 0
    b: int = 0
    empty: bool = False

    def __post_init__(self) -> None:
        _validate_channel("r", self.r)
        _validate_channel("g", self.g)
        _validate_channel("b", self.b)
        if self.empty and (self.r, self.g, self.b) != (0, 0, 0):
            raise ValueError("The empty color cannot carry channel values")

    @classmethod
    def opaque(cls, r: int, g: int, b: int) -> "Color":
        """Create an opaque color from RGB channels."""
        return cls(r, g, b)

    @property
    def is_empty(self) -> bool:
        return self.empty

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __repr__(self) -> str:
        if self.empty:
            return "Color.EMPTY"
        return f"Color.opaque({self.r}, {self.g}, {self.b})"


EMPTY = Color(empty=True)


def colors_equal(a: Color, b: Color) -> bool:
    """
    Compare two colors for fill boundary detection.

    Args:
        a: First color
        b: Second color

    Returns:
        True if both are EMPTY, or both are opaque with identical RGB
    """
    if a.empty or b.empty:
        return a.empty and b.empty
    return a.rgb == b.rgb


def from_channels(r: int, g: int, b: int, a: int) -> Color:
    """
    Classify raw RGBA channels as a logical Color.

    Any pixel with alpha 0 is EMPTY regardless of its hue. Any other alpha
    is discarded and the pixel is treated as opaque.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha channel (0-255)

    Returns:
        EMPTY or an opaque Color

    Raises:
        ValueError: If a channel is outside 0-255
        TypeError: If a channel is not an int
    """
    _validate_channel("a", a)
    if a == 0:
        _validate_channel("r", r)
        _validate_channel("g", g)
        _validate_channel("b", b)
        return EMPTY
    return Color.opaque(r, g, b)


def from_rgba_tuple(rgba: RgbaColor) -> Color:
    """Classify an (r, g, b, a) tuple, e.g. a pixel read from a PIL image."""
    if len(rgba) != 4:
        raise ValueError(f"Expected 4 channels, got {len(rgba)}")
    r, g, b, a = rgba
    return from_channels(r, g, b, a)


def from_hex(value: str) -> Color:
    """
    Parse a color picker value.

    Picker colors are always fully opaque.

    Args:
        value: Color string in '#rrggbb' form (leading '#' optional)

    Returns:
        Opaque Color

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = _HEX_PATTERN.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}. Expected '#rrggbb'")
    digits = match.group(1)
    return Color.opaque(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def to_hex(color: Color) -> str:
    """
    Format a color as '#rrggbb'.

    Raises:
        ValueError: If the color is EMPTY (it has no hex form)
    """
    if color.empty:
        raise ValueError("The empty color has no hex representation")
    return "#{:02x}{:02x}{:02x}".format(color.r, color.g, color.b)


def to_rgba(color: Color) -> RgbaColor:
    """Render a color as RGBA; EMPTY is fully transparent."""
    if color.empty:
        return TRANSPARENT_RGBA
    return (color.r, color.g, color.b, CHANNEL_MAX)

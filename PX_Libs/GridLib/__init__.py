"""
GridLib - Pixel state for Pixel Pad

This module provides the color model and the fixed-size grid that owns
all pixel state.
"""

from PX_Libs.GridLib.color_model import (
    EMPTY,
    Color,
    RgbaColor,
    colors_equal,
    from_channels,
    from_hex,
    from_rgba_tuple,
    to_hex,
    to_rgba,
)
from PX_Libs.GridLib.pixel_grid import OutOfRangeError, PixelGrid

__all__ = [
    "EMPTY",
    "Color",
    "RgbaColor",
    "colors_equal",
    "from_channels",
    "from_hex",
    "from_rgba_tuple",
    "to_hex",
    "to_rgba",
    "OutOfRangeError",
    "PixelGrid",
]

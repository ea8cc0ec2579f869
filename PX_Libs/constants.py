"""
Constants and configuration values for Pixel Pad.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

from dataclasses import dataclass

# Grid constants
GRID_SIZE = 32
MIN_GRID_SIZE = 1

# Display constants
DISPLAY_SIZE = 512
DEFAULT_WINDOW_WIDTH = 760
DEFAULT_WINDOW_HEIGHT = 600

# Export constants
EXPORT_SCALE = DISPLAY_SIZE // GRID_SIZE
DEFAULT_EXPORT_FILENAME = "my_pixel_art.png"
DEFAULT_EXPORT_FORMAT = "PNG"

# Color constants
CHANNEL_MIN = 0
CHANNEL_MAX = 255
DEFAULT_COLOR_HEX = "#000000"
TRANSPARENT_RGBA = (0, 0, 0, 0)

# Checkerboard drawn behind empty cells (Qt color strings)
CHECKER_LIGHT_COLOR = "#ffffff"
CHECKER_DARK_COLOR = "#d9d9d9"
GRID_LINE_COLOR = "#eeeeee"

# Tool names
TOOL_PENCIL = "pencil"
TOOL_ERASER = "eraser"
TOOL_BUCKET = "bucket"


@dataclass
class EditorConfig:
    """Configuration for an editor session.

    Attributes:
        grid_size: Cells per side of the square grid
        display_size: On-screen size of the canvas in screen pixels
        export_scale: Upscale factor used when exporting the grid
    """
    grid_size: int = GRID_SIZE
    display_size: int = DISPLAY_SIZE
    export_scale: int = EXPORT_SCALE

    def __post_init__(self) -> None:
        for field_name in ("grid_size", "display_size", "export_scale"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{field_name} must be an int, got {type(value)}")
            if value < MIN_GRID_SIZE:
                raise ValueError(f"{field_name} must be >= {MIN_GRID_SIZE}, got {value}")

    @property
    def cell_display_size(self) -> float:
        """Screen pixels covered by one grid cell."""
        return self.display_size / self.grid_size

"""
ExportLib - Rendering and export

This module turns the pixel grid into RGBA images for display and
writes upscaled PNG downloads.
"""

from PX_Libs.ExportLib.export_adapter import (
    export_png,
    grid_to_array,
    grid_to_image,
    render_grid,
)

__all__ = [
    "export_png",
    "grid_to_array",
    "grid_to_image",
    "render_grid",
]

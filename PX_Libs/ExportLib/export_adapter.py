"""
Export operations for Pixel Pad.

This module renders the pixel grid into RGBA images and writes PNG files.
Rendering only reads the grid. Upscaling uses nearest-neighbour sampling so
every cell becomes a solid K x K block with hard edges.

Functions:
    grid_to_array: Grid as an (N, N, 4) uint8 array
    grid_to_image: Grid as an N x N RGBA PIL image
    render_grid: Grid upscaled by an integer factor
    export_png: Write the upscaled grid to disk

Example:
    >>> grid = PixelGrid(32)
    >>> grid.set(0, 0, Color.opaque(255, 0, 0))
    >>> image = render_grid(grid, scale=16)
    >>> image.size
    (512, 512)
    >>> export_png(grid, Path("my_pixel_art.png"))
"""

import logging
import numbers
from pathlib import Path
from typing import Any, Union

import numpy as np
from PIL import Image

from PX_Libs.GridLib.color_model import to_rgba
from PX_Libs.GridLib.pixel_grid import PixelGrid
from PX_Libs.constants import (
    DEFAULT_EXPORT_FILENAME,
    DEFAULT_EXPORT_FORMAT,
    EXPORT_SCALE,
)

logger = logging.getLogger(__name__)


def _validate_scale(scale: int) -> None:
    if isinstance(scale, bool) or not isinstance(scale, numbers.Integral):
        raise TypeError(f"scale must be an int, got {type(scale)}")
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")


def grid_to_array(grid: PixelGrid) -> np.ndarray:
    """
    Convert the grid to an RGBA array.

    Args:
        grid: Grid to read

    Returns:
        uint8 array of shape (N, N, 4), indexed [y, x]; EMPTY cells are (0, 0, 0, 0)
    """
    pixels = np.array(
        [[to_rgba(color) for color in row] for row in grid.snapshot()],
        dtype=np.uint8,
    )
    return pixels


def grid_to_image(grid: PixelGrid) -> Any:
    """Convert the grid to an N x N RGBA PIL Image, one pixel per cell."""
    return Image.fromarray(grid_to_array(grid))


def render_grid(grid: PixelGrid, scale: int = EXPORT_SCALE) -> Any:
    """
    Render the grid at an integer upscale factor.

    Args:
        grid: Grid to read
        scale: Screen pixels per cell side (K)

    Returns:
        RGBA PIL Image of size (N * K, N * K). Pixel (i, j) has the color of
        cell (i // K, j // K); EMPTY cells are fully transparent.

    Raises:
        ValueError: If scale < 1
        TypeError: If scale is not an int
    """
    _validate_scale(scale)
    scale = int(scale)

    image = grid_to_image(grid)
    if scale == 1:
        return image

    size = grid.dimensions() * scale
    return image.resize((size, size), resample=Image.NEAREST)


def export_png(
    grid: PixelGrid,
    output_path: Union[str, Path] = DEFAULT_EXPORT_FILENAME,
    scale: int = EXPORT_SCALE,
) -> Path:
    """
    Save the upscaled grid as a PNG.

    Args:
        grid: Grid to export
        output_path: Destination file, or an existing directory to write
            the default filename into
        scale: Upscale factor

    Returns:
        Path of the written file

    Raises:
        OSError: If the destination directory does not exist or the file
            cannot be written
        ValueError: If scale < 1
    """
    output_path = Path(output_path)
    if output_path.is_dir():
        output_path = output_path / DEFAULT_EXPORT_FILENAME

    output_dir = output_path.parent
    if not output_dir.exists():
        raise OSError(f"Output directory does not exist: {output_dir}")

    if not output_dir.is_dir():
        raise OSError(f"Output path is not a directory: {output_dir}")

    image = render_grid(grid, scale)
    image.save(output_path, format=DEFAULT_EXPORT_FORMAT)

    logger.info(f"Exported {image.width}x{image.height} image to {output_path}")
    return output_path

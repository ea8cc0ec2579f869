"""
Fixed-size pixel grid for Pixel Pad.

The grid is a square N x N matrix of Color values created fully EMPTY. It is
mutated in place one cell at a time and never resized. Every coordinate is
checked before any write, so a rejected call leaves the grid untouched.

Classes:
    OutOfRangeError: Raised for coordinates outside [0, N)
    PixelGrid: The grid itself
"""

import numbers
from typing import Iterator, List, Tuple

from PX_Libs.GridLib.color_model import EMPTY, Color, colors_equal
from PX_Libs.constants import MIN_GRID_SIZE


class OutOfRangeError(IndexError):
    """A coordinate fell outside the grid."""

    def __init__(self, x, y, size: int):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(
            f"Coordinate ({x}, {y}) is outside the {size}x{size} grid "
            f"(valid range 0-{size - 1})"
        )


class PixelGrid:
    """
    Square grid of colors with bounds-checked access.

    Example:
        >>> grid = PixelGrid(32)
        >>> grid.set(3, 4, Color.opaque(255, 0, 0))
        >>> grid.get(3, 4)
        Color.opaque(255, 0, 0)
        >>> grid.clear(3, 4)
        >>> grid.get(3, 4).is_empty
        True
    """

    def __init__(self, size: int):
        """
        Create an all-EMPTY grid.

        Args:
            size: Cells per side

        Raises:
            ValueError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < MIN_GRID_SIZE:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")

        self._size = size
        self._cells: List[List[Color]] = [[EMPTY] * size for _ in range(size)]

    def __repr__(self) -> str:
        return f"PixelGrid(size={self._size})"

    def dimensions(self) -> int:
        """Return N, the number of cells per side."""
        return self._size

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) addresses a cell of this grid."""
        if isinstance(x, bool) or isinstance(y, bool):
            return False
        if not isinstance(x, numbers.Integral) or not isinstance(y, numbers.Integral):
            return False
        return 0 <= x < self._size and 0 <= y < self._size

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfRangeError(x, y, self._size)

    def get(self, x: int, y: int) -> Color:
        """
        Read a cell.

        Raises:
            OutOfRangeError: If x or y is outside [0, N)
        """
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, color: Color) -> None:
        """
        Overwrite a cell.

        Raises:
            OutOfRangeError: If x or y is outside [0, N)
            TypeError: If color is not a Color
        """
        self._check(x, y)
        if not isinstance(color, Color):
            raise TypeError(f"Expected Color, got {type(color)}")
        self._cells[y][x] = color

    def clear(self, x: int, y: int) -> None:
        """Reset a cell to EMPTY."""
        self.set(x, y, EMPTY)

    def cells(self) -> Iterator[Tuple[int, int, Color]]:
        """Iterate over (x, y, color) in row-major order."""
        for y, row in enumerate(self._cells):
            for x, color in enumerate(row):
                yield x, y, color

    def snapshot(self) -> Tuple[Tuple[Color, ...], ...]:
        """Return an immutable copy of the grid as a tuple of rows."""
        return tuple(tuple(row) for row in self._cells)

    def count(self, color: Color) -> int:
        """Count cells equal to color."""
        return sum(1 for _, _, cell in self.cells() if colors_equal(cell, color))

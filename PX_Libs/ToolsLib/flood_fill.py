"""
Flood fill engine for the bucket tool.

Repaints the maximal 4-connected region of cells sharing the seed's color,
using an explicit LIFO work list instead of recursion. There is no visited
set: each popped cell is re-read, and a cell that no longer matches the
target color (because an earlier pop already painted it) is skipped without
pushing its neighbours. A coordinate can therefore be pushed several times,
so the number of pops exceeds the number of painted cells.

Work is bounded by a pop cap. The default cap is the seed plus every
in-range neighbour push a full-grid fill can make, so a legitimate fill is
never cut short. Passing ``reference_fill_cap(size)`` (exactly N x N pops)
reproduces the smaller historical bound, which does truncate large fills.

Example:
    >>> grid = PixelGrid(8)
    >>> result = flood_fill(grid, 0, 0, Color.opaque(0, 255, 0))
    >>> result.painted, result.pops, result.truncated
    (64, 225, False)

Classes:
    FillResult: Statistics about one fill call

Functions:
    flood_fill: Repaint the connected region around a seed cell
    fill_region: Compute the connected region without mutating the grid
    default_fill_cap: Pop cap that never truncates a fill
    reference_fill_cap: The N x N pop cap
    worst_case_pops: Measure pops for a full-grid fill
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from PX_Libs.GridLib.color_model import Color, colors_equal
from PX_Libs.GridLib.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Neighbour push order: +x, -x, +y, -y. Order changes the traversal only.
NEIGHBOUR_OFFSETS: Tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class FillResult:
    """Outcome of a flood fill.

    Attributes:
        target: The seed's original color
        painted: Number of cells repainted
        pops: Number of work items consumed
        max_stack: Peak length of the work list
        truncated: True if the pop cap stopped the fill with work remaining
    """
    target: Color
    painted: int = 0
    pops: int = 0
    max_stack: int = 0
    truncated: bool = False

    @property
    def absorbed(self) -> int:
        """Pops that found an already-repainted cell."""
        return self.pops - self.painted


def default_fill_cap(size: int) -> int:
    """
    Upper bound on pops for any fill on a size x size grid.

    A full-grid fill pushes the seed once and each painted cell pushes its
    in-range neighbours. The 2 * size * (size - 1) grid edges are each
    pushed from both ends, and every push is popped at most once.
    """
    return 1 + 4 * size * (size - 1)


def reference_fill_cap(size: int) -> int:
    """The N x N pop cap. Truncates fills whose duplicate pushes are frequent."""
    return size * size


def flood_fill(
    grid: PixelGrid,
    seed_x: int,
    seed_y: int,
    new_color: Color,
    max_pops: Optional[int] = None,
) -> FillResult:
    """
    Repaint the 4-connected region of the seed's color with new_color.

    Args:
        grid: Grid to mutate in place
        seed_x: Seed column
        seed_y: Seed row
        new_color: Replacement color
        max_pops: Pop cap (defaults to default_fill_cap(grid size))

    Returns:
        FillResult describing the work done. Filling a region that already
        has new_color is a no-op and returns painted=0, pops=0.

    Raises:
        OutOfRangeError: If the seed is outside the grid (nothing is painted)
        TypeError: If new_color is not a Color
        ValueError: If max_pops is less than 1
    """
    target = grid.get(seed_x, seed_y)
    if not isinstance(new_color, Color):
        raise TypeError(f"Expected Color, got {type(new_color)}")

    result = FillResult(target=target)
    if colors_equal(target, new_color):
        return result

    size = grid.dimensions()
    cap = default_fill_cap(size) if max_pops is None else int(max_pops)
    if cap < 1:
        raise ValueError(f"max_pops must be >= 1, got {max_pops}")

    stack: List[Cell] = [(seed_x, seed_y)]
    result.max_stack = 1

    while stack and result.pops < cap:
        x, y = stack.pop()
        result.pops += 1

        if not grid.in_bounds(x, y):
            continue
        if not colors_equal(grid.get(x, y), target):
            continue

        grid.set(x, y, new_color)
        result.painted += 1

        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size:
                stack.append((nx, ny))

        if len(stack) > result.max_stack:
            result.max_stack = len(stack)

    if stack:
        result.truncated = True
        logger.warning(
            f"Flood fill from ({seed_x}, {seed_y}) stopped at the {cap}-pop cap "
            f"with {len(stack)} cells pending ({result.painted} painted)"
        )
    else:
        logger.debug(
            f"Flood fill from ({seed_x}, {seed_y}) painted {result.painted} cells "
            f"in {result.pops} pops"
        )

    return result


def fill_region(grid: PixelGrid, seed_x: int, seed_y: int) -> Set[Cell]:
    """
    Compute the 4-connected region of the seed's color without painting.

    Args:
        grid: Grid to inspect
        seed_x: Seed column
        seed_y: Seed row

    Returns:
        Set of (x, y) cells in the region, seed included

    Raises:
        OutOfRangeError: If the seed is outside the grid
    """
    target = grid.get(seed_x, seed_y)
    size = grid.dimensions()

    region: Set[Cell] = set()
    stack: List[Cell] = [(seed_x, seed_y)]
    while stack:
        cell = stack.pop()
        if cell in region:
            continue
        x, y = cell
        if not colors_equal(grid.get(x, y), target):
            continue
        region.add(cell)
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and (nx, ny) not in region:
                stack.append((nx, ny))
    return region


def worst_case_pops(size: int) -> FillResult:
    """
    Fill an empty size x size grid from its corner with no effective cap.

    Every cell matches and is reachable, so this is the push multiplicity
    the pop cap has to accommodate.
    """
    grid = PixelGrid(size)
    return flood_fill(grid, 0, 0, Color.opaque(0, 0, 0), max_pops=default_fill_cap(size))

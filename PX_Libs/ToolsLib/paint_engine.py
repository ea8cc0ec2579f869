"""
Paint engine: applies one tool at one grid coordinate.

Pencil sets a cell, eraser clears it, bucket hands the coordinate to the
flood fill engine as its seed. Coordinate errors from the grid propagate
unchanged.

Example:
    >>> grid = PixelGrid(32)
    >>> apply_tool(grid, 1, 2, ToolType.PENCIL, Color.opaque(255, 0, 0))
    >>> apply_tool(grid, 1, 2, ToolType.ERASER)
    >>> apply_tool(grid, 0, 0, "bucket", Color.opaque(0, 0, 255))
"""

from enum import Enum
from typing import Any, Optional

from PX_Libs.GridLib.color_model import Color
from PX_Libs.GridLib.pixel_grid import PixelGrid
from PX_Libs.ToolsLib.flood_fill import FillResult, flood_fill
from PX_Libs.constants import TOOL_BUCKET, TOOL_ERASER, TOOL_PENCIL


class ToolType(Enum):
    PENCIL = TOOL_PENCIL
    ERASER = TOOL_ERASER
    BUCKET = TOOL_BUCKET

    @classmethod
    def parse(cls, value: Any) -> "ToolType":
        """
        Resolve a ToolType from a member or its name.

        Raises:
            ValueError: If value names no tool
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for member in cls:
            if member.value == name:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown tool: {value!r}. Valid tools: {valid}")

    @property
    def label(self) -> str:
        return self.value.capitalize()


def execute_pencil(grid: PixelGrid, x: int, y: int, color: Color) -> None:
    grid.set(x, y, color)


def execute_eraser(grid: PixelGrid, x: int, y: int, color: Optional[Color] = None) -> None:
    grid.clear(x, y)


def execute_bucket(grid: PixelGrid, x: int, y: int, color: Color) -> FillResult:
    return flood_fill(grid, x, y, color)


def apply_tool(
    grid: PixelGrid,
    x: int,
    y: int,
    tool: Any,
    color: Optional[Color] = None,
    registry=None,
) -> Any:
    """
    Apply a tool to the grid.

    Args:
        grid: Grid to mutate
        x: Column
        y: Row
        tool: ToolType member or tool name
        color: Paint color (ignored by the eraser)
        registry: Tool registry to dispatch through (default registry if None)

    Returns:
        None for pencil and eraser, a FillResult for the bucket

    Raises:
        ValueError: If tool is unknown, or color is missing for pencil/bucket
        OutOfRangeError: If (x, y) is outside the grid
    """
    tool_type = ToolType.parse(tool)
    if color is None and tool_type is not ToolType.ERASER:
        raise ValueError(f"Tool '{tool_type.value}' requires a color")

    if registry is None:
        from PX_Libs.ToolsLib.tool_registry import get_default_registry
        registry = get_default_registry()

    return registry.execute(tool_type, grid, x, y, color)

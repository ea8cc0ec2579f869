"""
Tool dispatch between pointer events and the paint engine.

The controller holds the current tool, color and "is drawing" flag, turns
pointer positions into grid coordinates and routes each event to the tool
registry. Events that land outside the grid are dropped, never raised.

Drags only repeat continuous tools (pencil, eraser). The bucket fires once
per press.

Classes:
    ToolState: Current tool, color and drawing flag
    CanvasController: Routes press/move/release events to the grid

Functions:
    map_pointer_to_cell: Floor-divide a pointer position into a grid cell
    clear_all: Reset every cell of a grid to EMPTY
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from PX_Libs.GridLib.color_model import Color, from_hex, to_hex
from PX_Libs.GridLib.pixel_grid import PixelGrid
from PX_Libs.ToolsLib.paint_engine import ToolType, apply_tool
from PX_Libs.ToolsLib.tool_registry import ToolExecutorRegistry, get_default_registry
from PX_Libs.constants import DEFAULT_COLOR_HEX

logger = logging.getLogger(__name__)


def map_pointer_to_cell(
    pointer_x: float,
    pointer_y: float,
    surface_width: float,
    surface_height: float,
    grid_size: int,
) -> Optional[Tuple[int, int]]:
    """
    Map a pointer position on the display surface to a grid cell.

    Args:
        pointer_x: Pointer x relative to the surface's left edge
        pointer_y: Pointer y relative to the surface's top edge
        surface_width: Displayed width of the canvas
        surface_height: Displayed height of the canvas
        grid_size: Cells per side

    Returns:
        (x, y) cell, or None if the pointer is outside the grid

    Raises:
        ValueError: If the surface has no area
    """
    if surface_width <= 0 or surface_height <= 0:
        raise ValueError(
            f"Surface dimensions must be positive, got {surface_width}x{surface_height}"
        )

    x = math.floor(pointer_x / (surface_width / grid_size))
    y = math.floor(pointer_y / (surface_height / grid_size))

    if x < 0 or x >= grid_size or y < 0 or y >= grid_size:
        return None
    return x, y


def clear_all(grid: PixelGrid) -> None:
    """Reset every cell to EMPTY."""
    size = grid.dimensions()
    for y in range(size):
        for x in range(size):
            grid.clear(x, y)


@dataclass
class ToolState:
    tool: ToolType = ToolType.PENCIL
    is_drawing: bool = False
    color: Color = field(default_factory=lambda: from_hex(DEFAULT_COLOR_HEX))


class CanvasController:
    """
    Routes editor input events to the grid.

    Example:
        >>> controller = CanvasController(PixelGrid(32))
        >>> controller.set_color("#ff0000")
        >>> controller.press(4, 4)
        >>> controller.move(5, 4)
        >>> controller.release()
    """

    def __init__(
        self,
        grid: PixelGrid,
        state: Optional[ToolState] = None,
        registry: Optional[ToolExecutorRegistry] = None,
    ):
        self.grid = grid
        self.state = state if state is not None else ToolState()
        self.registry = registry if registry is not None else get_default_registry()

    @property
    def tool(self) -> ToolType:
        return self.state.tool

    @property
    def color(self) -> Color:
        return self.state.color

    @property
    def is_drawing(self) -> bool:
        return self.state.is_drawing

    def set_tool(self, tool: Any) -> ToolType:
        """Switch tools. Grid contents are left as they are."""
        self.state.tool = ToolType.parse(tool)
        logger.debug(f"Selected tool: {self.state.tool.value}")
        return self.state.tool

    def set_color(self, color: Any) -> Color:
        """
        Set the paint color from a Color or a '#rrggbb' string.

        Raises:
            ValueError: If the color is EMPTY or not a valid hex string
        """
        if isinstance(color, Color):
            if color.is_empty:
                raise ValueError("Paint color must be opaque")
            self.state.color = color
        else:
            self.state.color = from_hex(color)
        logger.debug(f"Selected color: {to_hex(self.state.color)}")
        return self.state.color

    def _apply(self, x: int, y: int) -> Any:
        logger.debug(f"Applying {self.state.tool.value} at ({x}, {y})")
        return apply_tool(
            self.grid, x, y, self.state.tool, self.state.color, registry=self.registry
        )

    def press(self, x: int, y: int) -> Any:
        """Start drawing and apply the current tool once."""
        self.state.is_drawing = True
        return self._apply(x, y)

    def move(self, x: int, y: int) -> Any:
        """Apply a continuous tool while drawing; otherwise do nothing."""
        if not self.state.is_drawing:
            return None
        if not self.registry.is_continuous(self.state.tool):
            return None
        return self._apply(x, y)

    def release(self) -> None:
        self.state.is_drawing = False

    def leave(self) -> None:
        """The pointer left the canvas; ends any drag."""
        self.state.is_drawing = False

    def press_pointer(
        self,
        pointer_x: float,
        pointer_y: float,
        surface_width: float,
        surface_height: float,
    ) -> Any:
        """
        Press at a raw pointer position.

        Off-grid presses still start a drag so that moving back onto the
        canvas keeps painting, matching press-then-drag behaviour.
        """
        self.state.is_drawing = True
        cell = map_pointer_to_cell(
            pointer_x, pointer_y, surface_width, surface_height, self.grid.dimensions()
        )
        if cell is None:
            return None
        return self._apply(*cell)

    def move_pointer(
        self,
        pointer_x: float,
        pointer_y: float,
        surface_width: float,
        surface_height: float,
    ) -> Any:
        """Move to a raw pointer position; off-grid positions are dropped."""
        cell = map_pointer_to_cell(
            pointer_x, pointer_y, surface_width, surface_height, self.grid.dimensions()
        )
        if cell is None:
            return None
        return self.move(*cell)

    def clear_canvas(self) -> None:
        clear_all(self.grid)
        logger.info("Canvas cleared")

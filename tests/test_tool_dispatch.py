"""
Unit tests for tool_dispatch module.

Tests pointer-to-cell mapping, tool and color selection, press/drag/release
routing and clearing the canvas.
"""

import pytest

from PX_Libs.GridLib.color_model import EMPTY, Color
from PX_Libs.GridLib.pixel_grid import PixelGrid
from PX_Libs.ToolsLib.flood_fill import FillResult
from PX_Libs.ToolsLib.paint_engine import ToolType
from PX_Libs.ToolsLib.tool_dispatch import (
    CanvasController,
    ToolState,
    clear_all,
    map_pointer_to_cell,
)


@pytest.fixture
def controller(grid):
    return CanvasController(grid)


class TestMapPointerToCell:
    """Tests for map_pointer_to_cell function."""

    def test_floor_divides(self):
        # 512px surface, 32 cells: 16px per cell
        assert map_pointer_to_cell(0, 0, 512, 512, 32) == (0, 0)
        assert map_pointer_to_cell(15.9, 16, 512, 512, 32) == (0, 1)
        assert map_pointer_to_cell(511, 511, 512, 512, 32) == (31, 31)

    def test_non_square_surface(self):
        assert map_pointer_to_cell(50, 50, 100, 200, 4) == (2, 1)

    @pytest.mark.parametrize("px, py", [(-1, 0), (0, -0.5), (512, 0), (0, 512), (900, 900)])
    def test_off_grid_returns_none(self, px, py):
        assert map_pointer_to_cell(px, py, 512, 512, 32) is None

    def test_rejects_empty_surface(self):
        with pytest.raises(ValueError):
            map_pointer_to_cell(1, 1, 0, 512, 32)


class TestToolState:
    """Tests for ToolState defaults."""

    def test_defaults(self):
        state = ToolState()

        assert state.tool is ToolType.PENCIL
        assert state.is_drawing is False
        assert state.color == Color.opaque(0, 0, 0)


class TestSelection:
    """Tests for tool and color selection."""

    def test_set_tool_does_not_touch_grid(self, controller, red):
        controller.grid.set(1, 1, red)
        before = controller.grid.snapshot()

        controller.set_tool("bucket")
        controller.set_tool(ToolType.ERASER)

        assert controller.tool is ToolType.ERASER
        assert controller.grid.snapshot() == before

    def test_set_tool_unknown(self, controller):
        with pytest.raises(ValueError):
            controller.set_tool("airbrush")

    def test_set_color_from_hex(self, controller):
        controller.set_color("#00ff00")

        assert controller.color == Color.opaque(0, 255, 0)

    def test_set_color_rejects_empty(self, controller):
        with pytest.raises(ValueError):
            controller.set_color(EMPTY)


class TestPointerEvents:
    """Tests for press, move and release routing."""

    def test_press_paints_once(self, controller, red):
        controller.set_color(red)

        controller.press(2, 2)

        assert controller.is_drawing
        assert controller.grid.get(2, 2) == red
        assert controller.grid.count(red) == 1

    def test_drag_paints_in_order(self, controller, red, blue):
        controller.set_color(red)
        controller.press(0, 0)
        controller.move(1, 0)
        controller.set_color(blue)
        controller.move(1, 0)
        controller.release()

        assert controller.grid.get(0, 0) == red
        assert controller.grid.get(1, 0) == blue
        assert not controller.is_drawing

    def test_move_without_press_does_nothing(self, controller, red):
        controller.set_color(red)

        assert controller.move(3, 3) is None
        assert controller.grid.count(EMPTY) == 64

    def test_release_stops_drag(self, controller, red):
        controller.set_color(red)
        controller.press(0, 0)
        controller.release()
        controller.move(5, 5)

        assert controller.grid.get(5, 5) is EMPTY

    def test_leave_stops_drag(self, controller, red):
        controller.set_color(red)
        controller.press(0, 0)
        controller.leave()
        controller.move(5, 5)

        assert controller.grid.get(5, 5) is EMPTY

    def test_eraser_drag(self, controller, red):
        for x in range(4):
            controller.grid.set(x, 0, red)
        controller.set_tool("eraser")

        controller.press(0, 0)
        controller.move(1, 0)
        controller.move(2, 0)
        controller.release()

        assert controller.grid.count(red) == 1
        assert controller.grid.get(3, 0) == red

    def test_bucket_fires_once_per_press(self, controller, red, blue):
        controller.set_tool(ToolType.BUCKET)
        controller.set_color(red)

        result = controller.press(0, 0)
        controller.set_color(blue)
        moved = controller.move(4, 4)

        assert isinstance(result, FillResult)
        assert moved is None
        assert controller.grid.count(red) == 64

    def test_press_pointer_maps_coordinates(self, controller, red):
        controller.set_color(red)

        controller.press_pointer(130, 70, 512, 512)

        # 512 / 8 = 64px per cell
        assert controller.grid.get(2, 1) == red

    def test_off_grid_pointer_is_dropped(self, controller, red):
        controller.set_color(red)

        assert controller.press_pointer(-5, 10, 512, 512) is None
        assert controller.grid.count(EMPTY) == 64
        assert controller.is_drawing

    def test_move_pointer_continues_drag(self, controller, red):
        controller.set_color(red)
        controller.press_pointer(600, 600, 512, 512)

        controller.move_pointer(10, 10, 512, 512)
        controller.move_pointer(700, 10, 512, 512)

        assert controller.grid.get(0, 0) == red
        assert controller.grid.count(red) == 1

    def test_custom_state(self, grid, red):
        state = ToolState(tool=ToolType.BUCKET, color=red)
        controller = CanvasController(grid, state=state)

        controller.press(0, 0)

        assert grid.count(red) == 64


class TestClear:
    """Tests for clearing the canvas."""

    def test_clear_all(self, grid, red):
        grid.set(0, 0, red)
        grid.set(7, 7, red)

        clear_all(grid)

        assert grid.count(EMPTY) == 64

    def test_controller_clear_canvas(self, controller, red):
        controller.set_color(red)
        controller.set_tool("bucket")
        controller.press(0, 0)
        controller.release()

        controller.clear_canvas()

        assert controller.grid.count(EMPTY) == 64
        assert controller.tool is ToolType.BUCKET

"""
ToolsLib - Editing tools for Pixel Pad

This module provides the paint engine (pencil, eraser), the flood fill
engine (bucket), the tool executor registry and the pointer-event
dispatch used by the editor window.
"""

from PX_Libs.ToolsLib.flood_fill import (
    FillResult,
    default_fill_cap,
    fill_region,
    flood_fill,
    reference_fill_cap,
    worst_case_pops,
)
from PX_Libs.ToolsLib.paint_engine import ToolType, apply_tool
from PX_Libs.ToolsLib.tool_registry import (
    ToolExecutorRegistry,
    get_default_registry,
    register_default_executors,
)
from PX_Libs.ToolsLib.tool_dispatch import (
    CanvasController,
    ToolState,
    clear_all,
    map_pointer_to_cell,
)

__all__ = [
    "FillResult",
    "default_fill_cap",
    "fill_region",
    "flood_fill",
    "reference_fill_cap",
    "worst_case_pops",
    "ToolType",
    "apply_tool",
    "ToolExecutorRegistry",
    "get_default_registry",
    "register_default_executors",
    "CanvasController",
    "ToolState",
    "clear_all",
    "map_pointer_to_cell",
]

"""
Tool Executors Registry.

Maps each tool name to the callable that applies it and to whether it keeps
applying while the pointer drags. Every executor takes ``(grid, x, y, color)``
and mutates the grid at one coordinate (pencil, eraser) or from one seed
(bucket).

Classes:
    ToolExecutorRegistry: Registry for tool executors

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_executors: Register the built-in pencil, eraser and bucket
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from PX_Libs.GridLib.color_model import Color
from PX_Libs.GridLib.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)

# Type alias for executor function
ToolExecutor = Callable[[PixelGrid, int, int, Color], Any]


class ToolExecutorRegistry:
    """
    Registry for tool executors.

    Example:
        >>> registry = ToolExecutorRegistry()
        >>> registry.register("pencil", pencil_executor, continuous=True)
        >>> registry.execute("pencil", grid, 3, 4, Color.opaque(255, 0, 0))
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._executors: Dict[str, ToolExecutor] = {}
        self._continuous: Dict[str, bool] = {}

    @staticmethod
    def _normalize(tool_type: Any) -> str:
        # Accept ToolType members as well as plain names
        value = getattr(tool_type, "value", tool_type)
        return str(value).strip().lower()

    def register(
        self,
        tool_type: Any,
        executor: ToolExecutor,
        continuous: bool = False,
    ) -> None:
        """
        Register a tool executor.

        Args:
            tool_type: Unique tool name (e.g., "pencil") or ToolType member
            executor: Callable accepting (grid, x, y, color)
            continuous: True if the tool keeps applying while the pointer drags

        Raises:
            ValueError: If tool_type is empty or executor is not callable
            RuntimeError: If tool_type is already registered
        """
        tool_type = self._normalize(tool_type)

        if not tool_type:
            raise ValueError("tool_type cannot be empty")

        if not callable(executor):
            raise ValueError(f"executor must be callable, got {type(executor)}")

        if tool_type in self._executors:
            raise RuntimeError(f"Tool '{tool_type}' is already registered")

        self._executors[tool_type] = executor
        self._continuous[tool_type] = bool(continuous)

        logger.debug(f"Registered executor for tool: {tool_type}")

    def get_executor(self, tool_type: Any) -> ToolExecutor:
        """
        Get the executor for a tool.

        Raises:
            KeyError: If tool_type is not registered
        """
        tool_type = self._normalize(tool_type)

        if tool_type not in self._executors:
            available = ", ".join(self.list_tool_types())
            raise KeyError(
                f"No executor registered for tool '{tool_type}'. "
                f"Available tools: {available}"
            )

        return self._executors[tool_type]

    def execute(
        self,
        tool_type: Any,
        grid: PixelGrid,
        x: int,
        y: int,
        color: Color,
    ) -> Any:
        """
        Apply a tool by looking up its executor.

        Returns:
            Whatever the executor returns (a FillResult for the bucket)

        Raises:
            KeyError: If tool_type is not registered
            OutOfRangeError: Propagated unchanged from the grid
        """
        executor = self.get_executor(tool_type)
        return executor(grid, x, y, color)

    def is_continuous(self, tool_type: Any) -> bool:
        """
        Whether the tool applies on every pointer move while drawing.

        Raises:
            KeyError: If tool_type is not registered
        """
        self.get_executor(tool_type)
        return self._continuous[self._normalize(tool_type)]

    def list_tool_types(self) -> List[str]:
        """Sorted list of registered tool names."""
        return sorted(self._executors.keys())


# Global singleton registry
_default_registry: Optional[ToolExecutorRegistry] = None


def get_default_registry() -> ToolExecutorRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in tools.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = ToolExecutorRegistry()
        register_default_executors(_default_registry)

    return _default_registry


def register_default_executors(registry: ToolExecutorRegistry) -> None:
    """
    Register the built-in tools. Pencil and eraser repeat on drag, the
    bucket fires once per press.
    """
    from PX_Libs.ToolsLib.paint_engine import (
        ToolType,
        execute_bucket,
        execute_eraser,
        execute_pencil,
    )

    registry.register(ToolType.PENCIL, execute_pencil, continuous=True)
    registry.register(ToolType.ERASER, execute_eraser, continuous=True)
    registry.register(ToolType.BUCKET, execute_bucket, continuous=False)

    logger.info("Registered default tool executors")

"""
EditorLib - PyQt5 user interface

This module provides the editor window and the pixel canvas widget
that route mouse input to the tools.
"""

from PX_Libs.EditorLib.pixel_editor_window import PixelCanvas, PixelEditorWindow

__all__ = [
    "PixelCanvas",
    "PixelEditorWindow",
]

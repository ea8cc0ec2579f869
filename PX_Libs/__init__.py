"""
PX_Libs - Pixel Pad Library Modules

This package contains core functionality for the Pixel Pad editor,
organized into specialized sub-packages:

- GridLib: Color model and the fixed-size pixel grid
- ToolsLib: Pencil/eraser paint engine, flood fill, tool registry and dispatch
- ExportLib: Rendering the grid into upscaled RGBA images and PNG files
- EditorLib: PyQt5 editor window
"""

__version__ = "0.1.0"

from pathlib import Path
from typing import Any, Dict, Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QPainter, QPixmap
from PyQt5.QtWidgets import (
    QButtonGroup,
    QColorDialog,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from PX_Libs.ExportLib.export_adapter import export_png, render_grid
from PX_Libs.GridLib.color_model import from_hex, to_hex
from PX_Libs.GridLib.pixel_grid import PixelGrid
from PX_Libs.ToolsLib.paint_engine import ToolType
from PX_Libs.ToolsLib.tool_dispatch import CanvasController
from PX_Libs.constants import (
    CHECKER_DARK_COLOR,
    CHECKER_LIGHT_COLOR,
    DEFAULT_EXPORT_FILENAME,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    EditorConfig,
)


class PixelCanvas(QWidget):
    """Displays the grid scaled up and forwards mouse events to the controller."""

    def __init__(self, controller: CanvasController, config: EditorConfig, parent=None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.config = config
        self.setFixedSize(config.display_size, config.display_size)
        self.setMouseTracking(False)
        self._pixmap: Optional[QPixmap] = None
        self.refresh()

    def refresh(self) -> None:
        # Rendered at scale 1 and stretched by the painter without smoothing
        image = render_grid(self.controller.grid, scale=1)
        pixmap = QPixmap()
        pixmap.loadFromData(self._to_png_bytes(image), "PNG")
        self._pixmap = pixmap
        self.update()

    def _to_png_bytes(self, image: Any) -> bytes:
        from io import BytesIO

        buffer = BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform, False)

        cell = self.config.cell_display_size
        size = self.controller.grid.dimensions()
        light = QColor(CHECKER_LIGHT_COLOR)
        dark = QColor(CHECKER_DARK_COLOR)
        for y in range(size):
            for x in range(size):
                painter.fillRect(
                    int(x * cell), int(y * cell), int(cell) + 1, int(cell) + 1,
                    light if (x + y) % 2 == 0 else dark,
                )

        if self._pixmap is not None:
            painter.drawPixmap(self.rect(), self._pixmap)
        painter.end()

    def mousePressEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            return
        self.controller.press_pointer(event.x(), event.y(), self.width(), self.height())
        self.refresh()

    def mouseMoveEvent(self, event) -> None:
        if not self.controller.is_drawing:
            return
        self.controller.move_pointer(event.x(), event.y(), self.width(), self.height())
        self.refresh()

    def mouseReleaseEvent(self, event) -> None:
        if event.button() != Qt.LeftButton:
            return
        self.controller.release()

    def leaveEvent(self, event) -> None:
        self.controller.leave()
        super().leaveEvent(event)


class PixelEditorWindow(QMainWindow):
    def __init__(self, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self.config = config if config is not None else EditorConfig()
        self.setWindowTitle("Pixel Pad")
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.grid = PixelGrid(self.config.grid_size)
        self.controller = CanvasController(self.grid)
        self.tool_buttons: Dict[ToolType, QPushButton] = {}

        self._build_ui()
        self._connect_signals()
        self.set_tool(ToolType.PENCIL)

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QHBoxLayout(central)
        controls_col = QVBoxLayout()

        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)
        for tool in ToolType:
            button = QPushButton(tool.label)
            button.setCheckable(True)
            self.tool_group.addButton(button)
            self.tool_buttons[tool] = button
            controls_col.addWidget(button)

        self.label_current_tool = QLabel("Current tool: Pencil")
        self.btn_pick_color = QPushButton("Pick Color")
        self.label_color = QLabel()
        self.label_color.setFixedHeight(24)
        self.btn_clear = QPushButton("Clear")
        self.btn_download = QPushButton("Download PNG")

        controls_col.addWidget(self.label_current_tool)
        controls_col.addWidget(self.btn_pick_color)
        controls_col.addWidget(self.label_color)
        controls_col.addStretch(1)
        controls_col.addWidget(self.btn_clear)
        controls_col.addWidget(self.btn_download)

        self.canvas = PixelCanvas(self.controller, self.config)

        root.addLayout(controls_col, stretch=0)
        root.addWidget(self.canvas, stretch=1, alignment=Qt.AlignCenter)

        self._update_color_swatch()

    def _connect_signals(self) -> None:
        for tool, button in self.tool_buttons.items():
            button.clicked.connect(lambda _checked, t=tool: self.set_tool(t))
        self.btn_pick_color.clicked.connect(self.pick_color)
        self.btn_clear.clicked.connect(self.clear_canvas)
        self.btn_download.clicked.connect(self.download_art)

    def set_tool(self, tool: ToolType) -> None:
        tool = self.controller.set_tool(tool)
        self.tool_buttons[tool].setChecked(True)
        self.label_current_tool.setText(f"Current tool: {tool.label}")

    def pick_color(self) -> None:
        current = QColor(to_hex(self.controller.color))
        color = QColorDialog.getColor(current, self, "Pick paint color")
        if not color.isValid():
            return

        self.controller.set_color(from_hex(color.name()))
        self._update_color_swatch()

    def _update_color_swatch(self) -> None:
        hex_value = to_hex(self.controller.color)
        self.label_color.setText(hex_value)
        self.label_color.setStyleSheet(
            f"background-color: {hex_value}; border: 1px solid #888;"
        )

    def clear_canvas(self) -> None:
        self.controller.clear_canvas()
        self.canvas.refresh()

    def download_art(self) -> None:
        save_path, _ = QFileDialog.getSaveFileName(
            self,
            "Download Pixel Art",
            DEFAULT_EXPORT_FILENAME,
            "PNG Images (*.png)",
        )
        if not save_path:
            return

        try:
            written = export_png(self.grid, Path(save_path), scale=self.config.export_scale)
        except OSError as e:
            QMessageBox.warning(self, "Export Failed", str(e))
            return

        QMessageBox.information(self, "Success", f"Saved {written.name}")

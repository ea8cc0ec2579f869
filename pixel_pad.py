import logging
import sys

from PyQt5.QtWidgets import QApplication

from PX_Libs.EditorLib.pixel_editor_window import PixelEditorWindow
from PX_Libs.constants import EditorConfig


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = PixelEditorWindow(EditorConfig())
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()

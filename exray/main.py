"""
Entry point and main application window for EXRay.

This module defines the `MainWindow`, the top-level Qt window that owns the
application context (`CurrentContext`), the single `ColorspaceCatalog` and
the `ColorTransformer` built on it, and the viewer page.

Every user interaction ends in `MainWindow.refresh()`, which runs the
display pipeline once for the current selection:

    extract -> input->working -> grade -> working->display -> bitmap

Run this module directly via:

    python -m exray.main [image]

or call the top-level `main()` function.
"""
import logging
import sys

from PyQt5.QtWidgets import QApplication, QMainWindow

from . import config
from .color_ops import ColorTransformer
from .interface import tools as t
from .models import CurrentContext
from .ui import ViewActions, ViewerPage

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class MainWindow(QMainWindow):
    """
    Main window that:
      - Loads the color configuration once and injects it into the context
      - Hosts the ViewerPage
      - Routes viewport clicks through the page's ToolDispatcher
    """
    def __init__(self, parent=None, catalog=None):
        super().__init__(parent)

        self.setWindowTitle("EXRay")
        self.resize(1400, 900)

        self.cxt = CurrentContext()
        self.cxt.catalog = catalog if catalog is not None else t.load_catalog()
        self.transformer = ColorTransformer(self.cxt.catalog)

        self.page = ViewerPage(self)
        self.page.cxt = self.cxt
        self.setCentralWidget(self.page)

        self.view_actions = ViewActions(self.cxt, self.menuBar(), self)

        self.page.activate()
        self.page.dispatcher.set_right_click(self.view_actions.show_context_menu)
        self.page.dispatcher.set_single_click(self.view_actions.show_pixel)

        valid_state, msg = self.cxt.requires(self.cxt.CATALOG)
        self.statusBar().showMessage("Ready." if valid_state else msg)

    def reload_catalog(self):
        """Rebuild the catalog from the configured location and re-inject it."""
        self.cxt.catalog = t.load_catalog(config.con_dict["ocio_config"])
        self.transformer = ColorTransformer(self.cxt.catalog)

    def refresh(self):
        """Re-run the display pipeline and update the page."""
        if self.cxt.image is None:
            self.page.update_display(None)
            self.setWindowTitle("EXRay")
            return
        self.setWindowTitle(f"EXRay - {self.cxt.image.basename}")
        result = t.render_context(self.cxt, self.transformer)
        self.page.update_display(result)
        if result is None or result.ok:
            self.statusBar().showMessage(self.cxt.selection.label)
        else:
            self.statusBar().showMessage(result.message)

    def closeEvent(self, event):
        self.page.teardown()
        super().closeEvent(event)


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app = QApplication(sys.argv)
    win = MainWindow()
    if len(sys.argv) > 1:
        win.view_actions.open_image(sys.argv[1])
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

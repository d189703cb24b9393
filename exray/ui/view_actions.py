"""
Callback handler for viewer actions: opening files, settings, image info,
the viewport context menu and the pixel readout.
"""
import logging

from PyQt5.QtGui import QCursor
from PyQt5.QtWidgets import QDialog, QFileDialog

from ..interface import tools as t
from .base_actions import BaseActions
from .context_menu import build_context_menu
from .util_windows import ImageInfoPanel, SettingsDialog, busy_cursor

logger = logging.getLogger(__name__)

IMAGE_FILTER = "Images (*.exr *.hdr *.tif *.tiff *.png *.jpg *.jpeg *.dpx);;All files (*)"


class ViewActions(BaseActions):
    """File, settings and viewport interaction"""

    def stage_menus(self):
        """Define and register menus"""
        self._register_menu('File', [
            ("action", "Open", self.open_image, "Open a multi-channel image", "Ctrl+O"),
            ("action", "Close", self.close_image, "Close the current image", "Ctrl+W"),
            ("separator",),
            ("action", "Quit", self.controller.close, "Quit EXRay", "Ctrl+Q"),
        ])
        self._register_menu('View', [
            ("action", "Info", self.display_info, "Show image properties", "Ctrl+I"),
            ("action", "Settings", self.on_settings,
             "Edit colorspaces, grading and the OCIO config location"),
        ])

    # ------------------------------------------------------------------
    # file handling
    # ------------------------------------------------------------------
    def open_image(self, path=None):
        logger.info("Menu selected: Open")
        if not path:
            path, _ = QFileDialog.getOpenFileName(self.controller, "Open image", "", IMAGE_FILTER)
        if not path:
            return
        try:
            with busy_cursor('loading...', self.controller):
                image = t.load(path)
        except Exception as e:
            logger.error(f"Failed to open image {path}", exc_info=True)
            self._show_error("Open image", f"Failed to open image: {e}")
            return
        if image is None:
            self._show_error("Open image", f"{path} is not a file")
            return
        self.cxt.image = image
        self.cxt.selection = t.initial_selection(image, self.cxt.catalog)
        logger.info(f"Opened {image.basename} with layers {image.layers()}")
        self.controller.refresh()

    def close_image(self):
        logger.info("Menu selected: Close")
        self.cxt.image = None
        self.cxt.extracted = None
        self.controller.refresh()

    # ------------------------------------------------------------------
    # dialogs
    # ------------------------------------------------------------------
    def display_info(self):
        logger.info("Menu selected: Info")
        valid_state, msg = self.cxt.requires(self.cxt.IMAGE)
        if not valid_state:
            logger.warning(msg)
            self._show_error("Info", msg)
            return
        panel = ImageInfoPanel()
        panel.show_image(self.cxt.image)
        panel.setWindowTitle(self.cxt.image.basename)
        panel.resize(520, 360)
        panel.show()
        # keep a reference so the window is not garbage collected
        self._info_window = panel

    def on_settings(self):
        logger.info("Menu selected: Settings")
        dlg = SettingsDialog(self.controller, self.cxt.catalog)
        if dlg.exec() != QDialog.Accepted:
            return
        logger.info(f"Settings changed: {sorted(dlg.changed)}")
        if "ocio_config" in dlg.changed:
            with busy_cursor('loading color config...', self.controller):
                self.controller.reload_catalog()
            valid_state, msg = self.cxt.requires(self.cxt.CATALOG)
            if not valid_state:
                self._show_error("Settings", f"{msg}\n{self.cxt.catalog.error}")
        self.controller.refresh()

    # ------------------------------------------------------------------
    # viewport interaction
    # ------------------------------------------------------------------
    def select(self, selection):
        logger.info(f"Menu selected: {selection.label}")
        self.cxt.selection = selection
        self.controller.refresh()

    def show_context_menu(self, y, x):
        if self.cxt.selection is None:
            self.cxt.selection = t.initial_selection(self.cxt.image, self.cxt.catalog)
        menu = build_context_menu(self.controller, self.cxt.image, self.cxt.catalog,
                                  self.cxt.selection, self.select)
        menu.exec_(QCursor.pos())

    def show_pixel(self, y, x):
        data = self.cxt.extracted
        if data is None or data.is_empty:
            return
        values = ", ".join(f"{name}={value:.4f}" for name, value in data.pixel(y, x))
        self.controller.statusBar().showMessage(f"({x}, {y})  {values}")

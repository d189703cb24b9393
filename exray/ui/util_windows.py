"""
Viewport canvas and auxiliary windows.

Contains the matplotlib-backed image viewport, the image info panel and the
settings dialog.
"""

from contextlib import contextmanager

from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg, NavigationToolbar2QT
from matplotlib.figure import Figure

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QMessageBox,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ..interface import tools as t

BACKGROUND = "#0a0a0a"
COLORSPACE_KEYS = ("working_space", "input_colorspace", "display_colorspace")


@contextmanager
def busy_cursor(msg=None, window=None):
    """Wait cursor (and optional status message) for the duration of a block."""
    status = window.statusBar() if window is not None and hasattr(window, "statusBar") else None
    QApplication.setOverrideCursor(Qt.WaitCursor)
    if status is not None and msg:
        status.showMessage(msg)
    try:
        yield
    finally:
        QApplication.restoreOverrideCursor()
        if status is not None:
            status.clearMessage()


class ImageInfoPanel(QTreeWidget):
    """
    Side panel listing the open image's properties and its channels
    grouped by layer.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setColumnCount(2)
        self.setHeaderLabels(["Property", "Value"])
        self.setAlternatingRowColors(True)

    def show_image(self, image):
        self.clear()
        if image is None:
            return
        props = QTreeWidgetItem(self, ["Image"])
        for key, value in image.metadata.items():
            QTreeWidgetItem(props, [key, str(value)])
        props.setExpanded(True)

        layers = QTreeWidgetItem(self, ["Layers", str(len(image.layers()))])
        for layer in image.layers():
            comps = image.components(layer)[1:]
            QTreeWidgetItem(layers, [layer, " ".join(comps)])
        layers.setExpanded(True)
        self.resizeColumnToContents(0)


class ImageViewport(QWidget):
    """
    Shows the rasterized RGBA bitmap and reports clicks in pixel coordinates.

    Owners assign ``on_single_click(y, x)`` and ``on_right_click(y, x)``,
    normally through a ToolDispatcher. Right clicks outside the image report
    ``(-1, -1)`` so the context menu still opens over empty space.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.bitmap = None
        self.on_single_click = None
        self.on_right_click = None

        self.fig = Figure(figsize=(8, 5), facecolor=BACKGROUND)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.canvas = FigureCanvasQTAgg(self.fig)
        self.toolbar = NavigationToolbar2QT(self.canvas, self)

        box = QVBoxLayout(self)
        box.setContentsMargins(0, 0, 0, 0)
        box.addWidget(self.canvas, 1)
        box.addWidget(self.toolbar)

        self.canvas.mpl_connect("button_press_event", self._on_press)
        self._blank()

    def _blank(self):
        self.ax.clear()
        self.ax.set_facecolor(BACKGROUND)
        self.ax.set_axis_off()

    def show_bitmap(self, bitmap):
        """Display an (H, W, 4) uint8 array, or clear the view for None."""
        self.bitmap = bitmap
        self._blank()
        if bitmap is not None:
            self.ax.imshow(bitmap, origin="upper", interpolation="nearest")
        self.canvas.draw_idle()

    def clear(self):
        self.show_bitmap(None)

    def _pixel_at(self, event):
        if self.bitmap is None or event.inaxes is not self.ax or event.xdata is None:
            return None
        y, x = int(event.ydata + 0.5), int(event.xdata + 0.5)
        h, w = self.bitmap.shape[:2]
        if 0 <= y < h and 0 <= x < w:
            return y, x
        return None

    def _on_press(self, event):
        # pan/zoom own the mouse while active
        if self.toolbar.mode:
            return
        hit = self._pixel_at(event)
        if event.button == 3 and callable(self.on_right_click):
            self.on_right_click(*(hit or (-1, -1)))
        elif event.button == 1 and hit is not None and callable(self.on_single_click):
            self.on_single_click(*hit)


class SettingsDialog(QDialog):
    """
    Form over ``con_dict``. Colorspace settings offer the catalog's names
    in an editable combo box; everything else is free text cast on save.

    ``changed`` holds the keys whose value differs after saving.
    """
    def __init__(self, parent=None, catalog=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.resize(520, 300)
        self.changed = set()
        self._editors = {}

        names = catalog.names() if catalog is not None else []
        form = QFormLayout()
        for key, value in t.get_config().items():
            if key in COLORSPACE_KEYS:
                editor = QComboBox(self)
                editor.setEditable(True)
                editor.addItems(names)
                editor.setCurrentText(str(value))
            else:
                editor = QLineEdit(str(value), self)
            self._editors[key] = editor
            form.addRow(key, editor)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel, self)
        buttons.accepted.connect(self._on_save)
        buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(buttons)

    @staticmethod
    def _text(editor):
        if isinstance(editor, QComboBox):
            return editor.currentText()
        return editor.text()

    def _on_save(self):
        cfg = t.get_config()
        before = dict(cfg)
        for key, editor in self._editors.items():
            text = self._text(editor).strip()
            try:
                t.modify_config(key, text)
            except ValueError:
                cfg.update(before)
                QMessageBox.warning(self, "Settings", f"Invalid value for {key}: {text!r}")
                return
        self.changed = {k for k in cfg if cfg[k] != before[k]}
        self.accept()

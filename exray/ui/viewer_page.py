"""
The viewer page: image viewport on the left, info panel on the right.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QSplitter, QVBoxLayout, QWidget

from ..interface import ToolDispatcher
from ..models import CurrentContext
from .util_windows import ImageInfoPanel, ImageViewport


class ViewerPage(QWidget):
    """
    Hosts the viewport and info panel in a splitter and owns the
    ToolDispatcher for viewport clicks. Call ``teardown()`` before closing.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.cxt = CurrentContext()    # replaced by the main window
        self._dispatcher = None

        self.viewport = ImageViewport(self)
        self.info_panel = ImageInfoPanel(self)

        splitter = QSplitter(Qt.Horizontal, self)
        splitter.addWidget(self.viewport)
        splitter.addWidget(self.info_panel)
        splitter.setStretchFactor(0, 5)
        splitter.setStretchFactor(1, 1)

        lay = QVBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)
        lay.addWidget(splitter)

    @property
    def dispatcher(self) -> ToolDispatcher | None:
        return self._dispatcher

    def activate(self):
        """(Re)create the dispatcher so handlers can be bound."""
        self._dispatcher = ToolDispatcher(self.viewport)

    def teardown(self):
        if self._dispatcher:
            self._dispatcher.clear()

    def update_display(self, result=None):
        """Show a RenderResult's bitmap, or clear the view."""
        image = self.cxt.image if self.cxt is not None else None
        self.info_panel.show_image(image)
        if image is None or result is None:
            self.viewport.clear()
            return
        self.viewport.show_bitmap(result.bitmap)

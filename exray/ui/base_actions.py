"""
Base class for action handlers.

Provides common infrastructure for menu registration and context management.
"""

from PyQt5.QtWidgets import QAction, QMessageBox

from ..models import CurrentContext


class BaseActions:
    """
    Base class for all action handlers.

    Action handlers encapsulate related operations and their menu entries.
    Each handler:
    - Holds a reference to the shared CurrentContext
    - Registers its actions with the window's menu bar
    - Implements callback methods for user actions

    Subclasses must implement stage_menus() to define their UI.
    """

    def __init__(self, context: CurrentContext, menubar, parent=None):
        """
        Initialize the action handler.

        Args:
            context: Shared application context (replaced by the controller on reload)
            menubar: QMenuBar to register menus on
            parent: Parent widget for dialogs (typically MainWindow)
        """
        self.cxt = context
        self.menubar = menubar
        self.controller = parent
        self.actions = {}
        self.stage_menus()

    def stage_menus(self):
        """
        Define and register menu structure.

        Example:
            def stage_menus(self):
                self._register_menu('File', [
                    ("action", "Open", self.open, "Open an image", "Ctrl+O"),
                    ("separator",),
                    ("action", "Quit", self.quit, "Close the viewer"),
                ])
        """
        raise NotImplementedError("Subclasses must implement stage_menus()")

    def _register_menu(self, menu_name: str, entries: list):
        """
        Register a menu of actions with the menu bar.

        Args:
            menu_name: Title of the menu
            entries: List of entries in the format:
                     ("action", label, callback, tooltip)
                     ("action", label, callback, tooltip, shortcut)
                     ("separator",)
        """
        menu = self.menubar.addMenu(menu_name)
        menu.setToolTipsVisible(True)
        for entry in entries:
            if entry[0] == "separator":
                menu.addSeparator()
                continue
            _, label, callback, tooltip, *rest = entry
            act = QAction(label, self.controller)
            act.setToolTip(tooltip)
            if rest:
                act.setShortcut(rest[0])
            act.triggered.connect(lambda _checked=False, cb=callback: cb())
            menu.addAction(act)
            self.actions[label] = act
        return menu

    # ============ Helper Utilities ============

    def _show_error(self, title: str, message: str):
        """Show a consistent error dialog."""
        QMessageBox.warning(self.controller, title, message)

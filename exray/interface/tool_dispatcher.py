"""
Routes viewport mouse events to registered handlers.
"""


class ToolDispatcher:
    """
    Router between the viewport's click hooks and the viewer's handlers.

    The viewport only needs ``on_single_click`` and ``on_right_click``
    attributes; nothing here depends on Qt. Handlers may be rebound at any
    time and ``clear()`` drops them on page teardown.
    """
    def __init__(self, viewport):
        self.viewport = viewport
        self._click = None
        self._right = None
        viewport.on_single_click = lambda y, x: self._dispatch(self._click, y, x)
        viewport.on_right_click = lambda y, x: self._dispatch(self._right, y, x)

    def set_single_click(self, func):
        self._click = func

    def set_right_click(self, func):
        self._right = func

    def clear(self):
        self._click = self._right = None

    @staticmethod
    def _dispatch(handler, y, x):
        if callable(handler):
            handler(y, x)

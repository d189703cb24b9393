"""
UI module for EXRay.

Qt widgets for the viewer:

- ViewerPage:
    The image viewport with its info panel.

- ImageViewport:
    matplotlib-backed canvas showing the color-managed bitmap; reports
    left/right clicks in pixel coordinates.

- build_context_menu:
    The right-click View Layer / Input Colorspace / Output Colorspace menu.

- ViewActions:
    Menu bar actions and the viewport click handlers.
"""

from .context_menu import build_context_menu
from .util_windows import (
    ImageInfoPanel,
    ImageViewport,
    SettingsDialog,
    busy_cursor,
)
from .view_actions import ViewActions
from .viewer_page import ViewerPage

__all__ = [
    "ViewerPage",
    "ViewActions",
    "ImageViewport",
    "ImageInfoPanel",
    "SettingsDialog",
    "build_context_menu",
    "busy_cursor",
]

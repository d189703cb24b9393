"""
EXRay Interface Package
=======================

The thin layer between the Qt widgets and the display pipeline.

It provides:

- ``ToolDispatcher``
  Routes viewport clicks to whichever handler is registered: the context
  menu on right click, the pixel readout on left click.

- ``tools``
  Stateless functions for loading images and the colorspace catalog,
  reading/writing settings, and ``render_selection``, the single entry
  point that turns a ViewSelection into a displayable bitmap.

Typical Usage
-------------
::

    disp = ToolDispatcher(viewport)
    disp.set_right_click(show_menu)

    out = tools.render_selection(image, selection, catalog,
                                 working_space="ACEScg")
"""

from .tool_dispatcher import ToolDispatcher

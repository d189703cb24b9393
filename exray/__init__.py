"""
EXRay application package.

A Qt desktop viewer for multi-channel HDR images (EXR-style, multi-layer).
Any channel family or single component can be displayed through a
color-managed pipeline: input colorspace -> working space -> display
colorspace, driven by an OpenColorIO configuration.

Subpackages
-----------
- color_ops
    The display pipeline core: channel extraction, colorspace catalog,
    color transformer, grading and rasterization. No Qt imports.

- models
    Data structures: ImageSpec, ImageObject, ChannelData, ViewSelection,
    StageResult/Failure and CurrentContext.

- interface
    The thin layer connecting UI gestures to the pipeline: loading,
    settings access, `render_selection`, and the ToolDispatcher.

- ui
    Qt widgets: viewer page, image viewport, context menu and dialogs.

Other modules
-------------
- config
    Single in-memory configuration dictionary (con_dict).

- main
    `MainWindow` and the `main()` launcher.

Typical usage
-------------
    python -m exray.main image.exr

Or without a GUI:

    from exray.interface import tools as t
    image = t.load("image.exr")
    catalog = t.load_catalog()
    out = t.render_selection(image, t.initial_selection(image, catalog),
                             catalog, working_space="ACEScg")
"""

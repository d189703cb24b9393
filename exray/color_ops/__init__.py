"""
EXRay color_ops package.

The display pipeline core, free of any Qt dependency:

- channel_extraction
    Resolve a channel family/component selection into a ChannelData buffer.
- catalog
    ColorspaceCatalog wrapping an OpenColorIO configuration.
- transformer
    ColorTransformer applying colorspace conversions through OCIO processors.
- grading
    Exposure/gamma grade applied in the working space.
- rasterizer
    Float buffer to 8-bit RGBA bitmap.
"""

from .catalog import ColorspaceCatalog
from .channel_extraction import extract
from .grading import grade
from .rasterizer import to_bitmap
from .transformer import ColorTransformer

__all__ = [
    "ColorspaceCatalog",
    "ColorTransformer",
    "extract",
    "grade",
    "to_bitmap",
]

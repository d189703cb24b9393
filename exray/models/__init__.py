"""
EXRay models package.

Core data structures passed between the decoder, the display pipeline and
the Qt widgets.

Classes
-------
ImageSpec
    Width, height, channel count and ordered channel names of an image.
ImageObject
    A decoded image file with a read-only float pixel array.
ChannelData
    Canonical float buffer produced by channel extraction.
ViewSelection
    Channel family, component and colorspace choice from the UI.
StageResult, Failure
    Outcome of a pipeline stage and the reason it degraded.
CurrentContext
    The viewer's current state.
"""

from .results import Failure, StageResult
from .channel_data import ChannelData
from .image_object import ImageObject, ImageSpec
from .context import CurrentContext, ViewSelection

__all__ = [
    "ChannelData",
    "CurrentContext",
    "Failure",
    "ImageObject",
    "ImageSpec",
    "StageResult",
    "ViewSelection",
]

"""
Tracks the active viewer state for the UI.

Holds the open image, the injected colorspace catalog and the current
channel/colorspace selection.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from .channel_data import ChannelData
from .image_object import ImageObject

if TYPE_CHECKING:
    from ..color_ops.catalog import ColorspaceCatalog


@dataclass(frozen=True)
class ViewSelection:
    """
    What the user chose to look at.

    Produced by the context menu, consumed by the pipeline entry point.
    """
    channel_family: str
    component: str
    input_colorspace: str
    output_colorspace: str

    def replace(self, **changes):
        return replace(self, **changes)

    @property
    def label(self) -> str:
        return (f"{self.channel_family}:{self.component} | "
                f"{self.input_colorspace} -> {self.output_colorspace}")


@dataclass
class CurrentContext:
    """
    Lightweight container for the application's current working state.

    Attributes
    ----------
    image : ImageObject | None
        The currently open image.
    catalog : ColorspaceCatalog | None
        Catalog built from the active config, shared read-only.
    selection : ViewSelection | None
        Current channel and colorspace choice.
    extracted : ChannelData | None
        Last extraction result, kept for pixel readouts.
    """
    image: ImageObject | None = None
    catalog: ColorspaceCatalog | None = None
    selection: ViewSelection | None = None
    extracted: ChannelData | None = None

    IMAGE = "image"
    CATALOG = "catalog"

    def requires(self, *needs) -> tuple[bool, str]:
        """Check preconditions for an action; returns (ok, message)."""
        if self.IMAGE in needs and self.image is None:
            return False, "No image is open"
        if self.CATALOG in needs and (self.catalog is None or not self.catalog.is_usable):
            return False, "No color configuration loaded; showing unmanaged pixels"
        return True, ""

    @property
    def summary(self) -> str:
        parts = []
        if self.image is not None:
            parts.append(self.image.basename)
        if self.selection is not None:
            parts.append(self.selection.label)
        return " | ".join(parts) if parts else "(no image)"

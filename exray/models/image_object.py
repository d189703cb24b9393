"""
Representation of a decoded multi-channel image file.

Wraps the OpenImageIO decoder output (spec + one interleaved float read) so
the rest of the viewer only ever sees a flat channel list and a read-only
pixel array.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import OpenImageIO as oiio

from .channels import (
    CANONICAL_CHANNELS,
    COMPONENTS,
    DEFAULT_FAMILY,
    channel_family,
    uses_canonical_channels,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageSpec:
    """
    Shape and channel naming of a decoded image.

    Attributes
    ----------
    width, height : int
        Image dimensions.
    nchannels : int
        Total channel count, the stride of the interleaved pixel buffer.
    channel_names : tuple[str, ...]
        Dot-namespaced channel names in channel-index order.
    """
    width: int
    height: int
    nchannels: int
    channel_names: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "channel_names", tuple(self.channel_names))
        if len(self.channel_names) != self.nchannels:
            raise ValueError(
                f"{len(self.channel_names)} channel names for {self.nchannels} channels")
        if len(set(self.channel_names)) != len(self.channel_names):
            raise ValueError("Channel names must be unique")

    @classmethod
    def from_oiio(cls, spec):
        return cls(width=spec.width, height=spec.height,
                   nchannels=spec.nchannels,
                   channel_names=tuple(spec.channelnames))


@dataclass
class ImageObject:
    """
    A single image opened in the viewer.

    Attributes
    ----------
    path : Path | None
        Source file, None for images built in memory.
    spec : ImageSpec
        Dimensions and channel names.
    pixels : np.ndarray
        float32 array of shape (height, width, nchannels). Marked read-only;
        extraction copies out of it and never writes back.
    """
    path: Path | None
    spec: ImageSpec
    pixels: np.ndarray = field(repr=False, default=None)

    def __post_init__(self):
        if self.path is not None:
            self.path = Path(self.path)
        expected = self.spec.width * self.spec.height * self.spec.nchannels
        pixels = np.asarray(self.pixels, dtype=np.float32)
        if pixels.size != expected:
            raise ValueError(
                f"Pixel buffer holds {pixels.size} samples, spec expects {expected}")
        pixels = pixels.reshape(self.spec.height, self.spec.width, self.spec.nchannels)
        pixels.flags.writeable = False
        self.pixels = pixels

    @property
    def basename(self) -> str:
        return self.path.name if self.path is not None else "<memory>"

    @classmethod
    def from_path(cls, path):
        """
        Decode an image file through OpenImageIO.

        Raises
        ------
        ValueError
            If the file cannot be opened or read.
        """
        p = Path(path)
        inp = oiio.ImageInput.open(str(p))
        if inp is None:
            raise ValueError(f"File {p} could not be opened: {oiio.geterror()}")
        try:
            spec = ImageSpec.from_oiio(inp.spec())
            pixels = inp.read_image("float")
            if pixels is None:
                raise ValueError(f"Failed to read pixels from {p}: {inp.geterror()}")
        finally:
            inp.close()
        logger.info(f"Opened {p.name}: {spec.width}x{spec.height}, {spec.nchannels} channels")
        return cls(path=p, spec=spec, pixels=pixels)

    # ------------------------------------------------------------------
    # layer / component enumeration for the context menu
    # ------------------------------------------------------------------
    def layers(self) -> list[str]:
        """
        Distinct channel families in first-appearance order.

        Bare canonical channels (R, G, B, A) are grouped under a single
        leading ``"default"`` entry instead of appearing as four layers.
        A file's own ``default.*`` channels share that entry and are only
        selectable when the image has no bare canonical channels.
        """
        names = self.spec.channel_names
        out = []
        if any(n in CANONICAL_CHANNELS for n in names):
            out.append(DEFAULT_FAMILY)
        for name in names:
            if name in CANONICAL_CHANNELS:
                continue
            fam = channel_family(name)
            if fam not in out:
                out.append(fam)
        return out

    def components(self, family: str) -> list[str]:
        """Component tokens that resolve for ``family``, always led by 'all'."""
        names = self.spec.channel_names
        comps = ["all"]
        if uses_canonical_channels(names, family):
            present = {n for n in names if n in CANONICAL_CHANNELS}
            comps += [c for c in COMPONENTS if c.upper() in present]
            return comps
        members = [n for n in names if channel_family(n) == family]
        if len(members) == 1 and members[0] == family:
            return comps + [family]
        comps += [c for c in COMPONENTS if f"{family}.{c}" in members]
        return comps

    @property
    def metadata(self) -> dict:
        return {
            "file": str(self.path) if self.path is not None else self.basename,
            "width": self.spec.width,
            "height": self.spec.height,
            "channels": self.spec.nchannels,
            "channel names": ", ".join(self.spec.channel_names),
            "layers": ", ".join(self.layers()),
        }

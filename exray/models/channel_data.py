"""
Canonical float pixel buffer passed between the pipeline stages.
"""

from dataclasses import dataclass, field

import numpy as np


@dataclass
class ChannelData:
    """
    Freshly allocated float buffer produced by channel extraction.

    Parameters
    ----------
    width : int
        Image width in pixels.
    height : int
        Image height in pixels.
    samples : np.ndarray
        float32 array of shape (height, width, channel_count). Rows run top
        to bottom in the order of the decoded image.
    channel_names : list[str]
        Source channel name feeding each output slot.

    Notes
    -----
    An empty ChannelData (``samples.size == 0``) means "selection not found";
    it is a value, not an error.
    """
    width: int
    height: int
    samples: np.ndarray
    channel_names: list = field(default_factory=list)

    def __post_init__(self):
        self.samples = np.asarray(self.samples, dtype=np.float32)
        if not self.is_empty and not self.matches_dimensions:
            raise ValueError(
                f"Samples of shape {self.samples.shape} do not match "
                f"{self.width}x{self.height}")

    @property
    def channel_count(self) -> int:
        if self.samples.ndim != 3:
            return 0
        return int(self.samples.shape[2])

    @property
    def is_empty(self) -> bool:
        return self.samples.size == 0

    @property
    def matches_dimensions(self) -> bool:
        """True when samples are (height, width, channels)."""
        return self.samples.ndim == 3 and self.samples.shape[:2] == (self.height, self.width)

    @classmethod
    def empty(cls, width: int = 0, height: int = 0):
        return cls(width=width, height=height,
                   samples=np.zeros((0, 0, 0), dtype=np.float32))

    def copy(self):
        """Deep copy of this buffer."""
        return ChannelData(
            width=self.width,
            height=self.height,
            samples=np.array(self.samples, dtype=np.float32, copy=True),
            channel_names=list(self.channel_names),
        )

    def pixel(self, y: int, x: int) -> list[tuple[str, float]]:
        """(channel name, value) pairs at a single pixel, for status readouts."""
        if self.is_empty:
            return []
        values = self.samples[y, x]
        names = self.channel_names or [f"ch{i}" for i in range(len(values))]
        return [(n, float(v)) for n, v in zip(names, values)]

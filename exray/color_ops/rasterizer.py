"""
Turn the final float buffer into an 8-bit RGBA bitmap for the viewport.

Float to byte conversion clamps to [0, 1], scales by 255 and truncates
(0.5 -> 127, 1.0 -> 255). NaN samples map to 0.
"""

from numba import jit
import numpy as np

from ..models.results import Failure, StageResult


@jit(nopython=True)
def _pack_rgba8(samples, out):
    """
    Clamp/scale/truncate each pixel of ``samples`` (H, W, C>=3) into
    ``out`` (H, W, 4) uint8. Alpha is 1.0 when C == 3.
    """
    h, w, c = samples.shape
    for y in range(h):
        for x in range(w):
            for k in range(4):
                if k < 3 or c >= 4:
                    v = samples[y, x, k]
                else:
                    v = 1.0
                if not (v > 0.0):
                    v = 0.0
                elif v > 1.0:
                    v = 1.0
                out[y, x, k] = np.uint8(v * 255.0)
    return out


def to_bitmap(data) -> StageResult:
    """
    Pack ``data`` into a row-major, top-to-bottom RGBA uint8 array.

    Returns
    -------
    StageResult
        ``data`` is an (H, W, 4) uint8 array, or None with INVALID_SHAPE
        when the buffer is empty, has fewer than 3 channels, no pixels or
        samples that disagree with its width and height.
    """
    if data is None or data.is_empty or data.width <= 0 or data.height <= 0:
        return StageResult.degraded(None, Failure.INVALID_SHAPE,
                                    "invalid channel data for bitmap creation")
    if data.channel_count < 3:
        return StageResult.degraded(
            None, Failure.INVALID_SHAPE,
            f"need at least 3 channels for display, got {data.channel_count}")
    if not data.matches_dimensions:
        return StageResult.degraded(
            None, Failure.INVALID_SHAPE,
            f"samples of shape {data.samples.shape} do not match {data.width}x{data.height}")

    samples = np.ascontiguousarray(data.samples, dtype=np.float32)
    out = np.empty((data.height, data.width, 4), dtype=np.uint8)
    _pack_rgba8(samples, out)
    return StageResult.success(out)

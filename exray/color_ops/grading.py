"""
Exposure/gamma grade applied in the working space, between the input and
display transforms.
"""

import numpy as np

from ..models.results import Failure, StageResult


def grade(data, exposure: float = 0.0, gamma: float = 1.0) -> StageResult:
    """
    Scale RGB by ``2 ** exposure`` then apply ``v ** (1 / gamma)``.

    The power keeps the sign of negative values (scene-linear data can dip
    below zero). Alpha and any channel past the fourth are left untouched.
    ``exposure=0, gamma=1`` returns an exact copy. A non-positive gamma, or an
    exposure whose scale is not a finite float32, is INVALID_VALUE.
    """
    if data is None or data.is_empty:
        return StageResult.degraded(data, Failure.INVALID_SHAPE, "empty input data for grading")
    if data.channel_count < 3:
        return StageResult.degraded(
            data, Failure.INVALID_SHAPE,
            f"need at least 3 channels for grading, got {data.channel_count}")
    if not gamma > 0:
        return StageResult.degraded(data, Failure.INVALID_VALUE,
                                    f"gamma must be positive, got {gamma}")
    with np.errstate(over="ignore"):
        scale = np.float32(np.exp2(exposure))
    if not (np.isfinite(exposure) and np.isfinite(scale)):
        return StageResult.degraded(data, Failure.INVALID_VALUE,
                                    f"exposure out of range, got {exposure}")

    result = data.copy()
    rgb = result.samples[:, :, :3]
    if exposure != 0.0:
        rgb *= scale
    if gamma != 1.0:
        inv = np.float32(1.0 / gamma)
        rgb[...] = np.sign(rgb) * np.power(np.abs(rgb), inv)
    return StageResult.success(result)

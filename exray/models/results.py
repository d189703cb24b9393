"""
Outcome types shared by every stage of the display pipeline.

Stages never raise for the recoverable conditions of the viewer (missing
channel, missing colorspace, bad buffer shape, engine errors). They return a
StageResult carrying the stage's degraded output plus a tagged Failure, and
the caller decides what to log.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Failure(Enum):
    """Reason a pipeline stage fell back to its degraded output."""

    NOT_FOUND = "not_found"            # channel family/component or colorspace absent
    INVALID_SHAPE = "invalid_shape"    # empty buffer, too few channels, bad dimensions
    CONFIGURATION = "configuration"    # color-management config never loaded
    ENGINE = "engine"                  # transform engine raised
    INVALID_VALUE = "invalid_value"    # out-of-range grading parameter


@dataclass(frozen=True)
class StageResult:
    """
    Result of one pipeline stage.

    Attributes
    ----------
    data : object
        Stage output. On failure this is still usable: an empty ChannelData
        for extraction, the unchanged input for transforms, None for the
        rasterizer.
    failure : Failure | None
        None on success.
    detail : str
        Human readable description naming the channel/colorspace involved.
    """
    data: Any
    failure: Failure | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, data):
        return cls(data=data)

    @classmethod
    def degraded(cls, data, failure: Failure, detail: str = ""):
        return cls(data=data, failure=failure, detail=detail)

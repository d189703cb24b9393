"""
channel_extraction
==================

Resolve a channel-family selection against a decoded image and copy the
matching channels into a canonical float buffer ready for color transforms.

Selection rules
---------------

- Family ``"default"`` matches the bare image-standard names ``R, G, B, A``
  in that fixed order, whatever order they sit in the file. An image with
  none of them falls back to its own ``default.*`` channels.
- Any other family matches channel names whose family (text before the last
  ``.``) equals it, in channel-index order.
- Component ``"all"`` copies every matched channel, one output slot per
  match. A three channel AOV stays three channels; nothing is padded.
- A single component (``r g b a x y z``) is replicated into R, G and B.
  Alpha is the value itself for ``a``, otherwise the sibling ``<family>.a``
  channel (``A`` for the default family) or 1.0.

Typical usage
-------------

.. code-block:: python

    from exray.color_ops import channel_extraction as ce

    result = ce.extract(image.pixels, image.spec, "diffuse", "r")
    if result.ok:
        rgba = result.data.samples      # (H, W, 4)
"""

import numpy as np

from ..models.channel_data import ChannelData
from ..models.channels import (
    ALL_COMPONENTS,
    CANONICAL_CHANNELS,
    channel_family,
    uses_canonical_channels,
)
from ..models.results import Failure, StageResult

__all__ = ["channel_family", "match_channels", "resolve_component", "extract"]


def match_channels(channel_names, family: str) -> list[int]:
    """
    Channel indices belonging to ``family``, in output slot order.
    """
    names = list(channel_names)
    if uses_canonical_channels(names, family):
        return [names.index(c) for c in CANONICAL_CHANNELS if c in names]
    return [i for i, n in enumerate(names) if channel_family(n) == family]


def resolve_component(channel_names, matches: list[int], family: str,
                      component: str) -> int | None:
    """
    Index of the single channel named by ``component`` within the matches.

    Returns None when no matched channel carries that component.
    """
    names = list(channel_names)
    if uses_canonical_channels(names, family):
        wanted = component.upper()
        for i in matches:
            if names[i] == wanted:
                return i
        return None

    suffix = "." + component
    for i in matches:
        if names[i].endswith(suffix):
            return i
    # bare single-value channel such as a depth pass named "Z"
    if len(matches) == 1 and names[matches[0]] == family:
        return matches[0]
    return None


def _alpha_index(channel_names, matches: list[int], family: str) -> int | None:
    names = list(channel_names)
    sibling = "A" if uses_canonical_channels(names, family) else f"{family}.a"
    for i in matches:
        if names[i] == sibling:
            return i
    return None


def _as_pixel_rows(raw, spec) -> np.ndarray | None:
    """View the raw buffer as (H, W, nchannels) without copying."""
    arr = np.asarray(raw)
    if arr.size != spec.width * spec.height * spec.nchannels:
        return None
    return arr.reshape(spec.height, spec.width, spec.nchannels)


def extract(raw, spec, family: str, component: str = ALL_COMPONENTS) -> StageResult:
    """
    Build a ChannelData for one family/component selection.

    Parameters
    ----------
    raw : array-like
        Interleaved float samples, ``width * height * spec.nchannels`` long
        (any shape). Only read; the result never aliases it.
    spec : ImageSpec
        Width, height, channel count and ordered channel names of ``raw``.
    family : str
        ``"default"`` or a channel family such as ``"ViewLayer.Combined"``.
    component : str
        ``"all"`` or one of ``r g b a x y z``.

    Returns
    -------
    StageResult
        ``data`` is the new ChannelData. When the selection does not resolve
        ``data`` is an empty ChannelData and ``failure`` is NOT_FOUND.
    """
    if spec.width <= 0 or spec.height <= 0 or spec.nchannels <= 0:
        return StageResult.degraded(ChannelData.empty(), Failure.INVALID_SHAPE,
                                    f"image has no pixels ({spec.width}x{spec.height})")
    pixels = _as_pixel_rows(raw, spec)
    if pixels is None:
        return StageResult.degraded(
            ChannelData.empty(spec.width, spec.height), Failure.INVALID_SHAPE,
            f"buffer of {np.asarray(raw).size} samples does not match "
            f"{spec.width}x{spec.height}x{spec.nchannels}")

    names = spec.channel_names
    matches = match_channels(names, family)
    if not matches:
        return StageResult.degraded(ChannelData.empty(spec.width, spec.height),
                                    Failure.NOT_FOUND, f"channel family '{family}' not found")

    if component == ALL_COMPONENTS:
        out = np.empty((spec.height, spec.width, len(matches)), dtype=np.float32)
        for slot, idx in enumerate(matches):
            out[:, :, slot] = pixels[:, :, idx]
        return StageResult.success(ChannelData(
            width=spec.width, height=spec.height, samples=out,
            channel_names=[names[i] for i in matches]))

    target = resolve_component(names, matches, family, component)
    if target is None:
        return StageResult.degraded(
            ChannelData.empty(spec.width, spec.height), Failure.NOT_FOUND,
            f"component '{component}' not found in channel family '{family}'")

    out = np.empty((spec.height, spec.width, 4), dtype=np.float32)
    out[:, :, 0:3] = pixels[:, :, target, np.newaxis]
    if component == "a":
        alpha = target
    else:
        alpha = _alpha_index(names, matches, family)

    if alpha is None:
        out[:, :, 3] = 1.0
        alpha_name = "1.0"
    else:
        out[:, :, 3] = pixels[:, :, alpha]
        alpha_name = names[alpha]

    return StageResult.success(ChannelData(
        width=spec.width, height=spec.height, samples=out,
        channel_names=[names[target]] * 3 + [alpha_name]))

"""
Float buffer to RGBA8 bitmap conversion.
"""

import numpy as np
import pytest

from exray.color_ops import to_bitmap
from exray.models import ChannelData, Failure


def single_pixel(values):
    samples = np.asarray(values, dtype=np.float32).reshape(1, 1, -1)
    return ChannelData(width=1, height=1, samples=samples)


@pytest.mark.parametrize("value, byte", [
    (0.0, 0),
    (0.5, 127),
    (1.0, 255),
    (1.5, 255),
    (-0.2, 0),
    (float("nan"), 0),
    (float("inf"), 255),
])
def test_sample_conversion(value, byte):
    res = to_bitmap(single_pixel([value, value, value, value]))
    assert res.ok
    assert res.data.dtype == np.uint8
    assert res.data.tolist() == [[[byte] * 4]]


def test_three_channels_get_opaque_alpha():
    res = to_bitmap(single_pixel([1.0, 0.5, 0.0]))
    assert res.data.tolist() == [[[255, 127, 0, 255]]]


def test_extra_channels_are_ignored():
    res = to_bitmap(single_pixel([0.0, 0.0, 1.0, 1.0, 0.5, 0.5]))
    assert res.data.shape == (1, 1, 4)
    assert res.data.tolist() == [[[0, 0, 255, 255]]]


def test_row_order_is_preserved():
    samples = np.zeros((2, 3, 4), dtype=np.float32)
    samples[0, 2] = 1.0
    res = to_bitmap(ChannelData(width=3, height=2, samples=samples))
    assert res.data.shape == (2, 3, 4)
    assert res.data[0, 2].tolist() == [255, 255, 255, 255]
    assert res.data[1, 2].tolist() == [0, 0, 0, 0]


def test_source_is_not_modified():
    data = single_pixel([1.5, -1.0, 0.5, 2.0])
    before = data.samples.copy()
    to_bitmap(data)
    np.testing.assert_array_equal(data.samples, before)


@pytest.mark.parametrize("data", [
    None,
    ChannelData.empty(),
    single_pixel([0.5, 0.5]),
])
def test_invalid_input_gives_no_bitmap(data):
    res = to_bitmap(data)
    assert res.data is None
    assert res.failure is Failure.INVALID_SHAPE


@pytest.mark.parametrize("width, height", [(4, 1), (1, 1), (2, 2)])
def test_samples_must_match_dimensions(width, height):
    with pytest.raises(ValueError):
        ChannelData(width=width, height=height, samples=np.ones((1, 2, 4)))


def test_resized_samples_give_no_bitmap():
    data = single_pixel([0.5, 0.5, 0.5, 1.0])
    data.samples = np.ones((1, 2, 4), dtype=np.float32)
    res = to_bitmap(data)
    assert res.data is None
    assert res.failure is Failure.INVALID_SHAPE

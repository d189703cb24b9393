"""
Exposure/gamma grade.
"""

import numpy as np
import pytest

from exray.color_ops import grade
from exray.models import ChannelData, Failure


def rgba(values, alpha=0.5):
    values = np.asarray(values, dtype=np.float32)
    samples = np.empty((1, len(values), 4), dtype=np.float32)
    samples[0, :, :3] = values[:, None]
    samples[0, :, 3] = alpha
    return ChannelData(width=len(values), height=1, samples=samples,
                       channel_names=["R", "G", "B", "A"])


def test_neutral_grade_is_a_copy():
    data = rgba([0.1, 0.5, 2.0])
    res = grade(data)
    assert res.ok
    assert res.data is not data
    np.testing.assert_array_equal(res.data.samples, data.samples)


def test_exposure_scales_rgb_only():
    res = grade(rgba([0.25, 1.0]), exposure=1.0)
    np.testing.assert_allclose(res.data.samples[0, :, :3], [[0.5] * 3, [2.0] * 3])
    np.testing.assert_array_equal(res.data.samples[0, :, 3], 0.5)


def test_gamma_keeps_sign():
    res = grade(rgba([0.25, -0.25]), gamma=2.0)
    np.testing.assert_allclose(res.data.samples[0, 0, :3], 0.5, rtol=1e-6)
    np.testing.assert_allclose(res.data.samples[0, 1, :3], -0.5, rtol=1e-6)


def test_grade_leaves_source_untouched():
    data = rgba([0.25])
    grade(data, exposure=2.0, gamma=2.2)
    np.testing.assert_array_equal(data.samples[0, 0, :3], 0.25)


@pytest.mark.parametrize("gamma", [0.0, -1.0, float("nan")])
def test_non_positive_gamma_is_rejected(gamma):
    data = rgba([0.25])
    res = grade(data, gamma=gamma)
    assert res.failure is Failure.INVALID_VALUE
    assert res.data is data


def test_empty_data_is_invalid_shape():
    res = grade(ChannelData.empty())
    assert res.failure is Failure.INVALID_SHAPE


@pytest.mark.parametrize("exposure", [2000.0, 200.0, float("inf"), float("-inf"), float("nan")])
def test_out_of_range_exposure_is_rejected(exposure):
    data = rgba([0.25])
    res = grade(data, exposure=exposure)
    assert res.failure is Failure.INVALID_VALUE
    assert res.data is data


def test_large_negative_exposure_goes_black():
    res = grade(rgba([0.25]), exposure=-2000.0)
    assert res.ok
    np.testing.assert_array_equal(res.data.samples[0, 0, :3], 0.0)
    assert res.data.samples[0, 0, 3] == 0.5

# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""Tests for sRGB ↔ linear RGB conversions and linear-light mixing."""

import numpy as np
import pytest

from podacolor.engine.colorspace import (
    LUMINANCE_WEIGHTS,
    SRGB_THRESHOLD,
    linear_to_srgb,
    luminance_from_rgb,
    mix_rgb,
    srgb_to_linear,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_roundtrip_black_and_white(self):
        srgb = np.array([0.0, 1.0])
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values at or below 0.03928 use the linear segment."""
        linear = srgb_to_linear(np.array([SRGB_THRESHOLD]))
        assert float(linear[0]) == pytest.approx(SRGB_THRESHOLD / 12.92, abs=1e-12)

    def test_batch_roundtrip(self):
        srgb = np.random.RandomState(42).random((100, 3))
        recovered = linear_to_srgb(srgb_to_linear(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-10)

    def test_negative_linear_clipped(self):
        assert float(linear_to_srgb(np.array([-0.5]))[0]) == 0.0


class TestLuminance:

    def test_weights_sum_to_one(self):
        assert float(LUMINANCE_WEIGHTS.sum()) == pytest.approx(1.0)

    def test_white_and_black(self):
        lum = luminance_from_rgb(np.array([[255, 255, 255], [0, 0, 0]], dtype=np.uint8))
        np.testing.assert_allclose(lum, [1.0, 0.0], atol=1e-12)

    def test_primaries_match_weights(self):
        rgb = np.eye(3, dtype=np.uint8) * 255
        np.testing.assert_allclose(luminance_from_rgb(rgb), LUMINANCE_WEIGHTS, atol=1e-12)

    def test_single_color_shape(self):
        lum = luminance_from_rgb(np.array([37, 99, 235], dtype=np.uint8))
        assert lum.shape == ()


class TestMixRGB:

    def test_endpoints(self):
        mixed = mix_rgb((0, 0, 0), (255, 255, 255), np.array([0.0, 1.0]))
        np.testing.assert_array_equal(mixed, [[0, 0, 0], [255, 255, 255]])

    def test_mixes_in_linear_light(self):
        # Half luminance between black and white is sRGB ~188, not 128
        mixed = mix_rgb((0, 0, 0), (255, 255, 255), np.array([0.5]))
        assert mixed.shape == (1, 3)
        assert int(mixed[0, 0]) == 188

    def test_equal_luminance_steps(self):
        fractions = np.array([0.25, 0.5, 0.75])
        mixed = mix_rgb((0, 0, 0), (255, 255, 255), fractions)
        lum = luminance_from_rgb(mixed.astype(np.uint8))
        np.testing.assert_allclose(lum, fractions, atol=0.01)

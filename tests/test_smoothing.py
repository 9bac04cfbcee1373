# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""Tests for gradient smoothness checks and repair."""

import logging

from podacolor.engine.contrast import relative_luminance_batch
from podacolor.engine.gradient import extract_hex_colors
from podacolor.engine.smoothing import harsh_transitions, is_gradient_smooth, smooth_gradient

HARSH = "linear-gradient(90deg, #000000 0%, #FFFFFF 100%)"
SOFT = "linear-gradient(135deg, #2563EB 0%, #7C3AED 100%)"


class TestHarshTransitions:

    def test_black_to_white(self):
        assert harsh_transitions(HARSH) == [(0, 1)]
        assert not is_gradient_smooth(HARSH)

    def test_similar_stops_are_smooth(self):
        assert harsh_transitions(SOFT) == []
        assert is_gradient_smooth(SOFT)

    def test_middle_pair_only(self):
        value = "linear-gradient(90deg, #0f172a, #1e293b, #ffffff, #f8fafc)"
        assert harsh_transitions(value) == [(1, 2)]

    def test_solid_is_smooth(self):
        assert is_gradient_smooth("#000000")

    def test_single_color_gradient_is_smooth(self):
        assert is_gradient_smooth("linear-gradient(90deg, #000000, red)")

    def test_custom_threshold(self):
        assert harsh_transitions(SOFT, threshold=0.01) == [(0, 1)]


class TestSmoothGradient:

    def test_inserts_linear_light_stops(self):
        assert smooth_gradient(HARSH) == (
            "linear-gradient(90deg, #000000 0%, #9C9C9C 33%, #D5D5D5 67%, #FFFFFF 100%)"
        )

    def test_result_is_smooth(self):
        value = "linear-gradient(45deg, #0f172a 10%, #fef3c7 90%)"
        smoothed = smooth_gradient(value)
        assert is_gradient_smooth(smoothed)
        colors = extract_hex_colors(smoothed)
        assert colors[0] == "#0f172a"
        assert colors[-1] == "#fef3c7"
        lum = relative_luminance_batch(colors)
        assert (lum[1:] >= lum[:-1]).all()

    def test_smooth_value_unchanged(self):
        assert smooth_gradient(SOFT) == SOFT

    def test_non_gradient_unchanged(self):
        assert smooth_gradient("#000000") == "#000000"

    def test_unparseable_left_as_is(self, caplog):
        value = "radial-gradient(circle, #000000, #FFFFFF)"
        with caplog.at_level(logging.WARNING, logger="podacolor"):
            assert smooth_gradient(value) == value
        assert "left as is" in caplog.text

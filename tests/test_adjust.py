# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""Tests for the fixed-fallback and iterative contrast adjusters."""

import logging

import pytest

from podacolor.engine.adjust import (
    DEFAULT_FALLBACK_PALETTE,
    AdjustPolicy,
    FallbackPalette,
    IterativeConfig,
    TextRole,
    adjust_fixed_fallback,
    adjust_for_contrast,
    adjust_iterative,
    fallback_color,
)
from podacolor.engine.contrast import contrast_ratio, is_light, meets_wcag_aa

LIGHT_BACKGROUNDS = ["#FFFFFF", "#F8FAFC", "#E2E8F0", "#FEF3C7", "#D1FAE5"]
DARK_BACKGROUNDS = ["#000000", "#0F172A", "#1E293B", "#312E81", "#7C2D12"]


class TestFallbackPalette:

    def test_lookup(self):
        p = DEFAULT_FALLBACK_PALETTE
        assert p.color_for(TextRole.HEADING, True) == "#0F172A"
        assert p.color_for(TextRole.BODY, True) == "#1E293B"
        assert p.color_for(TextRole.HEADING, False) == "#F8FAFC"
        assert p.color_for(TextRole.BODY, False) == "#E2E8F0"
        assert p.color_for(TextRole.ICON, True) == "#1E293B"
        assert p.color_for(TextRole.ICON, False) == "#F8FAFC"

    def test_override(self):
        brand = FallbackPalette(heading_on_light="#111111")
        assert fallback_color(TextRole.HEADING, "#FFFFFF", brand) == "#111111"

    def test_dark_background_scenario(self):
        assert not is_light("#0f172a")
        assert fallback_color(TextRole.HEADING, "#0f172a") == "#F8FAFC"


class TestFixedFallback:

    @pytest.mark.parametrize("background", LIGHT_BACKGROUNDS)
    def test_heading_on_light(self, background):
        assert is_light(background)
        result = adjust_fixed_fallback("#FFFFFF", background, TextRole.HEADING)
        assert result == "#0F172A"
        assert meets_wcag_aa(background, result)

    @pytest.mark.parametrize("background", DARK_BACKGROUNDS)
    def test_heading_on_dark(self, background):
        assert not is_light(background)
        result = adjust_fixed_fallback("#000000", background, TextRole.HEADING)
        assert result == "#F8FAFC"
        assert meets_wcag_aa(background, result)

    def test_passing_color_kept(self):
        assert adjust_fixed_fallback("#0f172a", "#ffffff", TextRole.BODY) == "#0f172a"

    def test_body_fallback(self):
        assert adjust_fixed_fallback("#333333", "#000000", TextRole.BODY) == "#E2E8F0"


class TestIterative:

    def test_already_passing_returned_unchanged(self):
        assert adjust_iterative("#0f172a", "#ffffff") == "#0f172a"

    def test_darkens_on_light_background(self):
        result = adjust_iterative("#777777", "#FFFFFF")
        assert result == "#6D6D6D"
        assert contrast_ratio(result, "#FFFFFF") >= 4.5

    def test_lightens_on_dark_background(self):
        result = adjust_iterative("#333333", "#000000")
        assert contrast_ratio(result, "#000000") >= 4.5
        r = int(result[1:3], 16)
        assert r > 0x33

    @pytest.mark.parametrize("foreground,background", [
        ("#777777", "#FFFFFF"),
        ("#64748B", "#F8FAFC"),
        ("#2563EB", "#0F172A"),
        ("#333333", "#000000"),
    ])
    def test_solvable_pairs_reach_target(self, foreground, background):
        result = adjust_iterative(foreground, background)
        assert contrast_ratio(result, background) >= 4.5

    def test_gives_up_quietly(self, caplog):
        # Mid gray on itself cannot reach 4.5:1 by lightening
        with caplog.at_level(logging.WARNING, logger="podacolor"):
            result = adjust_iterative("#808080", "#808080")
        assert result == "#FFFFFF"
        assert contrast_ratio(result, "#808080") < 4.5
        assert "stopped at #FFFFFF" in caplog.text

    def test_budget_respected(self):
        cfg = IterativeConfig(step=1, max_iterations=3)
        assert adjust_iterative("#808080", "#FFFFFF", cfg) == "#7D7D7D"

    def test_custom_target(self):
        cfg = IterativeConfig(target_ratio=3.0)
        assert adjust_iterative("#777777", "#FFFFFF", cfg) == "#777777"


class TestDispatch:

    def test_default_is_fixed(self):
        assert adjust_for_contrast("#777777", "#FFFFFF", TextRole.HEADING) == "#0F172A"

    def test_iterative(self):
        result = adjust_for_contrast(
            "#777777", "#FFFFFF", TextRole.HEADING, policy=AdjustPolicy.ITERATIVE,
        )
        assert result == "#6D6D6D"

    def test_policy_values(self):
        assert AdjustPolicy("fixed") == AdjustPolicy.FIXED_FALLBACK
        assert AdjustPolicy("iterative") == AdjustPolicy.ITERATIVE

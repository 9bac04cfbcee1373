# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import json

import pytest

from podacolor.schema import (
    DEFAULT_GRADIENT,
    HSL,
    RGB,
    ContrastPair,
    Correction,
    GradientSpec,
    GradientStop,
    NormalizationReport,
    ThemeRecord,
    ThemeReview,
    TokenBundle,
)


class TestRGB:

    def test_valid(self):
        assert RGB(37, 99, 235).as_tuple() == (37, 99, 235)

    def test_invalid_channel(self):
        with pytest.raises(ValueError, match="Channel g"):
            RGB(0, 256, 0)

    def test_to_dict_roundtrip(self):
        c = RGB(1, 2, 3)
        assert RGB.from_dict(c.to_dict()) == c


class TestHSL:

    def test_invalid_hue(self):
        with pytest.raises(ValueError, match="Hue"):
            HSL(360, 50, 50)

    def test_invalid_saturation(self):
        with pytest.raises(ValueError, match="Saturation"):
            HSL(0, 101, 50)

    def test_invalid_lightness(self):
        with pytest.raises(ValueError, match="Lightness"):
            HSL(0, 50, -1)


class TestGradientSpec:

    def test_default(self):
        assert DEFAULT_GRADIENT.direction == 135
        assert DEFAULT_GRADIENT.color1 == "#2563EB"
        assert DEFAULT_GRADIENT.color2 == "#7C3AED"

    def test_invalid_direction(self):
        with pytest.raises(ValueError, match="Direction"):
            GradientSpec(361, DEFAULT_GRADIENT.stops)

    def test_too_few_stops(self):
        with pytest.raises(ValueError, match="at least 2"):
            GradientSpec(90, (GradientStop("#000000", 0),))

    def test_invalid_position(self):
        with pytest.raises(ValueError, match="Position"):
            GradientStop("#000000", 101)

    def test_with_stop_copies(self):
        spec = DEFAULT_GRADIENT.with_stop(1, color="#000000", position=80)
        assert spec.stops[1] == GradientStop("#000000", 80)
        assert DEFAULT_GRADIENT.color2 == "#7C3AED"

    def test_with_stop_out_of_range(self):
        with pytest.raises(IndexError):
            DEFAULT_GRADIENT.with_stop(5, color="#000000")

    def test_with_direction(self):
        assert DEFAULT_GRADIENT.with_direction(45).direction == 45

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_GRADIENT.direction = 10

    def test_to_dict_roundtrip(self):
        d = DEFAULT_GRADIENT.to_dict()
        assert d["stops"][0] == {"color": "#2563EB", "position": 0}
        assert GradientSpec.from_dict(json.loads(json.dumps(d))) == DEFAULT_GRADIENT


class TestContrastPair:

    def test_thresholds(self):
        pair = ContrastPair("#777777", "#FFFFFF", 4.48)
        assert not pair.passes_aa
        assert pair.passes_aa_large

    def test_invalid_ratio(self):
        with pytest.raises(ValueError):
            ContrastPair("#000000", "#000000", 0.5)


class TestThemeRecord:

    def test_from_row_missing_columns(self):
        record = ThemeRecord.from_row({"id": 7, "name": "Minimal"})
        assert record.id == 7
        assert record.page_background is None
        assert record.is_active

    def test_from_row_inactive(self):
        record = ThemeRecord.from_row({"id": 1, "name": "Old", "is_active": 0})
        assert not record.is_active


class TestTokenBundle:

    def test_group_and_encode(self):
        bundle = TokenBundle(shape={"corner": {"md": "0.5rem"}})
        assert bundle.group("shape_tokens") is bundle.shape
        assert bundle.encode("shape_tokens") == '{"corner":{"md":"0.5rem"}}'


class TestReports:

    def _review(self, updates=()):
        return ThemeReview(
            theme_id=3,
            name="Ocean",
            background="#0f172a",
            corrections=(Correction("typography_tokens", "color.heading", "#111111",
                                    "#F8FAFC", "heading contrast 1.02:1 below 4.5:1"),),
            updates=updates,
        )

    def test_review_changed(self):
        assert not self._review().changed
        review = self._review(updates=(("typography_tokens", "{}"),))
        assert review.changed
        assert review.changed_columns == ("typography_tokens",)

    def test_review_to_dict(self):
        d = self._review().to_dict()
        assert d["id"] == 3
        assert d["corrections"][0]["new"] == "#F8FAFC"

    def test_report_counts(self):
        report = NormalizationReport(
            reviews=(self._review(), self._review(updates=(("shape_tokens", "{}"),))),
        )
        assert report.reviewed == 2
        assert report.updated == 1
        assert json.loads(report.to_json())["updated"] == 1

# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values and theme normalization.

Color value types are immutable (frozen dataclasses). The wire format is
always the ColorValue string; these types are transient decoded forms.
"""

from podacolor.schema.color_value import (
    AA_LARGE_TEXT,
    AA_NORMAL_TEXT,
    DEFAULT_GRADIENT,
    HSL,
    RGB,
    ContrastPair,
    GradientGrammar,
    GradientSpec,
    GradientStop,
    ValueMode,
)
from podacolor.schema.theme import (
    BACKGROUND_COLUMNS,
    TOKEN_COLUMNS,
    Correction,
    NormalizationReport,
    ThemeRecord,
    ThemeReview,
    TokenBundle,
)

__all__ = [
    # Thresholds
    "AA_NORMAL_TEXT",
    "AA_LARGE_TEXT",
    # Color types
    "RGB",
    "HSL",
    "ContrastPair",
    # Gradient types
    "GradientStop",
    "GradientSpec",
    "GradientGrammar",
    "DEFAULT_GRADIENT",
    # Controller mode
    "ValueMode",
    # Theme records
    "TOKEN_COLUMNS",
    "BACKGROUND_COLUMNS",
    "ThemeRecord",
    "TokenBundle",
    "Correction",
    "ThemeReview",
    "NormalizationReport",
]

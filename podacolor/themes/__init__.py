# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Theme maintenance: the batch token normalizer and its storage boundary.
"""

from podacolor.themes.config import NormalizerConfig, RadiusRule, default_tokens
from podacolor.themes.normalizer import (
    ThemeTokenNormalizer,
    normalize_corner_radius,
    radius_to_px,
)
from podacolor.themes.store import ThemeStore

__all__ = [
    "NormalizerConfig",
    "RadiusRule",
    "default_tokens",
    "ThemeTokenNormalizer",
    "normalize_corner_radius",
    "radius_to_px",
    "ThemeStore",
]

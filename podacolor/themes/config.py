# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Configuration for the theme token normalizer.

Default token bundles are substituted for empty or missing token groups.
They are returned as fresh copies so a review can edit them in place.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from podacolor.engine.adjust import (
    DEFAULT_FALLBACK_PALETTE,
    AdjustPolicy,
    FallbackPalette,
    IterativeConfig,
)


# =============================================================================
# Default token bundles
# =============================================================================

_DEFAULT_COLOR_TOKENS = {
    "semantic": {
        "text": {"primary": "#0f172a", "secondary": "#64748b"},
        "background": {"base": "#ffffff", "elevated": "#f8fafc"},
        "accent": {"primary": "#2563eb"},
    },
}

_DEFAULT_TYPOGRAPHY_TOKENS = {
    "font": {"heading": "Inter", "body": "Inter"},
    "color": {"heading": "#0f172a", "body": "#4b5563"},
    "scale": {"heading": 24, "body": 16},
    "line_height": {"heading": 1.2, "body": 1.5},
    "weight": {
        "heading": {"bold": False, "italic": False},
        "body": {"bold": False, "italic": False},
    },
}

_DEFAULT_SHAPE_TOKENS = {
    "corner": {"md": "0.75rem"},
    "button_corner": {"md": "0.75rem"},
}

_DEFAULTS = {
    "color_tokens": _DEFAULT_COLOR_TOKENS,
    "typography_tokens": _DEFAULT_TYPOGRAPHY_TOKENS,
    "shape_tokens": _DEFAULT_SHAPE_TOKENS,
}


def default_tokens(column: str) -> dict:
    """
    Fresh default group for a token column.

    Iconography has no static default: it depends on the background and is
    built by the normalizer.
    """
    return copy.deepcopy(_DEFAULTS.get(column, {}))


# =============================================================================
# Normalizer configuration
# =============================================================================


@dataclass(frozen=True)
class RadiusRule:
    """
    Button corner radius lint.

    Radii below ``min_px`` or in ``[min_px, preferred_min_px)`` are raised
    to ``raise_to``; radii above ``max_px`` are lowered to ``lower_to``.
    """

    min_px: float = 6.0
    preferred_min_px: float = 8.0
    max_px: float = 20.0
    raise_to: str = "0.5rem"   # 8px
    lower_to: str = "0.75rem"  # 12px
    # Used when the stored radius cannot be read
    default_px: float = 12.0


@dataclass(frozen=True)
class NormalizerConfig:
    """Settings for one normalization run."""

    # How failing text/icon colors are replaced
    policy: AdjustPolicy = AdjustPolicy.FIXED_FALLBACK
    palette: FallbackPalette = DEFAULT_FALLBACK_PALETTE
    iterative: IterativeConfig = field(default_factory=IterativeConfig)

    radius: RadiusRule = field(default_factory=RadiusRule)

    # Values assumed when a theme does not set them
    default_background: str = "#ffffff"
    default_heading: str = "#0f172a"
    default_body: str = "#4b5563"
    default_icon: str = "#2563eb"
    icon_size: str = "48px"
    icon_spacing: str = "0.75rem"

    # Gradient backgrounds: report harsh transitions, optionally rewrite
    check_gradients: bool = True
    smooth_gradients: bool = False

    include_inactive: bool = False

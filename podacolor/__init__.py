# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
PodaColor -- color and gradient value engine for PodaBio themes.

Decodes, validates, adjusts and re-encodes the ColorValue strings
(``#RRGGBB``, ``linear-gradient(...)``, ``vanta:...``) that theme editors
and stored themes exchange.

Quick start::

    from podacolor import build_gradient, contrast_ratio, meets_wcag_aa

    build_gradient(135, "#2563EB", "#7C3AED")
    # 'linear-gradient(135deg, #2563EB 0%, #7C3AED 100%)'
    contrast_ratio("#FFFFFF", "#000000")   # 21.0
    meets_wcag_aa("#FFFFFF", "#F8F8F8")    # False
"""

from __future__ import annotations

__version__ = "1.0.0"

from podacolor.engine import (
    AdjustPolicy,
    ColorValueController,
    adjust_for_contrast,
    build_gradient,
    contrast_ratio,
    dominant_color,
    hex_to_hsl,
    hex_to_rgb,
    is_gradient,
    is_light,
    is_vanta,
    meets_wcag_aa,
    normalize_hex,
    parse_gradient,
    relative_luminance,
)
from podacolor.schema import GradientSpec, GradientStop, ValueMode

__all__ = [
    # Codec
    "normalize_hex",
    "hex_to_rgb",
    "hex_to_hsl",
    "is_gradient",
    "is_vanta",
    "parse_gradient",
    "build_gradient",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "meets_wcag_aa",
    "dominant_color",
    "is_light",
    "adjust_for_contrast",
    "AdjustPolicy",
    # Controller
    "ColorValueController",
    # Types (commonly needed)
    "GradientSpec",
    "GradientStop",
    "ValueMode",
    # Version
    "__version__",
]

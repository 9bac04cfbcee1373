# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Color & gradient value engine.

Pure functions over ColorValue strings (codec, gradient codec, contrast,
adjustment, smoothing) plus the stateful value-mode controller used by
color pickers. Nothing here knows about widgets, pages or persistence.
"""

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
from podacolor.engine.codec import (
    expand_hex,
    format_hsl,
    format_rgb,
    hex_to_hsl,
    hex_to_rgb,
    normalize_hex,
    rgb_to_hex,
)
from podacolor.engine.contrast import (
    contrast_ratio,
    dominant_color,
    evaluate_pair,
    is_light,
    meets_wcag_aa,
    meets_wcag_aa_large,
    relative_luminance,
    relative_luminance_batch,
)
from podacolor.engine.gradient import (
    build_gradient,
    classify,
    extract_hex_colors,
    format_gradient,
    is_gradient,
    is_vanta,
    parse_gradient,
    parse_gradient_lenient,
    parse_gradient_stops,
    parse_gradient_strict,
)
from podacolor.engine.picker import ColorValueController
from podacolor.engine.smoothing import harsh_transitions, is_gradient_smooth, smooth_gradient

__all__ = [
    # Color codec
    "normalize_hex",
    "expand_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "format_rgb",
    "format_hsl",
    # Gradient codec
    "is_gradient",
    "is_vanta",
    "classify",
    "parse_gradient",
    "parse_gradient_strict",
    "parse_gradient_lenient",
    "parse_gradient_stops",
    "build_gradient",
    "format_gradient",
    "extract_hex_colors",
    # Contrast
    "relative_luminance",
    "relative_luminance_batch",
    "contrast_ratio",
    "meets_wcag_aa",
    "meets_wcag_aa_large",
    "evaluate_pair",
    "dominant_color",
    "is_light",
    # Adjustment
    "TextRole",
    "AdjustPolicy",
    "FallbackPalette",
    "DEFAULT_FALLBACK_PALETTE",
    "IterativeConfig",
    "fallback_color",
    "adjust_fixed_fallback",
    "adjust_iterative",
    "adjust_for_contrast",
    # Smoothing
    "harsh_transitions",
    "is_gradient_smooth",
    "smooth_gradient",
    # Controller
    "ColorValueController",
]

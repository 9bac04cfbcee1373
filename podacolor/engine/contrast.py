# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
WCAG contrast evaluation.

Luminance uses the sRGB transfer curve and BT.709 weights from
``colorspace``. Malformed colors never raise: they measure as a neutral
luminance of 0.5 and a warning is logged.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from podacolor.schema import AA_LARGE_TEXT, AA_NORMAL_TEXT, ContrastPair
from podacolor.engine.codec import expand_hex, hex_to_rgb
from podacolor.engine.colorspace import luminance_from_rgb
from podacolor.engine.gradient import extract_hex_colors, is_gradient

logger = logging.getLogger(__name__)

# Luminance reported for anything that is not a 3- or 6-digit hex
NEUTRAL_LUMINANCE = 0.5

# Dominant color when a value carries no hex at all
DEFAULT_DOMINANT = "#FFFFFF"


def relative_luminance(hex_color: str) -> float:
    """
    WCAG relative luminance in [0, 1].

    Non-hex characters are stripped and 3-digit shorthand is expanded;
    anything else yields 0.5.
    """
    expanded = expand_hex(hex_color)
    if expanded is None:
        logger.warning("Cannot measure luminance of %r, using %.1f", hex_color, NEUTRAL_LUMINANCE)
        return NEUTRAL_LUMINANCE
    rgb = hex_to_rgb(expanded)
    return float(luminance_from_rgb(np.array(rgb.as_tuple(), dtype=np.uint8)))


def relative_luminance_batch(colors: Iterable[str]) -> NDArray[np.float64]:
    """
    Vectorized relative luminance for many hex colors.

    Malformed entries get 0.5, as in ``relative_luminance``.
    """
    colors = list(colors)
    if not colors:
        return np.empty(0, dtype=np.float64)

    rgb = np.zeros((len(colors), 3), dtype=np.uint8)
    valid = np.zeros(len(colors), dtype=bool)
    for i, color in enumerate(colors):
        expanded = expand_hex(color)
        if expanded is None:
            logger.warning("Cannot measure luminance of %r, using %.1f", color, NEUTRAL_LUMINANCE)
            continue
        rgb[i] = hex_to_rgb(expanded).as_tuple()
        valid[i] = True

    return np.where(valid, luminance_from_rgb(rgb), NEUTRAL_LUMINANCE)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """
    WCAG contrast ratio, ``(L_max + 0.05) / (L_min + 0.05)``.

    Symmetric, and 1.0 for identical colors.
    """
    la = relative_luminance(color_a)
    lb = relative_luminance(color_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def meets_wcag_aa(color_a: str, color_b: str) -> bool:
    """Normal-text AA: contrast ratio >= 4.5."""
    return contrast_ratio(color_a, color_b) >= AA_NORMAL_TEXT


def meets_wcag_aa_large(color_a: str, color_b: str) -> bool:
    """Large-text AA (18pt, or 14pt bold): contrast ratio >= 3.0."""
    return contrast_ratio(color_a, color_b) >= AA_LARGE_TEXT


def evaluate_pair(foreground: str, background: str) -> ContrastPair:
    """Measure a foreground/background pair."""
    return ContrastPair(
        foreground=foreground,
        background=background,
        ratio=contrast_ratio(foreground, background),
    )


def dominant_color(value: str) -> str:
    """
    The "dominant" solid color of a ColorValue.

    Dominant means first: the first hex stop of a gradient, else the first
    hex anywhere in the string, else white. The hex is returned as written.
    """
    colors = extract_hex_colors(value)
    if colors:
        return colors[0]
    if value:
        kind = "gradient" if is_gradient(value) else "value"
        logger.warning("No hex in %s %r, dominant color is %s", kind, value, DEFAULT_DOMINANT)
    return DEFAULT_DOMINANT


def is_light(hex_color: str) -> bool:
    """True if relative luminance is above 0.5."""
    return relative_luminance(hex_color) > 0.5

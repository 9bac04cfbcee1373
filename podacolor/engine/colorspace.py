# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
sRGB gamma math used by the contrast evaluator and gradient smoothing.

Conversion chain: sRGB [0,255] → sRGB [0,1] → Linear RGB → relative luminance

References:
- WCAG 2.x relative luminance:
  https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- ITU-R BT.709 luminance coefficients

The linear-segment threshold is the WCAG 2.x constant 0.03928 (IEC sRGB
writes 0.04045); no 8-bit channel value falls between the two.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# Linear-segment threshold on the encoded side, as written in WCAG 2.x
SRGB_THRESHOLD = 0.03928

# BT.709 coefficients for R, G, B
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    Piecewise gamma curve:
    - For values <= 0.03928: value / 12.92
    - Otherwise: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= SRGB_THRESHOLD,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= SRGB_THRESHOLD / 12.92,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Luminance
# =============================================================================


def luminance_from_rgb(rgb: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Relative luminance of uint8 sRGB colors.

    Args:
        rgb: Array of shape (..., 3) with sRGB values [0, 255]

    Returns:
        Array of shape (...) with luminance in [0, 1]
    """
    srgb = np.asarray(rgb, dtype=np.float64) / 255.0
    return srgb_to_linear(srgb) @ LUMINANCE_WEIGHTS


# =============================================================================
# Interpolation
# =============================================================================


def mix_rgb(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
    fractions: NDArray[np.float64],
) -> NDArray[np.int64]:
    """
    Interpolate between two sRGB colors in linear light.

    Args:
        start: First color as (r, g, b) in [0, 255]
        end: Second color as (r, g, b) in [0, 255]
        fractions: Array of shape (N,) with positions in [0, 1]

    Returns:
        Array of shape (N, 3) with rounded sRGB values [0, 255]
    """
    a = srgb_to_linear(np.asarray(start, dtype=np.float64) / 255.0)
    b = srgb_to_linear(np.asarray(end, dtype=np.float64) / 255.0)
    t = np.asarray(fractions, dtype=np.float64)[:, np.newaxis]

    linear = a + (b - a) * t
    srgb = linear_to_srgb(linear)
    return (srgb * 255).round().astype(np.int64)

# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Foreground adjustment for failing contrast pairs.

Two policies, chosen by the caller:

- FIXED_FALLBACK: replace the foreground with a brand-safe slate from a
  role × background-lightness table. Deterministic; the replacement is
  not re-checked.
- ITERATIVE: nudge all three channels by a fixed step (lighter on dark
  backgrounds, darker on light ones) until the target ratio is reached or
  the iteration budget runs out. Minimal perturbation, but the result may
  still fail; nothing is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from podacolor.schema import AA_NORMAL_TEXT
from podacolor.engine.codec import expand_hex, hex_to_rgb, rgb_to_hex
from podacolor.engine.contrast import contrast_ratio, is_light, relative_luminance

logger = logging.getLogger(__name__)


class TextRole(Enum):
    """What a foreground color paints."""
    HEADING = "heading"
    BODY = "body"
    ICON = "icon"


class AdjustPolicy(Enum):
    """How a failing foreground gets replaced."""
    FIXED_FALLBACK = "fixed"
    ITERATIVE = "iterative"


# =============================================================================
# Fallback palette
# =============================================================================


@dataclass(frozen=True)
class FallbackPalette:
    """
    Replacement foregrounds by role and background lightness.

    Icons reuse the body slate on light backgrounds and the heading slate
    on dark ones.
    """

    heading_on_light: str = "#0F172A"  # slate-900
    body_on_light: str = "#1E293B"     # slate-800
    heading_on_dark: str = "#F8FAFC"   # slate-50
    body_on_dark: str = "#E2E8F0"      # slate-200
    icon_on_light: str = "#1E293B"
    icon_on_dark: str = "#F8FAFC"

    def color_for(self, role: TextRole, light_background: bool) -> str:
        """Look up the fallback for a role on a light or dark background."""
        suffix = "on_light" if light_background else "on_dark"
        return getattr(self, f"{role.value}_{suffix}")


DEFAULT_FALLBACK_PALETTE = FallbackPalette()


@dataclass(frozen=True)
class IterativeConfig:
    """Budget for the iterative search."""

    target_ratio: float = AA_NORMAL_TEXT
    # Added to (or subtracted from) every channel per iteration
    step: int = 10
    max_iterations: int = 20


# =============================================================================
# Policies
# =============================================================================


def fallback_color(
    role: TextRole,
    background: str,
    palette: Optional[FallbackPalette] = None,
) -> str:
    """The fixed fallback for a role, based on ``is_light(background)``."""
    palette = palette or DEFAULT_FALLBACK_PALETTE
    return palette.color_for(role, is_light(background))


def adjust_fixed_fallback(
    foreground: str,
    background: str,
    role: TextRole = TextRole.BODY,
    *,
    palette: Optional[FallbackPalette] = None,
) -> str:
    """
    Keep the foreground if it passes AA, else return the role's fallback.

    The fallback is assumed to pass and is not verified.
    """
    if contrast_ratio(background, foreground) >= AA_NORMAL_TEXT:
        return foreground
    return fallback_color(role, background, palette)


def adjust_iterative(
    foreground: str,
    background: str,
    config: Optional[IterativeConfig] = None,
) -> str:
    """
    Step the foreground away from the background until it passes.

    Returns the original string unchanged if it already meets the target.
    Otherwise returns ``#RRGGBB`` for wherever the search stopped, which
    may still fall short of the target.
    """
    cfg = config or IterativeConfig()

    ratio = contrast_ratio(foreground, background)
    if ratio >= cfg.target_ratio:
        return foreground

    lighten = relative_luminance(background) < 0.5
    step = cfg.step if lighten else -cfg.step

    start = expand_hex(foreground)
    rgb = hex_to_rgb(start) if start is not None else hex_to_rgb(foreground)
    r, g, b = rgb.as_tuple()

    iterations = 0
    while ratio < cfg.target_ratio and iterations < cfg.max_iterations:
        r, g, b = (max(0, min(255, c + step)) for c in (r, g, b))
        ratio = contrast_ratio(rgb_to_hex(r, g, b), background)
        iterations += 1

    result = rgb_to_hex(r, g, b)
    if ratio < cfg.target_ratio:
        logger.warning(
            "Contrast search for %s on %s stopped at %s (%.2f:1 < %.2f:1)",
            foreground, background, result, ratio, cfg.target_ratio,
        )
    return result


def adjust_for_contrast(
    foreground: str,
    background: str,
    role: TextRole = TextRole.BODY,
    *,
    policy: AdjustPolicy = AdjustPolicy.FIXED_FALLBACK,
    palette: Optional[FallbackPalette] = None,
    iterative: Optional[IterativeConfig] = None,
) -> str:
    """Dispatch to the selected policy."""
    if policy == AdjustPolicy.ITERATIVE:
        return adjust_iterative(foreground, background, iterative)
    return adjust_fixed_fallback(foreground, background, role, palette=palette)

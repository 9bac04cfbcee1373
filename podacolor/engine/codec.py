# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Color codec: hex ⇄ RGB ⇄ HSL.

All functions are best-effort and never raise on malformed input:
``normalize_hex`` always returns a syntactically valid ``#RRGGBB`` string,
even for garbage (it pads with zeros). HSL is display-only, so there is no
HSL → hex direction.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from podacolor.schema import HSL, RGB


_NON_HEX_RE = re.compile(r"[^A-Fa-f0-9]")


def _round_half_up(x: float) -> int:
    """Round like the browser's Math.round (0.5 rounds up, not to even)."""
    return int(math.floor(x + 0.5))


def normalize_hex(value: object) -> str:
    """
    Sanitize any string into ``#RRGGBB``.

    Strips every non-hex character, truncates to 6 digits, right-pads with
    ``0`` and uppercases. Idempotent. Non-string values give ``#000000``.

    Examples:
        >>> normalize_hex("#2563eb")
        '#2563EB'
        >>> normalize_hex("fff")
        '#FFF000'
        >>> normalize_hex("not a color")
        '#AC0000'
    """
    text = value if isinstance(value, str) else ""
    digits = _NON_HEX_RE.sub("", text)[:6]
    return f"#{digits.ljust(6, '0')}".upper()


def expand_hex(value: object) -> Optional[str]:
    """
    Strict counterpart of ``normalize_hex`` used for measurements.

    Strips non-hex characters and expands 3-digit shorthand. Returns
    ``#RRGGBB`` (uppercase) or None if the remaining digits are neither 3
    nor 6 long, or if ``value`` is not a string.
    """
    if not isinstance(value, str):
        return None
    digits = _NON_HEX_RE.sub("", value)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        return None
    return f"#{digits.upper()}"


def hex_to_rgb(hex_color: str) -> RGB:
    """Decode a hex color (normalized first) into an RGB triple."""
    value = int(normalize_hex(hex_color)[1:], 16)
    return RGB(r=(value >> 16) & 255, g=(value >> 8) & 255, b=value & 255)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode channels as ``#RRGGBB``; out-of-range channels are clamped."""
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_hsl(hex_color: str) -> HSL:
    """
    Convert a hex color to display HSL.

    Standard min/max/delta algorithm. Achromatic colors (max == min) get
    hue and saturation 0. Values are rounded to whole degrees/percent.
    """
    rgb = hex_to_rgb(hex_color)
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255

    mx = max(r, g, b)
    mn = min(r, g, b)
    h = 0.0
    s = 0.0
    l = (mx + mn) / 2  # noqa: E741

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSL(
        h=_round_half_up(h * 360) % 360,
        s=_round_half_up(s * 100),
        l=_round_half_up(l * 100),
    )


def format_rgb(hex_color: str) -> str:
    """Read-only RGB field text, e.g. ``"37, 99, 235"``."""
    rgb = hex_to_rgb(hex_color)
    return f"{rgb.r}, {rgb.g}, {rgb.b}"


def format_hsl(hex_color: str) -> str:
    """Read-only HSL field text, e.g. ``"221°, 83%, 53%"``."""
    hsl = hex_to_hsl(hex_color)
    return f"{hsl.h}°, {hsl.s}%, {hsl.l}%"

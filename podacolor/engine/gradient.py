# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Gradient codec: classify, parse and serialize ColorValue strings.

Two parsing grammars coexist:

- STRICT: the canonical 2-stop form the editors emit,
  ``linear-gradient(Ddeg, #RRGGBB P1%, #RRGGBB P2%)``, matched by a single
  anchored regex. Round-trips exactly with ``build_gradient``.
- LENIENT: any ``linear-gradient(Ddeg, ...)``; collects every hex color
  (3 or 6 digits) or, failing that, every ``rgb()``/``rgba()`` triple and
  keeps the first two as stops. Missing stop percentages default to
  0% / 100%.

Parsers return None on mismatch; they never raise.
"""

from __future__ import annotations

import re
from typing import Optional

from podacolor.schema import GradientGrammar, GradientSpec, GradientStop, ValueMode
from podacolor.engine.codec import rgb_to_hex


# =============================================================================
# Patterns
# =============================================================================

_STRICT_RE = re.compile(
    r"linear-gradient\((\d+)deg,\s*(#[0-9a-fA-F]{6})\s*(\d+)%,"
    r"\s*(#[0-9a-fA-F]{6})\s*(\d+)%\)",
    re.IGNORECASE,
)

# Greedy body so rgb(...) stops inside the gradient don't end the match
_LINEAR_RE = re.compile(r"linear-gradient\s*\(\s*(\d+)deg(.*)\)", re.IGNORECASE | re.DOTALL)

_HEX_TOKEN = r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b"
_HEX_RE = re.compile(_HEX_TOKEN)

_POSITION = r"(?:\s+(\d+(?:\.\d+)?)%)?"
_HEX_STOP_RE = re.compile(rf"({_HEX_TOKEN}){_POSITION}")
_RGB_STOP_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+%?\s*)?\)" + _POSITION,
    re.IGNORECASE,
)

_VANTA_PREFIXES = ("vanta:", '{"type":"vanta')


# =============================================================================
# Classification
# =============================================================================


def is_gradient(value: str) -> bool:
    """True iff the value contains the substring ``gradient``."""
    return "gradient" in (value or "")


def is_vanta(value: str) -> bool:
    """True iff the value is an animated-background keyword."""
    return (value or "").startswith(_VANTA_PREFIXES)


def classify(value: str) -> ValueMode:
    """Classify a ColorValue by its contents alone."""
    if is_vanta(value):
        return ValueMode.VANTA
    if is_gradient(value):
        return ValueMode.GRADIENT
    return ValueMode.SOLID


# =============================================================================
# Parsing
# =============================================================================


def _expand_short(token: str) -> str:
    """``#abc`` → ``#aabbcc``; 6-digit tokens pass through unchanged."""
    if len(token) == 4:
        return "#" + "".join(ch * 2 for ch in token[1:])
    return token


def _position(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    return max(0, min(100, int(round(float(raw)))))


def parse_gradient_strict(value: str) -> Optional[GradientSpec]:
    """
    Parse the canonical editor form.

    Returns None unless the whole string matches
    ``linear-gradient(Ddeg, #RRGGBB P1%, #RRGGBB P2%)`` with a direction
    in [0, 360] and positions in [0, 100]. Colors are kept exactly as
    written.
    """
    m = _STRICT_RE.fullmatch((value or "").strip())
    if not m:
        return None

    direction = int(m.group(1))
    pos1, pos2 = int(m.group(3)), int(m.group(5))
    if direction > 360 or pos1 > 100 or pos2 > 100:
        return None

    return GradientSpec(
        direction=direction,
        stops=(GradientStop(m.group(2), pos1), GradientStop(m.group(4), pos2)),
    )


def parse_gradient_lenient(value: str) -> Optional[GradientSpec]:
    """
    Parse any linear gradient into its first two stops.

    Hex stops win over rgb() stops. Returns None if the value is not a
    linear gradient, has a direction above 360, or yields fewer than two
    colors.
    """
    m = _LINEAR_RE.search(value or "")
    if not m:
        return None

    direction = int(m.group(1))
    if direction > 360:
        return None
    body = m.group(2)

    stops: list[tuple[str, Optional[str]]] = [
        (_expand_short(sm.group(1)), sm.group(2))
        for sm in _HEX_STOP_RE.finditer(body)
    ]
    if len(stops) < 2:
        stops = [
            (rgb_to_hex(int(sm.group(1)), int(sm.group(2)), int(sm.group(3))), sm.group(4))
            for sm in _RGB_STOP_RE.finditer(body)
        ]
    if len(stops) < 2:
        return None

    (color1, raw1), (color2, raw2) = stops[0], stops[1]
    return GradientSpec(
        direction=direction,
        stops=(
            GradientStop(color1, _position(raw1, 0)),
            GradientStop(color2, _position(raw2, 100)),
        ),
    )


def parse_gradient_stops(value: str) -> Optional[GradientSpec]:
    """
    Parse every hex stop of a linear gradient.

    Used for auditing stored values, never by editors. Stops without a
    percentage are spread evenly over [0, 100] by index.
    """
    m = _LINEAR_RE.search(value or "")
    if not m:
        return None

    direction = int(m.group(1))
    if direction > 360:
        return None

    matches = list(_HEX_STOP_RE.finditer(m.group(2)))
    if len(matches) < 2:
        return None

    last = len(matches) - 1
    return GradientSpec(
        direction=direction,
        stops=tuple(
            GradientStop(
                _expand_short(sm.group(1)),
                _position(sm.group(2), int(round(100 * i / last))),
            )
            for i, sm in enumerate(matches)
        ),
    )


def parse_gradient(
    value: str,
    grammar: GradientGrammar = GradientGrammar.STRICT,
) -> Optional[GradientSpec]:
    """Parse a gradient ColorValue with the chosen grammar."""
    if grammar == GradientGrammar.LENIENT:
        return parse_gradient_lenient(value)
    return parse_gradient_strict(value)


# =============================================================================
# Serialization
# =============================================================================


def build_gradient(
    direction: int,
    color1: str,
    color2: str,
    position1: int = 0,
    position2: int = 100,
) -> str:
    """
    Serialize a 2-stop gradient; with default positions, the canonical form.

    This is the only path editors use to produce gradients. The direction
    is clamped into [0, 360] and positions into [0, 100].

    Example:
        >>> build_gradient(135, "#2563EB", "#7C3AED")
        'linear-gradient(135deg, #2563EB 0%, #7C3AED 100%)'
    """
    direction = max(0, min(360, int(direction)))
    position1 = max(0, min(100, int(position1)))
    position2 = max(0, min(100, int(position2)))
    return f"linear-gradient({direction}deg, {color1} {position1}%, {color2} {position2}%)"


def format_gradient(spec: GradientSpec) -> str:
    """Serialize a GradientSpec with all of its stops and positions."""
    stops = ", ".join(f"{s.color} {s.position}%" for s in spec.stops)
    return f"linear-gradient({spec.direction}deg, {stops})"


def extract_hex_colors(value: str) -> list[str]:
    """
    Every 3- or 6-digit hex token in the string, in order, as written.

    Works on any string (gradients, solid values, free text).
    """
    return _HEX_RE.findall(value or "")

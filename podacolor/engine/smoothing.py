# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Gradient smoothness check and repair.

A gradient is harsh when two adjacent hex stops differ in relative
luminance by more than a threshold (0.5 by default). Repair inserts
intermediate stops interpolated in linear-light RGB. Relative luminance
is linear in linear RGB, so equally spaced fractions give equal
luminance steps.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from podacolor.schema import GradientSpec, GradientStop
from podacolor.engine.codec import expand_hex, hex_to_rgb, rgb_to_hex
from podacolor.engine.colorspace import mix_rgb
from podacolor.engine.contrast import relative_luminance_batch
from podacolor.engine.gradient import (
    extract_hex_colors,
    format_gradient,
    is_gradient,
    parse_gradient_stops,
)

logger = logging.getLogger(__name__)

# Max luminance jump between adjacent stops
HARSH_THRESHOLD = 0.5


def harsh_transitions(
    value: str,
    threshold: float = HARSH_THRESHOLD,
) -> list[tuple[int, int]]:
    """
    Index pairs of adjacent hex stops whose luminance jump exceeds threshold.

    Non-gradients and gradients with fewer than two hex colors have none.
    """
    if not is_gradient(value):
        return []

    colors = extract_hex_colors(value)
    if len(colors) < 2:
        return []

    lum = relative_luminance_batch(colors)
    jumps = np.abs(np.diff(lum))
    return [(int(i), int(i) + 1) for i in np.flatnonzero(jumps > threshold)]


def is_gradient_smooth(value: str, threshold: float = HARSH_THRESHOLD) -> bool:
    """True unless some adjacent pair of stops is a harsh transition."""
    return not harsh_transitions(value, threshold)


def _split_pair(
    a: GradientStop,
    b: GradientStop,
    jump: float,
    threshold: float,
) -> list[GradientStop]:
    """Intermediate stops strictly between a and b."""
    segments = math.floor(jump / threshold) + 1
    fractions = np.arange(1, segments) / segments

    start = hex_to_rgb(expand_hex(a.color) or a.color).as_tuple()
    end = hex_to_rgb(expand_hex(b.color) or b.color).as_tuple()
    mixed = mix_rgb(start, end, fractions)

    return [
        GradientStop(
            color=rgb_to_hex(*rgb),
            position=int(round(a.position + (b.position - a.position) * t)),
        )
        for rgb, t in zip(mixed, fractions)
    ]


def smooth_gradient(value: str, threshold: float = HARSH_THRESHOLD) -> str:
    """
    Return the gradient with harsh transitions split into smaller steps.

    Smooth values, non-gradients and gradients that are not parseable
    linear hex gradients are returned unchanged.
    """
    if is_gradient_smooth(value, threshold):
        return value

    spec = parse_gradient_stops(value)
    if spec is None:
        logger.warning("Harsh gradient %r is not a linear hex gradient, left as is", value)
        return value

    lum = relative_luminance_batch(s.color for s in spec.stops)
    stops: list[GradientStop] = [spec.stops[0]]
    for i in range(1, len(spec.stops)):
        jump = abs(float(lum[i] - lum[i - 1]))
        if jump > threshold:
            stops.extend(_split_pair(spec.stops[i - 1], spec.stops[i], jump, threshold))
        stops.append(spec.stops[i])

    return format_gradient(GradientSpec(direction=spec.direction, stops=tuple(stops)))

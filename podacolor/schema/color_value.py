# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Value types for the color & gradient engine.

Design principles:
- Immutable: All types are frozen dataclasses
- Transient: Decoded forms live for a single edit; the wire format is
  always the ColorValue string
- Self-describing: A ColorValue string needs no side-channel type field;
  classification is a pure function of its contents

ColorValue wire forms:
- ``#RRGGBB`` hex (case-insensitive on input)
- ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` (read-only, gradient parser only)
- ``linear-gradient(<angle>deg, <color> <pct>%, <color> <pct>%[, ...])``
- Animated background keyword: ``vanta:<effect>`` or ``{"type":"vanta...``
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


# =============================================================================
# Constants
# =============================================================================

# WCAG 2.x thresholds
AA_NORMAL_TEXT = 4.5
AA_LARGE_TEXT = 3.0


class ValueMode(Enum):
    """Editing mode of a color control, derived from its ColorValue."""
    SOLID = "solid"
    GRADIENT = "gradient"
    VANTA = "vanta"  # page-background controls only


class GradientGrammar(Enum):
    """
    Which gradient grammar a caller trusts.

    STRICT round-trips only the canonical 2-stop form the editors emit.
    LENIENT classifies arbitrary or legacy stored values.
    """
    STRICT = "strict"
    LENIENT = "lenient"


# =============================================================================
# Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """An 8-bit sRGB triple."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not 0 <= v <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {v}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RGB:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class HSL:
    """
    Display-only HSL triple, rounded to whole units.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation percent [0, 100]
        l: Lightness percent [0, 100]
    """
    h: int
    s: int
    l: int  # noqa: E741

    def __post_init__(self) -> None:
        if not 0 <= self.h < 360:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0 <= self.s <= 100:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0 <= self.l <= 100:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"h": self.h, "s": self.s, "l": self.l}

    @classmethod
    def from_dict(cls, data: dict) -> HSL:
        """Deserialize from dictionary."""
        return cls(h=data["h"], s=data["s"], l=data["l"])


# =============================================================================
# Gradient Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A single stop in a linear gradient.

    Attributes:
        color: Solid ColorValue, kept exactly as written
        position: Percent along the gradient axis (0-100)
    """
    color: str
    position: int

    def __post_init__(self) -> None:
        if not 0 <= self.position <= 100:
            raise ValueError(f"Position must be 0-100, got {self.position}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.color, "position": self.position}

    @classmethod
    def from_dict(cls, data: dict) -> GradientStop:
        """Deserialize from dictionary."""
        return cls(color=data["color"], position=data["position"])


@dataclass(frozen=True, slots=True)
class GradientSpec:
    """
    Decoded form of a ``linear-gradient(...)`` ColorValue.

    Stop order is not validated: editors allow stops in any
    order and the serialized string keeps that order.

    Attributes:
        direction: Angle in degrees [0, 360]
        stops: Ordered stops (at least 2)
    """
    direction: int
    stops: tuple[GradientStop, ...]

    def __post_init__(self) -> None:
        if not 0 <= self.direction <= 360:
            raise ValueError(f"Direction must be 0-360, got {self.direction}")
        if len(self.stops) < 2:
            raise ValueError("Gradient must have at least 2 stops")

    @property
    def color1(self) -> str:
        return self.stops[0].color

    @property
    def color2(self) -> str:
        return self.stops[1].color

    def with_direction(self, direction: int) -> GradientSpec:
        """Copy with a new direction."""
        return replace(self, direction=direction)

    def with_stop(
        self,
        index: int,
        *,
        color: str | None = None,
        position: int | None = None,
    ) -> GradientSpec:
        """Copy with one stop's color and/or position replaced."""
        if not 0 <= index < len(self.stops):
            raise IndexError(f"Gradient has no stop {index}")
        old = self.stops[index]
        new = GradientStop(
            color=old.color if color is None else color,
            position=old.position if position is None else position,
        )
        stops = self.stops[:index] + (new,) + self.stops[index + 1:]
        return replace(self, stops=stops)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "direction": self.direction,
            "stops": [s.to_dict() for s in self.stops],
        }

    @classmethod
    def from_dict(cls, data: dict) -> GradientSpec:
        """Deserialize from dictionary."""
        return cls(
            direction=data["direction"],
            stops=tuple(GradientStop.from_dict(s) for s in data["stops"]),
        )


# Fresh gradient used when a solid value is toggled into gradient mode
DEFAULT_GRADIENT = GradientSpec(
    direction=135,
    stops=(GradientStop("#2563EB", 0), GradientStop("#7C3AED", 100)),
)


# =============================================================================
# Contrast Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ContrastPair:
    """
    A foreground/background pair with its WCAG contrast ratio.

    Not persisted; produced on demand by the contrast evaluator.
    """
    foreground: str
    background: str
    ratio: float

    def __post_init__(self) -> None:
        if self.ratio < 1.0:
            raise ValueError(f"Contrast ratio must be >= 1.0, got {self.ratio}")

    @property
    def passes_aa(self) -> bool:
        """Normal-text WCAG AA (4.5:1)."""
        return self.ratio >= AA_NORMAL_TEXT

    @property
    def passes_aa_large(self) -> bool:
        """Large-text WCAG AA (3:1)."""
        return self.ratio >= AA_LARGE_TEXT

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "foreground": self.foreground,
            "background": self.background,
            "ratio": round(self.ratio, 2),
            "passes_aa": self.passes_aa,
        }
